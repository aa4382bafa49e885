"""
Database connection and token record store.

PostgreSQL tables (prefixed, see config.settings):
- tokens: one row per mint, latest risk verdict (upsert by mint)
- scans: raw provider snapshots per scan
- alerts: posted alerts, used for duplicate suppression
"""

import psycopg2
from psycopg2.extras import RealDictCursor
from contextlib import contextmanager
from typing import List, Dict, Any, Optional
import json

from ..config.settings import DB_CONFIG, SCHEMA_NAME, TABLE_PREFIX


def table_name(name: str) -> str:
    """Get full table name with schema and prefix."""
    return f"{SCHEMA_NAME}.{TABLE_PREFIX}{name}"


@contextmanager
def get_connection():
    """
    Get a database connection as a context manager.

    Usage:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1")
    """
    conn = None
    try:
        conn = psycopg2.connect(**DB_CONFIG)
        yield conn
    finally:
        if conn:
            conn.close()


def execute_query(query: str, params: tuple = None, fetch: bool = True) -> Optional[List[Dict]]:
    """
    Execute a query and optionally fetch results.

    Args:
        query: SQL query string
        params: Query parameters (tuple)
        fetch: If True, return results as list of dicts

    Returns:
        List of dicts if fetch=True, else None
    """
    with get_connection() as conn:
        with conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(query, params)
            if fetch:
                return [dict(row) for row in cur.fetchall()]
            conn.commit()
            return None


def init_schema() -> None:
    """Create tables and indexes if they do not exist."""
    tokens = table_name("tokens")
    scans = table_name("scans")
    alerts = table_name("alerts")

    statements = [
        f"""
        CREATE TABLE IF NOT EXISTS {tokens} (
            mint TEXT PRIMARY KEY,
            name TEXT,
            symbol TEXT,
            deployer TEXT,
            risk_score INTEGER DEFAULT 50,
            lp_locked BOOLEAN DEFAULT false,
            mint_authority_revoked BOOLEAN DEFAULT false,
            status TEXT CHECK (status IN ('RED', 'YELLOW', 'GREEN')) DEFAULT 'YELLOW',
            risk_reasons JSONB DEFAULT '[]',
            risk_breakdown JSONB DEFAULT '{{}}',
            kill_switch_flags JSONB DEFAULT '[]',
            source TEXT DEFAULT 'unknown',
            created_at TIMESTAMPTZ DEFAULT NOW(),
            updated_at TIMESTAMPTZ DEFAULT NOW()
        )
        """,
        f"""
        CREATE TABLE IF NOT EXISTS {scans} (
            id SERIAL PRIMARY KEY,
            token_mint TEXT REFERENCES {tokens}(mint),
            scan_type TEXT,
            result_json JSONB,
            scanned_at TIMESTAMPTZ DEFAULT NOW()
        )
        """,
        f"""
        CREATE TABLE IF NOT EXISTS {alerts} (
            id SERIAL PRIMARY KEY,
            token_mint TEXT REFERENCES {tokens}(mint),
            alert_type TEXT,
            channel TEXT,
            message TEXT,
            posted_at TIMESTAMPTZ DEFAULT NOW()
        )
        """,
        f"CREATE INDEX IF NOT EXISTS {TABLE_PREFIX}idx_tokens_status ON {tokens}(status)",
        f"CREATE INDEX IF NOT EXISTS {TABLE_PREFIX}idx_tokens_deployer ON {tokens}(deployer)",
        f"CREATE INDEX IF NOT EXISTS {TABLE_PREFIX}idx_tokens_created_at ON {tokens}(created_at)",
        f"CREATE INDEX IF NOT EXISTS {TABLE_PREFIX}idx_alerts_token_mint ON {alerts}(token_mint)",
    ]

    with get_connection() as conn:
        with conn.cursor() as cur:
            for statement in statements:
                cur.execute(statement)
            conn.commit()
    print("[DB] Schema initialized")


# =============================================================================
# TOKENS
# =============================================================================

def upsert_token(token: Dict[str, Any]) -> None:
    """
    Insert or replace a token record, keyed by mint.

    Args:
        token: Dict with mint, name, symbol, deployer, risk_score, lp_locked,
            mint_authority_revoked, status, risk_reasons, risk_breakdown,
            kill_switch_flags, source
    """
    query = f"""
        INSERT INTO {table_name('tokens')}
        (mint, name, symbol, deployer, risk_score, lp_locked, mint_authority_revoked,
         status, risk_reasons, risk_breakdown, kill_switch_flags, source)
        VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
        ON CONFLICT (mint) DO UPDATE SET
            name = EXCLUDED.name,
            symbol = EXCLUDED.symbol,
            deployer = EXCLUDED.deployer,
            risk_score = EXCLUDED.risk_score,
            lp_locked = EXCLUDED.lp_locked,
            mint_authority_revoked = EXCLUDED.mint_authority_revoked,
            status = EXCLUDED.status,
            risk_reasons = EXCLUDED.risk_reasons,
            risk_breakdown = EXCLUDED.risk_breakdown,
            kill_switch_flags = EXCLUDED.kill_switch_flags,
            source = EXCLUDED.source,
            updated_at = NOW()
    """
    params = (
        token["mint"],
        token.get("name"),
        token.get("symbol"),
        token.get("deployer", "unknown"),
        token["risk_score"],
        bool(token.get("lp_locked", False)),
        bool(token.get("mint_authority_revoked", False)),
        token["status"],
        json.dumps(list(token.get("risk_reasons") or [])),
        json.dumps(dict(token.get("risk_breakdown") or {})),
        json.dumps(list(token.get("kill_switch_flags") or [])),
        token.get("source", "unknown"),
    )

    with get_connection() as conn:
        with conn.cursor() as cur:
            cur.execute(query, params)
            conn.commit()


def get_token_by_mint(mint: str) -> Optional[Dict]:
    """Point lookup of a stored token record."""
    query = f"SELECT * FROM {table_name('tokens')} WHERE mint = %s"
    results = execute_query(query, (mint,))
    return results[0] if results else None


def get_tokens(limit: int = 50, offset: int = 0) -> List[Dict]:
    """Most recently created token records."""
    query = f"""
        SELECT * FROM {table_name('tokens')}
        ORDER BY created_at DESC
        LIMIT %s OFFSET %s
    """
    return execute_query(query, (limit, offset))


def count_previous_rugs(deployer: str, exclude_mint: str) -> int:
    """
    Count a deployer's tokens we previously classified RED.

    The token being scanned is excluded so a rescan never counts itself.
    """
    query = f"""
        SELECT COUNT(*) AS count FROM {table_name('tokens')}
        WHERE deployer = %s AND status = 'RED' AND mint != %s
    """
    results = execute_query(query, (deployer, exclude_mint))
    return int(results[0]["count"]) if results else 0


def _status_stats(where: str = "", params: tuple = None) -> Dict[str, int]:
    query = f"""
        SELECT
            COUNT(*) AS total,
            SUM(CASE WHEN status = 'RED' THEN 1 ELSE 0 END) AS red,
            SUM(CASE WHEN status = 'YELLOW' THEN 1 ELSE 0 END) AS yellow,
            SUM(CASE WHEN status = 'GREEN' THEN 1 ELSE 0 END) AS green,
            AVG(risk_score) AS avg_score
        FROM {table_name('tokens')}
        {where}
    """
    results = execute_query(query, params)
    row = results[0] if results else {}

    return {
        "total": int(row.get("total") or 0),
        "red": int(row.get("red") or 0),
        "yellow": int(row.get("yellow") or 0),
        "green": int(row.get("green") or 0),
        "avg_score": int(round(float(row.get("avg_score") or 0))),
    }


def get_token_stats() -> Dict[str, int]:
    """Counts per status and average score across all tokens."""
    return _status_stats()


def get_tokens_by_deployer(deployer: str) -> List[Dict]:
    """All stored tokens created by a deployer, newest first."""
    query = f"""
        SELECT * FROM {table_name('tokens')}
        WHERE deployer = %s
        ORDER BY created_at DESC
    """
    return execute_query(query, (deployer,))


def get_deployer_stats(deployer: str) -> Dict[str, int]:
    """Counts per status and average score for one deployer."""
    return _status_stats("WHERE deployer = %s", (deployer,))


def get_serial_ruggers(limit: int = 10) -> List[Dict]:
    """
    Top deployers ranked by number of RED tokens.

    Only deployers with 2+ tokens are included, sorted by red count desc
    then average score asc.
    """
    query = f"""
        SELECT
            deployer,
            COUNT(*) AS total_tokens,
            SUM(CASE WHEN status = 'RED' THEN 1 ELSE 0 END) AS red_count,
            SUM(CASE WHEN status = 'YELLOW' THEN 1 ELSE 0 END) AS yellow_count,
            ROUND(AVG(risk_score)) AS avg_score,
            MIN(risk_score) AS worst_score,
            MAX(created_at) AS latest_token_time
        FROM {table_name('tokens')}
        WHERE deployer != 'unknown'
        GROUP BY deployer
        HAVING COUNT(*) >= 2
        ORDER BY red_count DESC, avg_score ASC
        LIMIT %s
    """
    return execute_query(query, (limit,))


# =============================================================================
# SCANS & ALERTS
# =============================================================================

def insert_scan(token_mint: str, scan_type: str, result: Dict[str, Any]) -> int:
    """Store a raw provider snapshot for a scan. Returns the row ID."""
    query = f"""
        INSERT INTO {table_name('scans')} (token_mint, scan_type, result_json)
        VALUES (%s, %s, %s)
        RETURNING id
    """
    with get_connection() as conn:
        with conn.cursor() as cur:
            cur.execute(query, (token_mint, scan_type, json.dumps(result, default=str)))
            row_id = cur.fetchone()[0]
            conn.commit()
            return row_id


def insert_alert(token_mint: str, alert_type: str, channel: str, message: str) -> int:
    """Record a posted alert. Returns the row ID."""
    query = f"""
        INSERT INTO {table_name('alerts')} (token_mint, alert_type, channel, message)
        VALUES (%s, %s, %s, %s)
        RETURNING id
    """
    with get_connection() as conn:
        with conn.cursor() as cur:
            cur.execute(query, (token_mint, alert_type, channel, message))
            row_id = cur.fetchone()[0]
            conn.commit()
            return row_id


def alert_exists(token_mint: str) -> bool:
    """True if an alert was already recorded for this mint."""
    query = f"SELECT 1 FROM {table_name('alerts')} WHERE token_mint = %s LIMIT 1"
    return bool(execute_query(query, (token_mint,)))


def test_connection() -> bool:
    """
    Test database connectivity.

    Returns:
        True if connection successful
    """
    try:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1")
                return True
    except psycopg2.Error as e:
        print(f"[DB] Database connection failed: {e}")
        return False


if __name__ == "__main__":
    print("Testing database connection...")
    if test_connection():
        init_schema()
        print("Connection successful!")
    else:
        print("Connection failed!")
