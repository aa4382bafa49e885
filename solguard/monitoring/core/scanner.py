"""
Token Scanner - Fetch facts for one mint, score it, store the verdict.

Flow per mint:
1. Skip if already stored (unless forced)
2. RugCheck summary + report -> inspection facts
3. Helius deployer history -> deployer facts + token age
4. assess_risk -> upsert token record, store raw scan snapshot
"""

import dataclasses
from datetime import datetime
from typing import Dict, Any, Optional

import psycopg2
import requests

from ...data_adapter import detect_source_tag
from ...risk_engine import assess_risk
from ..config.settings import DEFAULT_SOURCE_TAG
from ..fetchers import fetch_token_inspection, fetch_deployer_history
from .db import count_previous_rugs, get_token_by_mint, upsert_token, insert_scan


# In-process scanner status, reported by the status query
_status = {
    "tokens_scanned": 0,
    "last_scan_at": None,
    "last_error": None,
}


def get_scanner_status() -> Dict[str, Any]:
    """Snapshot of the in-process scanner counters."""
    return dict(_status)


def _record_error(message: str) -> None:
    _status["last_error"] = message
    print(f"[SCANNER] {message}")


def scan_token(mint: str, force: bool = False, source_tag: str = None) -> Optional[Dict[str, Any]]:
    """
    Scan a token and persist its risk verdict.

    Args:
        mint: Token mint address
        force: Rescan even if the token is already stored
        source_tag: Launch platform tag (detected from the mint address,
            falling back to DEFAULT_SOURCE_TAG)

    Returns:
        Dict with mint, name, symbol, deployer, score, status, reasons,
        breakdown and kill_switch_flags; None when skipped, when RugCheck
        has no data, or on provider / database errors.
    """
    source_tag = source_tag or detect_source_tag(mint, DEFAULT_SOURCE_TAG)

    try:
        if not force and get_token_by_mint(mint):
            print(f"[SCANNER] {mint} already scanned, skipping")
            return None

        print(f"[SCANNER] Scanning {mint}...")
        token_result = fetch_token_inspection(mint, source_tag=source_tag)
        if token_result["status"] != "success":
            print(f"[SCANNER] {token_result['error']}, skipping")
            return None

        inspection = token_result["inspection"]
        metadata = token_result["metadata"]
        deployer = metadata["deployer"]

        history = None
        if deployer != "unknown":
            try:
                previous_rugs = count_previous_rugs(deployer, mint)
                deployer_result = fetch_deployer_history(deployer, mint, previous_rugs)
                history = deployer_result["history"]
                if deployer_result["age_seconds"] is not None:
                    inspection = dataclasses.replace(
                        inspection, age_seconds=deployer_result["age_seconds"]
                    )
            except (requests.exceptions.RequestException, psycopg2.Error) as e:
                print(f"[SCANNER] Deployer lookup failed for {deployer}: {e}")

        assessment = assess_risk(inspection, history)
        flags = [flag.value for flag in assessment.kill_switch_flags]
        locked_pct = inspection.liquidity_locked_pct or 0

        upsert_token({
            "mint": mint,
            "name": metadata["name"],
            "symbol": metadata["symbol"],
            "deployer": deployer,
            "risk_score": assessment.score,
            "lp_locked": locked_pct > 50,
            "mint_authority_revoked": inspection.authority_known and not inspection.mint_authority_active,
            "status": assessment.status.value,
            "risk_reasons": list(assessment.reasons),
            "risk_breakdown": assessment.breakdown,
            "kill_switch_flags": flags,
            "source": source_tag,
        })
        insert_scan(mint, "rugcheck", {
            "summary": token_result["summary"],
            "report": token_result["report"],
        })

    except (requests.exceptions.RequestException, psycopg2.Error) as e:
        _record_error(f"Scan failed for {mint}: {e}")
        return None

    _status["tokens_scanned"] += 1
    _status["last_scan_at"] = datetime.utcnow().isoformat()

    print(
        f"[SCANNER] {metadata['symbol']} ({mint[:8]}...) -> "
        f"{assessment.status.value} {assessment.score}/100"
    )

    return {
        "mint": mint,
        "name": metadata["name"],
        "symbol": metadata["symbol"],
        "deployer": deployer,
        "score": assessment.score,
        "status": assessment.status.value,
        "reasons": list(assessment.reasons),
        "breakdown": dict(assessment.breakdown),
        "kill_switch_flags": flags,
    }
