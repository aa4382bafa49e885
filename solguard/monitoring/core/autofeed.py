"""
Autofeed - Poll DexScreener for new Solana tokens and scan them.

One poll cycle:
1. Gather latest + boosted Solana mints
2. Deduplicate, cap per cycle, drop already-stored mints
3. Scan the rest one at a time with a delay between scans
4. Alert on tokens that qualify
"""

import time
from datetime import datetime
from typing import Dict, Any, List, Optional

import psycopg2

from ...dexscreener import fetch_latest_solana_tokens, fetch_boosted_solana_tokens
from ..config.settings import AUTOFEED_CONFIG
from .db import get_token_by_mint
from .scanner import scan_token
from .alerts import maybe_alert


_status = {
    "running": False,
    "total_fed": 0,
    "last_poll": None,
}


def get_autofeed_status() -> Dict[str, Any]:
    """Snapshot of the in-process autofeed counters."""
    return dict(_status)


def gather_candidate_mints() -> List[str]:
    """Latest and boosted Solana mints, deduplicated in first-seen order."""
    mints = fetch_latest_solana_tokens() + fetch_boosted_solana_tokens()
    return list(dict.fromkeys(mints))


def poll_once(scan_delay: float = None, max_per_cycle: int = None) -> Dict[str, Any]:
    """
    Run one poll cycle.

    Args:
        scan_delay: Seconds to wait between scans (default from AUTOFEED_CONFIG)
        max_per_cycle: Cap on candidate mints per cycle (default from AUTOFEED_CONFIG)

    Returns:
        Dict with found, new, scanned, alerted counts and errors list
    """
    scan_delay = AUTOFEED_CONFIG["scan_delay_seconds"] if scan_delay is None else scan_delay
    max_per_cycle = max_per_cycle or AUTOFEED_CONFIG["max_per_cycle"]

    result = {
        "timestamp": datetime.utcnow().isoformat(),
        "found": 0,
        "new": 0,
        "scanned": 0,
        "alerted": 0,
        "errors": []
    }

    print("[AUTOFEED] Starting poll cycle...")
    _status["last_poll"] = result["timestamp"]

    candidates = gather_candidate_mints()[:max_per_cycle]
    result["found"] = len(candidates)

    to_scan = []
    for mint in candidates:
        try:
            if not get_token_by_mint(mint):
                to_scan.append(mint)
        except psycopg2.Error as e:
            result["errors"].append(f"{mint}: {e}")

    result["new"] = len(to_scan)
    if not to_scan:
        print("[AUTOFEED] No new tokens to scan")
        return result

    print(f"[AUTOFEED] Scanning {len(to_scan)} new tokens ({len(candidates) - len(to_scan)} cached)")

    for i, mint in enumerate(to_scan):
        if i > 0 and scan_delay:
            time.sleep(scan_delay)

        try:
            scan = scan_token(mint)
            if not scan:
                continue

            result["scanned"] += 1
            _status["total_fed"] += 1
            print(f"[AUTOFEED] Scanned {scan['status']} | {mint[:8]}... | Score: {scan['score']}")

            if maybe_alert(scan):
                result["alerted"] += 1
        except psycopg2.Error as e:
            result["errors"].append(f"{mint}: {e}")
            print(f"[AUTOFEED] Scan failed for {mint}: {e}")

    return result


def run_autofeed(max_cycles: Optional[int] = None) -> None:
    """
    Poll forever (or for max_cycles) at AUTOFEED_CONFIG["poll_interval_seconds"].
    """
    interval = AUTOFEED_CONFIG["poll_interval_seconds"]
    print(f"[AUTOFEED] Starting DexScreener auto-feed (every {interval}s)")
    _status["running"] = True

    cycles = 0
    try:
        while max_cycles is None or cycles < max_cycles:
            poll_once()
            cycles += 1
            if max_cycles is None or cycles < max_cycles:
                time.sleep(interval)
    finally:
        _status["running"] = False
        print("[AUTOFEED] Stopped")
