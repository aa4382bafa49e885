"""
RugCheck API client.

Token inspection data for Solana mints: authorities, metadata mutability,
locked LP percentage and the provider's risk signals.

Returns None when RugCheck has no data (404) or the request fails; callers
treat that as "no data", never as an error.
"""

from typing import Dict, Any, Optional

import requests

from .monitoring.config.settings import PROVIDER_CONFIG


def _get_json(path: str, timeout: int, label: str, mint: str) -> Optional[Dict[str, Any]]:
    url = f"{PROVIDER_CONFIG['rugcheck_api_url']}{path}"
    try:
        response = requests.get(url, timeout=timeout)
        if response.status_code == 404:
            return None
        response.raise_for_status()
        data = response.json()
        return data if isinstance(data, dict) else None
    except requests.exceptions.RequestException as e:
        print(f"[RUGCHECK] {label} error for {mint}: {e}")
        return None
    except ValueError as e:
        print(f"[RUGCHECK] {label} returned invalid JSON for {mint}: {e}")
        return None


def get_token_summary(mint: str) -> Optional[Dict[str, Any]]:
    """
    Get the quick summary report for a token.

    Lighter than the full report, carries lpLockedPct and risks.
    """
    return _get_json(
        f"/v1/tokens/{mint}/report/summary",
        PROVIDER_CONFIG["summary_timeout"],
        "summary",
        mint,
    )


def get_token_report(mint: str) -> Optional[Dict[str, Any]]:
    """
    Get the full report for a token.

    Includes creator, token authorities, tokenMeta and fileMeta.
    """
    return _get_json(
        f"/v1/tokens/{mint}/report",
        PROVIDER_CONFIG["report_timeout"],
        "report",
        mint,
    )


if __name__ == "__main__":
    import json
    import sys

    mint = sys.argv[1] if len(sys.argv) > 1 else input("Enter token mint: ").strip()
    print(json.dumps(get_token_summary(mint), indent=2))
