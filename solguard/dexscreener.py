"""
DexScreener API client - secondary source of newly listed Solana tokens.

No API key needed.
"""

import re
from typing import List

import requests

from .monitoring.config.settings import PROVIDER_CONFIG

SOLANA_ADDRESS_RE = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")


def is_solana_address(address: str) -> bool:
    """True if the string looks like a base58 Solana address."""
    return bool(address) and bool(SOLANA_ADDRESS_RE.match(address))


def _fetch_solana_addresses(path: str, label: str) -> List[str]:
    url = f"{PROVIDER_CONFIG['dexscreener_api_url']}{path}"
    try:
        response = requests.get(
            url,
            headers={"Accept": "application/json"},
            timeout=PROVIDER_CONFIG["dexscreener_timeout"],
        )
        response.raise_for_status()
        data = response.json()
    except (requests.exceptions.RequestException, ValueError) as e:
        print(f"[AUTOFEED] DexScreener {label} error: {e}")
        return []

    if not isinstance(data, list):
        return []

    tokens = [
        item.get("tokenAddress")
        for item in data
        if isinstance(item, dict) and item.get("chainId") == "solana"
    ]
    tokens = [t for t in tokens if is_solana_address(t)]

    print(f"[AUTOFEED] Found {len(tokens)} {label} Solana tokens from DexScreener")
    return tokens


def fetch_latest_solana_tokens() -> List[str]:
    """Latest token profiles listed on DexScreener, Solana only."""
    return _fetch_solana_addresses("/token-profiles/latest/v1", "latest")


def fetch_boosted_solana_tokens() -> List[str]:
    """Recently boosted tokens, Solana only."""
    return _fetch_solana_addresses("/token-boosts/latest/v1", "boosted")
