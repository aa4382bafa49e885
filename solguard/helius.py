"""
Helius Enhanced Transactions API client.

Deployer wallet history: the wallet's token creation transactions and the
earliest native (SOL) transfer that funded it.
"""

from typing import Dict, Any, List, Optional

import requests

from .monitoring.config.settings import PROVIDER_CONFIG

LAMPORTS_PER_SOL = 1_000_000_000


def _get_transactions(address: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
    url = f"{PROVIDER_CONFIG['helius_api_url']}/v0/addresses/{address}/transactions"
    query = {"api-key": PROVIDER_CONFIG["helius_api_key"], **params}

    response = requests.get(url, params=query, timeout=PROVIDER_CONFIG["helius_timeout"])
    response.raise_for_status()
    data = response.json()
    return data if isinstance(data, list) else []


def get_deployer_history(address: str) -> List[Dict[str, Any]]:
    """
    Get a deployer's token creation transactions.

    Each TOKEN_MINT transaction is one token this wallet created.

    Returns:
        List of Helius transaction dicts (empty on error)
    """
    try:
        txs = _get_transactions(address, {"type": "TOKEN_MINT"})
    except (requests.exceptions.RequestException, ValueError) as e:
        print(f"[HELIUS] Deployer history error for {address}: {e}")
        return []

    return [tx for tx in txs if tx.get("type") == "TOKEN_MINT"]


def get_funding_transfer(address: str) -> Optional[Dict[str, Any]]:
    """
    Find the earliest incoming native transfer to a wallet.

    Returns:
        {"from": str, "amount": float (SOL), "timestamp": int, "signature": str}
        or None if nothing was found
    """
    try:
        txs = _get_transactions(address, {"type": "TRANSFER"})
    except (requests.exceptions.RequestException, ValueError) as e:
        print(f"[HELIUS] Funding lookup error for {address}: {e}")
        return None

    incoming = []
    for tx in txs:
        for transfer in tx.get("nativeTransfers") or []:
            if transfer.get("toUserAccount") == address and transfer.get("fromUserAccount") != address:
                incoming.append((tx.get("timestamp") or 0, tx, transfer))

    if not incoming:
        return None

    timestamp, tx, transfer = min(incoming, key=lambda item: item[0])
    return {
        "from": transfer.get("fromUserAccount"),
        "amount": (transfer.get("amount") or 0) / LAMPORTS_PER_SOL,
        "timestamp": timestamp,
        "signature": tx.get("signature"),
    }
