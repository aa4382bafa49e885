"""
Deployer Fetcher - Wrapper for the Helius client.

Builds DeployerHistoryFacts for the wallet that created a token:
- total prior tokens from Helius TOKEN_MINT history
- previous rugs passed in by the caller (stored RED verdicts)
- funding source classified against known exchange / mixer wallets
- token age from this mint's creation transaction
"""

from typing import Dict, Any

from ...helius import get_deployer_history, get_funding_transfer
from ...data_adapter import (
    classify_funding_source,
    deployer_history_from_helius,
    token_age_seconds,
)
from ..config.settings import KNOWN_EXCHANGE_WALLETS, KNOWN_MIXER_WALLETS


def fetch_deployer_history(deployer: str, mint: str, previous_rug_count: int = 0) -> Dict[str, Any]:
    """
    Fetch deployer history facts.

    Args:
        deployer: Deployer wallet address
        mint: Mint being scanned
        previous_rug_count: Stored RED verdicts for this deployer

    Returns:
        Dict with status, history, age_seconds and error
    """
    result = {
        "status": "error",
        "history": None,
        "age_seconds": None,
        "funding": None,
        "error": None
    }

    if not deployer or deployer == "unknown":
        result["error"] = "Unknown deployer"
        return result

    mint_txs = get_deployer_history(deployer)
    funding = get_funding_transfer(deployer)
    funding_source = classify_funding_source(
        funding, KNOWN_EXCHANGE_WALLETS, KNOWN_MIXER_WALLETS
    )

    result["history"] = deployer_history_from_helius(mint_txs, previous_rug_count, funding_source)
    result["age_seconds"] = token_age_seconds(mint_txs, mint)
    result["funding"] = funding
    result["status"] = "success"
    return result
