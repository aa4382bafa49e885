"""
Data Adapter Layer for the Risk Engine.

This module provides the bridge between:
1. Provider payloads (RugCheck report/summary, Helius transactions) -> engine inputs
2. Wallet intelligence (known exchange / mixer wallets) -> funding classification

All functions are pure; fetching happens in monitoring.fetchers.
"""

import time
from typing import Dict, Any, List, Optional, Iterable

from .models import (
    DeployerHistoryFacts,
    FundingSource,
    RiskSignal,
    TokenInspectionFacts,
)

PUMP_FUN_MINT_SUFFIX = "pump"


# =============================================================================
# INSPECTION (RugCheck)
# =============================================================================

def parse_risk_signals(risks: Optional[Iterable[Dict[str, Any]]]) -> List[RiskSignal]:
    """Convert RugCheck risk dicts into RiskSignal objects, skipping malformed entries."""
    signals = []
    for risk in risks or []:
        if not isinstance(risk, dict) or not risk.get("name"):
            continue
        signals.append(RiskSignal(
            name=str(risk["name"]),
            description=str(risk.get("description") or ""),
            level=str(risk.get("level") or "info"),
        ))
    return signals


def inspection_from_rugcheck(
    report: Optional[Dict[str, Any]],
    summary: Optional[Dict[str, Any]],
    age_seconds: Optional[int] = None,
    source_tag: str = "unknown",
) -> Optional[TokenInspectionFacts]:
    """
    Build TokenInspectionFacts from RugCheck payloads.

    Authority and metadata facts come from the full report; the LP lock
    percentage from the summary. Risk signals come from the report, falling
    back to the summary. Without the report, authorities are marked unknown.

    Returns:
        TokenInspectionFacts, or None when both payloads are absent
    """
    if not report and not summary:
        return None

    token = (report or {}).get("token") or {}
    token_meta = (report or {}).get("tokenMeta") or {}

    risks = (report or {}).get("risks")
    if risks is None:
        risks = (summary or {}).get("risks")
    signals = parse_risk_signals(risks)

    liquidity_locked_pct = None
    if summary and summary.get("lpLockedPct") is not None:
        try:
            liquidity_locked_pct = float(summary["lpLockedPct"])
        except (TypeError, ValueError):
            liquidity_locked_pct = None

    return TokenInspectionFacts(
        mint_authority_active=bool(report) and token.get("mintAuthority") is not None,
        freeze_authority_active=bool(report) and token.get("freezeAuthority") is not None,
        metadata_mutable=bool(token_meta.get("mutable", False)),
        authority_known=bool(report),
        liquidity_locked_pct=liquidity_locked_pct,
        concentration_risk_signals=tuple(signals),
        danger_signals=tuple(s for s in signals if s.level == "danger"),
        age_seconds=age_seconds,
        source_tag=source_tag,
    )


def detect_source_tag(mint: str, default: str = "unknown") -> str:
    """
    Launch platform tag for a mint.

    pump.fun grinds every mint address to end in "pump"; anything else
    gets the default tag.
    """
    if mint and mint.endswith(PUMP_FUN_MINT_SUFFIX):
        return "pump.fun"
    return default


def token_metadata(report: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """Name, symbol and creator for display, with placeholders when missing."""
    report = report or {}
    file_meta = report.get("fileMeta") or {}
    token_meta = report.get("tokenMeta") or {}

    return {
        "name": file_meta.get("name") or token_meta.get("name") or "Unknown",
        "symbol": file_meta.get("symbol") or token_meta.get("symbol") or "???",
        "deployer": report.get("creator") or "unknown",
    }


# =============================================================================
# DEPLOYER HISTORY (Helius)
# =============================================================================

def token_age_seconds(mint_txs: List[Dict[str, Any]], mint: str, now: Optional[float] = None) -> Optional[int]:
    """
    Age of a token from the deployer's creation transaction for that mint.

    Returns:
        Seconds since creation, or None if the creation tx was not found
    """
    now = time.time() if now is None else now

    for tx in mint_txs:
        transfers = tx.get("tokenTransfers") or []
        if any(t.get("mint") == mint for t in transfers):
            timestamp = tx.get("timestamp")
            if timestamp:
                return max(0, int(now) - int(timestamp))
    return None


def classify_funding_source(
    funding: Optional[Dict[str, Any]],
    exchange_wallets: Iterable[str] = (),
    mixer_wallets: Iterable[str] = (),
) -> Optional[FundingSource]:
    """
    Classify the wallet that first funded a deployer.

    Args:
        funding: {"from": address, "amount": SOL} from the Helius client
        exchange_wallets: Known exchange hot wallets
        mixer_wallets: Known mixer / privacy-tool wallets

    Returns:
        FundingSource, or None when there is no funding data
    """
    if not funding or not funding.get("from"):
        return None

    address = funding["from"]
    if address in set(mixer_wallets):
        source_type = "mixer"
    elif address in set(exchange_wallets):
        source_type = "exchange"
    else:
        source_type = "unknown"

    return FundingSource(
        address=address,
        source_type=source_type,
        amount=float(funding.get("amount") or 0.0),
    )


def deployer_history_from_helius(
    mint_txs: List[Dict[str, Any]],
    previous_rug_count: int,
    funding_source: Optional[FundingSource] = None,
) -> DeployerHistoryFacts:
    """
    Build DeployerHistoryFacts.

    total_prior_token_count is the number of TOKEN_MINT transactions;
    previous_rug_count comes from our own stored RED verdicts.
    """
    total = sum(1 for tx in mint_txs if tx.get("type") == "TOKEN_MINT")
    return DeployerHistoryFacts(
        previous_rug_count=max(0, int(previous_rug_count or 0)),
        total_prior_token_count=total,
        funding_source=funding_source,
    )
