"""
Token Risk Scoring Implementation.

Calculates a 0-100 safety score (0 = extremely dangerous, 100 = safe) for a
token launch from inspection facts and deployer history, classifies it as
RED / YELLOW / GREEN and explains the result.

Scoring runs in three stages:
1. Five factor subscores (deployer, liquidity, authority, concentration, age)
2. Weighted composite plus soft overrides (cap GREEN at YELLOW)
3. Kill switches (force RED, cap score)

Every function here is pure. Missing inputs degrade to conservative default
subscores with an explanatory reason; nothing raises for well-typed input.
"""

import math
from typing import Dict, List, Optional, Tuple

from .models import (
    DeployerHistoryFacts,
    FundingSource,
    RiskAssessment,
    RiskStatus,
    TokenInspectionFacts,
)
from .thresholds import (
    AGE_MATURE_SCORE,
    AGE_THRESHOLDS,
    AGE_UNKNOWN,
    AUTHORITY_PENALTIES,
    AUTHORITY_UNKNOWN,
    CONCENTRATION_THRESHOLDS,
    DEPLOYER_THRESHOLDS,
    FACTORS,
    FUNDING_ADJUSTMENTS,
    KILL_SWITCH_SCORE_CAP,
    LIQUIDITY_THRESHOLDS,
    LIQUIDITY_UNKNOWN,
    get_weight_profile,
    get_weights,
    score_to_status,
)
from .kill_switches import filter_concentration_signals, run_kill_switches


FactorResult = Tuple[int, List[str]]

EMPTY_HISTORY = DeployerHistoryFacts()


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def round_half_up(value: float) -> int:
    """Round to nearest integer, halves away from zero for positive values."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Clamp a score to the 0..100 range."""
    return max(0, min(100, int(value)))


def dedupe_reasons(reasons: List[str]) -> Tuple[str, ...]:
    """Deduplicate reasons, keeping first-seen order."""
    return tuple(dict.fromkeys(r for r in reasons if r))


# =============================================================================
# FACTOR SCORING FUNCTIONS
# =============================================================================

def apply_funding_adjustment(score: int, funding: Optional[FundingSource]) -> FactorResult:
    """
    Adjust a deployer subscore by where the deployer's funds came from.

    At most one adjustment applies; the first matching rule wins.
    """
    if funding is None:
        return score, []

    source_type = (funding.source_type or "unknown").strip().lower().replace("-", "_")

    for rule in FUNDING_ADJUSTMENTS:
        if source_type not in rule["source_types"]:
            continue
        if "max_amount" in rule and not funding.amount < rule["max_amount"]:
            continue
        adjusted = max(0, min(100, score + rule["delta"]))
        return adjusted, [rule["reason"]]

    return score, []


def score_deployer(history: DeployerHistoryFacts) -> FactorResult:
    """
    Calculate the deployer subscore.

    Previous rugs dominate: the subscore is the deployer's non-rug rate.
    A deployer with no history is moderately risky; a clean history earns
    points per prior launch.
    """
    rugs = history.previous_rug_count
    total = history.total_prior_token_count
    reasons = []

    if rugs > 0:
        rug_rate = rugs / total if total > 0 else 1
        score = max(0, round_half_up((1 - rug_rate) * 100))
        reasons.append(f"Deployer rugged {rugs} of {total} previous tokens")
    elif total == 0:
        score = DEPLOYER_THRESHOLDS["new_deployer"]["score"]
        reasons.append("New deployer with no token history")
    else:
        clean = DEPLOYER_THRESHOLDS["clean_history"]
        score = min(clean["max"], clean["base"] + clean["per_token"] * total)

    score, funding_reasons = apply_funding_adjustment(score, history.funding_source)
    reasons.extend(funding_reasons)

    return score, reasons


def score_liquidity(liquidity_locked_pct: Optional[float]) -> FactorResult:
    """Calculate the liquidity subscore from the locked LP percentage."""
    if liquidity_locked_pct is None:
        return LIQUIDITY_UNKNOWN["score"], [LIQUIDITY_UNKNOWN["reason"]]

    for threshold in LIQUIDITY_THRESHOLDS:
        if liquidity_locked_pct >= threshold["min_locked_pct"]:
            reason = threshold["reason"]
            reasons = [reason.format(pct=liquidity_locked_pct)] if reason else []
            return threshold["score"], reasons

    # Below every bracket (negative input); treat as the lowest bracket
    lowest = LIQUIDITY_THRESHOLDS[-1]
    return lowest["score"], [lowest["reason"].format(pct=liquidity_locked_pct)]


def score_authority(inspection: Optional[TokenInspectionFacts]) -> FactorResult:
    """Calculate the authority subscore. Computed even when its weight is 0."""
    if inspection is None or not inspection.authority_known:
        return AUTHORITY_UNKNOWN["score"], [AUTHORITY_UNKNOWN["reason"]]

    score = 100
    reasons = []

    active = [
        ("mint_authority", inspection.mint_authority_active),
        ("freeze_authority", inspection.freeze_authority_active),
        ("mutable_metadata", inspection.metadata_mutable),
    ]
    for key, is_active in active:
        if is_active:
            score -= AUTHORITY_PENALTIES[key]["penalty"]
            reasons.append(AUTHORITY_PENALTIES[key]["reason"])

    return max(0, score), reasons


def score_concentration(inspection: Optional[TokenInspectionFacts]) -> Tuple[int, List[str], int]:
    """
    Calculate the concentration subscore.

    Returns:
        Tuple of (score, reasons, concentration signal count)
    """
    cfg = CONCENTRATION_THRESHOLDS

    if inspection is None:
        return cfg["unknown_score"], [], 0

    matched = filter_concentration_signals(inspection.concentration_risk_signals)
    count = len(matched)

    if count == 0:
        return cfg["clean_score"], [], 0

    score = max(cfg["floor"], cfg["base"] - cfg["per_signal_penalty"] * count)
    reasons = [s.description for s in matched if s.description]
    return score, reasons, count


def score_age(age_seconds: Optional[int]) -> FactorResult:
    """Calculate the age subscore. Older tokens have survived longer without rugging."""
    if not age_seconds or age_seconds <= 0:
        return AGE_UNKNOWN["score"], [AGE_UNKNOWN["reason"]]

    for threshold in AGE_THRESHOLDS:
        if age_seconds < threshold["max_seconds"]:
            reasons = [threshold["reason"]] if threshold["reason"] else []
            return threshold["score"], reasons

    return AGE_MATURE_SCORE, []


def danger_reasons(inspection: Optional[TokenInspectionFacts]) -> List[str]:
    """Provider danger flags, surfaced verbatim. Informational, not weighted."""
    if inspection is None:
        return []
    return [f"[DANGER] {s.name}: {s.description}" for s in inspection.danger_signals]


# =============================================================================
# COMPOSITE SCORE
# =============================================================================

def calculate_weighted_score(breakdown: Dict[str, int], weights: Dict[str, float]) -> int:
    """Weighted sum of factor subscores, rounded and clamped to 0..100."""
    total = sum(breakdown[factor] * weights[factor] for factor in FACTORS)
    return clamp_score(round_half_up(total))


def apply_soft_overrides(
    status: str,
    history: DeployerHistoryFacts,
    inspection: Optional[TokenInspectionFacts],
) -> Tuple[str, List[str]]:
    """Cap GREEN at YELLOW for rug history or an active mint authority."""
    reasons = []

    if history.previous_rug_count > 0 and status == "GREEN":
        status = "YELLOW"
        reasons.append("Score capped: deployer has previous rug history")

    # Authority reason is already present from the authority factor
    if inspection is not None and inspection.mint_authority_active and status == "GREEN":
        status = "YELLOW"

    return status, reasons


# =============================================================================
# MAIN SCORING FUNCTION
# =============================================================================

def assess_risk(
    inspection: Optional[TokenInspectionFacts],
    deployer_history: Optional[DeployerHistoryFacts] = None,
) -> RiskAssessment:
    """
    Assess the rug-pull risk of one token.

    Args:
        inspection: Inspection facts, or None if the provider had no data
        deployer_history: Deployer facts, or None if unknown

    Returns:
        A new RiskAssessment
    """
    history = deployer_history or EMPTY_HISTORY
    profile = get_weight_profile(inspection.source_tag if inspection else "")
    weights = get_weights(profile)

    deployer_score, deployer_notes = score_deployer(history)
    liquidity_score, liquidity_notes = score_liquidity(
        inspection.liquidity_locked_pct if inspection else None
    )
    authority_score, authority_notes = score_authority(inspection)
    concentration_score, concentration_notes, concentration_count = score_concentration(inspection)
    age_score, age_notes = score_age(inspection.age_seconds if inspection else None)

    breakdown = {
        "deployer": deployer_score,
        "liquidity": liquidity_score,
        "authority": authority_score,
        "concentration": concentration_score,
        "age": age_score,
    }

    reasons = (
        deployer_notes
        + liquidity_notes
        + authority_notes
        + concentration_notes
        + age_notes
        + danger_reasons(inspection)
    )

    score = calculate_weighted_score(breakdown, weights)
    status, override_notes = apply_soft_overrides(score_to_status(score), history, inspection)
    reasons.extend(override_notes)

    kill = run_kill_switches(
        history.previous_rug_count,
        inspection.liquidity_locked_pct if inspection else None,
        concentration_count,
    )
    if kill["fired"]:
        status = "RED"
        score = min(score, KILL_SWITCH_SCORE_CAP)
        reasons.extend(r.reason for r in kill["checks"] if r.fired)

    return RiskAssessment(
        score=score,
        status=RiskStatus(status),
        reasons=dedupe_reasons(reasons),
        breakdown=breakdown,
        kill_switch_flags=tuple(kill["flags"]),
        profile=profile,
    )
