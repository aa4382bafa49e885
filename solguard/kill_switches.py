"""
Kill Switches - Hard Overrides on the Composite Score.

Kill switches are binary rules evaluated after the weighted score. Each one
is independent; any number may fire for the same token. If any fires, the
token is forced to RED and its score is capped (not replaced).

These represent rug patterns that no amount of good signal elsewhere can
compensate for.
"""

from typing import Dict, Any, List, Optional
from dataclasses import dataclass

from .models import KillSwitch
from .thresholds import KILL_SWITCHES, CONCENTRATION_THRESHOLDS


@dataclass
class KillSwitchResult:
    """Result of a single kill switch evaluation."""
    switch: KillSwitch
    name: str
    fired: bool
    condition: str
    actual_value: Any
    reason: str


def matches_concentration_label(name: str) -> bool:
    """True if a risk signal name describes holder/supply concentration."""
    lowered = (name or "").lower()
    return any(term in lowered for term in CONCENTRATION_THRESHOLDS["label_terms"])


def filter_concentration_signals(signals) -> list:
    """
    Select the concentration signals from a provider risk list.

    The concentration factor and the CONCENTRATION_EXTREME switch both count
    the output of this filter.
    """
    return [s for s in signals or () if matches_concentration_label(s.name)]


# =============================================================================
# CHECK FUNCTIONS
# =============================================================================

def check_serial_rugger(previous_rug_count: int) -> KillSwitchResult:
    """Fire when the deployer has rugged at least twice before."""
    check_def = KILL_SWITCHES["DEPLOYER_SERIAL_RUGGER"]
    fired = previous_rug_count >= check_def["min_previous_rugs"]

    return KillSwitchResult(
        switch=KillSwitch.DEPLOYER_SERIAL_RUGGER,
        name=check_def["name"],
        fired=fired,
        condition=check_def["condition"],
        actual_value=f"{previous_rug_count} previous rugs",
        reason=check_def["reason"].format(rugs=previous_rug_count) if fired else "",
    )


def check_lp_unlocked(liquidity_locked_pct: Optional[float]) -> KillSwitchResult:
    """Fire when lock data exists and almost nothing is locked."""
    check_def = KILL_SWITCHES["LP_UNLOCKED"]
    # Missing data is not evidence of an unlocked pool
    fired = liquidity_locked_pct is not None and liquidity_locked_pct < check_def["max_locked_pct"]

    return KillSwitchResult(
        switch=KillSwitch.LP_UNLOCKED,
        name=check_def["name"],
        fired=fired,
        condition=check_def["condition"],
        actual_value="unknown" if liquidity_locked_pct is None else f"{liquidity_locked_pct:.1f}% locked",
        reason=check_def["reason"].format(pct=liquidity_locked_pct) if fired else "",
    )


def check_concentration_extreme(concentration_count: int) -> KillSwitchResult:
    """Fire when three or more concentration signals were detected."""
    check_def = KILL_SWITCHES["CONCENTRATION_EXTREME"]
    fired = concentration_count >= check_def["min_signals"]

    return KillSwitchResult(
        switch=KillSwitch.CONCENTRATION_EXTREME,
        name=check_def["name"],
        fired=fired,
        condition=check_def["condition"],
        actual_value=f"{concentration_count} concentration signals",
        reason=check_def["reason"].format(count=concentration_count) if fired else "",
    )


# =============================================================================
# MAIN EVALUATION FUNCTION
# =============================================================================

def run_kill_switches(
    previous_rug_count: int,
    liquidity_locked_pct: Optional[float],
    concentration_count: int,
) -> Dict[str, Any]:
    """
    Evaluate all kill switches.

    Args:
        previous_rug_count: Deployer's earlier RED tokens
        liquidity_locked_pct: Locked LP percentage, None if unknown
        concentration_count: Number of concentration signals

    Returns:
        Dictionary with:
        - fired: bool - True if any switch fired
        - checks: List of KillSwitchResult objects
        - flags: List of fired KillSwitch tags, in evaluation order
        - summary: Human-readable summary
    """
    results: List[KillSwitchResult] = [
        check_serial_rugger(previous_rug_count),
        check_lp_unlocked(liquidity_locked_pct),
        check_concentration_extreme(concentration_count),
    ]

    flags = [r.switch for r in results if r.fired]

    if flags:
        summary = f"{len(flags)} of {len(results)} kill switches fired: " + ", ".join(f.value for f in flags)
    else:
        summary = "No kill switches fired."

    return {
        "fired": bool(flags),
        "checks": results,
        "flags": flags,
        "summary": summary,
    }
