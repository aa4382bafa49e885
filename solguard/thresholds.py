"""
Risk Scoring Thresholds and Justifications.

All thresholds used by the token risk engine live here so they can be tuned
without touching the scoring logic.

Each threshold includes:
- value: The numeric threshold
- score: The subscore assigned when the metric meets this threshold
- justification: Why this threshold was chosen
"""

# =============================================================================
# STATUS SCALE
# =============================================================================

STATUS_SCALE = {
    "RED": {
        "min": 0,
        "max": 30,
        "label": "Danger",
        "description": "Token shows strong rug-pull indicators. Do not buy.",
    },
    "YELLOW": {
        "min": 31,
        "max": 60,
        "label": "Caution",
        "description": "Token has notable risk factors. Verify before buying.",
    },
    "GREEN": {
        "min": 61,
        "max": 100,
        "label": "Lower Risk",
        "description": "No major red flags detected. Still not a guarantee of safety.",
    },
}

# =============================================================================
# WEIGHT PROFILES
# =============================================================================

FACTORS = ["deployer", "liquidity", "authority", "concentration", "age"]

WEIGHT_PROFILES = {
    "default": {
        "weights": {
            "deployer": 0.40,
            "liquidity": 0.25,
            "authority": 0.15,
            "concentration": 0.10,
            "age": 0.10,
        },
        "justification": "Deployer track record is the strongest rug predictor, followed by "
                        "how much liquidity can be pulled. Authorities, holder concentration "
                        "and age refine the picture.",
    },
    "pump.fun": {
        "weights": {
            "deployer": 0.45,
            "liquidity": 0.30,
            "authority": 0.00,
            "concentration": 0.15,
            "age": 0.10,
        },
        "justification": "pump.fun revokes mint and freeze authority for every launch, so "
                        "authority carries no signal there. Its weight moves to deployer, "
                        "liquidity and concentration.",
    },
}

# source_tag -> profile name. Unknown tags use the default profile.
SOURCE_TAG_PROFILES = {
    "pump.fun": "pump.fun",
    "pumpfun": "pump.fun",
    "pump_fun": "pump.fun",
}

DEFAULT_PROFILE = "default"

# =============================================================================
# DEPLOYER THRESHOLDS
# =============================================================================

DEPLOYER_THRESHOLDS = {
    "new_deployer": {
        "score": 40,
        "justification": "No launch history to judge. Fresh wallets are the usual vehicle "
                        "for throwaway launches, so default to moderately risky.",
    },
    "clean_history": {
        "base": 60,
        "per_token": 5,
        "max": 100,
        "justification": "Each prior launch that was not flagged RED is weak evidence of a "
                        "legitimate deployer.",
    },
}

FUNDING_ADJUSTMENTS = [
    {
        "source_types": ["exchange"],
        "delta": 10,
        "reason": "Deployer funded from a known exchange",
        "justification": "Exchange withdrawals are tied to a KYC'd account.",
    },
    {
        "source_types": ["mixer", "privacy_tool"],
        "delta": -30,
        "reason": "[WARNING] Deployer funded through a mixer or privacy tool",
        "justification": "Laundered funding is a strong signal of intent to hide identity.",
    },
    {
        "source_types": ["unknown"],
        "max_amount": 0.1,
        "delta": -10,
        "reason": "Deployer funded with a tiny amount from an unknown wallet",
        "justification": "Dust funding from a burner wallet is typical of disposable deployers.",
    },
]

# =============================================================================
# LIQUIDITY THRESHOLDS
# =============================================================================

LIQUIDITY_THRESHOLDS = [
    {"min_locked_pct": 90, "score": 95, "reason": None},
    {"min_locked_pct": 50, "score": 70, "reason": None},
    {"min_locked_pct": 10, "score": 45, "reason": "Only {pct:.1f}% of LP locked"},
    {"min_locked_pct": 0, "score": 10, "reason": "LP barely locked ({pct:.1f}%)"},
]

LIQUIDITY_UNKNOWN = {
    "score": 20,
    "reason": "Could not verify LP lock status",
}

# =============================================================================
# AUTHORITY PENALTIES
# =============================================================================

AUTHORITY_PENALTIES = {
    "mint_authority": {
        "penalty": 40,
        "reason": "Mint authority is active - new tokens can be minted",
    },
    "freeze_authority": {
        "penalty": 30,
        "reason": "Freeze authority is active - your tokens can be frozen",
    },
    "mutable_metadata": {
        "penalty": 15,
        "reason": "Token metadata is mutable",
    },
}

AUTHORITY_UNKNOWN = {
    "score": 30,
    "reason": "Could not verify token authorities",
}

# =============================================================================
# CONCENTRATION THRESHOLDS
# =============================================================================

CONCENTRATION_THRESHOLDS = {
    # Case-insensitive substrings matched against risk signal names
    "label_terms": ["holder", "supply", "single"],
    "base": 50,
    "per_signal_penalty": 15,
    "floor": 10,
    "clean_score": 70,
    "unknown_score": 50,
}

# =============================================================================
# AGE THRESHOLDS
# =============================================================================

ONE_HOUR = 3600
ONE_DAY = 86400
ONE_WEEK = 604800
ONE_MONTH = 2592000
ONE_YEAR = 31536000

AGE_THRESHOLDS = [
    {"max_seconds": ONE_HOUR, "score": 0, "reason": "Token is less than 1 hour old"},
    {"max_seconds": ONE_DAY, "score": 30, "reason": "Token is less than 24 hours old"},
    {"max_seconds": ONE_WEEK, "score": 60, "reason": None},
    {"max_seconds": ONE_MONTH, "score": 80, "reason": None},
    {"max_seconds": ONE_YEAR, "score": 90, "reason": None},
]

AGE_MATURE_SCORE = 100

AGE_UNKNOWN = {
    "score": 20,
    "reason": "Could not determine token age",
}

# =============================================================================
# KILL SWITCHES
# =============================================================================

KILL_SWITCH_SCORE_CAP = 25

KILL_SWITCHES = {
    "DEPLOYER_SERIAL_RUGGER": {
        "name": "Deployer Serial Rugger",
        "condition": "Deployer has 2 or more previous RED tokens",
        "min_previous_rugs": 2,
        "reason": "KILL SWITCH: deployer is a serial rugger ({rugs} previous rugs)",
        "justification": "One rug can be bad luck. Two is a pattern.",
    },
    "LP_UNLOCKED": {
        "name": "LP Unlocked",
        "condition": "Less than 5% of LP is locked",
        "max_locked_pct": 5,
        "reason": "KILL SWITCH: liquidity is effectively unlocked ({pct:.1f}% locked)",
        "justification": "Unlocked liquidity can be pulled at any moment.",
    },
    "CONCENTRATION_EXTREME": {
        "name": "Concentration Extreme",
        "condition": "3 or more holder/supply concentration signals",
        "min_signals": 3,
        "reason": "KILL SWITCH: extreme holder concentration ({count} signals)",
        "justification": "A handful of wallets can dump the whole supply.",
    },
}

# =============================================================================
# ALERTING
# =============================================================================

# Only RED tokens at or below this score are posted as alerts
ALERT_SCORE_THRESHOLD = 25


def get_weight_profile(source_tag: str) -> str:
    """Return the weight profile name for a source tag."""
    if not source_tag:
        return DEFAULT_PROFILE
    return SOURCE_TAG_PROFILES.get(source_tag.strip().lower(), DEFAULT_PROFILE)


def get_weights(profile: str) -> dict:
    """Return the factor weights for a profile name."""
    return WEIGHT_PROFILES.get(profile, WEIGHT_PROFILES[DEFAULT_PROFILE])["weights"]


def score_to_status(score: float) -> str:
    """Convert numeric score to status name."""
    if score <= STATUS_SCALE["RED"]["max"]:
        return "RED"
    if score <= STATUS_SCALE["YELLOW"]["max"]:
        return "YELLOW"
    return "GREEN"
