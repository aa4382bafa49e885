"""
SolGuard - Rug-pull risk scoring for Solana token launches.

Core engine:
    from solguard import assess_risk, TokenInspectionFacts, DeployerHistoryFacts

    assessment = assess_risk(
        TokenInspectionFacts(liquidity_locked_pct=95, age_seconds=2592000),
        DeployerHistoryFacts(total_prior_token_count=2),
    )
    print(assessment.status, assessment.score)
"""

__version__ = "1.0.0"

from .models import (
    RiskStatus,
    KillSwitch,
    RiskSignal,
    FundingSource,
    TokenInspectionFacts,
    DeployerHistoryFacts,
    RiskAssessment,
    ScanFacts,
)
from .risk_engine import assess_risk

__all__ = [
    "__version__",
    "assess_risk",
    "RiskStatus",
    "KillSwitch",
    "RiskSignal",
    "FundingSource",
    "TokenInspectionFacts",
    "DeployerHistoryFacts",
    "RiskAssessment",
    "ScanFacts",
]
