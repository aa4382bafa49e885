"""
Data model for token risk assessment.

Defines the inputs handed to the risk engine by the scan orchestrator:
1. TokenInspectionFacts - authority/liquidity/holder facts for one mint
2. DeployerHistoryFacts - prior launches and funding source of the deployer

and the RiskAssessment the engine returns.
"""

from typing import Dict, Any, Optional, Tuple
from dataclasses import dataclass, asdict
from enum import Enum
import json


class RiskStatus(Enum):
    RED = "RED"
    YELLOW = "YELLOW"
    GREEN = "GREEN"


class KillSwitch(Enum):
    DEPLOYER_SERIAL_RUGGER = "DEPLOYER_SERIAL_RUGGER"
    LP_UNLOCKED = "LP_UNLOCKED"
    CONCENTRATION_EXTREME = "CONCENTRATION_EXTREME"


# Funding source classifications
FUNDING_SOURCE_TYPES = ["exchange", "mixer", "privacy_tool", "unknown"]  # "privacy-tool" also accepted


@dataclass(frozen=True)
class RiskSignal:
    """A single risk flag reported by the inspection provider."""
    name: str
    description: str = ""
    level: str = "info"  # "info", "warn", "danger", "good"


@dataclass(frozen=True)
class FundingSource:
    """Where the deployer wallet's first funds came from."""
    address: str
    source_type: str = "unknown"  # One of FUNDING_SOURCE_TYPES
    amount: float = 0.0  # native units (SOL)


@dataclass(frozen=True)
class TokenInspectionFacts:
    """Inspection facts for one mint, as supplied by the inspection provider."""
    mint_authority_active: bool = False
    freeze_authority_active: bool = False
    metadata_mutable: bool = False
    authority_known: bool = True  # False when the provider report was unavailable
    liquidity_locked_pct: Optional[float] = None  # 0..100, None = no data
    concentration_risk_signals: Tuple[RiskSignal, ...] = ()
    danger_signals: Tuple[RiskSignal, ...] = ()
    age_seconds: Optional[int] = None  # None or 0 = unknown
    source_tag: str = "unknown"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenInspectionFacts":
        """Create from dictionary (e.g., loaded from JSON)."""
        data = dict(data)
        for key in ("concentration_risk_signals", "danger_signals"):
            if key in data:
                data[key] = tuple(
                    RiskSignal(**s) if isinstance(s, dict) else s
                    for s in data[key] or []
                )
        return cls(**data)


@dataclass(frozen=True)
class DeployerHistoryFacts:
    """Launch history of the wallet that created the token."""
    previous_rug_count: int = 0
    total_prior_token_count: int = 0
    funding_source: Optional[FundingSource] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeployerHistoryFacts":
        """Create from dictionary (e.g., loaded from JSON)."""
        data = dict(data)
        if data.get("funding_source") and isinstance(data["funding_source"], dict):
            data["funding_source"] = FundingSource(**data["funding_source"])
        return cls(**data)


@dataclass(frozen=True)
class RiskAssessment:
    """
    Result of one risk assessment.

    score: 0 = extremely dangerous, 100 = safe.
    breakdown: per-factor subscores (deployer, liquidity, authority,
    concentration, age) before weighting.
    """
    score: int
    status: RiskStatus
    reasons: Tuple[str, ...]
    breakdown: Dict[str, int]
    kill_switch_flags: Tuple[KillSwitch, ...] = ()
    profile: str = "default"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "score": self.score,
            "status": self.status.value,
            "reasons": list(self.reasons),
            "breakdown": dict(self.breakdown),
            "kill_switch_flags": [flag.value for flag in self.kill_switch_flags],
            "profile": self.profile,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


@dataclass
class ScanFacts:
    """Engine inputs bundled for offline assessment (CLI facts files)."""
    inspection: Optional[TokenInspectionFacts] = None
    deployer_history: Optional[DeployerHistoryFacts] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScanFacts":
        inspection = data.get("inspection")
        history = data.get("deployer_history")
        return cls(
            inspection=TokenInspectionFacts.from_dict(inspection) if inspection else None,
            deployer_history=DeployerHistoryFacts.from_dict(history) if history else None,
        )

    @classmethod
    def from_json_file(cls, file_path: str) -> "ScanFacts":
        """Create from JSON file."""
        with open(file_path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
