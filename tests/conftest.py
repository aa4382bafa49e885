"""
Pytest configuration and fixtures for the SolGuard token risk scanner.

This file contains shared fixtures used across all test modules.
Fixtures follow the pattern: factory functions with auto-cleanup.
"""

import pytest
import time
from typing import Dict, Any, List
from unittest.mock import MagicMock

from solguard.models import (
    DeployerHistoryFacts,
    FundingSource,
    RiskSignal,
    TokenInspectionFacts,
)
from solguard.thresholds import ONE_DAY


# =============================================================================
# ADDRESSES
# =============================================================================

MINT = "So11111111111111111111111111111111111111112"
DEPLOYER = "7YttLkHDoNj9wyDur5pM1ejNaAvT9X4eqaYcHQqtj2G5"
FUNDER = "9xQeWvG816bUx9EPjHmaT23yvVM2ZWbrrpZb9PusVFin"

THIRTY_DAYS = 30 * ONE_DAY


@pytest.fixture
def mint() -> str:
    return MINT


@pytest.fixture
def deployer() -> str:
    return DEPLOYER


# =============================================================================
# ENGINE INPUT FIXTURES
# =============================================================================

@pytest.fixture
def make_inspection():
    """
    Factory fixture for TokenInspectionFacts.

    Defaults describe a clean token: no authorities, immutable metadata,
    95% LP locked, no signals, 30 days old, default profile.

    Usage:
        def test_something(make_inspection):
            inspection = make_inspection(liquidity_locked_pct=2, source_tag="pump.fun")
    """
    def _create(**overrides) -> TokenInspectionFacts:
        base = {
            "mint_authority_active": False,
            "freeze_authority_active": False,
            "metadata_mutable": False,
            "liquidity_locked_pct": 95.0,
            "concentration_risk_signals": (),
            "danger_signals": (),
            "age_seconds": THIRTY_DAYS,
            "source_tag": "unknown",
        }
        base.update(overrides)
        return TokenInspectionFacts(**base)

    return _create


@pytest.fixture
def make_history():
    """
    Factory fixture for DeployerHistoryFacts.

    Defaults describe a deployer with 5 prior clean tokens.
    """
    def _create(**overrides) -> DeployerHistoryFacts:
        base = {
            "previous_rug_count": 0,
            "total_prior_token_count": 5,
            "funding_source": None,
        }
        base.update(overrides)
        return DeployerHistoryFacts(**base)

    return _create


@pytest.fixture
def make_funding():
    def _create(source_type: str = "unknown", amount: float = 1.0) -> FundingSource:
        return FundingSource(address=FUNDER, source_type=source_type, amount=amount)

    return _create


@pytest.fixture
def concentration_signals() -> List[RiskSignal]:
    """Three signals that all match the concentration filter."""
    return [
        RiskSignal("Top 10 holders high ownership", "Top 10 holders own 74% of supply", "danger"),
        RiskSignal("Single holder ownership", "One wallet holds 41% of supply", "danger"),
        RiskSignal("High supply concentration", "Creator wallets hold most of the supply", "warn"),
    ]


# =============================================================================
# PROVIDER PAYLOAD FIXTURES
# =============================================================================

@pytest.fixture
def rugcheck_report() -> Dict[str, Any]:
    """Sample RugCheck full report for a clean token."""
    return {
        "mint": MINT,
        "creator": DEPLOYER,
        "token": {
            "mintAuthority": None,
            "freezeAuthority": None,
            "supply": 1_000_000_000,
            "decimals": 6,
        },
        "tokenMeta": {"name": "Safe Token", "symbol": "SAFE", "mutable": False},
        "fileMeta": {"name": "Safe Token", "symbol": "SAFE"},
        "risks": [],
    }


@pytest.fixture
def rugcheck_summary() -> Dict[str, Any]:
    """Sample RugCheck summary report."""
    return {
        "score": 1,
        "lpLockedPct": 95.0,
        "risks": [],
    }


@pytest.fixture
def helius_mint_txs() -> List[Dict[str, Any]]:
    """
    Deployer TOKEN_MINT history: 5 launches, the last one is MINT,
    created 40 days ago.
    """
    now = int(time.time())
    txs = [
        {
            "type": "TOKEN_MINT",
            "signature": f"sig{i}",
            "timestamp": now - (100 + i) * ONE_DAY,
            "tokenTransfers": [{"mint": f"OtherMint{i}"}],
        }
        for i in range(4)
    ]
    txs.append({
        "type": "TOKEN_MINT",
        "signature": "sigMint",
        "timestamp": now - 40 * ONE_DAY,
        "tokenTransfers": [{"mint": MINT}],
    })
    return txs


@pytest.fixture
def mock_response():
    """
    Factory for mocked requests.Response objects.

    Usage:
        mock_get.return_value = mock_response({"ok": True}, status_code=200)
    """
    def _create(json_data=None, status_code: int = 200) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = json_data
        if status_code >= 400:
            import requests
            response.raise_for_status.side_effect = requests.exceptions.HTTPError(
                f"{status_code} Error"
            )
        else:
            response.raise_for_status.return_value = None
        return response

    return _create


# =============================================================================
# SCAN RESULT FIXTURES
# =============================================================================

@pytest.fixture
def red_scan_result() -> Dict[str, Any]:
    """Scanner result for a token that qualifies for an alert."""
    return {
        "mint": MINT,
        "name": "Rug Token",
        "symbol": "RUG",
        "deployer": DEPLOYER,
        "score": 12,
        "status": "RED",
        "reasons": [
            "Deployer rugged 3 of 4 previous tokens",
            "LP barely locked (1.0%)",
            "Mint authority is active - new tokens can be minted",
            "Token is less than 1 hour old",
        ],
        "breakdown": {"deployer": 25, "liquidity": 10, "authority": 60, "concentration": 70, "age": 0},
        "kill_switch_flags": ["DEPLOYER_SERIAL_RUGGER", "LP_UNLOCKED"],
    }


# =============================================================================
# CLEANUP FIXTURES
# =============================================================================

@pytest.fixture(autouse=True)
def reset_module_state():
    """
    Auto-cleanup fixture that resets the in-process scanner and autofeed
    counters after each test.
    """
    yield
    from solguard.monitoring.core import scanner, autofeed

    scanner._status.update({"tokens_scanned": 0, "last_scan_at": None, "last_error": None})
    autofeed._status.update({"running": False, "total_fed": 0, "last_poll": None})
