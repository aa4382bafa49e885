"""
Unit tests for kill switches.

Each switch is independent; run_kill_switches reports all fired ones in
evaluation order.
"""

import pytest

from solguard.kill_switches import (
    check_concentration_extreme,
    check_lp_unlocked,
    check_serial_rugger,
    filter_concentration_signals,
    matches_concentration_label,
    run_kill_switches,
)
from solguard.models import KillSwitch, RiskSignal


class TestSerialRugger:

    @pytest.mark.unit
    @pytest.mark.scoring
    @pytest.mark.parametrize("rugs,fired", [(0, False), (1, False), (2, True), (9, True)])
    def test_threshold(self, rugs, fired):
        result = check_serial_rugger(rugs)
        assert result.fired is fired
        assert result.switch == KillSwitch.DEPLOYER_SERIAL_RUGGER

    @pytest.mark.unit
    @pytest.mark.scoring
    def test_reason_only_when_fired(self):
        assert check_serial_rugger(1).reason == ""
        assert "3 previous rugs" in check_serial_rugger(3).reason


class TestLpUnlocked:

    @pytest.mark.unit
    @pytest.mark.scoring
    @pytest.mark.parametrize("pct,fired", [(0, True), (4.99, True), (5, False), (80, False)])
    def test_threshold(self, pct, fired):
        assert check_lp_unlocked(pct).fired is fired

    @pytest.mark.unit
    @pytest.mark.scoring
    def test_unknown_never_fires(self):
        result = check_lp_unlocked(None)
        assert result.fired is False
        assert result.actual_value == "unknown"


class TestConcentrationExtreme:

    @pytest.mark.unit
    @pytest.mark.scoring
    @pytest.mark.parametrize("count,fired", [(0, False), (2, False), (3, True), (6, True)])
    def test_threshold(self, count, fired):
        assert check_concentration_extreme(count).fired is fired


class TestConcentrationFilter:

    @pytest.mark.unit
    @pytest.mark.parametrize("name,matches", [
        ("Top 10 holders high ownership", True),
        ("Single holder ownership", True),
        ("High SUPPLY concentration", True),
        ("Low Liquidity", False),
        ("Mutable metadata", False),
        ("", False),
    ])
    def test_label_match(self, name, matches):
        assert matches_concentration_label(name) is matches

    @pytest.mark.unit
    def test_filter_keeps_order(self, concentration_signals):
        mixed = [RiskSignal("Low Liquidity")] + concentration_signals
        assert filter_concentration_signals(mixed) == concentration_signals

    @pytest.mark.unit
    def test_filter_handles_none(self):
        assert filter_concentration_signals(None) == []


class TestRunKillSwitches:

    @pytest.mark.unit
    @pytest.mark.scoring
    def test_none_fired(self):
        result = run_kill_switches(0, 95.0, 0)
        assert result["fired"] is False
        assert result["flags"] == []
        assert result["summary"] == "No kill switches fired."
        assert len(result["checks"]) == 3

    @pytest.mark.unit
    @pytest.mark.scoring
    def test_all_fired_in_order(self):
        result = run_kill_switches(2, 1.0, 3)
        assert result["fired"] is True
        assert result["flags"] == [
            KillSwitch.DEPLOYER_SERIAL_RUGGER,
            KillSwitch.LP_UNLOCKED,
            KillSwitch.CONCENTRATION_EXTREME,
        ]
        assert result["summary"].startswith("3 of 3 kill switches fired")

    @pytest.mark.unit
    @pytest.mark.scoring
    def test_absent_data_fires_nothing(self):
        assert run_kill_switches(0, None, 0)["fired"] is False
