"""
Unit tests for the data model and the command line runner.
"""

import json

import pytest

from solguard.cli import EXAMPLE_FACTS, main
from solguard.models import (
    DeployerHistoryFacts,
    FundingSource,
    KillSwitch,
    RiskAssessment,
    RiskSignal,
    RiskStatus,
    ScanFacts,
    TokenInspectionFacts,
)


class TestFromDict:

    @pytest.mark.unit
    def test_inspection_signals_become_objects(self):
        inspection = TokenInspectionFacts.from_dict({
            "liquidity_locked_pct": 40,
            "concentration_risk_signals": [{"name": "Single holder ownership", "level": "danger"}],
        })
        assert inspection.concentration_risk_signals == (RiskSignal("Single holder ownership", "", "danger"),)
        assert inspection.danger_signals == ()

    @pytest.mark.unit
    def test_history_funding_becomes_object(self):
        history = DeployerHistoryFacts.from_dict({
            "previous_rug_count": 1,
            "funding_source": {"address": "W", "source_type": "exchange", "amount": 3},
        })
        assert history.funding_source == FundingSource("W", "exchange", 3)

    @pytest.mark.unit
    def test_scan_facts_missing_parts(self):
        facts = ScanFacts.from_dict({})
        assert facts.inspection is None
        assert facts.deployer_history is None


class TestRiskAssessment:

    @pytest.mark.unit
    def test_to_dict_uses_plain_values(self):
        assessment = RiskAssessment(
            score=25,
            status=RiskStatus.RED,
            reasons=("a", "b"),
            breakdown={"deployer": 0},
            kill_switch_flags=(KillSwitch.LP_UNLOCKED,),
            profile="pump.fun",
        )
        data = json.loads(assessment.to_json())
        assert data == {
            "score": 25,
            "status": "RED",
            "reasons": ["a", "b"],
            "breakdown": {"deployer": 0},
            "kill_switch_flags": ["LP_UNLOCKED"],
            "profile": "pump.fun",
        }


class TestCli:

    @pytest.mark.unit
    @pytest.mark.smoke
    def test_example_prints_facts(self, capsys):
        assert main(["--example"]) == 0
        assert json.loads(capsys.readouterr().out) == EXAMPLE_FACTS

    @pytest.mark.unit
    @pytest.mark.scoring
    def test_assess_writes_output(self, tmp_path):
        facts_path = tmp_path / "facts.json"
        output_path = tmp_path / "result.json"
        facts_path.write_text(json.dumps(EXAMPLE_FACTS))

        assert main(["assess", "--facts", str(facts_path), "--output", str(output_path)]) == 0

        result = json.loads(output_path.read_text())
        assert result["profile"] == "pump.fun"
        assert result["status"] in {"RED", "YELLOW", "GREEN"}
        assert set(result["breakdown"]) == {"deployer", "liquidity", "authority", "concentration", "age"}

    @pytest.mark.unit
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()
