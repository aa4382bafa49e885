"""
Unit tests for thresholds module.

Validates that thresholds are properly structured, status ranges cover
0-100 and every weight profile sums to 1.0.
"""

import pytest

from solguard.thresholds import (
    AGE_THRESHOLDS,
    FACTORS,
    FUNDING_ADJUSTMENTS,
    KILL_SWITCHES,
    LIQUIDITY_THRESHOLDS,
    STATUS_SCALE,
    WEIGHT_PROFILES,
    get_weight_profile,
    get_weights,
    score_to_status,
)
from solguard.models import KillSwitch, FUNDING_SOURCE_TYPES


class TestStatusScale:
    """Tests for the RED / YELLOW / GREEN scale."""

    @pytest.mark.unit
    @pytest.mark.scoring
    def test_ranges_are_contiguous(self):
        """Status ranges should cover 0-100 without gaps or overlaps."""
        covered = []
        for config in STATUS_SCALE.values():
            covered.extend(range(config["min"], config["max"] + 1))

        assert sorted(covered) == list(range(0, 101))

    @pytest.mark.unit
    @pytest.mark.scoring
    @pytest.mark.parametrize("score,expected", [
        (0, "RED"), (30, "RED"), (31, "YELLOW"), (60, "YELLOW"), (61, "GREEN"), (100, "GREEN"),
    ])
    def test_score_to_status_boundaries(self, score, expected):
        assert score_to_status(score) == expected


class TestWeightProfiles:
    """Tests for factor weight profiles."""

    @pytest.mark.unit
    @pytest.mark.scoring
    @pytest.mark.parametrize("profile", list(WEIGHT_PROFILES.keys()))
    def test_weights_sum_to_one(self, profile):
        weights = WEIGHT_PROFILES[profile]["weights"]
        assert abs(sum(weights.values()) - 1.0) < 1e-9

    @pytest.mark.unit
    @pytest.mark.scoring
    @pytest.mark.parametrize("profile", list(WEIGHT_PROFILES.keys()))
    def test_every_factor_weighted(self, profile):
        weights = WEIGHT_PROFILES[profile]["weights"]
        assert set(weights) == set(FACTORS)
        assert all(w >= 0 for w in weights.values())

    @pytest.mark.unit
    @pytest.mark.scoring
    def test_profiles_have_justification(self):
        for name, profile in WEIGHT_PROFILES.items():
            assert profile.get("justification"), f"{name} missing justification"

    @pytest.mark.unit
    @pytest.mark.scoring
    def test_pump_fun_ignores_authority(self):
        assert get_weights("pump.fun")["authority"] == 0.0

    @pytest.mark.unit
    @pytest.mark.scoring
    @pytest.mark.parametrize("tag,expected", [
        ("pump.fun", "pump.fun"),
        ("PUMP.FUN", "pump.fun"),
        ("pumpfun", "pump.fun"),
        ("raydium", "default"),
        ("", "default"),
        (None, "default"),
    ])
    def test_source_tag_lookup(self, tag, expected):
        assert get_weight_profile(tag) == expected

    @pytest.mark.unit
    @pytest.mark.scoring
    def test_unknown_profile_falls_back_to_default(self):
        assert get_weights("nope") == WEIGHT_PROFILES["default"]["weights"]


class TestFactorThresholds:

    @pytest.mark.unit
    @pytest.mark.scoring
    def test_liquidity_brackets_descending(self):
        mins = [t["min_locked_pct"] for t in LIQUIDITY_THRESHOLDS]
        scores = [t["score"] for t in LIQUIDITY_THRESHOLDS]
        assert mins == sorted(mins, reverse=True)
        assert scores == sorted(scores, reverse=True)
        assert mins[-1] == 0

    @pytest.mark.unit
    @pytest.mark.scoring
    def test_age_buckets_ascending(self):
        bounds = [t["max_seconds"] for t in AGE_THRESHOLDS]
        scores = [t["score"] for t in AGE_THRESHOLDS]
        assert bounds == sorted(bounds)
        assert scores == sorted(scores)

    @pytest.mark.unit
    @pytest.mark.scoring
    def test_funding_rules_use_known_source_types(self):
        for rule in FUNDING_ADJUSTMENTS:
            assert set(rule["source_types"]) <= set(FUNDING_SOURCE_TYPES)
            assert rule["reason"]


class TestKillSwitchDefinitions:

    @pytest.mark.unit
    @pytest.mark.scoring
    def test_every_tag_defined(self):
        assert set(KILL_SWITCHES) == {k.value for k in KillSwitch}

    @pytest.mark.unit
    @pytest.mark.scoring
    def test_required_fields(self):
        for key, definition in KILL_SWITCHES.items():
            for field in ("name", "condition", "reason", "justification"):
                assert definition.get(field), f"{key} missing {field}"
            assert definition["reason"].startswith("KILL SWITCH:")
