"""
Unit tests for the alert policy and message composition.

Database and Telegram calls are patched.
"""

import pytest
from unittest.mock import patch

from solguard.monitoring.core.alerts import (
    compose_alert_message,
    maybe_alert,
    short_mint,
    should_alert,
)

ALERTS = "solguard.monitoring.core.alerts"


class TestShouldAlert:

    @pytest.mark.unit
    @pytest.mark.parametrize("status,score,expected", [
        ("RED", 0, True),
        ("RED", 25, True),
        ("RED", 26, False),
        ("YELLOW", 10, False),
        ("GREEN", 90, False),
    ])
    def test_policy(self, status, score, expected):
        assert should_alert(status, score) is expected


class TestComposeAlertMessage:

    @pytest.mark.unit
    def test_short_mint(self, mint):
        assert short_mint(mint) == "So1111...1112"

    @pytest.mark.unit
    def test_siren_below_15(self, red_scan_result):
        message = compose_alert_message(red_scan_result)
        assert message.startswith("🚨 SCAM ALERT: $RUG (So1111...1112)")
        assert "Risk Score: 12/100 [RED]" in message
        assert message.endswith("Check before you buy. Stay safe.")

    @pytest.mark.unit
    def test_warning_emoji_at_15(self, red_scan_result):
        red_scan_result["score"] = 15
        assert compose_alert_message(red_scan_result).startswith("⚠️")

    @pytest.mark.unit
    def test_top_three_reasons_only(self, red_scan_result):
        message = compose_alert_message(red_scan_result)
        for reason in red_scan_result["reasons"][:3]:
            assert f"- {reason}" in message
        assert red_scan_result["reasons"][3] not in message

    @pytest.mark.unit
    def test_truncated_to_280(self, red_scan_result):
        red_scan_result["reasons"] = ["x" * 200, "y" * 200, "z" * 200]
        message = compose_alert_message(red_scan_result)
        assert len(message) == 280
        assert message.endswith("...")


class TestMaybeAlert:

    @pytest.mark.unit
    def test_not_qualifying(self, red_scan_result):
        red_scan_result["score"] = 40
        with patch(f"{ALERTS}.alert_exists") as mock_exists, \
                patch(f"{ALERTS}.insert_alert") as mock_insert:
            assert maybe_alert(red_scan_result) is False
        mock_exists.assert_not_called()
        mock_insert.assert_not_called()

    @pytest.mark.unit
    def test_duplicate_suppressed(self, red_scan_result):
        with patch(f"{ALERTS}.alert_exists", return_value=True), \
                patch(f"{ALERTS}.send_telegram_message") as mock_send, \
                patch(f"{ALERTS}.insert_alert") as mock_insert:
            assert maybe_alert(red_scan_result) is False
        mock_send.assert_not_called()
        mock_insert.assert_not_called()

    @pytest.mark.unit
    def test_sent_and_recorded(self, red_scan_result, mint):
        with patch(f"{ALERTS}.alert_exists", return_value=False), \
                patch(f"{ALERTS}.send_telegram_message", return_value=True) as mock_send, \
                patch(f"{ALERTS}.insert_alert") as mock_insert:
            assert maybe_alert(red_scan_result) is True

        message = mock_send.call_args[0][0]
        mock_insert.assert_called_once_with(mint, "scam_alert", "telegram", message)

    @pytest.mark.unit
    def test_recorded_when_channel_unconfigured(self, red_scan_result, mint):
        with patch(f"{ALERTS}.alert_exists", return_value=False), \
                patch(f"{ALERTS}.send_telegram_message", return_value=False), \
                patch(f"{ALERTS}.insert_alert") as mock_insert:
            assert maybe_alert(red_scan_result) is True

        args = mock_insert.call_args[0]
        assert args[0] == mint
        assert args[2] == ""
