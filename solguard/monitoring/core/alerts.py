"""
Alert System - Decide whether a scanned token deserves a public scam alert.

Only RED tokens at or below ALERT_SCORE_THRESHOLD are alerted, once per mint.
The alert is recorded even when no channel is configured.
"""

from typing import Dict, Any

from ...thresholds import ALERT_SCORE_THRESHOLD
from ..notifications.telegram import send_telegram_message
from .db import alert_exists, insert_alert


MAX_MESSAGE_LENGTH = 280
SIREN_SCORE = 15
ALERT_TYPE = "scam_alert"
ALERT_CHANNEL = "telegram"


def should_alert(status: str, score: int) -> bool:
    """True for RED tokens scoring at or below the alert threshold."""
    return status == "RED" and score <= ALERT_SCORE_THRESHOLD


def short_mint(mint: str) -> str:
    """First 6 and last 4 characters, e.g. 'So1ana...xYz1'."""
    return f"{mint[:6]}...{mint[-4:]}"


def compose_alert_message(payload: Dict[str, Any]) -> str:
    """
    Compose the alert text for a dangerous token.

    Args:
        payload: Dict with mint, symbol, score, status and reasons

    Returns:
        Message text, at most 280 characters
    """
    emoji = "🚨" if payload["score"] < SIREN_SCORE else "⚠️"
    top_reasons = list(payload.get("reasons") or [])[:3]

    lines = [
        f"{emoji} SCAM ALERT: ${payload.get('symbol') or '???'} ({short_mint(payload['mint'])})",
        "",
        f"Risk Score: {payload['score']}/100 [{payload['status']}]",
        "",
        *[f"- {reason}" for reason in top_reasons],
        "",
        "Check before you buy. Stay safe.",
    ]

    message = "\n".join(lines)
    if len(message) > MAX_MESSAGE_LENGTH:
        message = message[:MAX_MESSAGE_LENGTH - 3] + "..."
    return message


def maybe_alert(payload: Dict[str, Any]) -> bool:
    """
    Post an alert for a scanned token if policy allows.

    Args:
        payload: Scanner result dict (mint, symbol, score, status, reasons)

    Returns:
        True if an alert was composed and recorded
    """
    if not should_alert(payload["status"], payload["score"]):
        return False

    mint = payload["mint"]
    if alert_exists(mint):
        print(f"[ALERTS] Alert already posted for {mint}, skipping")
        return False

    print(f"[ALERTS] Token {payload.get('symbol')} qualifies for alert (score: {payload['score']})")

    message = compose_alert_message(payload)
    sent = send_telegram_message(message)

    insert_alert(mint, ALERT_TYPE, ALERT_CHANNEL if sent else "", message)
    return True
