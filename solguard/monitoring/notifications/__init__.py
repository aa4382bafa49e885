"""
Notification modules for alerting.

Supports:
- Telegram
"""

from .telegram import (
    send_telegram_message,
    test_telegram_connection,
    is_configured,
)

__all__ = [
    "send_telegram_message",
    "test_telegram_connection",
    "is_configured",
]
