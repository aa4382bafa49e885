"""
Telegram Notification Module - Post scam alerts to Telegram.

Alerts are composed by core.alerts; this module only delivers text.
"""

import requests
from typing import Dict, Any

from ..config.settings import ALERT_CONFIG


TELEGRAM_BOT_TOKEN = ALERT_CONFIG.get("telegram_bot_token")
TELEGRAM_CHAT_ID = ALERT_CONFIG.get("telegram_chat_id")

# Telegram API base URL
TELEGRAM_API_URL = "https://api.telegram.org/bot{token}/sendMessage"

# Characters with meaning in Telegram's legacy Markdown parse mode
MARKDOWN_SPECIAL_CHARS = ("_", "*", "`", "[")


def escape_markdown(text: str) -> str:
    """Escape the legacy Markdown control characters for Telegram."""
    if text is None:
        return ""
    text = str(text)
    for char in MARKDOWN_SPECIAL_CHARS:
        text = text.replace(char, "\\" + char)
    return text


def is_configured() -> bool:
    """True if both bot token and chat ID are set."""
    return bool(TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID)


def send_telegram_message(text: str, parse_mode: str = "Markdown") -> bool:
    """
    Send a message to Telegram.

    Args:
        text: Message text
        parse_mode: Telegram parse mode (Markdown or HTML)

    Returns:
        True if successful
    """
    if not is_configured():
        print("[ALERTS] Warning: TELEGRAM_BOT_TOKEN or TELEGRAM_CHAT_ID not configured")
        print(f"[ALERTS] Would have posted: {text}")
        return False

    url = TELEGRAM_API_URL.format(token=TELEGRAM_BOT_TOKEN)

    payload = {
        "chat_id": TELEGRAM_CHAT_ID,
        "text": escape_markdown(text) if parse_mode == "Markdown" else text,
        "parse_mode": parse_mode
    }

    try:
        response = requests.post(url, json=payload, timeout=10)
        response.raise_for_status()

        result = response.json()
        if not result.get("ok"):
            print(f"[ALERTS] Telegram API error: {result.get('description', 'Unknown error')}")
            return False

        return True
    except requests.exceptions.RequestException as e:
        print(f"[ALERTS] Telegram send error: {e}")
        return False


def test_telegram_connection() -> Dict[str, Any]:
    """
    Test Telegram bot connection by sending a test message.

    Returns:
        Dict with test results
    """
    result = {
        "status": "error",
        "message": None,
        "error": None
    }

    if not TELEGRAM_BOT_TOKEN:
        result["error"] = "TELEGRAM_BOT_TOKEN not set"
        return result

    if not TELEGRAM_CHAT_ID:
        result["error"] = "TELEGRAM_CHAT_ID not set"
        return result

    if send_telegram_message("🧪 SolGuard test: Telegram integration is working!"):
        result["status"] = "success"
        result["message"] = "Test message sent successfully"
    else:
        result["error"] = "Failed to send test message"

    return result


if __name__ == "__main__":
    print("Telegram Notification Module")
    print("=" * 60)

    print(f"\nBot Token: {'Set' if TELEGRAM_BOT_TOKEN else 'NOT SET'}")
    print(f"Chat ID: {'Set' if TELEGRAM_CHAT_ID else 'NOT SET'}")

    if is_configured():
        print("\nTesting connection...")
        result = test_telegram_connection()
        print(f"Status: {result['status']}")
        if result.get('error'):
            print(f"Error: {result['error']}")
    else:
        print("\nTo test, set environment variables:")
        print("  export TELEGRAM_BOT_TOKEN='your-bot-token'")
        print("  export TELEGRAM_CHAT_ID='your-chat-id'")
