"""Core monitoring components."""

from .db import (
    get_connection,
    execute_query,
    table_name,
    init_schema,
    upsert_token,
    get_token_by_mint,
    get_tokens,
    get_token_stats,
    get_tokens_by_deployer,
    get_deployer_stats,
    get_serial_ruggers,
    count_previous_rugs,
    insert_scan,
    insert_alert,
    alert_exists,
)

from .scanner import scan_token, get_scanner_status

from .alerts import should_alert, compose_alert_message, maybe_alert

from .autofeed import poll_once, run_autofeed, get_autofeed_status

__all__ = [
    # Database
    "get_connection",
    "execute_query",
    "table_name",
    "init_schema",
    "upsert_token",
    "get_token_by_mint",
    "get_tokens",
    "get_token_stats",
    "get_tokens_by_deployer",
    "get_deployer_stats",
    "get_serial_ruggers",
    "count_previous_rugs",
    "insert_scan",
    "insert_alert",
    "alert_exists",
    # Scanner
    "scan_token",
    "get_scanner_status",
    # Alerts
    "should_alert",
    "compose_alert_message",
    "maybe_alert",
    # Autofeed
    "poll_once",
    "run_autofeed",
    "get_autofeed_status",
]
