"""
Token Scanner Monitoring System.

Scans Solana token launches, stores risk verdicts in PostgreSQL and posts
alerts for the most dangerous ones.

Quick Start:
    from solguard.monitoring.core import init_schema, scan_token, maybe_alert

    init_schema()
    result = scan_token("<mint address>")
    if result:
        maybe_alert(result)
"""

__version__ = "1.0.0"
