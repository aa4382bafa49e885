"""
Query Lambda Handler - Read-only views over the token store.

Event:
    {"query": "tokens", "limit": 100, "offset": 0}
    {"query": "deployer", "address": "<base58>"}
    {"query": "leaderboard", "limit": 10}
    {"query": "status"}
"""

import json

from ...dexscreener import is_solana_address
from ..core.db import (
    get_tokens,
    get_token_stats,
    get_tokens_by_deployer,
    get_deployer_stats,
    get_serial_ruggers,
)
from ..core.scanner import get_scanner_status
from ..core.autofeed import get_autofeed_status


def query_tokens(event):
    tokens = get_tokens(int(event.get("limit", 100)), int(event.get("offset", 0)))
    return 200, {"tokens": tokens, "stats": get_token_stats()}


def query_deployer(event):
    address = event.get("address")
    if not isinstance(address, str) or not is_solana_address(address):
        return 400, {"error": "Invalid Solana address format"}

    return 200, {
        "address": address,
        "tokens": get_tokens_by_deployer(address),
        "stats": get_deployer_stats(address),
    }


def query_leaderboard(event):
    return 200, {"ruggers": get_serial_ruggers(int(event.get("limit", 10)))}


def query_status(event):
    return 200, {"scanner": get_scanner_status(), "autofeed": get_autofeed_status()}


QUERIES = {
    "tokens": query_tokens,
    "deployer": query_deployer,
    "leaderboard": query_leaderboard,
    "status": query_status,
}


def handler(event, context):
    """
    AWS Lambda handler for store queries.

    Args:
        event: Lambda event with "query" and query-specific keys
        context: Lambda context

    Returns:
        Dict with statusCode and body
    """
    event = event or {}
    query = event.get("query", "tokens")

    if query not in QUERIES:
        return {
            "statusCode": 400,
            "body": {"error": f"Unknown query '{query}'. Available: {list(QUERIES.keys())}"}
        }

    try:
        status_code, body = QUERIES[query](event)
    except Exception as e:
        print(f"[DB] Query '{query}' failed: {e}")
        return {"statusCode": 500, "body": {"error": f"Failed to run query '{query}'"}}

    return {"statusCode": status_code, "body": body}


# For local testing
if __name__ == "__main__":
    import sys
    result = handler({"query": sys.argv[1] if len(sys.argv) > 1 else "status"}, None)
    print(json.dumps(result, indent=2, default=str))
