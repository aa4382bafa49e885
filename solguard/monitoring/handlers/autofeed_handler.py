"""
Autofeed Lambda Handler (1 min interval).

Runs one DexScreener poll cycle: discover new Solana tokens, scan, alert.

Triggered by CloudWatch Events Rule.
"""

import json
from datetime import datetime

from ..core.autofeed import poll_once


def handler(event, context):
    """
    AWS Lambda handler for the autofeed poll cycle.

    Args:
        event: Lambda event (from CloudWatch Events)
        context: Lambda context

    Returns:
        Dict with execution results
    """
    start_time = datetime.utcnow()

    response = {
        "statusCode": 200,
        "body": {
            "handler": "autofeed",
            "timestamp": start_time.isoformat(),
            "status": "success",
            "poll_result": None,
            "error": None
        }
    }

    try:
        print(f"[{start_time.isoformat()}] Starting autofeed poll...")
        poll_result = poll_once()
        response["body"]["poll_result"] = poll_result

        print(f"  Found: {poll_result['found']}")
        print(f"  New: {poll_result['new']}")
        print(f"  Scanned: {poll_result['scanned']}")
        print(f"  Alerted: {poll_result['alerted']}")

        if poll_result.get("errors"):
            response["body"]["status"] = "partial"
            print(f"  Errors: {poll_result['errors']}")

    except Exception as e:
        response["statusCode"] = 500
        response["body"]["status"] = "error"
        response["body"]["error"] = str(e)
        print(f"ERROR: {e}")
        import traceback
        traceback.print_exc()

    end_time = datetime.utcnow()
    duration_ms = (end_time - start_time).total_seconds() * 1000
    response["body"]["duration_ms"] = duration_ms
    print(f"  Duration: {duration_ms:.0f}ms")

    return response


# For local testing
if __name__ == "__main__":
    print("Testing autofeed handler locally...")
    result = handler({}, None)
    print(json.dumps(result, indent=2, default=str))
