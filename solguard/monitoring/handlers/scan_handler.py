"""
Scan Lambda Handler - Scan a single token on demand.

Event:
    {"mint": "<base58 mint address>", "force": false}
"""

import json
from datetime import datetime

from ...dexscreener import is_solana_address
from ..core.scanner import scan_token
from ..core.alerts import maybe_alert
from ..core.db import get_token_by_mint


def handler(event, context):
    """
    AWS Lambda handler for on-demand token scans.

    Args:
        event: Lambda event with "mint" and optional "force"
        context: Lambda context

    Returns:
        Dict with statusCode and body:
        - 200 with the scan result and "alerted"
        - 200 with "message" and stored "token" if already scanned
        - 400 on a missing or invalid mint
        - 404 when no provider data is available
        - 500 on unexpected errors
    """
    start_time = datetime.utcnow()
    event = event or {}
    mint = event.get("mint")

    if not isinstance(mint, str) or not is_solana_address(mint):
        return {"statusCode": 400, "body": {"error": "Missing or invalid mint address"}}

    response = {"statusCode": 200, "body": {}}

    try:
        print(f"[{start_time.isoformat()}] [SCANNER] Scan requested for {mint}")
        result = scan_token(mint, force=bool(event.get("force", False)))

        if not result:
            existing = get_token_by_mint(mint)
            if existing:
                response["body"] = {"message": "Token already scanned", "token": existing}
            else:
                response["statusCode"] = 404
                response["body"] = {"error": "Could not scan token, no data available"}
            return response

        alerted = maybe_alert(result)
        response["body"] = {**result, "alerted": alerted}

    except Exception as e:
        response["statusCode"] = 500
        response["body"] = {"error": f"Internal scan error: {e}"}
        print(f"[SCANNER] ERROR: {e}")
        import traceback
        traceback.print_exc()

    return response


# For local testing
if __name__ == "__main__":
    import sys
    result = handler({"mint": sys.argv[1] if len(sys.argv) > 1 else ""}, None)
    print(json.dumps(result, indent=2, default=str))
