"""
Token Fetcher - Wrapper for the RugCheck client.

Fetches summary + full report for a mint and converts them into
TokenInspectionFacts plus display metadata.
"""

from typing import Dict, Any, Optional

from ...rugcheck import get_token_summary, get_token_report
from ...data_adapter import inspection_from_rugcheck, token_metadata


def fetch_token_inspection(
    mint: str,
    age_seconds: Optional[int] = None,
    source_tag: str = "unknown",
) -> Dict[str, Any]:
    """
    Fetch inspection facts for a token.

    Args:
        mint: Token mint address
        age_seconds: Token age if already known
        source_tag: Launch platform tag used for profile selection

    Returns:
        Dict with status, inspection, metadata and raw payloads.
        status is "no_data" when RugCheck knows nothing about the mint.
    """
    result = {
        "status": "error",
        "inspection": None,
        "metadata": None,
        "summary": None,
        "report": None,
        "error": None
    }

    summary = get_token_summary(mint)
    report = get_token_report(mint)

    if not summary and not report:
        result["status"] = "no_data"
        result["error"] = f"No RugCheck data for {mint}"
        return result

    result["summary"] = summary
    result["report"] = report
    result["metadata"] = token_metadata(report)
    result["inspection"] = inspection_from_rugcheck(
        report, summary, age_seconds=age_seconds, source_tag=source_tag
    )
    result["status"] = "success"
    return result
