"""
AWS Lambda Handlers for the Token Scanner.

- scan_handler: On-demand scan of one mint (+ alert)
- autofeed_handler: 1 min poll of DexScreener for new tokens
- query_handler: Token list, deployer profile, serial rugger leaderboard, status
"""

from .scan_handler import handler as scan_handler
from .autofeed_handler import handler as autofeed_handler
from .query_handler import handler as query_handler

__all__ = [
    "scan_handler",
    "autofeed_handler",
    "query_handler",
]
