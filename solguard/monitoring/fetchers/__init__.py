"""
Scan fetchers - wrappers around the provider clients.

Each fetcher returns a result dict with a status key instead of raising:
- token: RugCheck inspection facts and display metadata
- deployer: Helius deployer history, funding source and token age
"""

from .token import fetch_token_inspection
from .deployer import fetch_deployer_history

__all__ = [
    "fetch_token_inspection",
    "fetch_deployer_history",
]
