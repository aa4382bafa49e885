"""
Monitoring system configuration.

Database connection, provider endpoints and alert settings.
"""

import os

# Database configuration
DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "database": os.getenv("DB_NAME", "solguard"),
    "user": os.getenv("DB_USER", "solguard"),
    "password": os.getenv("DB_PASSWORD", ""),
    "port": int(os.getenv("DB_PORT", 5432))
}

# Schema for scanner tables
SCHEMA_NAME = os.getenv("DB_SCHEMA", "public")
TABLE_PREFIX = "sg_"  # solguard prefix

# Alert notification settings
ALERT_CONFIG = {
    "telegram_bot_token": os.getenv("TELEGRAM_BOT_TOKEN"),
    "telegram_chat_id": os.getenv("TELEGRAM_CHAT_ID"),
}

# External data providers
PROVIDER_CONFIG = {
    "rugcheck_api_url": os.getenv("RUGCHECK_API_URL", "https://api.rugcheck.xyz"),
    "helius_api_url": os.getenv("HELIUS_API_URL", "https://api.helius.xyz"),
    "helius_api_key": os.getenv("HELIUS_API_KEY", ""),
    "dexscreener_api_url": os.getenv("DEXSCREENER_API_URL", "https://api.dexscreener.com"),
    "summary_timeout": 10,   # seconds
    "report_timeout": 15,
    "helius_timeout": 15,
    "dexscreener_timeout": 15,
}

# Source tag for mints whose launch platform cannot be detected
DEFAULT_SOURCE_TAG = os.getenv("SCANNER_SOURCE_TAG", "unknown")

# Autofeed polling (DexScreener)
AUTOFEED_CONFIG = {
    "poll_interval_seconds": int(os.getenv("AUTOFEED_POLL_INTERVAL", 60)),
    "scan_delay_seconds": float(os.getenv("AUTOFEED_SCAN_DELAY", 3)),
    "max_per_cycle": int(os.getenv("AUTOFEED_MAX_PER_CYCLE", 10)),
}

# Funding source intelligence. Comma-separated wallet lists.
KNOWN_EXCHANGE_WALLETS = {
    w.strip() for w in os.getenv("KNOWN_EXCHANGE_WALLETS", "").split(",") if w.strip()
}
KNOWN_MIXER_WALLETS = {
    w.strip() for w in os.getenv("KNOWN_MIXER_WALLETS", "").split(",") if w.strip()
}
