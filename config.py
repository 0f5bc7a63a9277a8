"""
Configuration constants and settings
Centralizes hardcoded values for easier maintenance

Quote API endpoint, query dialect, file locations and logging settings for the
stock limit reporter. Values that may differ per machine can be overridden from
the environment (or a .env file) through the getter functions at the bottom.
"""
import os
from pathlib import Path
from typing import Optional, Tuple

# ============================================================================
# QUOTE API CONFIGURATION
# ============================================================================

QUOTE_API_URL_TEMPLATE = (
    "https://query.yahooapis.com/v1/public/yql?q={query}&format=json"
    "&env=store%3A%2F%2Fdatatables.org%2Falltableswithkeys&callback="
)
# Purpose: Request URL; {query} receives the escaped query text
# Used by: QuoteClient.build_url
# Override: QUOTE_API_URL environment variable

QUOTE_QUERY_TEMPLATE = "select {fields} from yahoo.finance.quotes where symbol in ({symbols})"
# Purpose: Query text sent to the quote API
# Used by: QuoteClient.build_query

QUOTE_API_FIELDS: Tuple[str, ...] = ("symbol", "PreviousClose")
# Purpose: Columns requested from the quote API (one per Quote field)
# Used by: QuoteClient.build_query, Quote.from_api

QUOTE_RESULTS_PATH: Tuple[str, ...] = ("query", "results", "quote")
# Purpose: Location of the quote array inside the API response envelope
# Used by: QuoteClient.parse_quotes

QUOTE_API_TIMEOUT: Optional[float] = None  # seconds; None = wait indefinitely
# Purpose: Maximum time to wait for the quote API response
# Used by: QuoteClient
# Override: QUOTE_API_TIMEOUT environment variable

# ============================================================================
# FILE PATH CONFIGURATION
# ============================================================================

DEFAULT_LIMITS_FILE = "Stocks.json"
# Purpose: Limits file looked up next to the program when no path is given
# Used by: limits_loader.default_limits_path
# Override: STOCK_LIMITS_FILE environment variable

PROGRAM_DIR = Path(__file__).resolve().parent
# Purpose: Directory the program is installed in
# Used by: limits_loader.default_limits_path

DEFAULT_ENV_PATH = ".env"
# Purpose: Path to environment variables file
# Used by: stock_reporter.main

DEFAULT_LOG_DIR = "logs"
# Purpose: Directory where log files are stored
# Used by: logger_config.setup_logging

DEFAULT_LOG_FILE = "stock_reporter.log"
# Purpose: Default log file name
# Used by: logger_config.setup_logging

# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# Purpose: Format string for log messages
# Used by: logger_config.setup_logging

LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
# Purpose: Date/time format in log messages
# Used by: logger_config.setup_logging

LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
# Purpose: Maximum size of a single log file before rotation
# Used by: RotatingFileHandler

LOG_BACKUP_COUNT = 5
# Purpose: Number of backup log files to keep
# Used by: RotatingFileHandler

DEFAULT_LOG_LEVEL = "INFO"
# Purpose: Log level when LOG_LEVEL is not set
# Used by: stock_reporter.main

# ============================================================================
# ENVIRONMENT OVERRIDES
# ============================================================================


def get_quote_api_url_template() -> str:
    """URL template for the quote API (QUOTE_API_URL overrides the built-in one)."""
    return os.environ.get("QUOTE_API_URL", "").strip() or QUOTE_API_URL_TEMPLATE


def get_quote_api_timeout() -> Optional[float]:
    """Request timeout in seconds from QUOTE_API_TIMEOUT; None when unset or not a positive number."""
    raw = os.environ.get("QUOTE_API_TIMEOUT", "").strip()
    if not raw:
        return QUOTE_API_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return QUOTE_API_TIMEOUT
    return value if value > 0 else QUOTE_API_TIMEOUT


def get_verify_ssl() -> bool:
    """False when DISABLE_SSL_VERIFY is 1/true/yes."""
    return os.environ.get("DISABLE_SSL_VERIFY", "").strip().lower() not in ("1", "true", "yes")


def get_limits_file_override() -> Optional[str]:
    """Limits file from STOCK_LIMITS_FILE, or None."""
    return os.environ.get("STOCK_LIMITS_FILE", "").strip() or None


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
