"""
Limits loader: JSON array of {"Symbol", "Min", "Max"} objects.
Used by stock_reporter (step 1 of a run).
"""
import json
from pathlib import Path
from typing import List, Optional, Union

from config import DEFAULT_LIMITS_FILE, PROGRAM_DIR, get_limits_file_override
from errors import ConfigError
from logger_config import get_logger
from models import StockLimit

logger = get_logger(__name__)


def default_limits_path() -> Path:
    """STOCK_LIMITS_FILE if set, else Stocks.json next to the program."""
    override = get_limits_file_override()
    if override:
        return Path(override)
    return PROGRAM_DIR / DEFAULT_LIMITS_FILE


def load_limits(path: Optional[Union[str, Path]] = None, default_path: Optional[Path] = None) -> List[StockLimit]:
    """
    Load stock limits from a JSON file.

    An empty or all-whitespace path falls back to default_path (or default_limits_path()).
    Raises ConfigError if the file is missing, unreadable, not JSON, or not a list of
    {Symbol, Min, Max} objects. Duplicate symbols and min > max are kept but logged.
    """
    if path is None or not str(path).strip():
        p = default_path or default_limits_path()
        logger.debug("No limits file given, using default %s", p)
    else:
        p = Path(str(path).strip())

    if not p.exists():
        logger.error("Limits file not found: %s", p)
        raise ConfigError("Limits file not found", path=str(p))
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Limits file is not valid JSON: {e}", path=str(p)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read limits file: {e}", path=str(p)) from e

    if not isinstance(data, list):
        raise ConfigError(f"Limits file must contain a JSON array, got {type(data).__name__}", path=str(p))

    limits: List[StockLimit] = []
    for i, item in enumerate(data):
        try:
            limits.append(StockLimit.from_config(item))
        except ValueError as e:
            raise ConfigError(f"Invalid limit at index {i}: {e}", path=str(p)) from e

    _warn_questionable_limits(limits)
    logger.info("Loaded %d limits from %s", len(limits), p)
    return limits


def _warn_questionable_limits(limits: List[StockLimit]) -> None:
    seen = set()
    for limit in limits:
        if limit.min > limit.max:
            logger.warning("Limit for %s has Min %s greater than Max %s", limit.symbol, limit.min, limit.max)
        key = limit.symbol.lower()
        if key in seen:
            logger.warning("Duplicate limit for %s; the last entry wins", limit.symbol)
        seen.add(key)


def symbols_for_fetch(limits: List[StockLimit]) -> List[str]:
    """Symbols to request from the quote API, in file order."""
    return [limit.symbol for limit in limits]
