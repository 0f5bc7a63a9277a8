"""
Error types for the stock limit reporter.
Every error is fatal: the CLI reports it and exits with status 1.
"""
from typing import Optional


class StockReporterError(Exception):
    """Base class for all reporter errors."""


class ConfigError(StockReporterError):
    """Limits file missing, unreadable, not JSON, or not a list of {Symbol, Min, Max}."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class FetchError(StockReporterError):
    """Quote API could not be reached or answered with a non-success status."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        if status_code is not None:
            message = f"{message} (HTTP {status_code})"
        if url:
            message = f"{message} (url: {url})"
        super().__init__(message)


class ParseError(StockReporterError):
    """Quote API response is not JSON or does not have the expected shape."""


class MissingLimitError(StockReporterError):
    """A fetched quote has no configured limit."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"No limit configured for symbol '{symbol}'")
