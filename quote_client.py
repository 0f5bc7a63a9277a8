"""
Quote API Client
Builds the quote query for a list of symbols, fetches it with one GET and parses the response
"""
import json
from typing import Any, List, Optional, Sequence
from urllib.parse import quote as url_quote

import requests

from config import (
    QUOTE_API_FIELDS,
    QUOTE_QUERY_TEMPLATE,
    QUOTE_RESULTS_PATH,
    get_quote_api_timeout,
    get_quote_api_url_template,
    get_verify_ssl,
)
from errors import FetchError, ParseError
from logger_config import get_logger
from models import Quote

logger = get_logger(__name__)

# Characters a general URI escaper leaves as-is (reserved + unreserved)
URI_SAFE_CHARS = "!#$&'()*+,/:;=?@[]"


def escape_query(query: str) -> str:
    """Percent-encode query text for the URL; commas are always sent as %2C."""
    return url_quote(query, safe=URI_SAFE_CHARS).replace(",", "%2C")


class QuoteClient:
    """Client for the quote query API"""

    def __init__(
        self,
        url_template: Optional[str] = None,
        query_template: str = QUOTE_QUERY_TEMPLATE,
        fields: Sequence[str] = QUOTE_API_FIELDS,
        timeout: Optional[float] = None,
        verify_ssl: Optional[bool] = None,
    ):
        """
        Initialize the quote client

        Args:
            url_template: Request URL with a {query} placeholder (default: from config / QUOTE_API_URL)
            query_template: Query text with {fields} and {symbols} placeholders
            fields: Column names requested for each quote
            timeout: Request timeout in seconds (default: from config / QUOTE_API_TIMEOUT; None waits indefinitely)
            verify_ssl: Verify TLS certificates (default: False only when DISABLE_SSL_VERIFY is set)
        """
        self.url_template = url_template or get_quote_api_url_template()
        self.query_template = query_template
        self.fields = tuple(fields)
        self.timeout = timeout if timeout is not None else get_quote_api_timeout()
        self.verify_ssl = get_verify_ssl() if verify_ssl is None else verify_ssl
        logger.debug("QuoteClient initialized with timeout=%s", self.timeout)

    def build_query(self, symbols: Sequence[str]) -> str:
        """Query text, e.g. select symbol, PreviousClose from ... where symbol in ("aaa", "bbb")"""
        symbol_clause = ", ".join(f'"{s}"' for s in symbols)
        return self.query_template.format(fields=", ".join(self.fields), symbols=symbol_clause)

    def build_url(self, symbols: Sequence[str]) -> str:
        return self.url_template.format(query=escape_query(self.build_query(symbols)))

    def fetch_quotes(self, symbols: Sequence[str]) -> List[Quote]:
        """
        Fetch quotes for symbols with a single GET (no retry).

        Raises FetchError on network failure or non-success status, ParseError on an unexpected body.
        An empty symbol list returns [] without a request.
        """
        if not symbols:
            logger.info("No symbols to fetch; skipping quote request")
            return []

        url = self.build_url(symbols)
        logger.debug("Requesting quotes: %s", url)
        try:
            response = requests.get(url, timeout=self.timeout, verify=self.verify_ssl)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error("Quote request failed: %s", e)
            raise FetchError("Quote request failed", url=url, status_code=status) from e
        except requests.exceptions.RequestException as e:
            logger.error("Quote request failed: %s", e)
            raise FetchError(f"Quote request failed: {e}", url=url) from e

        quotes = self.parse_quotes(response.text)
        logger.info("Fetched %d quotes for %d symbols", len(quotes), len(symbols))
        return quotes

    def parse_quotes(self, text: str) -> List[Quote]:
        """
        Parse a response body and return the quotes at query.results.quote.

        results == null means no quotes. A single object instead of an array is one quote.
        """
        try:
            payload = json.loads(text)
        except (TypeError, ValueError) as e:
            raise ParseError(f"Quote response is not valid JSON: {e}") from e

        node: Any = payload
        for depth, key in enumerate(QUOTE_RESULTS_PATH):
            if not isinstance(node, dict) or key not in node:
                raise ParseError(f"Quote response has no '{'.'.join(QUOTE_RESULTS_PATH[:depth + 1])}'")
            node = node[key]
            if node is None and key == "results":
                logger.info("Quote response contains no results")
                return []

        if isinstance(node, dict):
            node = [node]
        if not isinstance(node, list):
            raise ParseError(f"Expected a list at '{'.'.join(QUOTE_RESULTS_PATH)}', got {type(node).__name__}")

        quotes: List[Quote] = []
        for i, item in enumerate(node):
            try:
                quotes.append(Quote.from_api(item))
            except ValueError as e:
                raise ParseError(f"Invalid quote at index {i}: {e}") from e
        return quotes
