"""
Stock limit report: load limits, fetch previous closes, print which stocks are under Min, over Max or within range.

  python stock_reporter.py                  # Stocks.json next to this program
  python stock_reporter.py my_limits.json
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from dotenv import load_dotenv

from config import DEFAULT_ENV_PATH, get_log_level
from errors import StockReporterError
from limit_evaluator import LimitEvaluation, evaluate
from limits_loader import load_limits, symbols_for_fetch
from logger_config import get_logger, setup_logging
from quote_client import QuoteClient
from report import print_report

logger = get_logger(__name__)


def run(limits_path: Optional[str] = None, client: Optional[QuoteClient] = None, stream: Optional[TextIO] = None) -> LimitEvaluation:
    """One complete run: load → fetch → evaluate → print. Errors propagate."""
    limits = load_limits(limits_path)
    symbols = symbols_for_fetch(limits)
    client = client or QuoteClient()
    query_text = client.build_query(symbols)
    quotes = client.fetch_quotes(symbols)
    evaluation = evaluate(quotes, limits)
    print_report(limits, evaluation, query_text, stream=stream)
    return evaluation


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Report stocks whose previous close is outside configured Min/Max limits")
    parser.add_argument(
        "limits_file",
        nargs="?",
        default="",
        help="JSON file with [{\"Symbol\", \"Min\", \"Max\"}, ...] (default: Stocks.json next to this program)",
    )
    args = parser.parse_args(argv)

    if Path(DEFAULT_ENV_PATH).exists():
        load_dotenv(Path(DEFAULT_ENV_PATH))
    setup_logging(log_level=get_log_level(), log_to_file=True)

    try:
        run(args.limits_file)
    except StockReporterError as e:
        logger.error("Stock report failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
