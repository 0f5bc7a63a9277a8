"""
Console report: limit rules, then under-min, over-max and within-range quotes, then the query used.
"""
import sys
from typing import Any, List, Optional, Sequence, TextIO

from limit_evaluator import LimitEvaluation
from models import StockLimit, field_values

SECTION_LIMITS = "Stock Limits"
SECTION_UNDER_MIN = "Stocks under Min"
SECTION_OVER_MAX = "Stocks over Max"
SECTION_WITHIN_RANGE = "Stocks within Range"
SECTION_QUERY = "Query"


def _format_value(value: Any) -> str:
    # 20.0 -> "20", 9.99 -> "9.99", 0.1 + 0.2 -> "0.3"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(value, ".15g")
    return str(value)


def format_record(record: Any) -> str:
    """'Label: value' pairs in the record's declared field order, e.g. 'Symbol: AAA, Min: 10, Max: 20'."""
    return ", ".join(f"{label}: {_format_value(value)}" for label, value in field_values(record))


def _section(title: str, records: Sequence[Any]) -> List[str]:
    lines = [title]
    lines.extend(format_record(r) for r in records)
    lines.append("")
    return lines


def generate_report(limits: Sequence[StockLimit], evaluation: LimitEvaluation, query_text: str) -> str:
    lines: List[str] = []
    lines.extend(_section(SECTION_LIMITS, limits))
    lines.extend(_section(SECTION_UNDER_MIN, evaluation.under_min))
    lines.extend(_section(SECTION_OVER_MAX, evaluation.over_max))
    lines.extend(_section(SECTION_WITHIN_RANGE, evaluation.within_range))
    lines.append(f"{SECTION_QUERY}: {query_text}")
    return "\n".join(lines) + "\n"


def print_report(
    limits: Sequence[StockLimit],
    evaluation: LimitEvaluation,
    query_text: str,
    stream: Optional[TextIO] = None,
) -> None:
    """Write the report to stream (default: stdout)."""
    out = stream if stream is not None else sys.stdout
    out.write(generate_report(limits, evaluation, query_text))
    out.flush()
