"""
Split quotes into under-min, over-max and within-range groups by their previous close.
"""
from typing import Dict, List, NamedTuple, Sequence, Tuple

from errors import MissingLimitError
from logger_config import get_logger
from models import Quote, StockLimit

logger = get_logger(__name__)


class LimitEvaluation(NamedTuple):
    under_min: List[Quote]
    over_max: List[Quote]
    within_range: List[Quote]


def build_limit_lookups(limits: Sequence[StockLimit]) -> Tuple[Dict[str, float], Dict[str, float]]:
    """
    (min_lookup, max_lookup) keyed by lower-cased symbol.
    A symbol listed twice keeps the values of its last entry.
    """
    min_lookup = {limit.symbol.lower(): limit.min for limit in limits}
    max_lookup = {limit.symbol.lower(): limit.max for limit in limits}
    return min_lookup, max_lookup


def evaluate(quotes: Sequence[Quote], limits: Sequence[StockLimit]) -> LimitEvaluation:
    """
    Classify each quote, keeping quote order within each group.
    Min and Max are inclusive: a close equal to either is within range.
    Raises MissingLimitError for a quote whose symbol has no limit.
    """
    if not limits:
        if quotes:
            logger.warning("No limits configured; %d quotes not evaluated", len(quotes))
        return LimitEvaluation([], [], [])

    min_lookup, max_lookup = build_limit_lookups(limits)
    result = LimitEvaluation([], [], [])
    for q in quotes:
        key = q.symbol.lower()
        if key not in min_lookup:
            logger.error("Quote %s has no configured limit", q.symbol)
            raise MissingLimitError(q.symbol)
        if q.previous_close < min_lookup[key]:
            result.under_min.append(q)
        elif q.previous_close > max_lookup[key]:
            result.over_max.append(q)
        else:
            result.within_range.append(q)

    logger.info(
        "Evaluated %d quotes: %d under min, %d over max, %d within range",
        len(quotes), len(result.under_min), len(result.over_max), len(result.within_range),
    )
    return result
