"""
Quote and StockLimit records.

Each record declares FIELDS, the ordered (label, attribute) pairs used when it is
printed, and a constructor from the JSON object it is read from. Key lookup in
the JSON object is case-insensitive.
"""
import math
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Tuple


def _normalized_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    return {str(k).strip().lower(): v for k, v in data.items()}


def _required(data: Dict[str, Any], key: str) -> Any:
    fields = _normalized_keys(data)
    if key.lower() not in fields:
        raise ValueError(f"missing field '{key}'")
    return fields[key.lower()]


def _to_symbol(value: Any, key: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"field '{key}' must be a non-empty string, got {value!r}")
    return value.strip()


def _to_float(value: Any, key: str) -> float:
    """Accept JSON numbers and numeric strings; reject booleans, nulls, NaN and infinities."""
    if isinstance(value, bool) or value is None:
        raise ValueError(f"field '{key}' must be a number, got {value!r}")
    number = None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            pass
    if number is None:
        raise ValueError(f"field '{key}' must be a number, got {value!r}")
    if not math.isfinite(number):
        raise ValueError(f"field '{key}' must be a finite number, got {value!r}")
    return number


@dataclass(frozen=True)
class Quote:
    symbol: str
    previous_close: float

    FIELDS: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("Symbol", "symbol"),
        ("PreviousClose", "previous_close"),
    )

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Quote":
        """Build from one element of query.results.quote ({"symbol": ..., "PreviousClose": ...})."""
        if not isinstance(data, dict):
            raise ValueError(f"quote must be an object, got {type(data).__name__}")
        symbol = _to_symbol(_required(data, "symbol"), "symbol")
        previous_close = _to_float(_required(data, "PreviousClose"), "PreviousClose")
        return cls(symbol=symbol, previous_close=previous_close)


@dataclass(frozen=True)
class StockLimit:
    symbol: str
    min: float
    max: float

    FIELDS: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("Symbol", "symbol"),
        ("Min", "min"),
        ("Max", "max"),
    )

    @classmethod
    def from_config(cls, data: Dict[str, Any]) -> "StockLimit":
        """Build from one {"Symbol", "Min", "Max"} object of the limits file."""
        if not isinstance(data, dict):
            raise ValueError(f"limit must be an object, got {type(data).__name__}")
        return cls(
            symbol=_to_symbol(_required(data, "Symbol"), "Symbol"),
            min=_to_float(_required(data, "Min"), "Min"),
            max=_to_float(_required(data, "Max"), "Max"),
        )


def field_values(record: Any) -> List[Tuple[str, Any]]:
    """(label, value) pairs of a record in its declared FIELDS order."""
    return [(label, getattr(record, attr)) for label, attr in record.FIELDS]
