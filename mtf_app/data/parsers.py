"""
Parsers converting raw data feed payloads into Bar objects.

Feeds deliver bars as JSON-like dicts with ``timestamp`` (epoch ms) and
OHLCV fields. Parsing checks shape and types only; ordering is checked by
the series validators.
"""

from typing import Any

from ..errors import MalformedDataError
from .models import Bar

BAR_FIELDS = ("timestamp", "open", "high", "low", "close", "volume")


def _to_float(value: Any, field_name: str, raw: dict[str, Any]) -> float:
    if isinstance(value, bool):
        raise MalformedDataError(
            f"Field '{field_name}' must be numeric, got bool",
            raw_data=str(raw)[:100],
            expected_format="number"
        )
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise MalformedDataError(
            f"Field '{field_name}' must be numeric, got {value!r}",
            raw_data=str(raw)[:100],
            expected_format="number"
        ) from e


def parse_bar(raw: dict[str, Any]) -> Bar:
    """
    Parse a single raw bar payload.

    Args:
        raw: Dict with timestamp, open, high, low, close and volume keys

    Returns:
        Parsed Bar

    Raises:
        MalformedDataError: If the payload is not a dict, misses fields or
            carries non-numeric values
    """
    if not isinstance(raw, dict):
        raise MalformedDataError(
            f"Bar payload must be dict, got {type(raw).__name__}",
            raw_data=str(raw)[:100],
            expected_format="dict"
        )

    missing = [name for name in BAR_FIELDS if name not in raw]
    if missing:
        raise MalformedDataError(
            f"Bar payload missing fields: {', '.join(missing)}",
            raw_data=str(raw)[:100],
            expected_format=", ".join(BAR_FIELDS)
        )

    timestamp = raw["timestamp"]
    if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float, str)):
        raise MalformedDataError(
            f"Field 'timestamp' must be epoch milliseconds, got {timestamp!r}",
            raw_data=str(raw)[:100],
            expected_format="integer epoch ms"
        )
    try:
        timestamp_ms = int(timestamp)
    except ValueError as e:
        raise MalformedDataError(
            f"Field 'timestamp' must be epoch milliseconds, got {timestamp!r}",
            raw_data=str(raw)[:100],
            expected_format="integer epoch ms"
        ) from e

    return Bar(
        timestamp=timestamp_ms,
        open=_to_float(raw["open"], "open", raw),
        high=_to_float(raw["high"], "high", raw),
        low=_to_float(raw["low"], "low", raw),
        close=_to_float(raw["close"], "close", raw),
        volume=_to_float(raw["volume"], "volume", raw),
    )


def parse_bars(payload: list[dict[str, Any]]) -> list[Bar]:
    """Parse a list of raw bar payloads, preserving order."""
    if not isinstance(payload, list):
        raise MalformedDataError(
            f"Bar series payload must be list, got {type(payload).__name__}",
            raw_data=str(payload)[:100],
            expected_format="list"
        )
    return [parse_bar(raw) for raw in payload]
