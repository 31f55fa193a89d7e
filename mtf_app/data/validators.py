"""
Structural validation for bar series.

A series handed to the indicator library must be non-empty, strictly
increasing in timestamp and carry finite closing prices. Short series are
valid: the indicators degrade to fallback values on their own.
"""

import math
from collections.abc import Sequence

from ..errors import MalformedDataError, MissingDataError, TemporalDataError
from .models import Bar


def validate_bar_series(bars: Sequence[Bar], timeframe: str = "unknown") -> None:
    """
    Validate a bar series before indicator calculation.

    Args:
        bars: Bars in chronological order
        timeframe: Timeframe label, used for error context

    Raises:
        MissingDataError: If the series is empty
        TemporalDataError: If timestamps are not strictly increasing
        MalformedDataError: If a closing price is not a finite number
    """
    if not bars:
        raise MissingDataError(
            f"Bar series for {timeframe} is empty",
            data_type="bars",
            context={"timeframe": timeframe}
        )

    previous_ts = None
    for index, bar in enumerate(bars):
        close = bar.close
        if not isinstance(close, (int, float)) or isinstance(close, bool):
            raise MalformedDataError(
                f"Invalid close type at index {index}: {type(close).__name__}",
                raw_data=str(bar)[:100],
                context={"timeframe": timeframe, "index": index}
            )
        if math.isnan(close) or math.isinf(close):
            raise MalformedDataError(
                f"Invalid close value at index {index}: {close}",
                raw_data=str(bar)[:100],
                context={"timeframe": timeframe, "index": index}
            )

        if previous_ts is not None and bar.timestamp <= previous_ts:
            raise TemporalDataError(
                f"Bar timestamps must be strictly increasing: {bar.timestamp} "
                f"at index {index} follows {previous_ts}",
                timestamp=bar.timestamp,
                expected_timestamp=previous_ts + 1,
                context={"timeframe": timeframe, "index": index}
            )
        previous_ts = bar.timestamp
