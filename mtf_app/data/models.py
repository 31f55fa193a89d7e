"""
Canonical bar model for price series.

Bars are immutable; a series is a list of bars in strictly increasing
timestamp order.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..utils.time import ms_to_datetime


@dataclass(frozen=True)
class Bar:
    """One OHLCV observation."""
    timestamp: int      # Epoch milliseconds
    open: float         # Opening price
    high: float         # High price
    low: float          # Low price
    close: float        # Closing price
    volume: float       # Base volume

    @property
    def ts(self) -> datetime:
        """Bar timestamp as a UTC datetime."""
        return ms_to_datetime(self.timestamp)

    def to_dict(self) -> dict[str, Any]:
        """Wire representation of the bar."""
        return {
            "timestamp": self.timestamp,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }
