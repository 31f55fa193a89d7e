"""Data models for trading signals"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..data.models import Bar
from ..errors import MalformedDataError
from ..utils.rounding import round_half_up

INDICATOR_DECIMALS = 2


class SignalDirection(Enum):
    """Discrete trading recommendation."""
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"

    @classmethod
    def parse(cls, value: Any) -> "SignalDirection":
        """Parse a direction from its string form."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError as e:
            raise MalformedDataError(
                f"Unknown signal direction: {value!r}",
                raw_data=str(value)[:100],
                expected_format="BUY, SELL or HOLD"
            ) from e


@dataclass(frozen=True)
class IndicatorSet:
    """Indicator snapshot at the latest bar, kept at full precision"""
    sma20: float
    sma50: float
    rsi: float
    momentum: float

    def to_dict(self) -> dict[str, float]:
        """Serialized form, rounded to 2 decimals"""
        return {
            "sma20": round_half_up(self.sma20, INDICATOR_DECIMALS),
            "sma50": round_half_up(self.sma50, INDICATOR_DECIMALS),
            "rsi": round_half_up(self.rsi, INDICATOR_DECIMALS),
            "momentum": round_half_up(self.momentum, INDICATOR_DECIMALS),
        }


@dataclass(frozen=True)
class Signal:
    """Classified signal for one timeframe"""
    timeframe: str
    signal: SignalDirection
    strength: int
    indicators: IndicatorSet

    def __post_init__(self):
        if not isinstance(self.signal, SignalDirection):
            raise MalformedDataError(
                f"signal must be a SignalDirection, got {self.signal!r}",
                raw_data=str(self.signal)[:100],
                expected_format="SignalDirection"
            )
        if isinstance(self.strength, bool) or not isinstance(self.strength, int):
            raise MalformedDataError(
                f"strength must be an integer, got {self.strength!r}",
                raw_data=str(self.strength)[:100],
                expected_format="int"
            )
        if not 0 <= self.strength <= 100:
            raise MalformedDataError(
                f"strength must be within [0, 100], got {self.strength}",
                raw_data=str(self.strength),
                expected_format="0-100"
            )

    def to_dict(self) -> dict[str, Any]:
        """Serialized form for the presentation layer"""
        return {
            "timeframe": self.timeframe,
            "signal": self.signal.value,
            "strength": self.strength,
            "indicators": self.indicators.to_dict(),
        }


@dataclass(frozen=True)
class Evaluation:
    """Complete result of evaluating one symbol"""
    symbol: str
    intraday_bars: tuple[Bar, ...]
    daily_bars: tuple[Bar, ...]
    daily: Signal
    intraday: Signal
    combined: Signal
    recommendation: str

    def to_dict(self) -> dict[str, Any]:
        """Response payload consumed by the presentation layer"""
        return {
            "symbol": self.symbol,
            "data15m": [bar.to_dict() for bar in self.intraday_bars],
            "dataDaily": [bar.to_dict() for bar in self.daily_bars],
            "signals": {
                "daily": self.daily.to_dict(),
                "intraday": self.intraday.to_dict(),
                "combined": self.combined.to_dict(),
            },
            "recommendation": self.recommendation,
        }
