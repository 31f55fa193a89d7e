"""Indicator calculator coordinating all indicator calculations for a bar series"""

import math
from collections.abc import Sequence
from typing import Optional

from ..config.defaults import IndicatorParams
from ..data.models import Bar
from ..data.validators import validate_bar_series
from ..errors import IndicatorCalculationError
from ..models.signals import IndicatorSet
from .momentum import calculate_momentum
from .moving_average import calculate_sma
from .rsi import calculate_rsi


class IndicatorCalculator:
    """
    Computes the IndicatorSet for the latest bar of a series.

    This is where malformed series are rejected. Stateless: the same
    instance can serve any number of series concurrently.
    """

    def __init__(self, params: Optional[IndicatorParams] = None):
        self.params = params or IndicatorParams()

    def calculate(self, bars: Sequence[Bar], timeframe: str = "unknown") -> IndicatorSet:
        """
        Calculate indicators for a bar series.

        Args:
            bars: Bars in strictly increasing timestamp order
            timeframe: Timeframe label for error context

        Returns:
            Full-precision IndicatorSet

        Raises:
            MissingDataError: Empty series
            TemporalDataError: Non-increasing timestamps
            MalformedDataError: Non-finite closing price
            IndicatorCalculationError: An indicator produced a non-finite value
        """
        validate_bar_series(bars, timeframe)
        return self.calculate_from_closes([bar.close for bar in bars])

    def calculate_from_closes(self, closes: Sequence[float]) -> IndicatorSet:
        """Calculate indicators from an already validated closing price sequence."""
        indicators = IndicatorSet(
            sma20=calculate_sma(closes, self.params.sma_fast_period),
            sma50=calculate_sma(closes, self.params.sma_slow_period),
            rsi=calculate_rsi(closes, self.params.rsi_period),
            momentum=calculate_momentum(closes, self.params.momentum_period),
        )
        self._validate_indicators(indicators, len(closes))
        return indicators

    def warmup_period(self) -> int:
        """Number of bars needed before no indicator uses its fallback value."""
        return max(
            self.params.sma_fast_period,
            self.params.sma_slow_period,
            self.params.rsi_period + 1,
            self.params.momentum_period,
        )

    def is_warmed_up(self, bars: Sequence[Bar]) -> bool:
        """Check if a series is long enough for every indicator."""
        return len(bars) >= self.warmup_period()

    def _validate_indicators(self, indicators: IndicatorSet, close_count: int) -> None:
        """Reject non-finite indicator values (e.g. overflow on extreme prices)."""
        for name, value in (("sma20", indicators.sma20), ("sma50", indicators.sma50),
                            ("rsi", indicators.rsi), ("momentum", indicators.momentum)):
            if math.isnan(value) or math.isinf(value):
                raise IndicatorCalculationError(
                    f"Invalid {name} value: {value}",
                    indicator_name=name,
                    calculation_input={"close_count": close_count}
                )
