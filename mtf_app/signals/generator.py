"""Trend-following signal classification for a single timeframe"""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import ClassificationParams, IndicatorParams
from ..data.models import Bar
from ..indicators.calculator import IndicatorCalculator
from ..logging.config import get_signal_logger, log_signal_decision
from ..models.signals import IndicatorSet, Signal, SignalDirection


def classify(
    price: float,
    indicators: IndicatorSet,
    params: Optional[ClassificationParams] = None
) -> tuple[SignalDirection, int]:
    """
    Classify the latest close against its indicators.

    BUY needs price > sma20 > sma50 with RSI below the overbought band and
    positive momentum; SELL is the mirror image. The two conditions cannot
    hold together since they need opposite orderings of price and sma20.

    Args:
        price: Latest closing price
        indicators: Full-precision indicator snapshot
        params: Classification thresholds

    Returns:
        Tuple of direction and strength in [0, 100]
    """
    params = params or ClassificationParams()
    sma20 = indicators.sma20
    sma50 = indicators.sma50
    rsi = indicators.rsi
    momentum = indicators.momentum

    if price > sma20 and sma20 > sma50 and rsi < params.rsi_overbought and momentum > 0:
        base = params.extreme_base_strength if rsi < params.rsi_oversold else params.base_strength
        bonus = params.large_bonus if momentum > params.momentum_bonus_threshold else params.small_bonus
        return SignalDirection.BUY, min(100, base + bonus)

    if price < sma20 and sma20 < sma50 and rsi > params.rsi_oversold and momentum < 0:
        base = params.extreme_base_strength if rsi > params.rsi_overbought else params.base_strength
        bonus = params.large_bonus if momentum < -params.momentum_bonus_threshold else params.small_bonus
        return SignalDirection.SELL, min(100, base + bonus)

    return SignalDirection.HOLD, params.hold_strength


class SignalGenerator:
    """Derives a Signal from one timeframe's bar series."""

    def __init__(
        self,
        indicator_params: Optional[IndicatorParams] = None,
        classification_params: Optional[ClassificationParams] = None
    ):
        self.calculator = IndicatorCalculator(indicator_params)
        self.params = classification_params or ClassificationParams()
        self.logger = get_signal_logger(__name__)

    def generate(self, bars: Sequence[Bar], timeframe: str) -> Signal:
        """
        Generate a signal for the latest bar of a series.

        Args:
            bars: Bars in strictly increasing timestamp order (at least one)
            timeframe: Free-form timeframe label, e.g. "daily" or "15min"

        Returns:
            Freshly created Signal

        Raises:
            DataQualityError: Malformed series (empty or out of order)
            IndicatorCalculationError: Non-finite indicator output
        """
        indicators = self.calculator.calculate(bars, timeframe)
        price = bars[-1].close

        direction, strength = classify(price, indicators, self.params)

        signal = Signal(
            timeframe=timeframe,
            signal=direction,
            strength=strength,
            indicators=indicators,
        )

        log_signal_decision(
            self.logger,
            timeframe=timeframe,
            signal=direction.value,
            strength=strength,
            indicators=indicators.to_dict(),
        )

        return signal
