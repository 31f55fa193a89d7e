"""Weighted consensus of the daily and intraday signals"""

from typing import Optional

from ..config.defaults import CombinerParams
from ..models.signals import Signal, SignalDirection
from ..utils.rounding import round_strength


def combine_direction(daily: SignalDirection, intraday: SignalDirection) -> SignalDirection:
    """
    Resolve the combined direction.

    Agreement keeps the direction. On disagreement the daily trend wins
    unless the intraday signal points the opposite way; every other case
    is HOLD.
    """
    if daily == intraday:
        return daily
    if daily == SignalDirection.BUY and intraday != SignalDirection.SELL:
        return SignalDirection.BUY
    if daily == SignalDirection.SELL and intraday != SignalDirection.BUY:
        return SignalDirection.SELL
    return SignalDirection.HOLD


def combine_signals(
    daily: Signal,
    intraday: Signal,
    params: Optional[CombinerParams] = None
) -> Signal:
    """
    Merge two timeframe signals into one combined Signal.

    Args:
        daily: Dominant trend signal
        intraday: Short-interval signal
        params: Timeframe weights and the combined timeframe label

    Returns:
        New Signal carrying the daily indicators, the consensus direction and
        the weighted strength
    """
    params = params or CombinerParams()

    strength = round_strength(
        daily.strength * params.daily_weight + intraday.strength * params.intraday_weight
    )

    return Signal(
        timeframe=params.combined_timeframe,
        signal=combine_direction(daily.signal, intraday.signal),
        strength=strength,
        indicators=daily.indicators,
    )
