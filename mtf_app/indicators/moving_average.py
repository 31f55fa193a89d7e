"""SMA (Simple Moving Average) calculation"""

from collections.abc import Sequence


def calculate_sma(closes: Sequence[float], period: int) -> float:
    """
    Calculate the Simple Moving Average of the last ``period`` closes

    With fewer than ``period`` closes the most recent close is returned,
    or 0.0 for an empty sequence.

    Args:
        closes: Closing prices in chronological order
        period: Averaging window

    Returns:
        SMA value
    """
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")

    if len(closes) < period:
        return float(closes[-1]) if closes else 0.0

    recent = closes[-period:]
    return sum(recent) / period
