"""Momentum (percentage rate of change) calculation"""

from collections.abc import Sequence


def calculate_momentum(closes: Sequence[float], period: int = 10) -> float:
    """
    Calculate percentage change across a ``period``-bar window

    momentum = (latest - past) / past * 100, where ``past`` is the oldest
    close of the trailing ``period`` closes. That close sits ``period - 1``
    bars before the latest one, not ``period`` bars, so exactly ``period``
    closes are enough to leave the 0.0 fallback.

    Args:
        closes: Closing prices in chronological order
        period: Window length in bars (default 10)

    Returns:
        Momentum percentage, 0.0 with fewer than ``period`` closes
    """
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")

    if len(closes) < period:
        return 0.0

    past = closes[-period]
    if past == 0:
        return 0.0

    return (closes[-1] - past) / past * 100.0
