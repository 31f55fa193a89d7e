"""RSI (Relative Strength Index) calculation"""

from collections.abc import Sequence

NEUTRAL_RSI = 50.0
MAX_RSI = 100.0


def calculate_rsi(closes: Sequence[float], period: int = 14) -> float:
    """
    Calculate RSI from simple averages of the last ``period`` changes

    RSI = 100 - 100 / (1 + avg_gain / avg_loss)

    Args:
        closes: Closing prices in chronological order
        period: RSI period (default 14)

    Returns:
        RSI value, 50.0 with fewer than ``period + 1`` closes and 100.0
        when there are no losses in the window (a flat window included)
    """
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")

    if len(closes) < period + 1:
        return NEUTRAL_RSI

    window = closes[-(period + 1):]
    changes = [current - previous for previous, current in zip(window, window[1:])]

    avg_gain = sum(change for change in changes if change > 0) / period
    avg_loss = sum(-change for change in changes if change < 0) / period

    if avg_loss == 0:
        return MAX_RSI

    rs = avg_gain / avg_loss
    return 100.0 - (100.0 / (1.0 + rs))
