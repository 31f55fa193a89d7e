"""Human readable recommendation text"""

from ..models.signals import Signal, SignalDirection


def _describe(signal: Signal) -> str:
    return f"{signal.signal.value} with {signal.strength}% confidence"


def format_recommendation(
    daily: Signal,
    intraday: Signal,
    combined: Signal,
    strong_threshold: int = 80
) -> str:
    """
    Explain the combined signal in plain language.

    Args:
        daily: Daily timeframe signal
        intraday: Intraday timeframe signal
        combined: Combined signal
        strong_threshold: Combined strength above which a call is "Strong"

    Returns:
        Recommendation text
    """
    intraday_label = intraday.timeframe

    if combined.signal == SignalDirection.HOLD:
        return (
            "HOLD position. Market conditions are mixed. "
            f"Daily: {daily.signal.value} ({daily.strength}%), "
            f"{intraday_label}: {intraday.signal.value} ({intraday.strength}%). "
            "Wait for clearer signals."
        )

    grade = "Strong" if combined.strength > strong_threshold else "Moderate"
    return (
        f"{grade} {combined.signal.value} signal. "
        f"Daily trend is {_describe(daily)}. "
        f"{intraday_label} trend shows {_describe(intraday)}."
    )
