"""Default configuration parameters for the signal engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IndicatorParams:
    """Indicator lookback periods."""
    sma_fast_period: int = 20
    sma_slow_period: int = 50
    rsi_period: int = 14
    momentum_period: int = 10


@dataclass(frozen=True)
class ClassificationParams:
    """Trend-following classification thresholds."""
    # RSI bands
    rsi_overbought: float = 70.0                     # BUY requires rsi below this
    rsi_oversold: float = 30.0                       # SELL requires rsi above this

    # Strength scoring
    base_strength: int = 70
    extreme_base_strength: int = 90                  # RSI beyond the opposite band
    momentum_bonus_threshold: float = 5.0            # Absolute momentum % for the large bonus
    small_bonus: int = 10
    large_bonus: int = 20
    hold_strength: int = 40


@dataclass(frozen=True)
class CombinerParams:
    """Timeframe weighting for the combined signal."""
    daily_weight: float = 0.6
    intraday_weight: float = 0.4
    combined_timeframe: str = "combined"


@dataclass(frozen=True)
class DisplayParams:
    """Response shaping parameters."""
    window_size: int = 50                            # Bars returned for charting
    history_limit: int = 100                         # Bars requested from feeds
    strong_threshold: int = 80                       # Combined strength for "Strong"
    daily_timeframe: str = "daily"
    intraday_timeframe: str = "15min"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    indicators: IndicatorParams
    classification: ClassificationParams
    combiner: CombinerParams
    display: DisplayParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        indicators=IndicatorParams(),
        classification=ClassificationParams(),
        combiner=CombinerParams(),
        display=DisplayParams(),
    )
