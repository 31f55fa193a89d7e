"""Indicator library: moving average, RSI and momentum over closing prices"""

from .calculator import IndicatorCalculator
from .momentum import calculate_momentum
from .moving_average import calculate_sma
from .rsi import calculate_rsi

__all__ = [
    "IndicatorCalculator",
    "calculate_sma",
    "calculate_rsi",
    "calculate_momentum",
]
