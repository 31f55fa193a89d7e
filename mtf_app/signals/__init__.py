"""
Signal generation module.

Rule-based classification of a single timeframe, weighted combination of
the daily and intraday signals, and the human readable recommendation.
"""

from .combiner import combine_signals
from .formatter import format_recommendation
from .generator import SignalGenerator, classify

__all__ = ["SignalGenerator", "classify", "combine_signals", "format_recommendation"]
