"""
MTF App - Multi-Timeframe Technical Signal Engine

Derives trend and momentum indicators from daily and intraday price series,
classifies each timeframe into a BUY/SELL/HOLD call and fuses both into a
single weighted recommendation.
"""

__version__ = "0.1.0"
__author__ = "MTF Team"
