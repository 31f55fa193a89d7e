"""
Market data feed contract.

Feeds supply already materialized, chronologically ordered bar series. The
engine never fetches data itself beyond calling a feed.
"""

from .base import BarFeed, InMemoryBarFeed

__all__ = ["BarFeed", "InMemoryBarFeed"]
