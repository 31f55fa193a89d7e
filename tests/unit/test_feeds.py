"""Unit tests for the data feed contract."""

import pytest

from mtf_app.errors import MissingDataError
from mtf_app.feeds.base import BarFeed, InMemoryBarFeed


class TestBarFeed:
    """Test the abstract feed"""

    def test_cannot_instantiate_abstract_feed(self):
        """fetch_bars must be implemented"""
        with pytest.raises(TypeError):
            BarFeed("abstract")


class TestInMemoryBarFeed:
    """Test InMemoryBarFeed"""

    def test_fetch_all(self, rising_bars):
        """Without a limit the full series is served"""
        feed = InMemoryBarFeed(series={("AAPL", "daily"): rising_bars})
        assert feed.fetch_bars("AAPL", "daily") == rising_bars

    def test_fetch_trailing_limit(self, rising_bars):
        """A limit keeps the most recent bars"""
        feed = InMemoryBarFeed(series={("AAPL", "daily"): rising_bars})
        bars = feed.fetch_bars("AAPL", "daily", limit=5)

        assert bars == rising_bars[-5:]

    def test_zero_limit(self, rising_bars):
        """A zero limit serves nothing"""
        feed = InMemoryBarFeed(series={("AAPL", "daily"): rising_bars})
        assert feed.fetch_bars("AAPL", "daily", limit=0) == []

    def test_load_replaces_series(self, rising_bars, flat_bars):
        """load registers or replaces a series"""
        feed = InMemoryBarFeed()
        feed.load("AAPL", "daily", rising_bars)
        feed.load("AAPL", "daily", flat_bars)

        assert feed.fetch_bars("AAPL", "daily") == flat_bars

    def test_caller_mutation_does_not_leak(self, make_bars):
        """The feed keeps its own copy of the series"""
        bars = make_bars([100.0, 101.0])
        feed = InMemoryBarFeed(series={("AAPL", "daily"): bars})
        bars.append(make_bars([102.0], start=bars[-1].timestamp + 1)[0])

        assert len(feed.fetch_bars("AAPL", "daily")) == 2

    def test_missing_series(self):
        """Unknown keys raise MissingDataError"""
        feed = InMemoryBarFeed(name="test")
        with pytest.raises(MissingDataError) as exc_info:
            feed.fetch_bars("AAPL", "15min")

        assert exc_info.value.context == {"feed": "test", "symbol": "AAPL", "timeframe": "15min"}
