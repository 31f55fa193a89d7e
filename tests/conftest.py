"""Pytest configuration and shared fixtures."""

from collections.abc import Callable, Sequence

import pytest

from mtf_app.data.models import Bar

START_TS = 1_700_000_000_000
DAY_MS = 24 * 60 * 60 * 1000


def build_bars(closes: Sequence[float], start: int = START_TS, step: int = DAY_MS) -> list[Bar]:
    """Build a chronologically ordered bar series from closing prices."""
    return [
        Bar(
            timestamp=start + i * step,
            open=close,
            high=close,
            low=close,
            close=close,
            volume=1000.0,
        )
        for i, close in enumerate(closes)
    ]


def zigzag(count: int, base: float, slope: float, swing: float) -> list[float]:
    """Trending closes with an alternating +swing / -swing offset."""
    return [base + slope * i + (swing if i % 2 == 0 else -swing) for i in range(count)]


@pytest.fixture
def make_bars() -> Callable[..., list[Bar]]:
    """Factory turning closing prices into a bar series."""
    return build_bars


@pytest.fixture
def flat_bars() -> list[Bar]:
    """50 daily bars all closing at 100.0."""
    return build_bars([100.0] * 50)


@pytest.fixture
def rising_bars() -> list[Bar]:
    """60 bars rising in a zigzag; classifies as BUY with strength 80."""
    return build_bars(zigzag(60, base=100.0, slope=0.5, swing=1.0))


@pytest.fixture
def strong_rising_bars() -> list[Bar]:
    """60 bars rising in a steeper zigzag; classifies as BUY with strength 90."""
    return build_bars(zigzag(60, base=100.0, slope=1.5, swing=2.0))


@pytest.fixture
def falling_bars() -> list[Bar]:
    """60 bars falling in a zigzag; classifies as SELL with strength 80."""
    return build_bars([300.0 - close for close in zigzag(60, base=100.0, slope=0.5, swing=1.0)])


@pytest.fixture
def sample_bar_payload() -> dict:
    """Raw bar payload as delivered by a data feed."""
    return {
        "timestamp": START_TS,
        "open": 150.12,
        "high": 151.0,
        "low": 149.5,
        "close": 150.75,
        "volume": 2500000,
    }
