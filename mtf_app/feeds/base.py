"""Base classes for market data feeds."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional

import structlog

from ..data.models import Bar
from ..errors import MissingDataError

logger = structlog.get_logger(__name__)


class BarFeed(ABC):
    """Supplier of ordered bar series for a symbol and timeframe."""

    def __init__(self, name: str):
        self.name = name
        self.logger = logger.bind(feed=name)

    @abstractmethod
    def fetch_bars(self, symbol: str, timeframe: str, limit: Optional[int] = None) -> list[Bar]:
        """
        Fetch the most recent bars.

        Args:
            symbol: Instrument symbol, e.g. "AAPL"
            timeframe: Timeframe label, e.g. "daily" or "15min"
            limit: Maximum number of trailing bars to return

        Returns:
            Bars in strictly increasing timestamp order
        """
        pass


class InMemoryBarFeed(BarFeed):
    """Feed serving pre-loaded series keyed by symbol and timeframe."""

    def __init__(self, name: str = "memory",
                 series: Optional[dict[tuple[str, str], Sequence[Bar]]] = None):
        super().__init__(name)
        self._series: dict[tuple[str, str], tuple[Bar, ...]] = {
            key: tuple(bars) for key, bars in (series or {}).items()
        }

    def load(self, symbol: str, timeframe: str, bars: Sequence[Bar]) -> None:
        """Register or replace the series for a symbol and timeframe."""
        self._series[(symbol, timeframe)] = tuple(bars)

    def fetch_bars(self, symbol: str, timeframe: str, limit: Optional[int] = None) -> list[Bar]:
        """Return the stored series, trimmed to the trailing ``limit`` bars."""
        key = (symbol, timeframe)
        if key not in self._series:
            raise MissingDataError(
                f"No {timeframe} bars available for {symbol}",
                data_type="bars",
                context={"feed": self.name, "symbol": symbol, "timeframe": timeframe}
            )

        bars = self._series[key]
        if limit is not None:
            bars = bars[-limit:] if limit > 0 else ()

        self.logger.debug(
            "Served bars from memory",
            symbol=symbol,
            timeframe=timeframe,
            count=len(bars)
        )
        return list(bars)
