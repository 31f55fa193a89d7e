"""
Main evaluation engine coordinator.

Orchestrates the signal pipeline for one symbol: indicator calculation and
classification per timeframe, the weighted combination and the
recommendation text.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Optional

import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .data.models import Bar
from .errors import DataQualityError, SignalEvaluationError, SystemFailureError
from .feeds.base import BarFeed
from .models.signals import Evaluation
from .signals.combiner import combine_signals
from .signals.formatter import format_recommendation
from .signals.generator import SignalGenerator

logger = structlog.get_logger(__name__)


class SignalEngine:
    """
    Coordinator for multi-timeframe signal evaluation.

    Pipeline:
    Bars → Indicators → Signal (daily, intraday) → Combined → Recommendation

    The engine keeps no per-request state, so one instance can evaluate any
    number of symbols concurrently.
    """

    def __init__(
        self,
        config_dir: Optional[Path] = None,
        config: Optional[DefaultConfig] = None
    ) -> None:
        """
        Initialize the signal engine.

        Args:
            config_dir: Directory holding symbols.yaml overrides
            config: Fixed configuration; skips per-symbol loading when given
        """
        self.logger = logger
        self.config_loader = ConfigLoader.create(config_dir)
        self.config = config

        self.logger.info("Signal engine initialized", config_dir=str(self.config_loader.config_dir))

    def config_for(self, symbol: str, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Resolve the configuration used to evaluate a symbol."""
        if self.config is not None and not overrides:
            return self.config
        return self.config_loader.load_config(symbol, overrides)

    def evaluate(
        self,
        symbol: str,
        intraday_bars: Sequence[Bar],
        daily_bars: Sequence[Bar],
        overrides: Optional[dict[str, Any]] = None
    ) -> Evaluation:
        """
        Evaluate a symbol from its intraday and daily bar series.

        Args:
            symbol: Instrument symbol
            intraday_bars: Short-interval bars in chronological order
            daily_bars: Daily bars in chronological order
            overrides: Per-call configuration overrides

        Returns:
            Evaluation with the charting windows, the three signals and the
            recommendation text

        Raises:
            SignalEvaluationError: If no signal can be produced
        """
        timeframe = None
        try:
            config = self.config_for(symbol, overrides)
            display = config.display
            generator = SignalGenerator(config.indicators, config.classification)

            timeframe = display.daily_timeframe
            daily = generator.generate(daily_bars, timeframe)

            timeframe = display.intraday_timeframe
            intraday = generator.generate(intraday_bars, timeframe)

            timeframe = config.combiner.combined_timeframe
            combined = combine_signals(daily, intraday, config.combiner)

            recommendation = format_recommendation(
                daily, intraday, combined, strong_threshold=display.strong_threshold
            )

        except (DataQualityError, SystemFailureError) as e:
            self.logger.error(
                "Unable to produce signal",
                symbol=symbol,
                timeframe=timeframe,
                error=str(e),
                error_type=type(e).__name__,
                context=getattr(e, 'context', {})
            )
            raise SignalEvaluationError(
                f"Unable to produce a signal for {symbol}: {e}",
                symbol=symbol,
                timeframe=timeframe,
                context={"error_type": type(e).__name__}
            ) from e

        self.logger.info(
            "Evaluated symbol",
            symbol=symbol,
            daily=daily.signal.value,
            intraday=intraday.signal.value,
            combined=combined.signal.value,
            strength=combined.strength
        )

        return Evaluation(
            symbol=symbol,
            intraday_bars=tuple(intraday_bars[-display.window_size:]),
            daily_bars=tuple(daily_bars[-display.window_size:]),
            daily=daily,
            intraday=intraday,
            combined=combined,
            recommendation=recommendation,
        )

    def evaluate_symbol(
        self,
        symbol: str,
        feed: BarFeed,
        overrides: Optional[dict[str, Any]] = None
    ) -> Evaluation:
        """
        Fetch both series from a feed and evaluate the symbol.

        Raises:
            SignalEvaluationError: If the feed has no data or no signal can be
                produced
        """
        timeframe = None
        try:
            display = self.config_for(symbol, overrides).display
            timeframe = display.daily_timeframe
            daily_bars = feed.fetch_bars(symbol, timeframe, display.history_limit)
            timeframe = display.intraday_timeframe
            intraday_bars = feed.fetch_bars(symbol, timeframe, display.history_limit)
        except (DataQualityError, SystemFailureError) as e:
            self.logger.error(
                "Unable to fetch bars",
                symbol=symbol,
                timeframe=timeframe,
                feed=feed.name,
                error=str(e),
                error_type=type(e).__name__
            )
            raise SignalEvaluationError(
                f"Unable to produce a signal for {symbol}: {e}",
                symbol=symbol,
                timeframe=timeframe,
                context={"error_type": type(e).__name__, "feed": feed.name}
            ) from e

        return self.evaluate(symbol, intraday_bars, daily_bars, overrides)
