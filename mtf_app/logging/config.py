"""
Centralized logging configuration for the signal engine.

This module provides standardized logging configuration using structlog
for all components, so that every classification and evaluation failure
is recorded as a structured event. Classification decisions are bound with
``subsystem="signals"`` and can be given their own level, so the DEBUG
audit trail can be switched on without the rest of the engine's DEBUG output.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import EventDict, FilteringBoundLogger, Processor, WrappedLogger

SIGNAL_SUBSYSTEM = "signals"

_METHOD_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
}


def filter_by_subsystem(default_level: int, subsystem_levels: dict[str, int]) -> Processor:
    """
    Build a processor that applies a per-subsystem minimum level.

    Records without a ``subsystem`` key, or with one not listed in
    ``subsystem_levels``, are held to ``default_level``.
    """
    def processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        threshold = subsystem_levels.get(event_dict.get("subsystem"), default_level)
        if _METHOD_LEVELS.get(method_name, logging.INFO) < threshold:
            raise structlog.DropEvent
        return event_dict

    return processor


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    signal_level: Optional[str] = None,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        signal_level: Level for classification decisions; follows ``level``
            when None. Decisions are logged at DEBUG.
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())
    decision_level = getattr(logging, signal_level.upper()) if signal_level else log_level

    logging.basicConfig(
        level=min(log_level, decision_level),
        stream=sys.stdout,
        format="%(message)s"
    )

    processors = [
        structlog.stdlib.filter_by_level,
        filter_by_subsystem(log_level, {SIGNAL_SUBSYSTEM: decision_level}),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_signal_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for signal classification decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for signal decisions
    """
    return get_logger(name).bind(
        subsystem=SIGNAL_SUBSYSTEM,
        audit_trail=True
    )


def log_signal_decision(
    logger: FilteringBoundLogger,
    timeframe: str,
    signal: str,
    strength: int,
    indicators: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a signal classification with standardized format.

    Args:
        logger: Structlog logger instance
        timeframe: Timeframe label of the classified series
        signal: Resulting direction (BUY, SELL or HOLD)
        strength: Resulting strength percentage
        indicators: Serialized indicator snapshot
    """
    bound_logger = logger.bind(
        timeframe=timeframe,
        signal=signal,
        strength=strength,
    )

    if indicators:
        bound_logger = bound_logger.bind(indicators=indicators)

    bound_logger.debug("Signal classified")
