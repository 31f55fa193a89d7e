"""
Logging configuration and utilities for the signal engine.
"""
from .config import (
    configure_logging,
    filter_by_subsystem,
    get_logger,
    get_signal_logger,
    log_signal_decision,
)

__all__ = [
    "configure_logging",
    "filter_by_subsystem",
    "get_logger",
    "get_signal_logger",
    "log_signal_decision",
]
