"""
System failure error classifications.

These exceptions mean the engine could not produce a signal and the caller
has to surface the failure.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class IndicatorCalculationError(SystemFailureError):
    """An indicator produced a value that cannot be classified."""

    def __init__(self, message: str, indicator_name: Optional[str] = None,
                 calculation_input: Optional[dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.indicator_name = indicator_name
        self.calculation_input = calculation_input


class SignalEvaluationError(SystemFailureError):
    """Unable to produce a signal for the requested symbol."""

    def __init__(self, message: str, symbol: Optional[str] = None,
                 timeframe: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.symbol = symbol
        self.timeframe = timeframe


class ConfigValidationError(SystemFailureError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
