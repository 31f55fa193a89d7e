"""
Error classification for the signal engine.

Data quality errors describe malformed input series; system failures describe
conditions under which no signal can be produced at all.
"""

from .data_quality import (
    DataQualityError,
    MalformedDataError,
    MissingDataError,
    TemporalDataError,
)
from .system_failures import (
    ConfigValidationError,
    IndicatorCalculationError,
    SignalEvaluationError,
    SystemFailureError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "TemporalDataError",
    "MissingDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "IndicatorCalculationError",
    "SignalEvaluationError",
    "ConfigValidationError",
]
