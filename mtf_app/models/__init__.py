"""
Signal data models.

Immutable signal snapshots and the evaluation payload handed to the
presentation layer. Built from frozen dataclasses and never mutated.
"""

from .signals import Evaluation, IndicatorSet, Signal, SignalDirection

__all__ = ["Evaluation", "IndicatorSet", "Signal", "SignalDirection"]
