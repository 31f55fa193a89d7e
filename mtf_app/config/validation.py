"""Configuration validation utilities."""

import math
from dataclasses import dataclass, fields
from typing import Any

from .defaults import ClassificationParams, CombinerParams, DisplayParams, IndicatorParams

SECTIONS = {
    "indicators": IndicatorParams,
    "classification": ClassificationParams,
    "combiner": CombinerParams,
    "display": DisplayParams,
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_unknown_keys(section: str, params: dict[str, Any]) -> list[ValidationError]:
        """Reject keys that do not exist on the section's dataclass."""
        known = {f.name for f in fields(SECTIONS[section])}
        return [
            ValidationError(field=f"{section}.{key}", message="Unknown parameter", value=value)
            for key, value in params.items()
            if key not in known
        ]

    @staticmethod
    def validate_indicator_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate indicator lookback periods."""
        errors = []

        for name in ("sma_fast_period", "sma_slow_period", "rsi_period", "momentum_period"):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive integer",
                    value=params[name]
                ))

        fast = params.get("sma_fast_period")
        slow = params.get("sma_slow_period")
        if _is_positive_int(fast) and _is_positive_int(slow) and fast >= slow:
            errors.append(ValidationError(
                field="sma_fast_period",
                message="Must be smaller than sma_slow_period",
                value=fast
            ))

        return errors

    @staticmethod
    def validate_classification_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate classification thresholds and strength scores."""
        errors = []

        for name in ("rsi_overbought", "rsi_oversold"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value > 100:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a number between 0 and 100",
                        value=value
                    ))

        overbought = params.get("rsi_overbought")
        oversold = params.get("rsi_oversold")
        if _is_number(overbought) and _is_number(oversold) and oversold >= overbought:
            errors.append(ValidationError(
                field="rsi_oversold",
                message="Must be below rsi_overbought",
                value=oversold
            ))

        if "momentum_bonus_threshold" in params:
            value = params["momentum_bonus_threshold"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="momentum_bonus_threshold",
                    message="Must be a non-negative number",
                    value=value
                ))

        for name in ("base_strength", "extreme_base_strength", "small_bonus",
                     "large_bonus", "hold_strength"):
            if name in params:
                value = params[name]
                if not isinstance(value, int) or isinstance(value, bool) or value < 0 or value > 100:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be an integer between 0 and 100",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_combiner_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate timeframe weights."""
        errors = []

        for name in ("daily_weight", "intraday_weight"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value > 1:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a number between 0 and 1",
                        value=value
                    ))

        daily = params.get("daily_weight")
        intraday = params.get("intraday_weight")
        if _is_number(daily) and _is_number(intraday) and not math.isclose(daily + intraday, 1.0):
            errors.append(ValidationError(
                field="daily_weight",
                message="daily_weight and intraday_weight must sum to 1",
                value=daily + intraday
            ))

        if "combined_timeframe" in params:
            value = params["combined_timeframe"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="combined_timeframe",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_display_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate response shaping parameters."""
        errors = []

        for name in ("window_size", "history_limit"):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive integer",
                    value=params[name]
                ))

        if "strong_threshold" in params:
            value = params["strong_threshold"]
            if not _is_number(value) or value < 0 or value > 100:
                errors.append(ValidationError(
                    field="strong_threshold",
                    message="Must be a number between 0 and 100",
                    value=value
                ))

        for name in ("daily_timeframe", "intraday_timeframe"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-empty string",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete merged configuration dictionary."""
        errors = []

        for section in config:
            if section not in SECTIONS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=config[section]
                ))

        validators = {
            "indicators": ConfigValidator.validate_indicator_params,
            "classification": ConfigValidator.validate_classification_params,
            "combiner": ConfigValidator.validate_combiner_params,
            "display": ConfigValidator.validate_display_params,
        }

        for section, validate in validators.items():
            params = config.get(section, {})
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            errors.extend(ConfigValidator.validate_unknown_keys(section, params))
            errors.extend(validate(params))

        return errors
