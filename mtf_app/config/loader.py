"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigValidationError
from .defaults import (
    ClassificationParams,
    CombinerParams,
    DefaultConfig,
    DisplayParams,
    IndicatorParams,
    get_default_config,
)
from .validation import ConfigValidator, ValidationError


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_symbol_config(self, symbol: str) -> dict[str, Any]:
        """
        Load symbol-specific configuration overrides.

        Raises:
            ConfigValidationError: If symbols.yaml does not parse or is not
                shaped as ``symbols: {SYMBOL: {section: {...}}}``
        """
        symbols_file = self.config_dir / "symbols.yaml"

        if not symbols_file.exists():
            return {}

        try:
            with open(symbols_file) as f:
                symbols_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigValidationError(
                f"Cannot parse {symbols_file}: {e}",
                context={"symbol": symbol, "file": str(symbols_file)},
            ) from e

        if not isinstance(symbols_config, dict):
            raise self._shape_error(symbol, symbols_file, "document", symbols_config)

        symbols = symbols_config.get("symbols") or {}
        if not isinstance(symbols, dict):
            raise self._shape_error(symbol, symbols_file, "symbols", symbols)

        symbol_config = symbols.get(symbol) or {}
        if not isinstance(symbol_config, dict):
            raise self._shape_error(symbol, symbols_file, f"symbols.{symbol}", symbol_config)

        return symbol_config

    @staticmethod
    def _shape_error(symbol: str, symbols_file: Path, field: str, value: Any) -> ConfigValidationError:
        error = ValidationError(field=field, message="Must be a mapping", value=value)
        return ConfigValidationError(
            f"Invalid {symbols_file}: {field} must be a mapping (got: {value!r})",
            errors=[error],
            context={"symbol": symbol, "file": str(symbols_file)},
        )

    def merge_config(
        self,
        symbol: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Symbol-specific overrides
        3. Global defaults (lowest priority)
        """
        config = asdict(self.defaults)

        symbol_config = self.load_symbol_config(symbol)
        config = self._deep_merge(config, symbol_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_config(
        self,
        symbol: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """
        Build a validated DefaultConfig for a symbol.

        Raises:
            ConfigValidationError: If the merged configuration is invalid
        """
        merged = self.merge_config(symbol, overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            raise ConfigValidationError(
                f"Invalid configuration for {symbol}: "
                + "; ".join(f"{err.field}: {err.message} (got: {err.value})" for err in errors),
                errors=errors,
                context={"symbol": symbol},
            )

        return DefaultConfig(
            indicators=IndicatorParams(**merged["indicators"]),
            classification=ClassificationParams(**merged["classification"]),
            combiner=CombinerParams(**merged["combiner"]),
            display=DisplayParams(**merged["display"]),
        )

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
