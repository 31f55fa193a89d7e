"""Unit tests for configuration management."""

from pathlib import Path

import pytest
import yaml

from mtf_app.config.defaults import DefaultConfig, get_default_config
from mtf_app.config.loader import ConfigLoader
from mtf_app.config.validation import ConfigValidator
from mtf_app.errors import ConfigValidationError


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Config directory with per-symbol overrides."""
    (tmp_path / "symbols.yaml").write_text(yaml.safe_dump({
        "symbols": {
            "SPY": {
                "combiner": {"daily_weight": 0.7, "intraday_weight": 0.3},
                "display": {"window_size": 20},
            },
            "BAD": {
                "indicators": {"rsi_period": 0},
            },
        }
    }))
    return tmp_path


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.indicators.sma_fast_period == 20
        assert config.indicators.sma_slow_period == 50
        assert config.indicators.rsi_period == 14
        assert config.indicators.momentum_period == 10
        assert config.combiner.daily_weight == 0.6
        assert config.combiner.intraday_weight == 0.4
        assert config.classification.hold_strength == 40
        assert config.display.window_size == 50
        assert config.display.strong_threshold == 80


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Default loader points at the repository config directory."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)
        assert loader.config_dir.name == "config"

    def test_missing_symbols_file(self, tmp_path: Path) -> None:
        """No symbols.yaml means defaults only."""
        loader = ConfigLoader.create(tmp_path)
        assert loader.load_symbol_config("AAPL") == {}
        assert loader.load_config("AAPL") == get_default_config()

    def test_symbol_overrides(self, config_dir: Path) -> None:
        """Symbol overrides replace only the keys they name."""
        config = ConfigLoader.create(config_dir).merge_config("SPY")

        assert config["combiner"]["daily_weight"] == 0.7
        assert config["combiner"]["combined_timeframe"] == "combined"
        assert config["display"]["window_size"] == 20
        assert config["indicators"]["sma_slow_period"] == 50

    def test_call_overrides_win(self, config_dir: Path) -> None:
        """Per-call overrides take precedence over symbol overrides."""
        config = ConfigLoader.create(config_dir).merge_config(
            "SPY", {"display": {"window_size": 10}}
        )
        assert config["display"]["window_size"] == 10

    def test_load_config_builds_dataclasses(self, config_dir: Path) -> None:
        """Merged dictionaries become a DefaultConfig."""
        config = ConfigLoader.create(config_dir).load_config("SPY")

        assert isinstance(config, DefaultConfig)
        assert config.combiner.daily_weight == 0.7
        assert config.display.window_size == 20

    def test_invalid_symbol_config(self, config_dir: Path) -> None:
        """Invalid overrides raise ConfigValidationError."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ConfigLoader.create(config_dir).load_config("BAD")

        assert exc_info.value.errors[0].field == "rsi_period"

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        """Typos in override keys are reported."""
        with pytest.raises(ConfigValidationError):
            ConfigLoader.create(tmp_path).load_config("AAPL", {"indicators": {"rsi_periods": 7}})

    def test_unparseable_symbols_file(self, tmp_path: Path) -> None:
        """YAML syntax errors surface as ConfigValidationError."""
        (tmp_path / "symbols.yaml").write_text("symbols:\n  X: [1, 2\n")

        with pytest.raises(ConfigValidationError) as exc_info:
            ConfigLoader.create(tmp_path).load_symbol_config("X")

        assert "Cannot parse" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    @pytest.mark.parametrize("content,field", [
        ("symbols:\n  X: 5\n", "symbols.X"),
        ("- 1\n- 2\n", "document"),
        ("symbols: [X]\n", "symbols"),
    ])
    def test_non_mapping_entries(self, tmp_path: Path, content: str, field: str) -> None:
        """Entries that are not mappings are rejected before merging."""
        (tmp_path / "symbols.yaml").write_text(content)

        with pytest.raises(ConfigValidationError) as exc_info:
            ConfigLoader.create(tmp_path).load_config("X")

        assert exc_info.value.errors[0].field == field
        assert exc_info.value.context["symbol"] == "X"

    def test_empty_symbol_entry(self, tmp_path: Path) -> None:
        """A symbol listed without overrides uses the defaults."""
        (tmp_path / "symbols.yaml").write_text("symbols:\n  X:\n")
        assert ConfigLoader.create(tmp_path).load_config("X") == get_default_config()


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_defaults_are_valid(self) -> None:
        """The shipped defaults pass validation."""
        config = ConfigLoader.create(Path("/nonexistent")).merge_config("AAPL")
        assert ConfigValidator.validate_config(config) == []

    def test_fast_period_must_be_shorter(self) -> None:
        """The fast average must use fewer bars than the slow one."""
        errors = ConfigValidator.validate_indicator_params(
            {"sma_fast_period": 50, "sma_slow_period": 20}
        )
        assert len(errors) == 1
        assert errors[0].field == "sma_fast_period"

    def test_non_integer_period(self) -> None:
        """Periods must be positive integers."""
        errors = ConfigValidator.validate_indicator_params({"momentum_period": 2.5})
        assert errors[0].field == "momentum_period"

    def test_weights_must_sum_to_one(self) -> None:
        """Daily and intraday weights form a convex combination."""
        errors = ConfigValidator.validate_combiner_params(
            {"daily_weight": 0.6, "intraday_weight": 0.6}
        )
        assert len(errors) == 1
        assert "sum to 1" in errors[0].message

    def test_rsi_bands_ordered(self) -> None:
        """Oversold band must sit below the overbought band."""
        errors = ConfigValidator.validate_classification_params(
            {"rsi_overbought": 30.0, "rsi_oversold": 70.0}
        )
        assert [err.field for err in errors] == ["rsi_oversold"]

    def test_strength_out_of_range(self) -> None:
        """Strength scores are integer percentages."""
        errors = ConfigValidator.validate_classification_params({"hold_strength": 140})
        assert errors[0].field == "hold_strength"

    def test_display_window(self) -> None:
        """The display window must be positive."""
        errors = ConfigValidator.validate_display_params({"window_size": 0})
        assert errors[0].field == "window_size"

    def test_unknown_section(self) -> None:
        """Unknown sections are reported."""
        errors = ConfigValidator.validate_config({"scoring": {}})
        assert any(err.field == "scoring" for err in errors)
