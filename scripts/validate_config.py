#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

import yaml

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from mtf_app.config.loader import ConfigLoader
from mtf_app.config.validation import ConfigValidator, ValidationError
from mtf_app.errors import ConfigValidationError


def validate_symbol_config(loader: ConfigLoader, symbol: str) -> list[ValidationError]:
    """Validate configuration for a specific symbol."""
    config = loader.merge_config(symbol)
    return ConfigValidator.validate_config(config)


def configured_symbols(loader: ConfigLoader) -> list[str]:
    """Symbols that have overrides in symbols.yaml."""
    symbols_file = loader.config_dir / "symbols.yaml"
    if not symbols_file.exists():
        return []

    try:
        with open(symbols_file) as f:
            symbols_config = yaml.safe_load(f) or {}
    except yaml.YAMLError:
        # Reported per symbol by the loader
        return []

    if not isinstance(symbols_config, dict):
        return []
    symbols = symbols_config.get("symbols") or {}
    return sorted(str(symbol) for symbol in symbols) if isinstance(symbols, dict) else []


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"Validating configuration in {loader.config_dir}...")

    # Unknown symbols fall back to the defaults
    symbols = configured_symbols(loader) + ["UNKNOWN-SYMBOL"]

    all_valid = True

    for symbol in symbols:
        try:
            errors = validate_symbol_config(loader, symbol)
        except ConfigValidationError as e:
            print(f"  {symbol}: {e}")
            all_valid = False
            continue

        if errors:
            print(f"  {symbol}: {len(errors)} validation errors")
            for error in errors:
                print(f"    - {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"  {symbol}: ok")

    if all_valid:
        print("All configuration validation passed")
        sys.exit(0)
    else:
        print("Configuration validation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
