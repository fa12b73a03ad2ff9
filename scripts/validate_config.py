#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dividend_forecast.config.loader import ConfigLoader
from dividend_forecast.config.validation import ConfigValidator, ValidationError
from dividend_forecast.errors import ConfigurationError


def validate_merged_config(loader: ConfigLoader, overrides=None) -> List[ValidationError]:
    """Validate the file configuration merged over defaults."""
    config = loader.merge_config(overrides)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    loader = ConfigLoader.create()
    print(f"Validating {loader.config_path}...")

    all_valid = True

    try:
        errors = validate_merged_config(loader)
    except ConfigurationError as e:
        print(f"Could not load configuration: {e}")
        sys.exit(1)

    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  - {error}")
        all_valid = False
    else:
        print("File configuration is valid")

    # Typed construction catches unknown fields the validator ignores
    try:
        config = loader.load_config()
        print("Scenarios:")
        for key in ("conservative", "moderate", "aggressive", "custom"):
            rates = getattr(config.scenarios, key)
            print(f"  {key:<13} dividend growth {rates.dividend_growth_rate_pct}%, "
                  f"market growth {rates.market_growth_rate_pct}%, "
                  f"target yield {rates.target_yield_pct}%")
    except ConfigurationError as e:
        print(f"Configuration could not be built: {e}")
        for error in e.errors:
            print(f"  - {error}")
        all_valid = False

    if all_valid:
        print("\nAll configuration validation passed!")
        sys.exit(0)
    else:
        print("\nConfiguration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
