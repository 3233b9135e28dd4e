#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import Any, List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from funded_hours.config.loader import ConfigLoader
from funded_hours.config.validation import ConfigValidator
from funded_hours.errors import ValidationError


def validate_provider_config(config_dir: Optional[Path] = None,
                             overrides: Optional[dict[str, Any]] = None) -> List[ValidationError]:
    """Validate the merged configuration for a config directory."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config(overrides)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating funded hours configuration in {loader.config_dir}...")

    all_valid = True

    errors = validate_provider_config(config_dir)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        settings = loader.load_provider_settings()
        print("✅ Provider configuration is valid")
        print(f"  • hourly rate: £{settings.hourly_rate:.2f}")
        print(f"  • operating weeks: {settings.operating_weeks}")
        print(f"  • meal charge: £{settings.meal_charge:.2f}")
        print(f"  • consumables charge: £{settings.consumables_charge:.2f}/day")

    # Check that each supported operating-weeks value passes
    print("\n📋 Testing operating weeks range...")
    for weeks in range(39, 53):
        errors = validate_provider_config(config_dir, {"provider": {"operating_weeks": weeks}})
        if errors:
            print(f"❌ operating_weeks={weeks} rejected: {errors[0].message}")
            all_valid = False
    print("✅ Operating weeks range check finished")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
