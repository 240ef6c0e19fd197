#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bidsort_app.config.loader import CONFIG_FILE_NAME, ConfigLoader
from bidsort_app.config.validation import ConfigValidator


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating {loader.config_dir / CONFIG_FILE_NAME}...")
    if not (loader.config_dir / CONFIG_FILE_NAME).exists():
        print("ℹ️  No config file found, defaults apply")

    try:
        config = loader.merge_config()
    except Exception as e:
        print(f"❌ Error reading configuration: {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(config)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    print(f"✅ Configuration is valid")
    print(f"   Default file: {config['csv']['default_path']}")
    print(f"   Columns: {config['columns']}")


if __name__ == "__main__":
    main()
