"""Configuration loader with 3-tier parameter precedence."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    AmountParams,
    ColumnParams,
    CsvParams,
    DefaultConfig,
    LoggingParams,
    get_default_config,
)
from .validation import ConfigValidator

CONFIG_DIR_ENV = "BIDSORT_CONFIG_DIR"
CONFIG_FILE_NAME = "bidsort.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            env_dir = os.environ.get(CONFIG_DIR_ENV)
            config_dir = Path(env_dir) if env_dir else Path.cwd() / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """
        Load overrides from the YAML config file, if one exists.

        Raises:
            ConfigurationError: If the file is not valid YAML or not a mapping
        """
        config_file = self.config_dir / CONFIG_FILE_NAME

        if not config_file.exists():
            return {}

        try:
            with open(config_file) as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Cannot parse {config_file}: {e}",
                context={"path": str(config_file)},
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"{config_file} must contain a mapping of sections, got {type(file_config).__name__}",
                context={"path": str(config_file)},
            )

        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. YAML config file
        3. Global defaults (lowest priority)
        """
        # Start with global defaults
        config = self._dataclass_to_dict(self.defaults)

        # Apply config file overrides
        config = self._deep_merge(config, self.load_file_config())

        # Apply explicit overrides
        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def build_config(merged: dict[str, Any]) -> DefaultConfig:
    """
    Rebuild typed configuration from a merged dictionary.

    Unknown keys are ignored so a config file written for a newer version
    still loads.

    Args:
        merged: Output of ConfigLoader.merge_config (validated)

    Returns:
        DefaultConfig populated from the merged values
    """
    def section(params_cls: type, name: str) -> Any:
        values = merged.get(name) or {}
        known = {k: v for k, v in values.items() if k in params_cls.__dataclass_fields__}
        return params_cls(**known)

    return DefaultConfig(
        csv=section(CsvParams, "csv"),
        columns=section(ColumnParams, "columns"),
        amount=section(AmountParams, "amount"),
        logging=section(LoggingParams, "logging"),
    )


def load_config(
    loader: Optional[ConfigLoader] = None,
    overrides: Optional[dict[str, Any]] = None
) -> DefaultConfig:
    """
    Merge, validate and build the application configuration.

    Raises:
        ConfigurationError: If the merged configuration is invalid
    """
    loader = loader or ConfigLoader.create()
    merged = loader.merge_config(overrides)

    errors = ConfigValidator.validate_config(merged)
    if errors:
        raise ConfigurationError(
            f"{len(errors)} invalid configuration value(s) in {loader.config_dir}",
            errors=errors,
        )

    return build_config(merged)
