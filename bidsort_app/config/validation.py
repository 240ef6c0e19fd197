"""Configuration validation utilities."""

import codecs
from dataclasses import dataclass
from typing import Any

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _is_known_codec(name: str) -> bool:
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_csv_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate input file parameters."""
        errors = []

        # Validate delimiter
        if "delimiter" in params:
            value = params["delimiter"]
            if not isinstance(value, str) or len(value) != 1:
                errors.append(ValidationError(
                    field="delimiter",
                    message="Must be a single character",
                    value=value
                ))

        # Validate encoding
        if "encoding" in params:
            value = params["encoding"]
            if not isinstance(value, str) or not _is_known_codec(value):
                errors.append(ValidationError(
                    field="encoding",
                    message="Must be a known text encoding",
                    value=value
                ))

        # Validate default_path
        if "default_path" in params:
            value = params["default_path"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="default_path",
                    message="Must be a non-empty string",
                    value=value
                ))

        # Validate has_header
        if "has_header" in params:
            value = params["has_header"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="has_header",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_column_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate column positions."""
        errors = []
        positions = []

        for name in ("title", "bid_id", "amount", "fund"):
            if name not in params:
                continue
            value = params[name]
            # bool is an int subclass
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field=name,
                    message="Must be a non-negative integer",
                    value=value
                ))
            else:
                positions.append(value)

        if len(positions) != len(set(positions)):
            errors.append(ValidationError(
                field="columns",
                message="Column positions must be distinct",
                value=positions
            ))

        return errors

    @staticmethod
    def validate_amount_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate amount parsing parameters."""
        errors = []

        if "strip_char" in params:
            value = params["strip_char"]
            if not isinstance(value, str) or len(value) != 1:
                errors.append(ValidationError(
                    field="strip_char",
                    message="Must be a single character",
                    value=value
                ))

        if "extra_strip_chars" in params:
            value = params["extra_strip_chars"]
            if not isinstance(value, str):
                errors.append(ValidationError(
                    field="extra_strip_chars",
                    message="Must be a string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []
        section_validators = {
            "csv": ConfigValidator.validate_csv_params,
            "columns": ConfigValidator.validate_column_params,
            "amount": ConfigValidator.validate_amount_params,
            "logging": ConfigValidator.validate_logging_params,
        }

        for section, validate in section_validators.items():
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors
