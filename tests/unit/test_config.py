"""Unit tests for configuration management."""

import pytest
from pathlib import Path

from bidsort_app.config.defaults import get_default_config
from bidsort_app.config.loader import CONFIG_DIR_ENV, ConfigLoader, build_config, load_config
from bidsort_app.config.validation import ConfigValidator
from bidsort_app.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration matches the eBid export layout."""
        config = get_default_config()
        assert config.csv.default_path == "eBid_Monthly_Sales_Dec_2016.csv"
        assert config.columns.bid_id == 1
        assert config.columns.title == 0
        assert config.columns.fund == 8
        assert config.columns.amount == 4
        assert config.amount.strip_char == "$"
        assert config.amount.extra_strip_chars == ""

    def test_required_columns(self) -> None:
        assert get_default_config().columns.required_columns == 9


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self, tmp_path: Path) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create(tmp_path)
        assert loader.config_dir == tmp_path

    def test_config_dir_from_environment(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
        loader = ConfigLoader.create()
        assert loader.config_dir == tmp_path

    def test_merge_config_defaults_only(self, tmp_path: Path) -> None:
        """Test config merging with no config file."""
        config = ConfigLoader.create(tmp_path).merge_config()

        assert config["columns"]["fund"] == 8
        assert config["amount"]["strip_char"] == "$"

    def test_merge_config_with_file(self, tmp_path: Path) -> None:
        """Test config file values override defaults."""
        (tmp_path / "bidsort.yaml").write_text(
            "amount:\n  extra_strip_chars: ','\ncsv:\n  default_path: other.csv\n"
        )
        config = ConfigLoader.create(tmp_path).merge_config()

        assert config["amount"]["extra_strip_chars"] == ","
        assert config["amount"]["strip_char"] == "$"
        assert config["csv"]["default_path"] == "other.csv"
        assert config["csv"]["has_header"] is True

    def test_explicit_overrides_win(self, tmp_path: Path) -> None:
        """Test explicit overrides beat the config file."""
        (tmp_path / "bidsort.yaml").write_text("logging:\n  level: DEBUG\n")
        config = ConfigLoader.create(tmp_path).merge_config({"logging": {"level": "ERROR"}})

        assert config["logging"]["level"] == "ERROR"

    def test_empty_config_file(self, tmp_path: Path) -> None:
        (tmp_path / "bidsort.yaml").write_text("")
        config = ConfigLoader.create(tmp_path).merge_config()
        assert config["columns"]["title"] == 0

    def test_build_config_ignores_unknown_keys(self, tmp_path: Path) -> None:
        merged = ConfigLoader.create(tmp_path).merge_config({"csv": {"unknown": 1, "delimiter": ";"}})
        config = build_config(merged)
        assert config.csv.delimiter == ";"

    def test_load_config_valid(self, tmp_path: Path) -> None:
        config = load_config(ConfigLoader.create(tmp_path), {"columns": {"fund": 9}})
        assert config.columns.fund == 9

    def test_load_config_invalid_raises(self, tmp_path: Path) -> None:
        """Test invalid values surface as ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(ConfigLoader.create(tmp_path), {"amount": {"strip_char": "$$"}})

        assert [error.field for error in exc_info.value.errors] == ["strip_char"]

    def test_unparseable_yaml_raises(self, tmp_path: Path) -> None:
        """Test a config file with broken YAML syntax."""
        (tmp_path / "bidsort.yaml").write_text("csv: [unclosed\n")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).merge_config()

        assert "bidsort.yaml" in str(exc_info.value)

    def test_non_mapping_yaml_raises(self, tmp_path: Path) -> None:
        """Test a config file whose top level is a list."""
        (tmp_path / "bidsort.yaml").write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).merge_config()

        assert "mapping" in str(exc_info.value)

    def test_shipped_config_file_is_valid(self) -> None:
        """Test the repository's config/bidsort.yaml."""
        config_dir = Path(__file__).parent.parent.parent / "config"
        config = load_config(ConfigLoader.create(config_dir))
        assert config == get_default_config()


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_defaults(self, tmp_path: Path) -> None:
        config = ConfigLoader.create(tmp_path).merge_config()
        assert ConfigValidator.validate_config(config) == []

    def test_negative_column(self) -> None:
        errors = ConfigValidator.validate_column_params({"title": -1})
        assert len(errors) == 1
        assert errors[0].field == "title"

    def test_bool_column_rejected(self) -> None:
        errors = ConfigValidator.validate_column_params({"fund": True})
        assert errors[0].field == "fund"

    def test_duplicate_columns(self) -> None:
        """Test two fields mapped to the same column."""
        errors = ConfigValidator.validate_column_params({"title": 0, "bid_id": 0})
        assert [error.field for error in errors] == ["columns"]

    def test_delimiter_must_be_single_character(self) -> None:
        errors = ConfigValidator.validate_csv_params({"delimiter": ",,"})
        assert errors[0].field == "delimiter"

    def test_has_header_must_be_bool(self) -> None:
        errors = ConfigValidator.validate_csv_params({"has_header": "yes"})
        assert errors[0].field == "has_header"

    def test_unknown_encoding(self) -> None:
        errors = ConfigValidator.validate_csv_params({"encoding": "nope-enc"})
        assert [error.field for error in errors] == ["encoding"]

    def test_known_encodings(self) -> None:
        assert ConfigValidator.validate_csv_params({"encoding": "latin-1"}) == []
        assert ConfigValidator.validate_csv_params({"encoding": "utf-8-sig"}) == []

    def test_invalid_log_level(self) -> None:
        errors = ConfigValidator.validate_logging_params({"level": "LOUD"})
        assert errors[0].field == "level"

    def test_lowercase_log_level_allowed(self) -> None:
        assert ConfigValidator.validate_logging_params({"level": "debug"}) == []

    def test_section_must_be_mapping(self) -> None:
        errors = ConfigValidator.validate_config({"csv": "bids.csv"})
        assert errors[0].field == "csv"
