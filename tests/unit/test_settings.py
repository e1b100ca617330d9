"""
Unit tests for deserializer settings and config loading.
"""

from pathlib import Path

import pytest

from cf_log_serde.config import (
    DeserializerSettings,
    get_settings,
    load_config_file,
    load_deserializer_section,
)
from cf_log_serde.deserializer import SerDeConfigError


class TestDeserializerSettings:
    """Tests for the settings dataclass."""

    def test_defaults(self):
        """Defaults clear unmatched fields and impose no length limit."""
        settings = DeserializerSettings()
        assert settings.clear_unmatched_fields is True
        assert settings.log_legacy_fallback is True
        assert settings.max_line_length == 0
        assert settings.validate() == []

    def test_validate_negative_length(self):
        """Negative limits are reported."""
        errors = DeserializerSettings(max_line_length=-1).validate()
        assert len(errors) == 1
        assert "max_line_length" in errors[0]

    def test_from_dict_native_values(self):
        """YAML-native values are taken as-is."""
        settings = DeserializerSettings.from_dict(
            {"clear_unmatched_fields": False, "max_line_length": 4096}
        )
        assert settings.clear_unmatched_fields is False
        assert settings.log_legacy_fallback is True
        assert settings.max_line_length == 4096

    def test_from_dict_string_values(self):
        """String spellings, as table properties carry, are coerced."""
        settings = DeserializerSettings.from_dict(
            {"log_legacy_fallback": "No", "max_line_length": " 100 "}
        )
        assert settings.log_legacy_fallback is False
        assert settings.max_line_length == 100

    @pytest.mark.parametrize(
        "config",
        [
            {"clear_unmatched_fields": "maybe"},
            {"max_line_length": "ten"},
            {"max_line_length": True},
            {"max_line_length": -5},
        ],
    )
    def test_from_dict_invalid(self, config):
        """Bad values raise SerDeConfigError."""
        with pytest.raises(SerDeConfigError):
            DeserializerSettings.from_dict(config)

    def test_round_trip_dict(self):
        """to_dict output feeds back into from_dict."""
        settings = DeserializerSettings(
            clear_unmatched_fields=False, log_legacy_fallback=False, max_line_length=8
        )
        assert DeserializerSettings.from_dict(settings.to_dict()) == settings

    def test_from_env(self, monkeypatch):
        """Environment variables override defaults."""
        monkeypatch.setenv("CF_SERDE_CLEAR_UNMATCHED_FIELDS", "false")
        monkeypatch.setenv("CF_SERDE_MAX_LINE_LENGTH", "512")

        settings = DeserializerSettings.from_env()
        assert settings.clear_unmatched_fields is False
        assert settings.log_legacy_fallback is True
        assert settings.max_line_length == 512

    def test_from_env_bad_integer_falls_back(self, monkeypatch):
        """Unparseable integers use the default."""
        monkeypatch.setenv("CF_SERDE_MAX_LINE_LENGTH", "huge")
        assert DeserializerSettings.from_env().max_line_length == 0

    @pytest.mark.parametrize(
        "value,expected",
        [("1", True), ("yes", True), ("ON", True), ("0", False), ("off", False)],
    )
    def test_from_env_boolean_spellings(self, monkeypatch, value, expected):
        """Environment booleans accept the same spellings as table properties."""
        monkeypatch.setenv("CF_SERDE_LOG_LEGACY_FALLBACK", value)
        assert DeserializerSettings.from_env().log_legacy_fallback is expected

    def test_from_env_bad_boolean_falls_back(self, monkeypatch, caplog):
        """Unrecognized booleans keep the default and log a warning."""
        monkeypatch.setenv("CF_SERDE_CLEAR_UNMATCHED_FIELDS", "maybe")

        with caplog.at_level("WARNING"):
            settings = DeserializerSettings.from_env()

        assert settings.clear_unmatched_fields is True
        assert "CF_SERDE_CLEAR_UNMATCHED_FIELDS" in caplog.text


class TestConfigLoading:
    """Tests for YAML config files and get_settings."""

    def test_load_config_file(self, tmp_path: Path):
        """A YAML mapping is returned as a dict."""
        path = tmp_path / "cf.yaml"
        path.write_text("deserializer:\n  max_line_length: 2048\n")

        assert load_config_file(path) == {"deserializer": {"max_line_length": 2048}}
        assert load_deserializer_section(path) == {"max_line_length": 2048}

    def test_empty_file(self, tmp_path: Path):
        """An empty file is an empty config."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config_file(path) == {}
        assert load_deserializer_section(path) == {}

    def test_missing_file(self, tmp_path: Path):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config_file(tmp_path / "nope.yaml")

    def test_non_mapping(self, tmp_path: Path):
        """Top-level lists are rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(SerDeConfigError):
            load_config_file(path)

    def test_invalid_yaml(self, tmp_path: Path):
        """Syntax errors surface as SerDeConfigError."""
        path = tmp_path / "bad.yaml"
        path.write_text("deserializer: [unclosed\n")

        with pytest.raises(SerDeConfigError):
            load_config_file(path)

    def test_get_settings_from_file(self, tmp_path: Path):
        """get_settings reads the file when it exists."""
        path = tmp_path / "cf.yaml"
        path.write_text("deserializer:\n  clear_unmatched_fields: false\n")

        settings = get_settings(str(path))
        assert settings.clear_unmatched_fields is False
        assert get_settings(str(path)) is settings

    def test_get_settings_falls_back_to_env(self, tmp_path: Path, monkeypatch):
        """Without a file, environment variables are used."""
        monkeypatch.setenv("CF_SERDE_LOG_LEGACY_FALLBACK", "false")

        settings = get_settings(str(tmp_path / "missing.yaml"))
        assert settings.log_legacy_fallback is False
