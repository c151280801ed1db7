"""Tests for configuration validation."""

import os
import pytest
from unittest.mock import patch

from grant_matcher.config.config import Config, validate_config


def _clean_env(**overrides):
    """Environment without any GRANT_MATCHER_ variables, plus overrides."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("GRANT_MATCHER_")}
    env.update(overrides)
    return env


class TestConfigValidation:
    """Test startup config validation."""

    def test_defaults_without_environment(self, tmp_path, monkeypatch):
        """No variables set → seed catalog, INFO logging."""
        monkeypatch.chdir(tmp_path)  # keep any local .env out of the way
        with patch.dict(os.environ, _clean_env(), clear=True):
            config = validate_config()

        assert config.catalog_path is None
        assert config.catalog_url is None
        assert config.weights_path is None
        assert config.request_timeout_seconds == 30.0
        assert config.log_level == "INFO"

    def test_values_read_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        env = _clean_env(
            GRANT_MATCHER_CATALOG_URL="https://catalog.example.com/programs",
            GRANT_MATCHER_WEIGHTS_PATH="/etc/grant-matcher/weights.yaml",
            GRANT_MATCHER_REQUEST_TIMEOUT_SECONDS="12.5",
            GRANT_MATCHER_LOG_LEVEL="DEBUG",
        )
        with patch.dict(os.environ, env, clear=True):
            config = validate_config()

        assert config.catalog_url == "https://catalog.example.com/programs"
        assert config.weights_path == "/etc/grant-matcher/weights.yaml"
        assert config.request_timeout_seconds == 12.5
        assert config.log_level == "DEBUG"

    def test_env_file_is_read(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("GRANT_MATCHER_CATALOG_PATH=catalog.yaml\n")

        with patch.dict(os.environ, _clean_env(), clear=True):
            config = Config()

        assert config.catalog_path == "catalog.yaml"

    def test_both_catalog_sources_rejected(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        env = _clean_env(
            GRANT_MATCHER_CATALOG_PATH="catalog.json",
            GRANT_MATCHER_CATALOG_URL="https://catalog.example.com/programs",
        )
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValueError) as exc_info:
                validate_config()

        assert "mutually exclusive" in str(exc_info.value)

    def test_invalid_value_names_variable(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        env = _clean_env(GRANT_MATCHER_REQUEST_TIMEOUT_SECONDS="soon")
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValueError) as exc_info:
                validate_config()

        assert "GRANT_MATCHER_REQUEST_TIMEOUT_SECONDS" in str(exc_info.value)

    def test_unknown_log_level_names_variable(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        env = _clean_env(GRANT_MATCHER_LOG_LEVEL="verbose")
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValueError) as exc_info:
                validate_config()

        assert "GRANT_MATCHER_LOG_LEVEL" in str(exc_info.value)
        assert "verbose" in str(exc_info.value)

    def test_log_level_is_case_insensitive(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        env = _clean_env(GRANT_MATCHER_LOG_LEVEL=" debug ")
        with patch.dict(os.environ, env, clear=True):
            config = validate_config()

        assert config.log_level == "DEBUG"
