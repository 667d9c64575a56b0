# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================

import logging

import pytest
from pydantic import ValidationError

from bridge import DEFAULT_CONFIG, info
from bridge.config import Settings, get_settings, setup_logging


class TestSettings:

    def test_defaults_match_default_config(self, clean_settings):
        settings = get_settings()
        assert settings.bridge_config == DEFAULT_CONFIG
        assert info(settings.bridge_config) == "bridge v0.1.0"

    def test_reads_environment(self, clean_settings):
        clean_settings.setenv("BRIDGE_NAME", "custom")
        clean_settings.setenv("BRIDGE_VERSION", "2.0.0")

        assert info(get_settings().bridge_config) == "custom v2.0.0"

    def test_settings_are_cached(self, clean_settings):
        assert get_settings() is get_settings()

    def test_log_level(self, clean_settings):
        clean_settings.setenv("LOG_LEVEL", "WARNING")
        assert get_settings().log_level == logging.WARNING

    def test_debug_overrides_log_level(self, clean_settings):
        clean_settings.setenv("LOG_LEVEL", "ERROR")
        clean_settings.setenv("DEBUG", "true")
        assert get_settings().log_level == logging.DEBUG

    def test_invalid_log_level_rejected(self, clean_settings):
        clean_settings.setenv("LOG_LEVEL", "VERBOSE")
        with pytest.raises(ValidationError):
            Settings()


class TestSetupLogging:

    def test_uses_settings_level(self, clean_settings):
        calls = []
        clean_settings.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        clean_settings.setenv("DEBUG", "true")

        setup_logging()

        assert calls[0]["level"] == logging.DEBUG
