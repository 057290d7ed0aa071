"""
Unit tests for RailtrackSettings — environment loading and validation.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from railtrack.config import RailtrackSettings, get_settings


class TestDefaults:
    def test_defaults(self) -> None:
        settings = RailtrackSettings()
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.tee_log_level == "INFO"
        assert settings.failure_log_level == "WARNING"


class TestEnvironment:
    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        GIVEN RAILTRACK_* variables in the environment
        WHEN settings are loaded
        THEN every field picks up its variable.
        """
        monkeypatch.setenv("RAILTRACK_LOG_LEVEL", "debug")
        monkeypatch.setenv("RAILTRACK_LOG_JSON", "true")
        monkeypatch.setenv("RAILTRACK_TEE_LOG_LEVEL", "warning")
        monkeypatch.setenv("RAILTRACK_FAILURE_LOG_LEVEL", "Error")

        settings = RailtrackSettings()

        assert settings.log_level == "DEBUG"
        assert settings.log_json is True
        assert settings.tee_log_level == "WARNING"
        assert settings.failure_log_level == "ERROR"

    def test_unprefixed_variables_are_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert RailtrackSettings().log_level == "INFO"


class TestValidation:
    def test_rejects_unknown_level(self) -> None:
        with pytest.raises(ValidationError, match="Log level must be one of"):
            RailtrackSettings(log_level="LOUD")

    def test_strips_whitespace(self) -> None:
        assert RailtrackSettings(failure_log_level="  critical ").failure_log_level == "CRITICAL"


class TestGetSettings:
    def test_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("RAILTRACK_LOG_LEVEL", "ERROR")
        get_settings.cache_clear()
        second = get_settings()
        assert second is not first
        assert second.log_level == "ERROR"
