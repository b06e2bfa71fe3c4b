"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from splitjoin.core.config import LOG_LEVELS, SplitJoinSettings
from splitjoin.core.line_processor import RangeErrorPolicy


class TestSplitJoinSettings:
    def test_defaults(self):
        settings = SplitJoinSettings()
        assert settings.log_level == "WARNING"
        assert settings.strict_range is True
        assert settings.on_range_error is RangeErrorPolicy.ABORT

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SPLITJOIN_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SPLITJOIN_STRICT_RANGE", "false")
        monkeypatch.setenv("SPLITJOIN_ON_RANGE_ERROR", "blank")

        settings = SplitJoinSettings()

        assert settings.log_level == "DEBUG"
        assert settings.strict_range is False
        assert settings.on_range_error is RangeErrorPolicy.BLANK

    def test_log_level_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("SPLITJOIN_LOG_LEVEL", "info")
        assert SplitJoinSettings().log_level == "INFO"

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("SPLITJOIN_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            SplitJoinSettings()

    def test_unknown_policy_rejected(self, monkeypatch):
        monkeypatch.setenv("SPLITJOIN_ON_RANGE_ERROR", "retry")
        with pytest.raises(ValidationError):
            SplitJoinSettings()

    def test_env_name(self):
        assert SplitJoinSettings.env_name("on_range_error") == "SPLITJOIN_ON_RANGE_ERROR"

    def test_log_levels_are_loguru_names(self):
        assert LOG_LEVELS[0] == "TRACE"
        assert "WARNING" in LOG_LEVELS
        assert LOG_LEVELS[-1] == "CRITICAL"
