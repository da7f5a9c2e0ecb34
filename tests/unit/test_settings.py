"""Unit tests for querykit settings."""

import pytest
from pydantic import ValidationError

from querykit.settings import PaginationSettings, _reload_settings, get_settings


class TestSettings:

    def test_defaults(self):
        settings = get_settings()
        assert settings.app_env == "dev"
        assert settings.log_level == "INFO"
        assert settings.log_json is True
        assert settings.pagination.default_limit == 10
        assert settings.pagination.max_limit == 100
        assert settings.pagination.default_cursor_limit == 20

    def test_singleton(self):
        assert get_settings() is get_settings()
        assert get_settings(force_reload=True) is not None

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("QUERYKIT_LOG_LEVEL", "debug")
        monkeypatch.setenv("QUERYKIT_PAGINATION__MAX_LIMIT", "500")
        monkeypatch.setenv("QUERYKIT_APP_ENV", "prod-east")
        settings = _reload_settings()
        assert settings.log_level == "DEBUG"
        assert settings.pagination.max_limit == 500
        assert settings.is_production

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("QUERYKIT_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            _reload_settings()


class TestPaginationSettings:

    def test_default_above_max_rejected(self):
        with pytest.raises(ValidationError):
            PaginationSettings(default_limit=50, max_limit=20)

    def test_cursor_default_above_max_rejected(self):
        with pytest.raises(ValidationError):
            PaginationSettings(max_limit=10, default_limit=5)
