"""Shared test fixtures for querykit."""

import pytest

from querykit.logging import clear_request_context, set_logging_context
from querykit.settings import main as settings_main


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch):
    """Give every test a fresh settings singleton built from a clean env."""
    for name in (
        "QUERYKIT_APP_ENV",
        "QUERYKIT_LOG_LEVEL",
        "QUERYKIT_LOG_JSON",
        "QUERYKIT_PAGINATION__DEFAULT_LIMIT",
        "QUERYKIT_PAGINATION__MAX_LIMIT",
        "QUERYKIT_PAGINATION__DEFAULT_CURSOR_LIMIT",
    ):
        monkeypatch.delenv(name, raising=False)
    settings_main._settings = None
    yield
    settings_main._settings = None


@pytest.fixture(autouse=True)
def _reset_logging_context():
    yield
    set_logging_context(environment=None, extra=None)
    clear_request_context()


@pytest.fixture
def users_builder():
    from querykit.query_builder import StatementBuilder

    return StatementBuilder("SELECT * FROM users")
