from typing import Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from .base import QueryKitBaseSettings
from .pagination import PaginationSettings


class _Settings(QueryKitBaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="QUERYKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__"
    )

    pagination: PaginationSettings = Field(
        default_factory=PaginationSettings,
        description="Offset and cursor pagination defaults"
    )


# Singleton instance
_settings: Optional[_Settings] = None


def get_settings(force_reload: bool = False) -> _Settings:
    """Get the singleton settings instance for the application.

    Settings are loaded from ``QUERYKIT_*`` environment variables (and a
    ``.env`` file, if present) on first access.

    Args:
        force_reload: If True, creates a new Settings instance even if
                     one already exists. Useful for testing or when
                     environment variables have changed.

    Returns:
        Settings: The singleton Settings instance

    Example:
        ```python
        settings = get_settings()
        limit = settings.pagination.default_limit

        # Nested values use a double underscore:
        #   QUERYKIT_PAGINATION__MAX_LIMIT=500
        ```
    """
    global _settings

    if _settings is None or force_reload:
        _settings = _Settings()

    return _settings


def _reload_settings() -> _Settings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.

    Returns:
        A fresh _Settings instance
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)
