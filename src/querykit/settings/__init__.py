"""Settings module providing configuration management for querykit.

Built on Pydantic Settings. Values come from environment variables
prefixed with ``QUERYKIT_`` (nested values use ``__``, e.g.
``QUERYKIT_PAGINATION__DEFAULT_LIMIT=25``), then a ``.env`` file, then the
defaults in code.

Quick Start:
    >>> from querykit.settings import get_settings
    >>> settings = get_settings()
    >>> settings.pagination.max_limit
    100
"""

from .main import _Settings, get_settings, _reload_settings
from .base import QueryKitBaseSettings
from .pagination import PaginationSettings

__all__ = [
    "get_settings",
    "QueryKitBaseSettings",
    "PaginationSettings",
]
