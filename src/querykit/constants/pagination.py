"""Pagination constants.

Fallback values used when no settings are available. The effective
values are configured through :class:`querykit.settings.PaginationSettings`.
"""

DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100
DEFAULT_CURSOR_LIMIT = 20
