"""Constants module for querykit.

This module contains all constant values and enumerations used throughout
querykit. As Layer 0 in the architecture, this module has no dependencies
on other querykit modules.

Organization:
    - sql: Comparison operators, sort orders and rendered SQL tokens
    - pagination: Fallback pagination limits
"""

# SQL/Query constants
from querykit.constants.sql import (
    COUNT_ALIAS,
    ILIKE,
    LIKE,
    ORDER_ASC,
    ORDER_DESC,
    PG_UNIQUE_VIOLATION,
    RAW_COMPARISON_OPERATORS,
    Operator,
    SortOrder,
)

# Pagination constants
from querykit.constants.pagination import (
    DEFAULT_CURSOR_LIMIT,
    DEFAULT_PAGE,
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
)

__all__ = [
    "Operator",
    "SortOrder",
    "RAW_COMPARISON_OPERATORS",
    "LIKE",
    "ILIKE",
    "ORDER_ASC",
    "ORDER_DESC",
    "COUNT_ALIAS",
    "PG_UNIQUE_VIOLATION",
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_LIMIT",
    "MAX_PAGE_LIMIT",
    "DEFAULT_CURSOR_LIMIT",
]
