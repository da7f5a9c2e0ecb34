"""SQL and query-related constants.

This module contains the comparison operator and sort order enums together
with the fixed SQL tokens the statement builder renders.

These constants are in Layer 0 as they represent core SQL concepts
that can be used by any layer without creating circular dependencies.
"""

from enum import Enum
from typing import Any, Dict, FrozenSet


class Operator(str, Enum):
    """Comparison operator enumeration.

    Named operators as they arrive from API query parameters
    (e.g. ``?age[gte]=18``). Each member maps to exactly one SQL
    comparison symbol through :attr:`sql`.
    """

    GTE = "gte"
    GT = "gt"
    LTE = "lte"
    LT = "lt"
    EQ = "eq"

    @property
    def sql(self) -> str:
        """SQL comparison symbol for this operator."""
        return _OPERATOR_SQL[self]

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        """Check whether ``value`` is a member or a member's string value."""
        if isinstance(value, cls):
            return True
        if not isinstance(value, str):
            return False
        return value in cls._value2member_map_


_OPERATOR_SQL: Dict[Operator, str] = {
    Operator.GTE: ">=",
    Operator.GT: ">",
    Operator.LTE: "<=",
    Operator.LT: "<",
    Operator.EQ: "=",
}

# Raw comparison tokens accepted verbatim in place of a named operator.
RAW_COMPARISON_OPERATORS: FrozenSet[str] = frozenset({"=", "!=", "<", "<=", ">", ">="})


class SortOrder(str, Enum):
    """Sort direction as accepted from API callers (lowercase)."""

    ASC = "asc"
    DESC = "desc"


# Rendered SQL keywords
LIKE = "LIKE"
ILIKE = "ILIKE"
ORDER_ASC = "ASC"
ORDER_DESC = "DESC"

COUNT_ALIAS = "count_alias"

# PostgreSQL SQLSTATE for unique constraint violations
PG_UNIQUE_VIOLATION = "23505"
