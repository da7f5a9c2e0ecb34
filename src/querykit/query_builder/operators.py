"""Comparison operator resolution for WHERE fragments.

Maps what a caller passes as an operator to the SQL symbol rendered into
the statement. Named operators (``Operator`` members, or their string
values such as ``"gte"`` taken straight from ``?age[gte]=18``) win; raw
comparison tokens (``">="``) are accepted verbatim as a fallback.
"""

from typing import Any, Optional

from querykit.constants.sql import RAW_COMPARISON_OPERATORS, Operator


def resolve_operator(operator: Any) -> Optional[str]:
    """Resolve ``operator`` to a SQL comparison symbol.

    Args:
        operator: ``Operator`` member, its string value, or a raw token
            from ``RAW_COMPARISON_OPERATORS``

    Returns:
        The SQL symbol, or None if ``operator`` is not recognized
    """
    if isinstance(operator, Operator):
        return operator.sql
    if not isinstance(operator, str) or not operator:
        return None
    if Operator.is_valid(operator):
        return Operator(operator).sql
    if operator in RAW_COMPARISON_OPERATORS:
        return operator
    return None
