"""Statement building for parameterized PostgreSQL queries.

``StatementBuilder`` composes a statement from optional fragments and
renders it together with its bound values; ``resolve_operator`` turns
caller supplied comparison operators into SQL symbols.
"""

from querykit.query_builder.operators import resolve_operator
from querykit.query_builder.statement import RenderedStatement, StatementBuilder

__all__ = [
    "StatementBuilder",
    "RenderedStatement",
    "resolve_operator",
]
