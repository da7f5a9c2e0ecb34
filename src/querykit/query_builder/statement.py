"""Dynamic statement builder with positional ``$N`` parameters.

The builder accumulates optional SQL fragments (SET assignments, WHERE
conditions, GROUP BY columns, ORDER BY, LIMIT and OFFSET) together with
the values bound to their placeholders, then renders either the full
statement or a row-count statement over the same filters.

Bound values are never interpolated into SQL text. The rendered
``(sql, args)`` pair goes straight to a driver's parameterized execute
call (``asyncpg.Connection.fetch(sql, *args)`` and friends).

Example:
    >>> builder = StatementBuilder("SELECT id, name FROM users")
    >>> builder.compare_filter("age", "gte", 18)
    >>> builder.substring_filter("name", params.get("q"), case_sensitive=False)
    >>> builder.sort("created_at", "desc")
    >>> builder.paginate(20, 40)
    >>> sql, args = builder.build()
    >>> count_sql, count_args = builder.count()
"""

import re
from enum import Enum
from typing import Any, Iterable, List, NamedTuple, Optional

from querykit.common.exceptions import precondition_error
from querykit.constants.sql import COUNT_ALIAS, ILIKE, LIKE, ORDER_ASC, ORDER_DESC
from querykit.logging import get_logger
from querykit.query_builder.operators import resolve_operator

logger = get_logger(__name__)

_FROM_KEYWORD = re.compile(r"\bFROM\b", re.IGNORECASE)


class RenderedStatement(NamedTuple):
    """SQL text and the values bound to its ``$N`` placeholders, in order."""

    sql: str
    args: List[Any]


class StatementBuilder:
    """Accumulates SQL fragments and their bound arguments.

    One builder per statement; it is not safe to share between threads
    or tasks. Every fragment-adding method silently ignores empty or
    missing input so optional request filters can be applied without
    guards at the call site. Each of them returns the builder.

    Invariant: ``len(args) == next_placeholder() - 1``.
    """

    def __init__(self, base: str):
        """Initialize the builder.

        Args:
            base: Starting SQL text, e.g. ``"SELECT * FROM users"`` or
                ``"UPDATE users"``. Must contain a FROM clause if
                :meth:`count` is going to be used.
        """
        self._base = base
        self._count_source: Optional[str] = None
        self._assignments: List[str] = []
        self._conditions: List[str] = []
        self._group_columns: List[str] = []
        self._order_clause = ""
        self._limit_clause = ""
        self._offset_clause = ""
        self._args: List[Any] = []
        self._next_placeholder = 1

    @classmethod
    def from_parts(cls, select_sql: str, from_sql: str) -> "StatementBuilder":
        """Create a builder from a projection head and a ``FROM ...`` tail.

        :meth:`count` then wraps ``from_sql`` as given instead of
        searching the base text for the FROM keyword.

        Args:
            select_sql: Projection, e.g. ``"SELECT id, name"``
            from_sql: Source tail, e.g. ``"FROM users u"``

        Raises:
            QueryKitError: If ``from_sql`` is empty (PRECONDITION_FAILED)
        """
        if not from_sql or not from_sql.strip():
            raise precondition_error(
                "from_sql must contain the FROM clause of the statement",
                statement=select_sql,
            )
        builder = cls(f"{select_sql.strip()} {from_sql.strip()}")
        builder._count_source = from_sql.strip()
        return builder

    @property
    def base(self) -> str:
        return self._base

    @property
    def args(self) -> List[Any]:
        """Copy of the values bound so far."""
        return list(self._args)

    def next_placeholder(self) -> int:
        """Number the next bound value will get (``$N``).

        Use it to number placeholders inside a condition rendered for
        :meth:`append_raw_where`.
        """
        return self._next_placeholder

    def _bind(self, *values: Any) -> List[str]:
        """Bind ``values`` and return their placeholders."""
        placeholders = []
        for value in values:
            placeholders.append(f"${self._next_placeholder}")
            self._args.append(value)
            self._next_placeholder += 1
        return placeholders

    # SET

    def assign(self, column: str, value: Any) -> "StatementBuilder":
        """Add ``column = $N`` to the SET clause of an UPDATE statement."""
        if not column or value is None:
            return self
        (placeholder,) = self._bind(value)
        self._assignments.append(f"{column} = {placeholder}")
        return self

    # WHERE

    def compare_filter(self, column: str, operator: Any, value: Any) -> "StatementBuilder":
        """Add ``column <op> $N``.

        ``operator`` is an :class:`Operator` member, its value (``"gte"``)
        or a raw token (``">="``). Anything else drops the filter.
        """
        if not column or value is None:
            return self
        symbol = resolve_operator(operator)
        if symbol is None:
            return self
        (placeholder,) = self._bind(value)
        self._conditions.append(f"{column} {symbol} {placeholder}")
        return self

    def between_filter(self, column: str, start: Any, end: Any) -> "StatementBuilder":
        """Add ``column BETWEEN $N AND $N+1``, binding ``start`` then ``end``."""
        if not column or start is None or end is None:
            return self
        low, high = self._bind(start, end)
        self._conditions.append(f"{column} BETWEEN {low} AND {high}")
        return self

    def array_filter(self, column: str, values: Optional[Iterable[Any]]) -> "StatementBuilder":
        """Add ``column = ANY($N)``, binding all ``values`` as one array."""
        if not column or values is None or isinstance(values, (str, bytes)):
            return self
        values = list(values)
        if not values:
            return self
        (placeholder,) = self._bind(values)
        self._conditions.append(f"{column} = ANY({placeholder})")
        return self

    def _like_filter(self, column: str, pattern: str, case_sensitive: bool) -> "StatementBuilder":
        keyword = LIKE if case_sensitive else ILIKE
        (placeholder,) = self._bind(pattern)
        self._conditions.append(f"{column} {keyword} {placeholder}")
        return self

    def prefix_filter(self, column: str, value: Optional[str], case_sensitive: bool = False) -> "StatementBuilder":
        """Match values starting with ``value`` (``value%``)."""
        if not column or not value:
            return self
        return self._like_filter(column, f"{value}%", case_sensitive)

    def suffix_filter(self, column: str, value: Optional[str], case_sensitive: bool = False) -> "StatementBuilder":
        """Match values ending with ``value`` (``%value``)."""
        if not column or not value:
            return self
        return self._like_filter(column, f"%{value}", case_sensitive)

    def substring_filter(self, column: str, value: Optional[str], case_sensitive: bool = False) -> "StatementBuilder":
        """Match values containing ``value`` (``%value%``)."""
        if not column or not value:
            return self
        return self._like_filter(column, f"%{value}%", case_sensitive)

    def append_raw_where(self, condition: str, *args: Any) -> "StatementBuilder":
        """Append a caller-rendered WHERE condition and bind ``args``.

        Placeholders inside ``condition`` must start at
        :meth:`next_placeholder` as read right before this call.

        Example:
            >>> n = builder.next_placeholder()
            >>> builder.append_raw_where(f"(owner_id = ${n} OR shared = ${n + 1})", uid, True)
        """
        if not condition:
            return self
        self._bind(*args)
        self._conditions.append(condition)
        return self

    # GROUP BY / ORDER BY / LIMIT / OFFSET

    def group_by(self, *columns: str) -> "StatementBuilder":
        self._group_columns.extend(columns)
        return self

    def sort(self, field: str, order: Optional[str] = None) -> "StatementBuilder":
        """Set ``ORDER BY field ASC|DESC``, replacing any earlier ordering.

        ``order`` other than ``"desc"`` (any case, or ``SortOrder.DESC``)
        sorts ascending.
        """
        if not field:
            return self
        if isinstance(order, Enum):
            order = order.value
        direction = ORDER_DESC if order and str(order).upper() == ORDER_DESC else ORDER_ASC
        self._order_clause = f"ORDER BY {field} {direction}"
        return self

    def paginate(self, limit: Optional[int] = None, offset: Optional[int] = None) -> "StatementBuilder":
        """Set LIMIT and/or OFFSET. Non-positive values leave that clause as is."""
        if limit is not None and limit > 0:
            self._limit_clause = f"LIMIT {int(limit)}"
        if offset is not None and offset > 0:
            self._offset_clause = f"OFFSET {int(offset)}"
        return self

    # Rendering

    def _filter_clauses(self) -> List[str]:
        clauses = []
        if self._conditions:
            clauses.append(" WHERE " + " AND ".join(self._conditions))
        if self._group_columns:
            clauses.append(" GROUP BY " + ", ".join(self._group_columns))
        return clauses

    def build(self) -> RenderedStatement:
        """Render the full statement.

        Clauses always come out as SET, WHERE, GROUP BY, ORDER BY, LIMIT,
        OFFSET whatever order the fragments were added in.

        Returns:
            RenderedStatement with the SQL text and bound values
        """
        parts = [self._base]
        if self._assignments:
            parts.append(" SET " + ", ".join(self._assignments))
        parts.extend(self._filter_clauses())
        for clause in (self._order_clause, self._limit_clause, self._offset_clause):
            if clause:
                parts.append(" " + clause)

        sql = "".join(parts)
        logger.debug("Built statement", extra={"sql": sql, "arg_count": len(self._args)})
        return RenderedStatement(sql, list(self._args))

    def count(self) -> RenderedStatement:
        """Render a statement counting the rows :meth:`build` would match.

        Keeps the FROM tail, WHERE and GROUP BY; drops the projection,
        SET, ORDER BY, LIMIT and OFFSET.

        Returns:
            RenderedStatement with the count SQL and bound values

        Raises:
            QueryKitError: If the base statement has no FROM keyword
                (PRECONDITION_FAILED). This is a programming error.
        """
        source = self._count_source
        if source is None:
            # Textual search: a FROM inside a string literal or a
            # subselect in the projection is picked up as well.
            match = _FROM_KEYWORD.search(self._base)
            if match is None:
                raise precondition_error(
                    "base statement must include a FROM clause to derive a count query",
                    statement=self._base,
                )
            source = self._base[match.start():]

        if self._assignments:
            logger.warning(
                "Count statement built from a builder with SET assignments; "
                "their placeholders stay bound but are not referenced",
                extra={"assignment_count": len(self._assignments)},
            )

        parts = ["SELECT COUNT(*) FROM (SELECT 1 ", source]
        parts.extend(self._filter_clauses())
        parts.append(f") AS {COUNT_ALIAS}")

        sql = "".join(parts)
        logger.debug("Built count statement", extra={"sql": sql, "arg_count": len(self._args)})
        return RenderedStatement(sql, list(self._args))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(base={self._base!r}, "
            f"conditions={len(self._conditions)}, args={len(self._args)})"
        )
