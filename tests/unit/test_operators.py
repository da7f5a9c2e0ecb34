"""Unit tests for comparison operator resolution."""

import pytest

from querykit.constants import RAW_COMPARISON_OPERATORS, Operator
from querykit.query_builder import resolve_operator


class TestOperator:

    def test_sql_symbols(self):
        assert {op.value: op.sql for op in Operator} == {
            "gte": ">=",
            "gt": ">",
            "lte": "<=",
            "lt": "<",
            "eq": "=",
        }

    @pytest.mark.parametrize("value", [Operator.LT, "lt", "eq"])
    def test_is_valid(self, value):
        assert Operator.is_valid(value)

    @pytest.mark.parametrize("value", ["", "EQ", ">=", "neq", None, 1])
    def test_is_not_valid(self, value):
        assert not Operator.is_valid(value)


class TestResolveOperator:

    def test_named_operators_win(self):
        for op in Operator:
            assert resolve_operator(op) == op.sql
            assert resolve_operator(op.value) == op.sql

    @pytest.mark.parametrize("token", sorted(RAW_COMPARISON_OPERATORS))
    def test_raw_tokens_pass_through(self, token):
        assert resolve_operator(token) == token

    @pytest.mark.parametrize("value", ["", "<>", "LIKE", "==", " >", None, 0, [">"]])
    def test_unknown_resolves_to_none(self, value):
        assert resolve_operator(value) is None
