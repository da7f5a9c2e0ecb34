"""Unit tests for error codes, helper factories and driver error detection."""

import pytest

from querykit.common.exceptions import (
    ErrorCode,
    QueryKitError,
    conflict_error,
    is_unique_violation,
    precondition_error,
    resource_not_found_error,
    validation_error,
)


class FakeAsyncpgError(Exception):
    def __init__(self, sqlstate):
        super().__init__("driver error")
        self.sqlstate = sqlstate


class FakePsycopg2Error(Exception):
    def __init__(self, pgcode):
        super().__init__("driver error")
        self.pgcode = pgcode


class TestQueryKitError:

    def test_str_includes_code(self):
        err = QueryKitError("boom", error_code=ErrorCode.INVALID_SORT)
        assert str(err) == "[VALIDATION_002] boom"

    def test_str_includes_cause(self):
        err = QueryKitError("boom", cause=ValueError("bad"))
        assert str(err) == "[VALIDATION_001] boom (caused by: ValueError: bad)"

    def test_to_dict(self):
        err = validation_error("bad limit", field="limit", value=500)
        assert err.to_dict() == {
            "type": "QueryKitError",
            "message": "bad limit",
            "error_code": "VALIDATION_001",
            "error_name": "VALIDATION_ERROR",
            "details": {"field": "limit", "value": "500"},
        }

    def test_error_code_names(self):
        assert {code.name for code in ErrorCode} == {
            "VALIDATION_ERROR",
            "INVALID_SORT",
            "INVALID_CURSOR",
            "PRECONDITION_FAILED",
            "RESOURCE_NOT_FOUND",
            "RESOURCE_CONFLICT",
        }


class TestHelpers:

    def test_resource_not_found(self):
        err = resource_not_found_error(resource_type="user", resource_id=7)
        assert err.error_code == ErrorCode.RESOURCE_NOT_FOUND
        assert err.message == "resource not found"
        assert err.details == {"resource_type": "user", "resource_id": "7"}

    def test_conflict(self):
        err = conflict_error(resource_type="user", constraint="users_email_key")
        assert err.error_code == ErrorCode.RESOURCE_CONFLICT
        assert err.details["constraint"] == "users_email_key"

    def test_precondition_truncates_statement(self):
        err = precondition_error("no FROM", statement="x" * 600)
        assert err.error_code == ErrorCode.PRECONDITION_FAILED
        assert len(err.details["statement"]) == 503

    def test_cause_is_kept(self):
        cause = FakeAsyncpgError("23505")
        err = conflict_error(cause=cause)
        assert err.cause is cause


class TestIsUniqueViolation:

    def test_sqlstate(self):
        assert is_unique_violation(FakeAsyncpgError("23505"))

    def test_pgcode(self):
        assert is_unique_violation(FakePsycopg2Error("23505"))

    @pytest.mark.parametrize("code", ["23503", "40001", None])
    def test_other_codes(self, code):
        assert not is_unique_violation(FakeAsyncpgError(code))

    def test_plain_exception(self):
        assert not is_unique_violation(RuntimeError("nope"))

    def test_none(self):
        assert not is_unique_violation(None)

    def test_wrapped(self):
        try:
            try:
                raise FakeAsyncpgError("23505")
            except FakeAsyncpgError as exc:
                raise RuntimeError("insert failed") from exc
        except RuntimeError as wrapped:
            assert is_unique_violation(wrapped)
