"""Unit tests for application result objects."""

from __future__ import annotations

import pytest

from devconvert.application.ports import Session
from devconvert.application.results import ConversionResult, FailureKind


def test_success_and_failure_constructors() -> None:
    """Exactly one of output and error is populated."""
    ok = ConversionResult.success("sql", "CREATE TABLE users ();")
    assert ok.ok
    assert ok.error is None

    failed = ConversionResult.failure("sql", FailureKind.PARSE_ERROR, "bad")
    assert not failed.ok
    assert failed.output is None
    assert failed.message == "bad"


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"output": "x", "error": FailureKind.EMPTY_INPUT},
        {"output": "x", "message": "unexpected"},
    ],
)
def test_inconsistent_results_are_rejected(kwargs: dict[str, object]) -> None:
    """Reject results that are both or neither success and failure."""
    with pytest.raises(ValueError):
        ConversionResult("sql", **kwargs)  # type: ignore[arg-type]


def test_session_can_record_only_for_identified_users() -> None:
    """Anonymous sessions never record history."""
    assert not Session().can_record
    assert not Session(user_id="u1").can_record
    assert not Session(user_id="", is_anonymous=False).can_record
    assert Session(user_id="u1", is_anonymous=False).can_record
