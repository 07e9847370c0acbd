"""Shared conversion-service core utilities."""

from __future__ import annotations

from collections.abc import Mapping

from devconvert.application.ports import HistoryStore, Session
from devconvert.application.results import ConversionRequest, ConversionResult, FailureKind
from devconvert.application.use_cases import (
    build_generator_options,
    convert_and_record,
)

FAILURE_STATUS: dict[FailureKind, int] = {
    FailureKind.NOT_FOUND: 404,
    FailureKind.PARSE_ERROR: 400,
    FailureKind.EMPTY_INPUT: 400,
}


def normalize_conversion_id(value: str) -> str:
    """Strip a transport-supplied conversion id.

    Ids are matched exactly, so case is preserved.
    """
    normalized = value.strip()
    if not normalized:
        raise ValueError("conversion_id cannot be blank")
    return normalized


def session_for(user_id: str | None) -> Session:
    """Build a session from an optional caller id; no id means anonymous."""
    cleaned = (user_id or "").strip()
    if not cleaned:
        return Session()
    return Session(user_id=cleaned, is_anonymous=False)


def status_for(result: ConversionResult) -> int:
    """Map a conversion result to an HTTP status code."""
    if result.error is None:
        return 200
    return FAILURE_STATUS[result.error]


def execute_conversion(
    conversion_id: str,
    input_text: str,
    *,
    user_id: str | None,
    store: HistoryStore,
    options: Mapping[str, object] | None = None,
) -> ConversionResult:
    """Run a transport request through the engine, recording history.

    Raises
    ------
    ValueError
        If the conversion id is blank.
    ConversionError
        If option overrides are invalid.
    """
    request = ConversionRequest(
        conversion_id=normalize_conversion_id(conversion_id),
        input_text=input_text,
    )
    return convert_and_record(
        request,
        session=session_for(user_id),
        store=store,
        options=build_generator_options(options),
    )
