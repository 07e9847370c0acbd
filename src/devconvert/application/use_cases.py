"""Application use-cases orchestrating conversion workflows."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import UTC, datetime

from pydantic import ValidationError

from devconvert.application.options import DEFAULT_OPTIONS, GeneratorOptions
from devconvert.application.ports import HistoryEntry, HistoryStore, Session
from devconvert.application.results import (
    ConversionRequest,
    ConversionResult,
    FailureKind,
    NotFound,
)
from devconvert.errors import ConversionError, EmptyInputError, ParseError
from devconvert.registry.registry import ConverterRegistry, create_default_registry
from devconvert.schemas import GeneratorOptionsConfig

logger = logging.getLogger(__name__)

_default_registry: ConverterRegistry | None = None


def default_registry() -> ConverterRegistry:
    """Return the process-wide registry, building it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry


def build_generator_options(
    overrides: Mapping[str, object] | None = None,
) -> GeneratorOptions:
    """Validate name overrides and merge them over the defaults.

    Raises
    ------
    ConversionError
        If an override is unknown or not a valid identifier.
    """
    if not overrides:
        return DEFAULT_OPTIONS
    try:
        config = GeneratorOptionsConfig.model_validate(dict(overrides))
    except ValidationError as exc:
        raise ConversionError(f"Invalid generator options: {exc}") from exc
    return replace(DEFAULT_OPTIONS, **config.model_dump(exclude_none=True))


def run_conversion(
    request: ConversionRequest,
    *,
    options: GeneratorOptions = DEFAULT_OPTIONS,
    registry: ConverterRegistry | None = None,
) -> ConversionResult:
    """Use-case: run one conversion and classify its outcome.

    Blank input is reported before the id is looked up, so it yields
    ``EMPTY_INPUT`` for any id. Unknown ids and parse failures come back
    as tagged failures too; nothing is raised for them.
    """
    registry = registry or default_registry()
    conversion_id = request.conversion_id

    try:
        text = _clean_input(request.input_text)
    except EmptyInputError as exc:
        logger.debug("conversion %s skipped: empty input", conversion_id)
        return ConversionResult.failure(conversion_id, FailureKind.EMPTY_INPUT, str(exc))

    found = registry.lookup(conversion_id)
    if isinstance(found, NotFound):
        logger.debug("conversion %s not found", conversion_id)
        return ConversionResult.failure(
            conversion_id,
            FailureKind.NOT_FOUND,
            f"Unknown conversion '{conversion_id}'.",
        )

    try:
        output = registry.transformer(conversion_id)(text, options)
    except ParseError as exc:
        logger.debug("conversion %s failed to parse input: %s", conversion_id, exc)
        return ConversionResult.failure(conversion_id, FailureKind.PARSE_ERROR, str(exc))

    logger.debug("conversion %s produced %d characters", conversion_id, len(output))
    return ConversionResult.success(conversion_id, output)


def convert_and_record(
    request: ConversionRequest,
    *,
    session: Session,
    store: HistoryStore,
    options: GeneratorOptions = DEFAULT_OPTIONS,
    registry: ConverterRegistry | None = None,
    clock: Callable[[], datetime] | None = None,
) -> ConversionResult:
    """Use-case: convert, then record history for identified sessions.

    History is written only after a successful conversion and only when the
    session belongs to a non-anonymous user.
    """
    result = run_conversion(request, options=options, registry=registry)
    if not result.ok or not session.can_record:
        return result

    now = clock or (lambda: datetime.now(UTC))
    entry = HistoryEntry(
        id=str(uuid.uuid4()),
        created_at=now(),
        input_text=request.input_text.strip(),
        output_text=result.output or "",
        format_type=request.conversion_id,
        user_id=str(session.user_id),
    )
    store.add(entry)
    logger.debug("recorded history entry %s for user %s", entry.id, entry.user_id)
    return result


def _clean_input(text: str) -> str:
    cleaned = text.strip()
    if not cleaned:
        raise EmptyInputError("Nothing to convert: input is empty.")
    return cleaned
