"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from devconvert.application.options import DEFAULT_OPTIONS, GeneratorOptions
from devconvert.application.ports import HistoryEntry, HistoryStore, Session
from devconvert.application.results import (
    ConversionRequest,
    ConversionResult,
    FailureKind,
    NotFound,
)

if TYPE_CHECKING:
    from devconvert.registry.registry import ConverterRegistry


def build_generator_options(
    overrides: Mapping[str, object] | None = None,
) -> GeneratorOptions:
    """Build typed generator options via lazy use-case import."""
    from devconvert.application.use_cases import build_generator_options as _impl

    return _impl(overrides)


def run_conversion(
    request: ConversionRequest,
    *,
    options: GeneratorOptions = DEFAULT_OPTIONS,
    registry: ConverterRegistry | None = None,
) -> ConversionResult:
    """Run one conversion via lazy use-case import."""
    from devconvert.application.use_cases import run_conversion as _impl

    return _impl(request, options=options, registry=registry)


def convert_and_record(
    request: ConversionRequest,
    *,
    session: Session,
    store: HistoryStore,
    options: GeneratorOptions = DEFAULT_OPTIONS,
    registry: ConverterRegistry | None = None,
) -> ConversionResult:
    """Convert and record history via lazy use-case import."""
    from devconvert.application.use_cases import convert_and_record as _impl

    return _impl(
        request,
        session=session,
        store=store,
        options=options,
        registry=registry,
    )


__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "FailureKind",
    "GeneratorOptions",
    "HistoryEntry",
    "HistoryStore",
    "NotFound",
    "Session",
    "build_generator_options",
    "convert_and_record",
    "run_conversion",
]
