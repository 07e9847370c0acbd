"""Public conversion API (delegates to application use-cases)."""

from __future__ import annotations

from typing import Mapping
from typing import Optional

from devconvert.application.results import ConversionRequest, ConversionResult, NotFound
from devconvert.application.use_cases import build_generator_options
from devconvert.application.use_cases import default_registry
from devconvert.application.use_cases import run_conversion
from devconvert.registry.base import ConversionSpec
from devconvert.registry.registry import CategoryGroup


def transform(
    conversion_id: str,
    input_text: str,
    options: Optional[Mapping[str, object]] = None,
) -> ConversionResult:
    """Run a conversion by id and return a tagged result."""
    return run_conversion(
        ConversionRequest(conversion_id=conversion_id, input_text=input_text),
        options=build_generator_options(options),
    )


def list_conversions(query: Optional[str] = None) -> list[CategoryGroup]:
    """List conversions grouped by category, optionally filtered."""
    return default_registry().search(query)


def lookup(conversion_id: str) -> ConversionSpec | NotFound:
    """Look up a conversion descriptor without raising."""
    return default_registry().lookup(conversion_id)
