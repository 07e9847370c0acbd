"""Top-level API for developer snippet conversion."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from devconvert.application.results import ConversionResult, FailureKind, NotFound
from devconvert.types import Category

if TYPE_CHECKING:
    from devconvert.registry.base import ConversionSpec
    from devconvert.registry.registry import CategoryGroup

__version__ = "0.1.0"


def transform(
    conversion_id: str,
    input_text: str,
    options: Mapping[str, object] | None = None,
) -> ConversionResult:
    """Convert ``input_text`` with the conversion registered as ``conversion_id``.

    Parameters
    ----------
    conversion_id : str
        Conversion identifier, e.g. ``"typescript"`` or ``"css_obj"``.
    input_text : str
        Raw input; surrounding whitespace is ignored.
    options : Mapping[str, object] | None, optional
        Overrides for generator names such as ``table_name``.

    Returns
    -------
    ConversionResult
        Success with the output text, or a failure tagged ``NOT_FOUND``,
        ``EMPTY_INPUT`` or ``PARSE_ERROR``.

    Raises
    ------
    ConversionError
        If ``options`` holds invalid overrides.
    """
    from .api import transform as _impl

    return _impl(conversion_id, input_text, options)


def list_conversions(query: str | None = None) -> list[CategoryGroup]:
    """List conversions grouped by category.

    Parameters
    ----------
    query : str | None, optional
        Case-insensitive filter on labels and category names.
    """
    from .api import list_conversions as _impl

    return _impl(query)


def lookup(conversion_id: str) -> ConversionSpec | NotFound:
    """Look up a conversion descriptor; unknown ids give :class:`NotFound`."""
    from .api import lookup as _impl

    return _impl(conversion_id)


__all__ = [
    "Category",
    "ConversionResult",
    "FailureKind",
    "NotFound",
    "list_conversions",
    "lookup",
    "transform",
]
