"""Conversion descriptor and transformation protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from devconvert.application.options import GeneratorOptions
from devconvert.types import Category


@dataclass(frozen=True)
class ConversionSpec:
    """Immutable description of one conversion.

    Parameters
    ----------
    id : str
        Unique conversion identifier.
    category : Category
        Structural category used to group the menu.
    label : str
        Display label, e.g. ``"to TypeScript"``.
    source_language : str
        Editor syntax tag for the input.
    target_language : str
        Editor syntax tag for the output.
    example : str
        Sample input showing what the conversion expects.
    """

    id: str
    category: Category
    label: str
    source_language: str
    target_language: str
    example: str = ""

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on label or category name."""
        needle = query.strip().lower()
        return (
            needle in self.label.lower()
            or needle in self.category.display_name.lower()
        )


@runtime_checkable
class Transformer(Protocol):
    """Callable implementing one conversion."""

    def __call__(self, text: str, options: GeneratorOptions) -> str:
        """Convert ``text``.

        Parameters
        ----------
        text : str
            Stripped, non-empty input text.
        options : GeneratorOptions
            Generator names.

        Returns
        -------
        str
            Converted text.

        Raises
        ------
        ParseError
            If ``text`` does not fit the expected source grammar.
        """
