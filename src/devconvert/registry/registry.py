"""Converter registry: conversion ids to descriptors and transformations."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from devconvert.application.results import NotFound
from devconvert.errors import RegistryError, UnknownConversionError
from devconvert.registry.base import ConversionSpec, Transformer
from devconvert.registry.builtins import BUILTIN_CONVERSIONS
from devconvert.types import Category

logger = logging.getLogger(__name__)

type CategoryGroup = tuple[Category, list[ConversionSpec]]


class ConverterRegistry:
    """Registry of conversions, kept in declaration order."""

    def __init__(self) -> None:
        self._specs: dict[str, ConversionSpec] = {}
        self._transformers: dict[str, Transformer] = {}

    def register(self, spec: ConversionSpec, transform: Transformer) -> None:
        """Register a conversion under its unique id.

        Parameters
        ----------
        spec : ConversionSpec
            Conversion descriptor.
        transform : Transformer
            Function implementing the conversion.

        Raises
        ------
        RegistryError
            If the id is blank or already registered, or ``transform`` is
            not callable.
        """
        conversion_id = spec.id.strip()
        if not conversion_id:
            raise RegistryError("Conversion must define a non-empty 'id'.")
        if conversion_id in self._specs:
            raise RegistryError(f"Conversion '{conversion_id}' is already registered.")
        if not callable(transform):
            raise RegistryError(f"Transformation for '{conversion_id}' is not callable.")
        self._specs[conversion_id] = spec
        self._transformers[conversion_id] = transform
        logger.debug("registered conversion %s (%s)", conversion_id, spec.category.name)

    def ids(self) -> list[str]:
        """Return registered ids in declaration order."""
        return list(self._specs)

    def __contains__(self, conversion_id: object) -> bool:
        return conversion_id in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def lookup(self, conversion_id: str) -> ConversionSpec | NotFound:
        """Look up a conversion without raising.

        Returns
        -------
        ConversionSpec | NotFound
            The descriptor, or :class:`NotFound` for unknown ids.
        """
        spec = self._specs.get(conversion_id)
        if spec is None:
            return NotFound(conversion_id)
        return spec

    def get(self, conversion_id: str) -> ConversionSpec:
        """Get a conversion descriptor by id.

        Raises
        ------
        UnknownConversionError
            If the id is not registered.
        """
        try:
            return self._specs[conversion_id]
        except KeyError as exc:
            raise UnknownConversionError(conversion_id, self.ids()) from exc

    def transformer(self, conversion_id: str) -> Transformer:
        """Return the transformation registered for ``conversion_id``.

        Raises
        ------
        UnknownConversionError
            If the id is not registered.
        """
        try:
            return self._transformers[conversion_id]
        except KeyError as exc:
            raise UnknownConversionError(conversion_id, self.ids()) from exc

    def default(self) -> ConversionSpec:
        """Return the first declared conversion.

        Raises
        ------
        RegistryError
            If the registry is empty.
        """
        for spec in self._specs.values():
            return spec
        raise RegistryError("Registry has no conversions.")

    def resolve_or_default(self, conversion_id: str) -> ConversionSpec:
        """Return the conversion for ``conversion_id``, else the default one.

        Stale history entries may reference retired ids; callers fall back
        to the default conversion rather than failing.
        """
        found = self.lookup(conversion_id)
        if isinstance(found, NotFound):
            logger.debug("unknown conversion %s, falling back to default", conversion_id)
            return self.default()
        return found

    def list_by_category(self) -> list[CategoryGroup]:
        """Group conversions by category, preserving declaration order."""
        groups: dict[Category, list[ConversionSpec]] = {}
        for spec in self._specs.values():
            groups.setdefault(spec.category, []).append(spec)
        return list(groups.items())

    def search(self, query: str | None) -> list[CategoryGroup]:
        """Filter :meth:`list_by_category` by label or category name.

        Matching is a case-insensitive substring test. Categories with no
        matching entries are dropped; a blank query keeps everything.
        """
        if not query or not query.strip():
            return self.list_by_category()
        filtered: list[CategoryGroup] = []
        for category, specs in self.list_by_category():
            matching = [spec for spec in specs if spec.matches(query)]
            if matching:
                filtered.append((category, matching))
        return filtered


def create_default_registry(
    extra: Iterable[tuple[ConversionSpec, Transformer]] | None = None,
) -> ConverterRegistry:
    """Create the registry of built-in conversions.

    Parameters
    ----------
    extra : Iterable[tuple[ConversionSpec, Transformer]] | None, optional
        Additional conversions appended after the built-ins.

    Returns
    -------
    ConverterRegistry
        Registry with built-in and extra conversions.
    """
    registry = ConverterRegistry()
    for spec, transform in BUILTIN_CONVERSIONS:
        registry.register(spec, transform)
    for spec, transform in extra or []:
        registry.register(spec, transform)
    return registry
