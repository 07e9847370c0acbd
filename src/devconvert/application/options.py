"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratorOptions:
    """Names emitted by the code generators.

    The defaults are the fixed names every conversion uses when no
    overrides are supplied.
    """

    root_name: str = "RootObject"
    zod_schema_name: str = "schema"
    typebox_schema_name: str = "T"
    mongoose_schema_name: str = "PostSchema"
    table_name: str = "users"
    placeholder_url: str = "https://api.example.com"


DEFAULT_OPTIONS = GeneratorOptions()
