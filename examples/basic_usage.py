#!/usr/bin/env python3
"""Examples for running conversions through the package API."""

from __future__ import annotations

from devconvert import FailureKind, list_conversions, lookup, transform
from devconvert.registry import ConversionSpec


def _banner(title: str) -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def example_menu() -> None:
    """Print the conversion menu grouped by category."""
    _banner("Example 1: Conversion menu")
    for category, specs in list_conversions():
        print(category.display_name)
        for spec in specs:
            print(f"  {spec.id:<14} {spec.label}")


def example_builtin_samples() -> None:
    """Convert each shipped sample input."""
    _banner("Example 2: Built-in samples")
    for conversion_id in ("typescript", "sql", "css_obj", "curl_fetch"):
        spec = lookup(conversion_id)
        if not isinstance(spec, ConversionSpec):
            raise SystemExit(f"FAIL: {conversion_id} is not registered.")
        result = transform(conversion_id, spec.example)
        if not result.ok:
            raise SystemExit(f"FAIL: {conversion_id}: {result.message}")
        print(f"--- {conversion_id} ---\n{result.output}")


def example_options_and_failures() -> None:
    """Override generator names and inspect tagged failures."""
    _banner("Example 3: Options and failures")
    renamed = transform("sql", '{"id": 1, "email": "a@b.test"}', {"table_name": "accounts"})
    print(renamed.output)

    for conversion_id, text in (("typescript", "{broken"), ("typescript", "  "), ("cobol", "x")):
        result = transform(conversion_id, text)
        assert result.error in set(FailureKind)
        print(f"{conversion_id!r} with {text!r}: {result.error.name} ({result.message})")


if __name__ == "__main__":
    example_menu()
    example_builtin_samples()
    example_options_and_failures()
