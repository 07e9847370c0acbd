#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/devconvert"

TRANSPORT_IMPORTS = ["import typer", "from typer", "import fastapi", "from fastapi", "uvicorn"]


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = path.read_text(encoding="utf-8")
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    for path in (PACKAGE / "application").glob("*.py"):
        _assert_no_imports(path, TRANSPORT_IMPORTS)

    # Transformations are pure text functions: no validation or transport layers.
    for path in (PACKAGE / "converters").glob("*.py"):
        _assert_no_imports(path, [*TRANSPORT_IMPORTS, "import pydantic", "from pydantic"])

    for path in (PACKAGE / "registry").glob("*.py"):
        _assert_no_imports(path, TRANSPORT_IMPORTS)

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
