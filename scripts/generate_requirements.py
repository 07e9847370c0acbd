#!/usr/bin/env python3
"""Write or verify ``requirements.txt`` for the devconvert runtime profile.

The runtime profile is the base dependency list plus the ``cli`` and
``server`` extras; the ``test`` extra is installed separately.

Examples
--------
Regenerate the file:

    uv run python scripts/generate_requirements.py

Fail when the committed file has drifted from ``pyproject.toml``:

    uv run python scripts/generate_requirements.py --check
"""

from __future__ import annotations

import argparse
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

ROOT = Path(__file__).resolve().parents[1]
RUNTIME_EXTRAS = ("cli", "server")
REGENERATE_HINT = "uv run python scripts/generate_requirements.py"


def runtime_requirements(project: Mapping[str, Any]) -> list[str]:
    """Collect base and runtime-extra requirements, sorted and de-duplicated.

    Parameters
    ----------
    project : Mapping[str, Any]
        The ``[project]`` table of ``pyproject.toml``.
    """
    collected = set(project.get("dependencies", []))
    extras = project.get("optional-dependencies", {})
    for extra in RUNTIME_EXTRAS:
        collected.update(extras.get(extra, []))
    return sorted(req.strip() for req in collected if req.strip())


def render(requirements: Sequence[str]) -> str:
    """Render the requirements file body with its provenance header."""
    header = [
        f"# Generated from pyproject.toml (base + extras: {','.join(RUNTIME_EXTRAS)})",
        f"# Do not edit manually; run: {REGENERATE_HINT}",
    ]
    return "\n".join([*header, *requirements]) + "\n"


def parse_requirements(text: str) -> set[str]:
    """Return the requirement lines of ``text``, ignoring comments and blanks."""
    return {
        line.split("#", 1)[0].strip()
        for line in text.splitlines()
        if line.split("#", 1)[0].strip()
    }


def drift(expected: Sequence[str], actual_text: str) -> list[str]:
    """Describe how ``actual_text`` differs from ``expected``; empty when in sync."""
    actual = parse_requirements(actual_text)
    missing = sorted(set(expected) - actual)
    unexpected = sorted(actual - set(expected))
    lines: list[str] = []
    if missing:
        lines.append("Missing from requirements.txt:")
        lines.extend(f"- {req}" for req in missing)
    if unexpected:
        lines.append("Unexpected in requirements.txt:")
        lines.extend(f"- {req}" for req in unexpected)
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Regenerate ``requirements.txt``, or check it with ``--check``."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit non-zero instead of writing when requirements.txt is stale.",
    )
    parser.add_argument("--root", type=Path, default=ROOT, help="Project root directory.")
    args = parser.parse_args(argv)

    pyproject = tomllib.loads((args.root / "pyproject.toml").read_text(encoding="utf-8"))
    requirements = runtime_requirements(pyproject["project"])
    target = args.root / "requirements.txt"

    if args.check:
        current = target.read_text(encoding="utf-8") if target.exists() else ""
        problems = drift(requirements, current)
        if problems:
            print("requirements.txt is out of sync with pyproject.toml.")
            print(f"Run: {REGENERATE_HINT}")
            print("\n".join(problems))
            return 1
        print("requirements.txt is in sync.")
        return 0

    target.write_text(render(requirements), encoding="utf-8")
    print(f"Wrote {len(requirements)} requirements to {target.name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
