#!/usr/bin/env python3
"""
devconvert.cli.cli

Typer-based CLI for listing and running snippet conversions.

Examples
--------
Install core + CLI only:

    uv pip install -e ".[cli]"

Convert a JSON file to TypeScript interfaces:

    devconvert convert typescript payload.json

Pipe a curl command through the fetch converter:

    echo "curl 'https://api.test/users'" | devconvert convert curl_fetch
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import typer

from devconvert.application.results import ConversionResult, FailureKind
from devconvert.errors import (
    DevConvertError,
    EmptyInputError,
    ParseError,
    UnknownConversionError,
)

app = typer.Typer(
    name="devconvert",
    help="Convert SVG, HTML, CSS, JSON and curl snippets between formats.",
    no_args_is_help=True,
)

OPTION_HELP = "Generator option KEY=VALUE, e.g. table_name=accounts (repeatable)."


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _parse_generator_options(option_items: list[str] | None) -> dict[str, str]:
    """Parse repeatable KEY=VALUE generator options."""
    parsed: dict[str, str] = {}
    for item in option_items or []:
        if "=" not in item:
            raise typer.BadParameter(
                f"Invalid option entry '{item}'. Use KEY=VALUE format."
            )
        key, raw_value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise typer.BadParameter("Option key cannot be empty.")
        parsed[key] = raw_value
    return parsed


def _read_input(input_file: Path | None, text: str | None) -> str:
    """Resolve command input from ``--text``, a file, or stdin."""
    if text is not None and input_file is not None:
        raise typer.BadParameter("Pass either INPUT_FILE or --text, not both.")
    if text is not None:
        return text
    if input_file is not None:
        return input_file.read_text(encoding="utf-8")
    return sys.stdin.read()


def _raise_for_failure(result: ConversionResult) -> None:
    """Turn a tagged failure back into the matching exception."""
    if result.error is None:
        return
    message = result.message or ""
    if result.error is FailureKind.NOT_FOUND:
        from devconvert.application.use_cases import default_registry

        raise UnknownConversionError(result.conversion_id, default_registry().ids())
    if result.error is FailureKind.EMPTY_INPUT:
        raise EmptyInputError(message)
    raise ParseError(message)


@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show debug logs and full tracebacks."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug logging and error output.
    """
    ctx.obj = {"debug": debug}
    if debug:
        logging.basicConfig(level=logging.DEBUG)


@app.command("list")
def list_cmd(
    search: str | None = typer.Option(
        None, "--search", "-s", help="Filter by label or category (case-insensitive)."
    ),
) -> None:
    """List available conversions grouped by category."""
    from devconvert.api import list_conversions

    groups = list_conversions(search)
    if not groups:
        typer.echo("No conversions match.")
        return
    for category, specs in groups:
        typer.echo(category.display_name)
        for spec in specs:
            typer.echo(f"  {spec.id:<14} {spec.label}")


@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    conversion_id: str = typer.Argument(..., help="Conversion id, e.g. typescript."),
    input_file: Path | None = typer.Argument(
        None,
        exists=True,
        readable=True,
        dir_okay=False,
        help="File holding the input; stdin is read when omitted.",
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Input given inline."),
    output_path: Path | None = typer.Option(
        None, "--output", "-o", help="Write the result here instead of stdout."
    ),
    option: list[str] | None = typer.Option(None, "--option", help=OPTION_HELP),
) -> None:
    """Run one conversion and print the result."""
    debug: bool = bool(ctx.obj.get("debug", False))
    options = _parse_generator_options(option)
    source = _read_input(input_file, text)

    try:
        from devconvert.api import transform

        result = transform(conversion_id.strip(), source, options)
        _raise_for_failure(result)
    except DevConvertError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    output = result.output or ""
    if output_path is None:
        typer.echo(output)
        return
    output_path.write_text(output + "\n", encoding="utf-8")
    typer.echo(f"✓ Saved: {output_path}", err=True)


@app.command("example")
def example_cmd(
    ctx: typer.Context,
    conversion_id: str = typer.Argument(..., help="Conversion id."),
) -> None:
    """Print the sample input shipped with a conversion."""
    debug: bool = bool(ctx.obj.get("debug", False))
    from devconvert.application.use_cases import default_registry

    try:
        spec = default_registry().get(conversion_id.strip())
    except UnknownConversionError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    if not spec.example:
        typer.echo(f"No example for '{spec.id}'.", err=True)
        return
    typer.echo(spec.example)


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed toolchain versions and the registered conversions."""
    import importlib.metadata as metadata

    modules = ["pydantic", "typer", "fastapi", "uvicorn"]

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in modules:
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    try:
        from devconvert.application.use_cases import default_registry

        registry = default_registry()
        typer.echo(f"conversions ({len(registry)}): {', '.join(registry.ids())}")
    except DevConvertError:
        typer.echo("conversions: <unavailable>")


if __name__ == "__main__":
    app()
