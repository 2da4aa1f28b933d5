"""
Parsing commands.

- parse: parse probe specifiers from one or more files
- canon: print the canonical form of a specifier given on the command line
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console

from dparse.core.errors import DparseError, ParseError
from dparse.core.loader import FileResult, SourceMode, parse_files
from dparse.core.manifest import DEFAULT_CONFIG_NAME, OUTPUT_FORMATS, load_config
from dparse.core.specifier import parse_specifier

console = Console(stderr=True, highlight=False)


def parse_command(
    files: list[Path] = typer.Argument(  # noqa: B008
        ..., help="Script file(s) holding probe specifiers"
    ),
    mode: SourceMode | None = typer.Option(
        None, "--mode", "-m", help="'file': whole file is one specifier, 'lines': one per line"
    ),
    format: str | None = typer.Option(
        None, "--format", "-f", help="Output format: 'text' or 'json'"
    ),
    keep_going: bool = typer.Option(
        False, "--keep-going", "-k", help="Continue with remaining files after an error"
    ),
    config: Path = typer.Option(  # noqa: B008
        Path(DEFAULT_CONFIG_NAME), "--config", "-c", help="Path to dparse.toml"
    ),
) -> None:
    """
    Parse probe specifiers from FILES and print them in canonical form.

    Stops at the first file that fails unless --keep-going is given.
    """
    try:
        cfg = load_config(config)
    except DparseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    source_mode = mode or cfg.parse.mode
    output_format = format or cfg.output.format
    fail_fast = cfg.parse.fail_fast and not keep_going

    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Error: unknown output format {output_format!r}", err=True)
        raise typer.Exit(code=1)

    failed = 0
    for result in parse_files(files, source_mode, fail_fast=fail_fast):
        if result.ok:
            _print_result(result, source_mode, output_format)
        else:
            failed += 1
            typer.echo(f"Error parsing '{result.path}': {result.error}", err=True)

    if failed:
        if not fail_fast:
            console.print(f"[red]{failed} of {len(files)} file(s) failed[/red]")
        raise typer.Exit(code=1)


def canon_command(
    specifier: str = typer.Argument(..., help="Probe specifier, e.g. 'syscall::open:entry'"),
) -> None:
    """Print the canonical form of SPECIFIER."""
    try:
        spec = parse_specifier(specifier)
    except ParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(str(spec))


def _print_result(result: FileResult, mode: SourceMode, output_format: str) -> None:
    for spec in result.specifiers:
        if output_format == "json":
            typer.echo(json.dumps({"file": str(result.path), **spec.model_dump()}))
        elif mode == SourceMode.FILE:
            # Historical output: specifier followed by a blank line
            typer.echo(f"{spec}\n")
        else:
            typer.echo(str(spec))
