"""
dparse CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import platform
from pathlib import Path

import typer

from dparse import __version__


def get_version() -> str:
    """Get dparse version (pyproject.toml when editable, else package metadata)."""
    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        dparse_version = get_version()

        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        try:
            import dparse

            install_location = Path(dparse.__file__).parent
        except Exception:
            install_location = Path.cwd()

        typer.echo(f"dparse version {dparse_version}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo(f"  Location:      {install_location}")

        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, DEBUG with --verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        force=True,
    )
