"""
dparse CLI Package.

- parse.py: parse and canon commands
- utils.py: version and logging helpers
"""

import sys

import typer

from dparse.cli.parse import canon_command, parse_command
from dparse.cli.utils import configure_logging, get_version, version_callback

app = typer.Typer(
    help="dparse - parse DTrace probe specifiers (provider:module:function:action)",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """dparse CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="parse")(parse_command)
app.command(name="canon")(canon_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = [
    "app",
    "main",
    "get_version",
    "version_callback",
]


if __name__ == "__main__":
    main(sys.argv[1:])
