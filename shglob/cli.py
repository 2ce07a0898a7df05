# Command-line entry point for shglob.
# Parses options, runs one traversal and prints each match as it is found.

from __future__ import annotations

import sys
from typing import Optional

import typer
from loguru import logger
from rich.console import Console

from shglob import __version__
from shglob._exceptions import PatternError
from shglob._options import MatchOptions
from shglob._walk import traverse_with

app = typer.Typer(
    add_completion=False,
    help="Print the paths matching a Unix shell style glob pattern.",
)
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def _enable_debug_logging() -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG",
        format="<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | {message}",
        diagnose=False,
    )
    logger.enable("shglob")


@app.command(help="Print every path matching PATTERN, in shell glob order.")
def main(
    pattern: Optional[str] = typer.Argument(
        None,
        help="Glob pattern, e.g. 'src/**/*.py'. Quote it so the shell does not expand it.",
    ),
    ignore_case: bool = typer.Option(
        False, "--ignore-case", "-i",
        envvar="SHGLOB_IGNORE_CASE",
        help="Match ASCII letters without regard to case.",
    ),
    literal_leading_dot: bool = typer.Option(
        False, "--literal-leading-dot",
        help="Hidden entries only match a literal leading '.'.",
    ),
    tilde: bool = typer.Option(
        True, "--tilde/--no-tilde",
        help="Expand a leading '~' to the home directory.",
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", min=1,
        help="Stop after this many matches.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Log traversal details to stderr.",
    ),
    version: bool = typer.Option(
        False, "--version",
        help="Show version and exit.",
    ),
) -> None:
    if version:
        console.print(__version__)
        raise typer.Exit(code=0)

    if pattern is None:
        raise typer.BadParameter("a pattern is required", param_hint="PATTERN")

    if verbose:
        _enable_debug_logging()

    options = MatchOptions(
        case_sensitive=not ignore_case,
        require_literal_leading_dot=literal_leading_dot,
        tilde_expansion=tilde,
    )

    try:
        paths = traverse_with(pattern, options)
    except PatternError as e:
        err_console.print(f"error: {e}", markup=False, soft_wrap=True)
        err_console.print(f"  {pattern}", markup=False, soft_wrap=True)
        err_console.print("  " + " " * e.pos + "^", markup=False, soft_wrap=True)
        raise typer.Exit(code=2)

    for count, path in enumerate(paths, start=1):
        console.print(path, markup=False, soft_wrap=True)
        if limit is not None and count >= limit:
            break


if __name__ == "__main__":
    app()
