"""Shared CLI option helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer

from csvtable.core import Table, TableError
from csvtable.io.text import DEFAULT_SEPARATOR, check_separator

SEPARATOR_ENVVAR = "CSVTABLE_SEPARATOR"


def separator_option(default: str = DEFAULT_SEPARATOR, *, flag: str = "--sep", envvar: str | None = SEPARATOR_ENVVAR) -> Any:
    """Typer option for a single-character separator, overridable via env var."""
    return typer.Option(
        default,
        flag,
        envvar=envvar,
        help="Single-character field separator.",
    )


def parse_separator(value: str, *, flag: str = "--sep") -> str:
    # Allow "\t" to be typed literally on the command line.
    if value == "\\t":
        value = "\t"
    try:
        return check_separator(value)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint=flag) from e


def load_or_exit(path: str, separator: str) -> Table:
    """Load a table, turning `TableError` into a one-line error and exit code 1."""
    try:
        return Table.from_file(Path(path), separator)
    except TableError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1) from e
