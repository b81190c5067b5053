"""`csvtable show` command.

Prints the header and the first `--limit` rows, re-joined with the separator.
Bytes that were not valid UTF-8 in the input are written out unchanged.
"""

from __future__ import annotations

from typing import Optional

import typer

from csvtable.cli.options import load_or_exit, parse_separator, separator_option
from csvtable.io.text import join_line


def register(app: typer.Typer) -> None:
    @app.command("show")
    def show(
        path: str = typer.Argument(..., help="Path to a CSV file."),
        sep: str = separator_option(),
        limit: Optional[int] = typer.Option(None, "--limit", min=0, help="Print at most this many rows."),
    ) -> None:
        """Print a CSV file's header and rows."""
        separator = parse_separator(sep)
        table = load_or_exit(path, separator)

        rows = table.rows() if limit is None else table.rows()[:limit]
        for line in [table.header, *rows]:
            # bytes go to the binary stream so undecodable input is echoed unchanged
            typer.echo(join_line(line, separator).encode("utf-8", "surrogateescape"), nl=False)
