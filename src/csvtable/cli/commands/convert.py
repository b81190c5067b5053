"""`csvtable convert` command.

Re-writes a CSV file with a different separator. Fields are not inspected: a
field that contains the output separator will split on the next load.
"""

from __future__ import annotations

from pathlib import Path

import typer

from csvtable.cli.options import load_or_exit, parse_separator, separator_option
from csvtable.core import Table, TableError


def register(app: typer.Typer) -> None:
    @app.command("convert")
    def convert(
        src: str = typer.Argument(..., help="Input CSV file."),
        dst: str = typer.Argument(..., help="Output CSV file (truncated or created)."),
        sep: str = separator_option(),
        out_sep: str = separator_option(flag="--out-sep", envvar=None),
    ) -> None:
        """Load SRC with --sep and save it to DST with --out-sep."""
        in_separator = parse_separator(sep)
        out_separator = parse_separator(out_sep, flag="--out-sep")

        table = load_or_exit(src, in_separator)

        out = Table(out_separator)
        out.set_header(table.header)
        out.reserve(len(table))
        for row in table:
            out.add_row(row)

        try:
            out.save(Path(dst))
        except TableError as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=1) from e

        typer.echo(dst)
