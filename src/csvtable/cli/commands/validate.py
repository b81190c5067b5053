"""`csvtable validate` command.

Loads a file and reports its shape; any load failure exits with code 1.
"""

from __future__ import annotations

import typer

from csvtable.cli.options import load_or_exit, parse_separator, separator_option


def register(app: typer.Typer) -> None:
    @app.command("validate")
    def validate(
        path: str = typer.Argument(..., help="Path to a CSV file."),
        sep: str = separator_option(),
    ) -> None:
        """Check that a CSV file loads."""
        table = load_or_exit(path, parse_separator(sep))
        typer.echo(f"OK rows={len(table)} columns={table.column_count}")
