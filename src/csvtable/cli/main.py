"""csvtable CLI entrypoint."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="csvtable",
    add_completion=False,
    no_args_is_help=True,
    help="Load, inspect and re-write simple CSV tables.",
)


@app.callback()
def _callback() -> None:
    """csvtable CLI."""
    return


@app.command("version")
def version() -> None:
    """Print the installed csvtable version."""
    from csvtable import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    """Register CLI subcommands."""
    from csvtable.cli.commands import convert as convert_cmd
    from csvtable.cli.commands import show as show_cmd
    from csvtable.cli.commands import validate as validate_cmd

    show_cmd.register(app)
    validate_cmd.register(app)
    convert_cmd.register(app)


_register_commands()
