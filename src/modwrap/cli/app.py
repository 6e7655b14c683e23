import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from modwrap.cli.compile import compile_command
from modwrap.cli.watch import watch
from modwrap.core.conventions import SUPPORTED_CONVENTIONS, aliases_for, describe_convention

app = typer.Typer(
    name="modwrap",
    help="Compile default import/export modules to AMD, CommonJS or browser globals.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


@app.callback()
def root(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every compiled and copied file.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command("conventions")
def conventions() -> None:
    """List the supported module conventions and their aliases."""
    table = Table(show_lines=False)
    for header in ("convention", "aliases", "shape"):
        table.add_column(header)
    for name in SUPPORTED_CONVENTIONS:
        table.add_row(name, ", ".join(aliases_for(name)), escape(describe_convention(name)))
    console.print(table)


app.command("compile")(compile_command)
app.command("watch")(watch)


def main() -> None:
    app()
