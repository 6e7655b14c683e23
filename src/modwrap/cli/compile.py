from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from modwrap.config import STDOUT, CompileOptions, get_settings
from modwrap.core.compile import run_compile
from modwrap.models import CompileReport

console = Console(stderr=True)


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]{escape(message)}[/red]")
    return typer.Exit(1)


def compile_command(
    input: Annotated[str | None, typer.Option("--input", "-i", help="Path to a source file or directory.")] = None,
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output file, output directory, or 'stdout'.")
    ] = STDOUT,
    type: Annotated[
        str | None, typer.Option("--type", "-t", help="Module convention: amd, cjs or globals.")
    ] = None,
    code: Annotated[str | None, typer.Option(help="Source code string to compile instead of a file path.")] = None,
) -> None:
    """Compile a source file or directory into a module convention."""
    try:
        settings = get_settings()
        options = CompileOptions(input=input, output=output, type=type or settings.default_convention, code=code)
    except ValidationError as exc:
        raise _fail(exc.errors()[0]["msg"]) from None

    try:
        result = run_compile(options, suffixes=settings.source_suffixes)
    except (ValueError, FileNotFoundError) as exc:
        raise _fail(str(exc)) from None

    if isinstance(result, CompileReport):
        console.print(
            f"[green]Compiled[/green] {result.compiled} file(s), "
            f"{result.passed_through} without export, copied {result.copied} other file(s) into {escape(output)}"
        )
    elif output == STDOUT:
        typer.echo(result)
    else:
        source = escape(input) if input else "inline code"
        console.print(f"[green]Compiled[/green] {source} ({options.type}) into {escape(output)}")
