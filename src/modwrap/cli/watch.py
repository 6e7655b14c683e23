import asyncio
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from modwrap.config import get_settings
from modwrap.core.compile import compile_tree, recompile_changed
from modwrap.core.conventions import normalize_convention
from modwrap.watcher.watchfiles_adapter import WatchfilesWatcher

console = Console(stderr=True)


async def _wait_until_interrupted() -> None:
    await asyncio.Event().wait()


def watch(
    input: Annotated[Path, typer.Argument(help="Source directory to watch.")],
    output: Annotated[Path, typer.Argument(help="Directory receiving the compiled tree.")],
    type: Annotated[
        str | None, typer.Option("--type", "-t", help="Module convention: amd, cjs or globals.")
    ] = None,
) -> None:
    """Compile a directory, then recompile source files as they change."""
    try:
        settings = get_settings()
        convention = normalize_convention(type or settings.default_convention)
    except (ValidationError, ValueError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from None

    if not input.is_dir():
        console.print(f"[red]Directory not found: {escape(str(input))}[/red]")
        raise typer.Exit(1)

    report = compile_tree(input, output, convention, settings.source_suffixes)
    console.print(f"[green]Compiled[/green] {report.compiled} file(s) into {escape(str(output))}")

    async def _on_change(paths: set[Path]) -> None:
        for dest in recompile_changed(paths, input, output, convention, settings.source_suffixes):
            console.print(f"[green]Recompiled[/green] {escape(str(dest))}")

    async def _run() -> None:
        watcher = WatchfilesWatcher(input, _on_change, settings.source_suffixes)
        await watcher.start()
        try:
            await _wait_until_interrupted()
        finally:
            await watcher.stop()

    console.print(f"Watching {escape(str(input))} ({convention}), press Ctrl+C to stop.")
    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        console.print("Stopped watching.")
