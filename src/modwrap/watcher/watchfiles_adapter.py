from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Coroutine, Sequence
from pathlib import Path
from typing import Any

from watchfiles import awatch

from modwrap.core.compile import DEFAULT_SUFFIXES, is_source_file

logger = logging.getLogger(__name__)


class WatchfilesWatcher:
    """Watch a source tree and hand changed source files to a callback."""

    def __init__(
        self,
        directory: str | Path,
        on_change: Callable[[set[Path]], Coroutine[Any, Any, None]],
        suffixes: Sequence[str] = DEFAULT_SUFFIXES,
    ) -> None:
        self._directory = Path(directory)
        self._on_change = on_change
        self._suffixes = tuple(suffixes)
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._watch())
        logger.info("Watcher started for %s", self._directory)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Watcher stopped for %s", self._directory)

    async def _watch(self) -> None:
        async for changes in awatch(self._directory):
            paths = {Path(p) for _, p in changes if is_source_file(Path(p), self._suffixes)}
            if paths:
                logger.info("Detected changes in %d source file(s)", len(paths))
                try:
                    await self._on_change(paths)
                except Exception:
                    logger.exception("Error while recompiling changed files")
