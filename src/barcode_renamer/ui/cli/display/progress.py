"""Progress display and cooperative cancellation for the CLI."""

from __future__ import annotations

import signal
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from types import FrameType
from typing import Any, final

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

from barcode_renamer.platform.logging import ClassificationRichHandler, logger


def _shared_console() -> Console | None:
    """Return the console of the Rich log handler so bars and logs interleave."""

    for handler in logger.handlers:
        if isinstance(handler, ClassificationRichHandler):
            return handler.console
    return None


@final
class RichProgressMonitor:
    """Progress monitor rendering a Rich progress bar.

    Cancellation is cooperative: ``cancel()`` only raises a flag that the
    classification loop polls between images.
    """

    def __init__(self, console: Console | None = None) -> None:
        progress_kwargs: dict[str, Any] = {
            "transient": True,
            "redirect_stdout": False,
            "redirect_stderr": False,
        }
        progress_console = console or _shared_console()
        if progress_console is not None:
            progress_kwargs["console"] = progress_console

        self._progress: Progress = Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            **progress_kwargs,
        )
        self._task_id: TaskID | None = None
        self._task_name: str = ""
        self._started: bool = False
        self._cancel_requested: threading.Event = threading.Event()

    def begin_task(self, name: str, total: int) -> None:
        self._task_name = name
        if not self._started:
            self._progress.start()
            self._started = True
        self._task_id = self._progress.add_task(f"[cyan]{name}", total=total)

    def sub_task(self, description: str) -> None:
        if self._task_id is None:
            return
        _ = self._progress.update(
            self._task_id,
            description=f"[cyan]{self._task_name}[/cyan] {description}",
        )

    def worked(self, units: int) -> None:
        if self._task_id is None:
            return
        self._progress.advance(self._task_id, units)

    def done(self) -> None:
        if self._started:
            self._progress.stop()
            self._started = False

    def cancel(self) -> None:
        self._cancel_requested.set()

    def is_canceled(self) -> bool:
        return self._cancel_requested.is_set()

    @contextmanager
    def cancel_on_interrupt(self) -> Iterator["RichProgressMonitor"]:
        """Turn the first Ctrl+C into a cancellation request.

        A second Ctrl+C falls through to the previous handler, which by default
        raises ``KeyboardInterrupt``. Signal handlers can only be installed from
        the main thread; elsewhere this is a no-op.
        """

        if threading.current_thread() is not threading.main_thread():
            yield self
            return

        previous = signal.getsignal(signal.SIGINT)

        def _handler(signum: int, frame: FrameType | None) -> None:
            del signum, frame
            logger.warning("Cancellation requested; finishing the current image")
            self.cancel()
            _ = signal.signal(signal.SIGINT, previous)

        _ = signal.signal(signal.SIGINT, _handler)
        try:
            yield self
        finally:
            _ = signal.signal(signal.SIGINT, previous)
            self.done()


__all__ = ["RichProgressMonitor"]
