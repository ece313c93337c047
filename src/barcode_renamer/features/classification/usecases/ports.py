"""
Summary: Ports defining classification use case dependencies.
Why: Decouple the run loop from Pillow, zxing-cpp, and the UI so tests and swaps stay simple.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from ..domain.models import DecodedSymbol, RunResult


class ImageLoadError(Exception):
    """Raised by an image loader when a file cannot be turned into pixels."""


class BarcodeReadError(Exception):
    """Raised by a barcode reader when decoding itself fails."""


@runtime_checkable
class ImageLoaderPort(Protocol):
    """Port for reading pixel data from an image file."""

    def load(self, path: Path) -> Any:
        """Return a decoder-ready image or raise ``ImageLoadError``."""
        ...


@runtime_checkable
class BarcodeReaderPort(Protocol):
    """Port for the multi-symbol barcode decoder."""

    def read(self, image: Any, *, high_effort: bool = False) -> list[DecodedSymbol]:
        """Return every symbol found in ``image`` in scan order.

        An empty list means no symbol is present. Decoder failures raise
        ``BarcodeReadError``.
        """
        ...


@runtime_checkable
class ImageClassifierPort(Protocol):
    """Port deciding which directory entries are images."""

    def is_image(self, path: Path) -> bool:
        """Return True when ``path`` should be treated as an image."""
        ...


@runtime_checkable
class ProgressMonitorPort(Protocol):
    """Port for progress reporting and cooperative cancellation."""

    def begin_task(self, name: str, total: int) -> None:
        """Announce the task and its total number of work units."""
        ...

    def sub_task(self, description: str) -> None:
        """Describe the unit currently being worked on."""
        ...

    def worked(self, units: int) -> None:
        """Report ``units`` completed work units."""
        ...

    def done(self) -> None:
        """Signal that no further work will be reported."""
        ...

    def is_canceled(self) -> bool:
        """Return True once the observer requested cancellation."""
        ...


@runtime_checkable
class UnresolvedReporterPort(Protocol):
    """Port receiving the finished run for display."""

    def report(self, result: RunResult) -> None:
        """Present ``result`` (notably its unresolved files) to the user."""
        ...


class NullProgressMonitor:
    """Progress monitor that reports nowhere and is never cancelled."""

    def begin_task(self, name: str, total: int) -> None:
        del name, total

    def sub_task(self, description: str) -> None:
        del description

    def worked(self, units: int) -> None:
        del units

    def done(self) -> None:
        pass

    def is_canceled(self) -> bool:
        return False


class NullReporter:
    """Reporter that discards the run result."""

    def report(self, result: RunResult) -> None:
        del result


__all__ = [
    "BarcodeReadError",
    "BarcodeReaderPort",
    "ImageClassifierPort",
    "ImageLoadError",
    "ImageLoaderPort",
    "NullProgressMonitor",
    "NullReporter",
    "ProgressMonitorPort",
    "UnresolvedReporterPort",
]
