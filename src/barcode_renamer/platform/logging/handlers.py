"""Rich console handler that renders structured classification events."""

from __future__ import annotations

import logging
import re
from pathlib import PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, Final, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

_PATH_MARKS: Final[re.Pattern[str]] = re.compile(r"[\\/…]")


def compact_path(raw: str, base: str | None = None, limit: int = 4) -> str:
    """Shorten ``raw`` for display.

    The path is shown relative to ``base`` when it lies below it, and only its
    last ``limit`` components are kept, behind an ellipsis.
    """
    flavour = PureWindowsPath if "\\" in raw else PurePosixPath
    path = flavour(raw)
    if base:
        base_path = flavour(base)
        if path != base_path and path.is_relative_to(base_path):
            path = path.relative_to(base_path)

    separator = "\\" if flavour is PureWindowsPath else "/"
    parts = [part for part in path.parts if part != path.anchor]
    if len(parts) > limit:
        parts = ["…", *parts[-limit:]]

    prefix = path.anchor.rstrip("\\/") + separator if path.anchor else ""
    return (prefix + separator.join(parts)) or "."


def _styled_path(rendered: str) -> Text:
    text = Text(rendered, style="white")
    for mark in _PATH_MARKS.finditer(rendered):
        text.stylize("magenta", mark.start(), mark.end())
    return text


class ClassificationRichHandler(RichHandler):
    """Rich handler that renders ``classification.*`` events as one compact line.

    Records without a ``classification_event`` extra fall back to the stock
    Rich rendering.
    """

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "classification.run.start": ("🚀", "cyan"),
        "classification.run.complete": ("✅", "green"),
        "classification.run.cancelled": ("⏹", "yellow"),
        "classification.run.no_files": ("ℹ️", "yellow"),
        "classification.run.error": ("❌", "red"),
        "classification.file.start": ("🔍", "blue"),
        "classification.file.renamed": ("🏷", "green"),
        "classification.file.copied_original": ("📋", "yellow"),
        "classification.file.skipped": ("↪️", "yellow"),
        "classification.file.decode_failed": ("⚠️", "red"),
        "classification.file.error": ("⛔", "red"),
    }
    _FILE_PREFIXES: ClassVar[dict[str, str]] = {
        "classification.file.start": "Decoding ",
        "classification.file.renamed": "Renamed ",
        "classification.file.copied_original": "No code, copied ",
        "classification.file.skipped": "No code, skipped ",
        "classification.file.decode_failed": "Unreadable ",
        "classification.file.error": "Failed ",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.update(
            show_time=False,
            show_path=False,
            show_level=False,
            rich_tracebacks=True,
            markup=True,
        )
        super().__init__(*args, **kwargs)

    @staticmethod
    def _path_text(raw: object, base: object = None) -> Text:
        return _styled_path(compact_path(str(raw), str(base) if base else None))

    def _render_run_body(
        self, event: str, record: logging.LogRecord, style: Style
    ) -> Text:
        body = Text(style=style)
        metrics: list[str] = []
        if event == "classification.run.start":
            _ = body.append("Run start")
            total_files = getattr(record, "total_files", None)
            if isinstance(total_files, int):
                metrics.append(f"images={total_files}")
            if getattr(record, "high_effort", False):
                metrics.append("try-harder")
        elif event in {"classification.run.complete", "classification.run.cancelled"}:
            _ = body.append(
                "Run complete" if event == "classification.run.complete" else "Run cancelled"
            )
            for key in ("processed", "renamed", "unresolved", "failed"):
                value = getattr(record, key, None)
                if isinstance(value, int):
                    metrics.append(f"{key}={value}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
        elif event == "classification.run.no_files":
            _ = body.append("No images found")
        else:
            _ = body.append("Run error")
            error = getattr(record, "error_message", None)
            if error:
                metrics.append(str(error))
        if metrics:
            _ = body.append(" [" + ", ".join(metrics) + "]")

        directory = getattr(record, "directory", None)
        if directory:
            _ = body.append(" @ ")
            _ = body.append_text(self._path_text(directory))
        return body

    def _render_file_body(
        self, event: str, record: logging.LogRecord, style: Style
    ) -> Text:
        body = Text(style=style)
        sequence = getattr(record, "sequence", None)
        total_files = getattr(record, "total_files", None)
        if isinstance(sequence, int) and sequence > 0:
            if isinstance(total_files, int) and total_files > 0:
                _ = body.append(f"[{sequence}/{total_files}] ")
            else:
                _ = body.append(f"[{sequence}] ")

        prefix = self._FILE_PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(
                self._path_text(source_path, getattr(record, "source_base_path", None))
            )

        target_path = getattr(record, "target_path", None)
        if target_path and event in {
            "classification.file.renamed",
            "classification.file.copied_original",
        }:
            _ = body.append(" → ")
            _ = body.append_text(
                self._path_text(target_path, getattr(record, "target_base_path", None))
            )

        error_message = getattr(record, "error_message", None)
        if error_message and event in {
            "classification.file.error",
            "classification.file.decode_failed",
        }:
            _ = body.append(f" ({error_message})")
        return body

    def _render_classification_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured classification events with dedicated styling."""

        event = getattr(record, "classification_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        if event.startswith("classification.run"):
            body = self._render_run_body(event, record, Style(color=color))
        else:
            body = self._render_file_body(event, record, Style(color=color))
        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for classification events."""

        classification_text = self._render_classification_message(record)
        if classification_text is not None:
            return classification_text

        return super().render_message(record, message)


__all__ = ["ClassificationRichHandler", "compact_path"]
