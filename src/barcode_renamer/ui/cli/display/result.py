"""Render the run summary and the list of unresolved images."""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console
from rich.table import Table

from barcode_renamer.config.file_ops import write_text_file
from barcode_renamer.config.settings import UNRESOLVED_PREVIEW_LIMIT
from barcode_renamer.features.classification import FileStatus, RunResult
from barcode_renamer.platform.logging import logger
from barcode_renamer.ui.cli.labels import FILE_STATUS_LABELS

_STATUS_STYLES: dict[FileStatus, str] = {
    FileStatus.RENAMED: "green",
    FileStatus.COPIED_ORIGINAL: "yellow",
    FileStatus.SKIPPED: "yellow",
    FileStatus.FAILED: "red",
}


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_summary(self, result: RunResult, quiet: bool = False) -> None:
        """Display per-status counts and any failures.

        Args:
            result: Finished run.
            quiet: Whether to suppress non-error output.
        """
        failures = [o for o in result.outcomes if o.status is FileStatus.FAILED]
        if quiet and not failures:
            return

        if not quiet:
            table = Table(title="Rename Summary", show_header=False, box=None)
            table.add_column("label")
            table.add_column("count", justify="right")
            table.add_row("Images found", str(result.total))
            table.add_row("Images processed", str(result.processed))
            for status in FileStatus:
                style = _STATUS_STYLES[status]
                table.add_row(
                    f"[{style}]{FILE_STATUS_LABELS[status]}[/{style}]",
                    f"[{style}]{result.count(status)}[/{style}]",
                )
            self.console.print()
            self.console.print(table)
            self.console.print(f"Target directory: {result.target_dir}")
            if result.cancelled:
                remaining = result.total - result.processed
                self.console.print(
                    f"[yellow]Run cancelled; {remaining} image(s) were not processed.[/yellow]"
                )

        for failure in failures:
            self.console.print(
                f"[red]  • {failure.source_path.name}: {failure.error_message}[/red]"
            )


@final
class UnresolvedReportDisplay:
    """Unresolved-file reporter for the terminal.

    Lists images that did not get a barcode name and optionally writes their
    absolute paths, one per line, to an export file.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        show_all: bool = False,
        export_path: Path | None = None,
        quiet: bool = False,
    ) -> None:
        self.console: Console = console or Console()
        self.show_all: bool = show_all
        self.export_path: Path | None = export_path
        self.quiet: bool = quiet

    def report(self, result: RunResult) -> None:
        unresolved = result.unresolved
        if self.export_path is not None:
            self._export(self.export_path, unresolved)

        if self.quiet or not unresolved:
            return

        self.console.print(
            f"\n[bold yellow]Images without a barcode name: {len(unresolved)}[/bold yellow]"
        )
        limit = 0 if self.show_all else UNRESOLVED_PREVIEW_LIMIT
        preview = unresolved if limit <= 0 else unresolved[:limit]
        for path in preview:
            self.console.print(f"  • {path.name}")

        remaining = len(unresolved) - len(preview)
        if remaining > 0:
            self.console.print(f"...and {remaining} more.")

    @staticmethod
    def _export(export_path: Path, unresolved: list[Path]) -> None:
        content = "\n".join(str(path.resolve()) for path in unresolved)
        if content:
            content += "\n"
        write_text_file(export_path, content)
        logger.info("Wrote %d unresolved path(s) to %s", len(unresolved), export_path)


__all__ = ["ResultDisplay", "UnresolvedReportDisplay"]
