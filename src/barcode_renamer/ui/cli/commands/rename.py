"""Execute a rename run for a source directory from parsed CLI arguments."""

from __future__ import annotations

from typing import final

from barcode_renamer.application.services.rename_service import (
    BarcodeRenameService,
    RenameRequest,
)
from barcode_renamer.features.classification import RunResult
from barcode_renamer.ui.cli.args.options import RenameArgs
from barcode_renamer.ui.cli.display.progress import RichProgressMonitor
from barcode_renamer.ui.cli.display.result import ResultDisplay, UnresolvedReportDisplay


@final
class RenameCommand:
    """Command for renaming the images of one directory."""

    args: RenameArgs
    app: BarcodeRenameService
    request: RenameRequest
    result_display: ResultDisplay

    def __init__(self, args: RenameArgs, app: BarcodeRenameService | None = None) -> None:
        self.args = args
        self.app = app or BarcodeRenameService()
        self.request = RenameRequest(
            source_dir=args.source_path,
            target_dir=args.target_path,
            duplicate_policy=args.duplicate_policy,
            missing_policy=args.missing_policy,
            format_restriction=args.format_restriction,
            try_harder=args.try_harder,
        )
        self.result_display = ResultDisplay()

    def execute(self) -> RunResult:
        """Run the classification with a progress bar and report the outcome."""

        reporter = UnresolvedReportDisplay(
            self.result_display.console,
            show_all=self.args.show_all_unresolved,
            export_path=self.args.export_unresolved,
            quiet=self.args.quiet,
        )
        monitor = RichProgressMonitor()
        with monitor.cancel_on_interrupt():
            result = self.app.run(self.request, monitor=monitor, reporter=reporter)
        self.result_display.show_summary(result, quiet=self.args.quiet)
        return result
