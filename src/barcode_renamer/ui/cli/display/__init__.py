"""Display management for CLI interface."""

from barcode_renamer.ui.cli.display.progress import RichProgressMonitor
from barcode_renamer.ui.cli.display.result import ResultDisplay, UnresolvedReportDisplay

__all__ = ["ResultDisplay", "RichProgressMonitor", "UnresolvedReportDisplay"]
