"""Command execution package for CLI."""

from barcode_renamer.ui.cli.commands.formats import FormatsCommand
from barcode_renamer.ui.cli.commands.rename import RenameCommand

__all__ = ["FormatsCommand", "RenameCommand"]
