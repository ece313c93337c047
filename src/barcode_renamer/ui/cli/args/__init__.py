"""Command line argument handling package."""

from barcode_renamer.ui.cli.args.parser import ArgumentParser
from barcode_renamer.ui.cli.args.options import CLIArgs, FormatsArgs, RenameArgs

__all__ = ["ArgumentParser", "CLIArgs", "FormatsArgs", "RenameArgs"]
