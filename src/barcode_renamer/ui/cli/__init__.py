"""Command line interface package."""

from barcode_renamer.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
