"""List the symbol formats accepted by ``--format``."""

from __future__ import annotations

from typing import final

from rich.console import Console

from barcode_renamer.features.classification import SymbolFormat


@final
class FormatsCommand:
    """Print every known symbol format name."""

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or Console()

    def execute(self) -> list[SymbolFormat]:
        formats = [fmt for fmt in SymbolFormat if fmt is not SymbolFormat.UNKNOWN]
        for fmt in formats:
            self.console.print(fmt.value)
        return formats
