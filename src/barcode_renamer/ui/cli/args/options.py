"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class RenameArgs:
    """Command line arguments for the ``rename`` subcommand."""

    command: Literal["rename"]
    source_path: Path
    target_path: Path | None
    duplicate_policy: str | None
    missing_policy: str | None
    format_restriction: str | None
    try_harder: bool | None
    export_unresolved: Path | None
    show_all_unresolved: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class FormatsArgs:
    """Command line arguments for the ``formats`` subcommand."""

    command: Literal["formats"]


CLIArgs = RenameArgs | FormatsArgs

__all__ = ["CLIArgs", "FormatsArgs", "RenameArgs"]
