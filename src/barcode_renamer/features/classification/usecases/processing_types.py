"""
Summary: Event identifiers, run bookkeeping, and errors for the classification loop.
Why: Keep the runner lean by centralising type definitions.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any


class ClassificationEvent(StrEnum):
    """Structured event identifiers for classification logs."""

    RUN_START = "classification.run.start"
    RUN_COMPLETE = "classification.run.complete"
    RUN_CANCELLED = "classification.run.cancelled"
    RUN_NO_FILES = "classification.run.no_files"
    RUN_ERROR = "classification.run.error"
    FILE_START = "classification.file.start"
    FILE_RENAMED = "classification.file.renamed"
    FILE_COPIED_ORIGINAL = "classification.file.copied_original"
    FILE_SKIPPED = "classification.file.skipped"
    FILE_DECODE_FAILED = "classification.file.decode_failed"
    FILE_ERROR = "classification.file.error"


@dataclass(slots=True)
class RunLogContext:
    """Mutable bookkeeping for a classification run."""

    run_id: str
    directory: Path
    total_files: int
    high_effort: bool
    start_time: float = field(default_factory=time.perf_counter)
    renamed: int = 0
    unresolved: int = 0
    failed: int = 0

    def record_renamed(self) -> None:
        self.renamed += 1

    def record_unresolved(self, *, failed: bool = False) -> None:
        self.unresolved += 1
        if failed:
            self.failed += 1

    def duration_seconds(self) -> float:
        """Return the elapsed run time in seconds."""

        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "run_id": self.run_id,
            "directory": str(self.directory),
            "total_files": self.total_files,
            "high_effort": self.high_effort,
            "processed": self.renamed + self.unresolved,
            "renamed": self.renamed,
            "unresolved": self.unresolved,
            "failed": self.failed,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


class ClassificationError(Exception):
    """Base class for errors raised by the classification feature."""


class TargetDirectoryError(ClassificationError):
    """Raised when the target directory cannot be prepared; aborts the run."""

    def __init__(self, target_dir: Path, cause: OSError) -> None:
        super().__init__(f"Cannot prepare target directory {target_dir}: {cause}")
        self.target_dir: Path = target_dir
        self.cause: OSError = cause


class TargetExistsError(ClassificationError, FileExistsError):
    """Raised when copying an unclassified image would overwrite a target file."""

    def __init__(self, target_path: Path) -> None:
        super().__init__(f"Target file already exists: {target_path}")
        self.target_path: Path = target_path


__all__ = [
    "ClassificationError",
    "ClassificationEvent",
    "RunLogContext",
    "TargetDirectoryError",
    "TargetExistsError",
]
