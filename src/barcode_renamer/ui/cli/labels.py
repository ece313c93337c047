"""User-facing labels for policy values, kept apart from the policy types."""

from __future__ import annotations

from typing import Final

from barcode_renamer.features.classification import (
    DuplicatePolicy,
    FileStatus,
    MissingPolicy,
)

DUPLICATE_POLICY_LABELS: Final[dict[DuplicatePolicy, str]] = {
    DuplicatePolicy.PICK_FIRST: "Use the first code found",
    DuplicatePolicy.CONCATENATE: "Join all codes with '-'",
}

MISSING_POLICY_LABELS: Final[dict[MissingPolicy, str]] = {
    MissingPolicy.SKIP: "Skip the image",
    MissingPolicy.COPY: "Copy the image under its original name",
}

FILE_STATUS_LABELS: Final[dict[FileStatus, str]] = {
    FileStatus.RENAMED: "Renamed",
    FileStatus.COPIED_ORIGINAL: "Copied under original name",
    FileStatus.SKIPPED: "Skipped (no code)",
    FileStatus.FAILED: "Failed",
}


__all__ = ["DUPLICATE_POLICY_LABELS", "FILE_STATUS_LABELS", "MISSING_POLICY_LABELS"]
