"""
Summary: Apply the missing-code policy to an image without a usable symbol.
Why: Copying under the original name must surface conflicts instead of renaming silently.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from barcode_renamer.platform.filesystem import copy_file_exclusive

from ..domain.models import ImageCandidate, MissingPolicy
from .processing_types import TargetExistsError


@dataclass(slots=True, frozen=True)
class MissingOutcome:
    """Result of handling an unclassified image."""

    copied: bool
    target_path: Path | None = None


def handle_missing(
    candidate: ImageCandidate,
    policy: MissingPolicy,
    target_dir: Path,
) -> MissingOutcome:
    """Skip ``candidate`` or copy it under its original filename.

    The caller records the image as unresolved in both cases.

    Raises:
        TargetExistsError: ``COPY`` and a file with the original name already
            exists in ``target_dir``.
        OSError: ``COPY`` and the copy itself failed.
    """

    if policy is MissingPolicy.SKIP:
        return MissingOutcome(copied=False)

    destination = target_dir / candidate.name
    try:
        _ = copy_file_exclusive(candidate.path, destination)
    except FileExistsError as exc:
        raise TargetExistsError(destination) from exc
    return MissingOutcome(copied=True, target_path=destination)


__all__ = ["MissingOutcome", "handle_missing"]
