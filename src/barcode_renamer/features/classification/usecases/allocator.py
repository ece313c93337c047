"""
Summary: Hand out collision-free target filenames for the duration of one run.
Why: Two images decoding to the same payload must never overwrite each other.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from ..domain.sanitizer import PayloadSanitizer


@final
class UniqueFilenameAllocator:
    """Allocate filenames in ``target_dir`` that are free on disk and in this run.

    A name is reserved as soon as it is returned, before any copy happens, so
    later allocations in the same run cannot pick it even if the copy is still
    pending or failed.
    """

    def __init__(self, target_dir: Path) -> None:
        self.target_dir: Path = target_dir
        self._allocated: set[str] = set()

    def allocate(self, base_name: str, suffix: str) -> Path:
        """Reserve and return a free path for ``base_name`` + ``suffix``.

        Args:
            base_name: Desired base name; sanitized before use.
            suffix: File suffix including the leading dot (may be empty).

        Returns:
            Path: ``base.suffix`` when free, otherwise ``base (n).suffix`` for
            the smallest ``n`` that is free.
        """
        stem = PayloadSanitizer.sanitize(base_name)
        candidate = f"{stem}{suffix}"
        counter = 1
        while not self._is_free(candidate):
            candidate = f"{stem} ({counter}){suffix}"
            counter += 1

        self._allocated.add(candidate)
        return self.target_dir / candidate

    def reserve(self, filename: str) -> None:
        """Mark ``filename`` as taken without allocating it."""

        self._allocated.add(filename)

    def is_allocated(self, filename: str) -> bool:
        return filename in self._allocated

    def _is_free(self, filename: str) -> bool:
        if filename in self._allocated:
            return False
        return not (self.target_dir / filename).exists()


__all__ = ["UniqueFilenameAllocator"]
