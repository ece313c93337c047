"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import shutil
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def unique_directory_path(parent: Path, name: str) -> Path:
    """Return ``parent / name`` or the first free ``name (n)`` sibling."""

    candidate = parent / name
    counter = 1
    while candidate.exists():
        candidate = parent / f"{name} ({counter})"
        counter += 1
    return candidate


def copy_file_exclusive(src_path: Path, dest_path: Path) -> Path:
    """Copy ``src_path`` to ``dest_path`` without ever replacing an existing file.

    Raises:
        FileExistsError: If ``dest_path`` already exists.
        OSError: For any other read or write failure.
    """

    with open(src_path, "rb") as source, open(dest_path, "xb") as destination:
        try:
            shutil.copyfileobj(source, destination)
        except OSError:
            destination.close()
            dest_path.unlink(missing_ok=True)
            raise
    try:
        shutil.copystat(src_path, dest_path)
    except OSError:
        # Timestamps are best effort; the content is already in place.
        pass
    return dest_path


__all__ = ["copy_file_exclusive", "ensure_directory", "unique_directory_path"]
