"""
Summary: Decide whether a directory entry is an image by its extension.
Why: Listing must stay cheap, so no file is opened just to check its type.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from barcode_renamer.config.settings import DEFAULT_IMAGE_EXTENSIONS


class ExtensionImageClassifier:
    """Case-insensitive extension membership check."""

    def __init__(self, extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS) -> None:
        self.extensions: frozenset[str] = frozenset(
            ext.strip().lower().lstrip(".") for ext in extensions if ext.strip()
        )

    def is_image(self, path: Path) -> bool:
        extension = path.suffix.lower().lstrip(".")
        return bool(extension) and extension in self.extensions


__all__ = ["ExtensionImageClassifier"]
