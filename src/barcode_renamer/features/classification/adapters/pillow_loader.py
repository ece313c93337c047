"""
Summary: Image loading adapter backed by Pillow.
Why: Keep Pillow specifics (lazy loading, mode conversion, its error zoo) out of the use cases.
"""

from __future__ import annotations

import struct
from pathlib import Path
from typing import final

from PIL import Image

from ..usecases.ports import ImageLoadError


@final
class PillowImageLoader:
    """Load an image file fully into memory as an 8-bit grayscale picture."""

    MODE: str = "L"

    def load(self, path: Path) -> Image.Image:
        # Broken files surface from Pillow plugins as several non-OSError types.
        try:
            with Image.open(path) as image:
                image.load()
                return image.convert(self.MODE)
        except (
            OSError,
            ValueError,
            SyntaxError,
            EOFError,
            struct.error,
            Image.DecompressionBombError,
        ) as exc:
            raise ImageLoadError(f"Cannot load image {path.name}: {exc}") from exc


__all__ = ["PillowImageLoader"]
