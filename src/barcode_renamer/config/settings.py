"""Static defaults shared by the configuration file and the feature layers.

Extensions are stored lowercase and without the leading dot. Per-run
overrides travel through ``RunConfiguration``, never through these constants.
"""

from __future__ import annotations

from typing import Final

# Image discovery ------------------------------------------------------------

# Extensions treated as images when listing the source directory.
DEFAULT_IMAGE_EXTENSIONS: Final[tuple[str, ...]] = (
    "jpg",
    "jpeg",
    "png",
    "gif",
    "bmp",
    "tif",
    "tiff",
    "webp",
)


# Target layout --------------------------------------------------------------

# Folder created inside the source directory when no target is given.
DEFAULT_TARGET_FOLDER_NAME: Final[str] = "renamed"

# Base name used when a decoded payload sanitizes to nothing.
EMPTY_PAYLOAD_NAME: Final[str] = "Unknown-Code"

# Upper bound for the sanitized base name, in UTF-8 bytes.
MAX_BASE_NAME_BYTES: Final[int] = 200


# Reporting ------------------------------------------------------------------

UNRESOLVED_PREVIEW_LIMIT: Final[int] = 20


__all__ = [
    "DEFAULT_IMAGE_EXTENSIONS",
    "DEFAULT_TARGET_FOLDER_NAME",
    "EMPTY_PAYLOAD_NAME",
    "MAX_BASE_NAME_BYTES",
    "UNRESOLVED_PREVIEW_LIMIT",
]
