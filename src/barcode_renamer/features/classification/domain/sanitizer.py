"""
Summary: Make decoded payload text safe to use as a single filename component.
Why: Payloads may carry separators or control bytes that would escape the target directory.
"""

from __future__ import annotations

import re
import unicodedata
from typing import ClassVar, final

from barcode_renamer.config.settings import EMPTY_PAYLOAD_NAME, MAX_BASE_NAME_BYTES


@final
class PayloadSanitizer:
    """Sanitize payload text for use as a file base name."""

    # Path separators, Windows-reserved characters, and control characters.
    UNSAFE_CHARACTERS: ClassVar[re.Pattern[str]] = re.compile(r'[<>:"/\\|?*\x00-\x1f\x7f]')

    REPLACEMENT: ClassVar[str] = "_"

    RESERVED_NAMES: ClassVar[frozenset[str]] = frozenset({".", ".."})

    @classmethod
    def sanitize(cls, text: str, max_length: int = MAX_BASE_NAME_BYTES) -> str:
        """Return ``text`` with unsafe characters replaced.

        Args:
            text: Raw payload-derived base name.
            max_length: Maximum length in UTF-8 bytes.

        Returns:
            str: Sanitized base name that is:
                - NFC-normalized
                - Free of separators, reserved and control characters
                - Stripped of surrounding whitespace and trailing dots
                - Within ``max_length`` bytes
                - ``EMPTY_PAYLOAD_NAME`` if nothing usable remains
        """
        text = unicodedata.normalize("NFC", text)
        text = cls.UNSAFE_CHARACTERS.sub(cls.REPLACEMENT, text)
        text = text.strip().rstrip(".").strip()

        while len(text.encode("utf-8")) > max_length:
            text = text[:-1]
        text = text.rstrip(". ")

        if not text or text in cls.RESERVED_NAMES:
            return EMPTY_PAYLOAD_NAME
        return text


__all__ = ["PayloadSanitizer"]
