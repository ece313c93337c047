"""
Summary: Decode one image into a normalized, order-preserving outcome.
Why: Fold loader errors, decoder errors, and format filtering into a single result type.
"""

from __future__ import annotations

from barcode_renamer.platform.logging import logger

from ..domain.models import (
    DecodeFailed,
    DecodeOutcome,
    Found,
    ImageCandidate,
    NotFound,
    SymbolFormat,
)
from .ports import BarcodeReadError, BarcodeReaderPort, ImageLoadError, ImageLoaderPort


def decode(
    candidate: ImageCandidate,
    *,
    loader: ImageLoaderPort,
    reader: BarcodeReaderPort,
    format_restriction: SymbolFormat | None = None,
    high_effort: bool = False,
) -> DecodeOutcome:
    """Load ``candidate`` and return every usable symbol it carries.

    Symbols are filtered to ``format_restriction`` before emptiness is
    checked, so a restriction alone can turn a hit into ``NotFound``.
    """

    try:
        image = loader.load(candidate.path)
    except ImageLoadError as exc:
        return DecodeFailed(cause=str(exc) or type(exc).__name__)

    try:
        symbols = reader.read(image, high_effort=high_effort)
    except BarcodeReadError as exc:
        return DecodeFailed(cause=str(exc) or type(exc).__name__)

    if not symbols:
        return NotFound()

    if format_restriction is None:
        return Found(symbols=tuple(symbols))

    matching = tuple(symbol for symbol in symbols if symbol.format is format_restriction)
    if not matching:
        logger.debug(
            "Ignoring %d symbol(s) not matching %s in %s",
            len(symbols),
            format_restriction.value,
            candidate.name,
        )
        return NotFound(rejected=len(symbols))
    return Found(symbols=matching)


__all__ = ["decode"]
