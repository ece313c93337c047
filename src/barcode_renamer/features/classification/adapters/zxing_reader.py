"""
Summary: Multi-symbol barcode reader adapter backed by zxing-cpp.
Why: Translate zxing-cpp results and formats into domain symbols in scan order.
"""

from __future__ import annotations

from typing import Any, Final, final

import zxingcpp

from ..domain.models import DecodedSymbol, SymbolFormat
from ..usecases.ports import BarcodeReadError

_ZXING_FORMATS: Final[dict[str, SymbolFormat]] = {
    "Aztec": SymbolFormat.AZTEC,
    "Codabar": SymbolFormat.CODABAR,
    "Code39": SymbolFormat.CODE_39,
    "Code93": SymbolFormat.CODE_93,
    "Code128": SymbolFormat.CODE_128,
    "DataBar": SymbolFormat.RSS_14,
    "DataBarExpanded": SymbolFormat.RSS_EXPANDED,
    "DataBarLimited": SymbolFormat.RSS_LIMITED,
    "DataMatrix": SymbolFormat.DATA_MATRIX,
    "DXFilmEdge": SymbolFormat.DX_FILM_EDGE,
    "EAN8": SymbolFormat.EAN_8,
    "EAN13": SymbolFormat.EAN_13,
    "ITF": SymbolFormat.ITF,
    "MaxiCode": SymbolFormat.MAXICODE,
    "MicroQRCode": SymbolFormat.MICRO_QR_CODE,
    "PDF417": SymbolFormat.PDF_417,
    "QRCode": SymbolFormat.QR_CODE,
    "RMQRCode": SymbolFormat.RMQR_CODE,
    "UPCA": SymbolFormat.UPC_A,
    "UPCE": SymbolFormat.UPC_E,
}


def symbol_format_of(zxing_format: Any) -> SymbolFormat:
    """Map a ``zxingcpp.BarcodeFormat`` to the domain enum."""

    name = getattr(zxing_format, "name", None) or str(zxing_format).rsplit(".", 1)[-1]
    return _ZXING_FORMATS.get(name, SymbolFormat.UNKNOWN)


@final
class ZxingBarcodeReader:
    """Read every barcode in an image with ``zxingcpp.read_barcodes``.

    The normal mode keeps zxing-cpp's defaults, which already search rotated
    and downscaled copies. When that finds nothing, the high-effort mode runs a
    second pass with the global-histogram binarizer, which copes better with
    uneven lighting.
    """

    def read(self, image: Any, *, high_effort: bool = False) -> list[DecodedSymbol]:
        try:
            results = zxingcpp.read_barcodes(image)
            if not results and high_effort:
                results = zxingcpp.read_barcodes(
                    image, binarizer=zxingcpp.Binarizer.GlobalHistogram
                )
        except (RuntimeError, TypeError, ValueError) as exc:
            raise BarcodeReadError(f"Decoder failed: {exc}") from exc

        return [
            DecodedSymbol(payload=result.text, format=symbol_format_of(result.format))
            for result in results
        ]


__all__ = ["ZxingBarcodeReader", "symbol_format_of"]
