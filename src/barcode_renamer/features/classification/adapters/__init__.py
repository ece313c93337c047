"""
Summary: Concrete adapters for the classification ports.
Why: Give the application layer one import path for the default Pillow, zxing-cpp, and extension adapters.
"""

from .extension_classifier import ExtensionImageClassifier
from .pillow_loader import PillowImageLoader
from .zxing_reader import ZxingBarcodeReader, symbol_format_of

__all__ = [
    "ExtensionImageClassifier",
    "PillowImageLoader",
    "ZxingBarcodeReader",
    "symbol_format_of",
]
