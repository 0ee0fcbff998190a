"""
EAN-13 scanline decoding utilities.
"""

from src.barcode.decoder import (
    BarcodeResult,
    Ean13Decoder,
    InvalidImageError,
    RowAttempt,
    decode_image,
)
from src.barcode.render import render_ean13, render_ean13_image
from src.barcode.validator import (
    calculate_ean13_checksum,
    is_checksum_valid,
    is_valid_ean13,
    validate_ean13_checksum,
)

__all__ = [
    "BarcodeResult",
    "Ean13Decoder",
    "InvalidImageError",
    "RowAttempt",
    "decode_image",
    "render_ean13",
    "render_ean13_image",
    "calculate_ean13_checksum",
    "is_checksum_valid",
    "is_valid_ean13",
    "validate_ean13_checksum",
]
