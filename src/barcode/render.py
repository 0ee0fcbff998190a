"""
Noise-free EAN-13 rendering.

Produces exact scanlines and images from a code, using the same symbol tables
as the decoder. Used for synthetic test images.
"""

from collections.abc import Sequence

import numpy as np

from src.barcode.tables import PARITY_R, encode_digit, parity_for_leading_digit, pattern_widths
from src.barcode.validator import EAN13_LENGTH, calculate_ean13_checksum, validate_ean13_checksum

GUARD_SIDE = "101"
GUARD_MIDDLE = "01010"
SYMBOL_MODULES = 95

# Minimum quiet zone on each side, in modules
DEFAULT_QUIET_ZONE = 9


def _digit_modules(digit: int, parity: str) -> str:
    # Left-half digits start with a space, right-half digits with a bar
    color = "1" if parity == PARITY_R else "0"
    modules = ""
    for width in pattern_widths(encode_digit(digit, parity)):
        modules += color * width
        color = "0" if color == "1" else "1"
    return modules


def ean13_modules(digits: Sequence[int]) -> str:
    """
    Build the 95-module bit string for 13 digits ("1" = bar, "0" = space).

    The check digit is not verified.
    """
    if len(digits) != EAN13_LENGTH:
        raise ValueError(f"EAN-13 needs {EAN13_LENGTH} digits, got {len(digits)}")

    parity = parity_for_leading_digit(digits[0])
    left = "".join(_digit_modules(d, p) for d, p in zip(digits[1:7], parity))
    right = "".join(_digit_modules(d, PARITY_R) for d in digits[7:])
    return GUARD_SIDE + left + GUARD_MIDDLE + right + GUARD_SIDE


def modules_to_scanline(
    modules: str,
    module_width: int = 1,
    quiet_zone: int = DEFAULT_QUIET_ZONE,
    black: int = 0,
    white: int = 255,
) -> np.ndarray:
    """
    Expand a module bit string into pixels.

    Args:
        modules: Bit string, "1" for bar and "0" for space
        module_width: Pixels per module
        quiet_zone: Blank modules added on each side
        black: Pixel value of a bar
        white: Pixel value of a space

    Returns:
        1-D uint8 array
    """
    if module_width < 1:
        raise ValueError("Module width must be at least 1 pixel")
    if quiet_zone < 0:
        raise ValueError("Quiet zone cannot be negative")

    padded = "0" * quiet_zone + modules + "0" * quiet_zone
    bits = np.frombuffer(padded.encode("ascii"), dtype=np.uint8) == ord("1")
    pixels = np.where(bits, black, white).astype(np.uint8)
    return np.repeat(pixels, module_width)


def _normalize_code(code: str) -> list[int]:
    if not code.isdigit():
        raise ValueError(f"Code contains non-numeric characters: {code!r}")
    if len(code) == EAN13_LENGTH - 1:
        code += str(calculate_ean13_checksum(code))
    elif len(code) != EAN13_LENGTH:
        raise ValueError(f"Unsupported code length: {len(code)}")
    elif not validate_ean13_checksum(code):
        raise ValueError(f"Invalid EAN-13 checksum: {code}")
    return [int(c) for c in code]


def render_ean13(
    code: str,
    module_width: int = 1,
    quiet_zone: int = DEFAULT_QUIET_ZONE,
    black: int = 0,
    white: int = 255,
) -> np.ndarray:
    """
    Render an EAN-13 code as a single scanline.

    Args:
        code: 12 digits (check digit appended) or 13 digits (check digit verified)

    Returns:
        1-D uint8 array of (95 + 2 * quiet_zone) * module_width pixels
    """
    modules = ean13_modules(_normalize_code(code))
    return modules_to_scanline(modules, module_width, quiet_zone, black, white)


def render_ean13_image(
    code: str,
    height: int = 50,
    module_width: int = 2,
    quiet_zone: int = DEFAULT_QUIET_ZONE,
    black: int = 0,
    white: int = 255,
) -> np.ndarray:
    """Render an EAN-13 code as a 2-D image of identical rows."""
    if height < 1:
        raise ValueError("Height must be at least 1 pixel")
    row = render_ean13(code, module_width, quiet_zone, black, white)
    return np.tile(row, (height, 1))
