"""
EAN-13 decoder for binarized images, one scanline at a time.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np
import structlog

from src.barcode.quantizer import ModuleWidth, quantize_digit
from src.barcode.segmenter import DIGITS_PER_HALF, segment_row
from src.barcode.tables import LG_CODES, PARITY_LEADING_DIGIT, R_CODES
from src.barcode.validator import EAN13_LENGTH, is_checksum_valid
from src.config import get_settings
from src.models.scan import RowStage

logger = structlog.get_logger(__name__)


class InvalidImageError(ValueError):
    """Raised when the input is not a single-channel two-level image."""


@dataclass(frozen=True)
class RowAttempt:
    """Outcome of decoding a single scanline."""

    stage: RowStage
    digits: tuple[int, ...] = ()
    reason: str | None = None

    @property
    def validated(self) -> bool:
        return self.stage == RowStage.VALIDATED


@dataclass(frozen=True)
class BarcodeResult:
    """Result of decoding an image."""

    decoded: bool
    digits: tuple[int, ...] = ()
    row: int | None = None  # first scanline that decoded
    rows_scanned: int = 0

    @property
    def code(self) -> str:
        """The 13 digits as a string, leading digit first."""
        if not self.decoded:
            raise ValueError("Barcode was not decoded")
        return "".join(str(d) for d in self.digits)

    @property
    def number(self) -> int:
        """The 13 digits as an integer (a leading zero is dropped)."""
        return int(self.code)

    @property
    def formatted(self) -> str:
        """The code grouped as leading digit, left half, right half."""
        code = self.code
        return f"{code[0]} {code[1:7]} {code[7:]}"


class Ean13Decoder:
    """
    Decoder for upright EAN-13 barcodes in a binarized image.

    Rows are tried top to bottom and the first one that yields a
    checksum-valid number wins.
    """

    def __init__(self, black: int | None = None, white: int | None = None):
        """
        Initialize decoder.

        Args:
            black: Pixel value of bars (default: settings.scanline_black)
            white: Pixel value of spaces (default: settings.scanline_white)
        """
        settings = get_settings()
        self.black = settings.scanline_black if black is None else black
        self.white = settings.scanline_white if white is None else white
        if self.black == self.white:
            raise ValueError("Black and white pixel values must differ")

    def decode(self, image: Any) -> BarcodeResult:
        """
        Decode the first readable row of an image.

        Args:
            image: 2-D array (height x width) of black/white pixel values

        Returns:
            Barcode result; ``decoded`` is False if no row could be read

        Raises:
            InvalidImageError: If the image is not a single-channel
                black/white image
        """
        grid = self._to_grid(image)
        height, width = grid.shape

        for row_index in range(height):
            attempt = self.decode_row(grid[row_index])
            if attempt.validated:
                result = BarcodeResult(
                    decoded=True,
                    digits=attempt.digits,
                    row=row_index,
                    rows_scanned=row_index + 1,
                )
                logger.info(
                    "Barcode decoded",
                    code=result.code,
                    row=row_index,
                    rows_scanned=result.rows_scanned,
                )
                return result

            logger.debug(
                "Row rejected",
                row=row_index,
                stage=attempt.stage.value,
                reason=attempt.reason,
            )

        logger.info("No barcode found", rows_scanned=height, width=width)
        return BarcodeResult(decoded=False, rows_scanned=height)

    def decode_row(self, row: Sequence[int] | np.ndarray) -> RowAttempt:
        """
        Decode one binarized scanline.

        Returns:
            The attempt, with digits only when the row validated
        """
        pixels = row.tolist() if isinstance(row, np.ndarray) else list(row)

        structure = segment_row(pixels, self.black, self.white)
        if structure is None:
            return RowAttempt(RowStage.SCANNING, reason="Incomplete guard/code structure")

        width = ModuleWidth.from_guards(*structure.guards)
        left_codes = [quantize_digit(runs, width) for runs in structure.left_digits()]
        right_codes = [quantize_digit(runs, width) for runs in structure.right_digits()]

        digits = [0] * EAN13_LENGTH
        parity = ""
        for position, pattern in enumerate(left_codes):
            entry = LG_CODES.get(pattern)
            if entry is None:
                return RowAttempt(
                    RowStage.QUANTIFIED,
                    reason=f"Unknown left pattern {pattern} at digit {position + 1}",
                )
            digits[1 + position], letter = entry
            parity += letter

        for position, pattern in enumerate(right_codes):
            digit = R_CODES.get(pattern)
            if digit is None:
                return RowAttempt(
                    RowStage.QUANTIFIED,
                    reason=f"Unknown right pattern {pattern} at digit {position + 1}",
                )
            digits[1 + DIGITS_PER_HALF + position] = digit

        leading = PARITY_LEADING_DIGIT.get(parity)
        if leading is None:
            return RowAttempt(RowStage.QUANTIFIED, reason=f"Unknown parity {parity}")
        digits[0] = leading

        if not is_checksum_valid(digits):
            return RowAttempt(RowStage.IDENTIFIED, reason="Checksum mismatch")

        return RowAttempt(RowStage.VALIDATED, digits=tuple(digits))

    def _to_grid(self, image: Any) -> np.ndarray:
        """Check the image contract and return it as a 2-D array."""
        try:
            grid = np.asarray(image)
        except ValueError as e:
            raise InvalidImageError(f"Barcode image is not a pixel grid: {e}") from e

        if grid.ndim == 3 and grid.shape[2] == 1:
            grid = grid[:, :, 0]
        if grid.ndim != 2:
            raise InvalidImageError(f"Barcode image is not single-channel: shape {grid.shape}")
        if grid.shape[0] == 0 or grid.shape[1] == 0:
            raise InvalidImageError("Barcode image is empty")
        if not np.isin(grid, (self.black, self.white)).all():
            raise InvalidImageError(
                f"Barcode image is not binarized to {self.black}/{self.white}"
            )

        return grid


def decode_image(
    image: Any,
    black: int | None = None,
    white: int | None = None,
) -> BarcodeResult:
    """
    Convenience function to decode an EAN-13 barcode from a binarized image.

    Args:
        image: 2-D black/white pixel grid
        black: Pixel value of bars
        white: Pixel value of spaces

    Returns:
        Barcode result
    """
    decoder = Ean13Decoder(black=black, white=white)
    return decoder.decode(image)
