"""
Scan models for row attempts and decode reports.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from src.models.base import utc_now


class RowStage(str, Enum):
    """
    Furthest stage a scanline reached while being decoded.

    Quantization cannot fail, so a segmented row always moves on to
    QUANTIFIED; SEGMENTED is a transit state and never a row's final stage.
    """

    SCANNING = "scanning"
    SEGMENTED = "segmented"
    QUANTIFIED = "quantified"
    IDENTIFIED = "identified"
    VALIDATED = "validated"


class PreprocessingInfo(BaseModel):
    """Information about image binarization."""

    original_width: int | None = None
    original_height: int | None = None
    grayscale: bool = False
    threshold: float | None = Field(None, description="Threshold actually applied")
    otsu: bool = False
    duration_ms: int | None = None


class ScanReport(BaseModel):
    """Outcome of decoding one image file."""

    source: str = Field(..., description="Image path or label")
    decoded: bool = False
    code: str | None = Field(None, description="13-digit EAN code")
    formatted: str | None = Field(None, description="Code grouped as 1 + 6 + 6 digits")
    number: int | None = None
    row: int | None = Field(None, description="Scanline the code was read from")
    rows_scanned: int = 0
    duration_ms: int | None = None
    preprocessing: PreprocessingInfo | None = None
    error: str | None = None
    scanned_at: datetime = Field(default_factory=utc_now)
