"""
Pydantic models for scan results and reports.
"""

from src.models.scan import (
    PreprocessingInfo,
    RowStage,
    ScanReport,
)

__all__ = [
    "PreprocessingInfo",
    "RowStage",
    "ScanReport",
]
