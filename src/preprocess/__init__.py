"""
Image preprocessing ahead of scanline decoding.
"""

from src.preprocess.binarize import BinarizeConfig, Binarizer

__all__ = ["BinarizeConfig", "Binarizer"]
