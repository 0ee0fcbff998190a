"""
Image binarization for scanline decoding.

Turns an upright, cropped barcode image into a two-level image:
- Decodes the image bytes as grayscale
- Converts colour arrays to grayscale
- Applies a fixed or Otsu threshold
"""

import time
from dataclasses import dataclass

import cv2
import numpy as np
import structlog

from src.config import get_settings
from src.models import PreprocessingInfo

logger = structlog.get_logger(__name__)


@dataclass
class BinarizeConfig:
    """Configuration for image binarization."""

    threshold: int = 25
    use_otsu: bool = True
    black: int = 0
    white: int = 255


class Binarizer:
    """
    Binarizes images into the black/white pixel grid the decoder expects.
    """

    def __init__(self, config: BinarizeConfig | None = None):
        if config is None:
            settings = get_settings()
            config = BinarizeConfig(
                threshold=settings.binarize_threshold,
                use_otsu=settings.binarize_use_otsu,
                black=settings.scanline_black,
                white=settings.scanline_white,
            )
        self.config = config

    def load_grayscale(self, image_data: bytes) -> np.ndarray:
        """Decode image bytes into a grayscale array."""
        if not image_data:
            raise ValueError("Failed to decode image: no data")

        nparr = np.frombuffer(image_data, np.uint8)
        img = cv2.imdecode(nparr, cv2.IMREAD_GRAYSCALE)

        if img is None:
            raise ValueError("Failed to decode image")

        return img

    def binarize(self, image: np.ndarray) -> tuple[np.ndarray, float]:
        """
        Threshold an image.

        Args:
            image: Grayscale or BGR image

        Returns:
            Tuple of (binary image with only black and white values, threshold used)
        """
        gray = image
        if gray.ndim == 3:
            gray = cv2.cvtColor(gray, cv2.COLOR_BGR2GRAY)
        if gray.dtype != np.uint8:
            gray = np.clip(gray, 0, 255).astype(np.uint8)

        flags = cv2.THRESH_BINARY
        if self.config.use_otsu:
            flags |= cv2.THRESH_OTSU

        used, mask = cv2.threshold(gray, self.config.threshold, 255, flags)
        binary = np.where(mask > 0, self.config.white, self.config.black).astype(np.uint8)
        return binary, float(used)

    def preprocess(self, image_data: bytes) -> tuple[np.ndarray, PreprocessingInfo]:
        """
        Load and binarize an image.

        Args:
            image_data: Raw image bytes

        Returns:
            Tuple of (binary image, preprocessing_info)
        """
        start_time = time.time()

        gray = self.load_grayscale(image_data)
        height, width = gray.shape[:2]
        binary, used = self.binarize(gray)

        duration_ms = int((time.time() - start_time) * 1000)

        logger.debug(
            "Image binarized",
            width=width,
            height=height,
            threshold=used,
            otsu=self.config.use_otsu,
        )

        info = PreprocessingInfo(
            original_width=width,
            original_height=height,
            grayscale=True,
            threshold=used,
            otsu=self.config.use_otsu,
            duration_ms=duration_ms,
        )

        return binary, info
