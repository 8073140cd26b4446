"""
In-memory format conversion utilities.

Handles conversions between planar images and:
- NumPy arrays in HWC layout (RGB or OpenCV BGR ordering)
- PIL Images (RGB format)
"""

import logging

import cv2
import numpy as np
from PIL import Image

from planarvision.core.constants import ErrorMessages, ImageConstants
from planarvision.core.image import PlanarImage

logger = logging.getLogger(__name__)


class ImageConverters:
    """Utilities for converting planar images to and from other formats."""

    @staticmethod
    def from_numpy(array: np.ndarray, bgr: bool = False) -> PlanarImage:
        """
        Convert an HWC (or HW) NumPy array to a planar image.

        Args:
            array: Array of shape (h, w) or (h, w, c). uint8 input is
                scaled to [0, 1]; other dtypes are cast to float32.
            bgr: If True, a 3-channel array is treated as OpenCV BGR and
                reordered to RGB

        Returns:
            New PlanarImage
        """
        if array.ndim == 2:
            array = array[:, :, np.newaxis]
        elif array.ndim != 3:
            raise ValueError(ErrorMessages.INVALID_ARRAY_SHAPE.format(shape=array.shape))

        if array.dtype == np.uint8:
            samples = array.astype(ImageConstants.DTYPE) / ImageConstants.UINT8_SCALE
        else:
            samples = array.astype(ImageConstants.DTYPE)

        # Convert BGR to RGB if needed
        if bgr and samples.shape[2] == ImageConstants.RGB_CHANNELS:
            samples = cv2.cvtColor(np.ascontiguousarray(samples), cv2.COLOR_BGR2RGB)

        h, w, c = samples.shape
        planar = np.ascontiguousarray(np.transpose(samples, (2, 0, 1))).ravel()
        return PlanarImage(w, h, c, planar)

    @staticmethod
    def to_numpy(image: PlanarImage, bgr: bool = False, as_uint8: bool = False) -> np.ndarray:
        """
        Convert a planar image to an HWC NumPy array.

        Args:
            image: Source image
            bgr: If True, convert a 3-channel result to BGR (OpenCV)
            as_uint8: If True, clip to [0, 1] and scale to 8-bit

        Returns:
            Array of shape (h, w, c), or (h, w) for single channel images
        """
        array = np.transpose(image.data.reshape(image.c, image.h, image.w), (1, 2, 0)).copy()

        if as_uint8:
            clipped = np.clip(array, ImageConstants.MIN_VALUE, ImageConstants.MAX_VALUE)
            array = np.rint(clipped * ImageConstants.UINT8_SCALE).astype(np.uint8)

        # Convert RGB to BGR if needed
        if bgr and image.c == ImageConstants.RGB_CHANNELS:
            array = cv2.cvtColor(array, cv2.COLOR_RGB2BGR)

        if image.c == ImageConstants.GRAYSCALE_CHANNELS:
            array = array[:, :, 0]

        return array

    @staticmethod
    def from_pil(image: Image.Image) -> PlanarImage:
        """
        Convert a PIL Image to a planar image.

        Palette and other non-raw modes are converted to RGB first.

        Args:
            image: PIL Image

        Returns:
            New PlanarImage with samples in [0, 1]
        """
        try:
            if image.mode not in ("L", "RGB", "RGBA", "F"):
                image = image.convert("RGB")
            return ImageConverters.from_numpy(np.array(image))
        except Exception as e:
            logger.error(f"Failed to convert PIL image: {e}")
            raise

    @staticmethod
    def to_pil(image: PlanarImage) -> Image.Image:
        """
        Convert a planar image to an 8-bit PIL Image.

        Samples are clipped to [0, 1] before quantization.

        Args:
            image: Source image with 1, 3 or 4 channels

        Returns:
            PIL Image in L, RGB or RGBA mode
        """
        try:
            return Image.fromarray(ImageConverters.to_numpy(image, as_uint8=True))
        except Exception as e:
            logger.error(f"Failed to convert image to PIL: {e}")
            raise
