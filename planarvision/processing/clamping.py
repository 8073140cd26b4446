"""
Range clamping for planar images.
"""

import numpy as np

from planarvision.core.constants import ImageConstants
from planarvision.core.image import PlanarImage


def clamp_image(image: PlanarImage) -> None:
    """
    Clamp every sample of every channel into [0, 1], in place.

    Values above 1 become 1 and values below 0 become 0. Values already
    in range, including exact bounds, are untouched. NaN stays NaN.

    Args:
        image: Image to clamp
    """
    np.clip(image.data, ImageConstants.MIN_VALUE, ImageConstants.MAX_VALUE, out=image.data)
