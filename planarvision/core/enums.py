"""
Centralized enum definitions.
"""

from enum import Enum


class InterpolationMethod(str, Enum):
    """Resampling kernels"""

    NEAREST = "nearest"
    BILINEAR = "bilinear"


class RGBChannel(int, Enum):
    """Channel indices of an RGB image"""

    RED = 0
    GREEN = 1
    BLUE = 2


class HSVChannel(int, Enum):
    """Channel indices of an image converted in place to HSV"""

    HUE = 0
    SATURATION = 1
    VALUE = 2
