"""
Image processing operations over planar images.

Modules:
- colorspace: Grayscale, channel shift and RGB/HSV conversion
- resampling: Nearest-neighbor and bilinear interpolation and resize
- clamping: Range enforcement to [0, 1]
"""

from .clamping import clamp_image
from .colorspace import hsv_to_rgb, rgb_to_grayscale, rgb_to_hsv, shift_image
from .resampling import (
    bilinear_interpolate,
    bilinear_resize,
    nn_interpolate,
    nn_resize,
    resize,
)

__all__ = [
    "clamp_image",
    "rgb_to_grayscale",
    "shift_image",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "nn_interpolate",
    "bilinear_interpolate",
    "nn_resize",
    "bilinear_resize",
    "resize",
]
