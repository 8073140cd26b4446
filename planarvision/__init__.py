"""
planarvision - floating-point image core over planar buffers.

Exposes the image model, pixel access, colorspace conversion,
resampling and range clamping at package level.
"""

from planarvision.core.exceptions import InvalidChannelCountError, PlanarImageError
from planarvision.core.image import PlanarImage, copy_image, make_image
from planarvision.core.pixel_accessor import get_pixel, set_pixel
from planarvision.processing.clamping import clamp_image
from planarvision.processing.colorspace import (
    hsv_to_rgb,
    rgb_to_grayscale,
    rgb_to_hsv,
    shift_image,
)
from planarvision.processing.resampling import (
    bilinear_interpolate,
    bilinear_resize,
    nn_interpolate,
    nn_resize,
    resize,
)

__version__ = "1.0.0"

__all__ = [
    "PlanarImage",
    "make_image",
    "copy_image",
    "get_pixel",
    "set_pixel",
    "rgb_to_grayscale",
    "shift_image",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "nn_interpolate",
    "bilinear_interpolate",
    "nn_resize",
    "bilinear_resize",
    "resize",
    "clamp_image",
    "PlanarImageError",
    "InvalidChannelCountError",
]
