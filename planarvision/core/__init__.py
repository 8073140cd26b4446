"""
Core modules for planarvision
"""

from .exceptions import InvalidChannelCountError, PlanarImageError
from .image import PlanarImage, copy_image, make_image
from .pixel_accessor import PixelAccessor, get_pixel, pixel_offset, set_pixel

__all__ = [
    "PlanarImage",
    "make_image",
    "copy_image",
    "PixelAccessor",
    "get_pixel",
    "set_pixel",
    "pixel_offset",
    "PlanarImageError",
    "InvalidChannelCountError",
]
