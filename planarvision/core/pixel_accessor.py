"""
Bounds-aware pixel access over planar buffers.

Reads and writes use different boundary policies:
- get_pixel clamps every axis to the nearest valid index, so reads
  outside the image repeat the edge pixel.
- set_pixel drops writes whose index falls outside [0, n) on any axis.

Both policies treat an index equal to the axis length as out of range.
"""

from planarvision.core.image import PlanarImage


def _clamp_index(value: int, length: int) -> int:
    if value >= length:
        value = length - 1
    if value < 0:
        value = 0
    return value


def pixel_offset(image: PlanarImage, x: int, y: int, c: int) -> int:
    """Offset of (x, y, c) in the planar buffer (no bounds handling)."""
    return x + y * image.w + image.w * image.h * c


def get_pixel(image: PlanarImage, x: int, y: int, c: int) -> float:
    """
    Get the sample at (x, y, c), clamping each coordinate to the image.

    Args:
        image: Source image
        x: Column (clamped to [0, w-1])
        y: Row (clamped to [0, h-1])
        c: Channel (clamped to [0, c-1])

    Returns:
        Sample value as a Python float
    """
    x = _clamp_index(x, image.w)
    y = _clamp_index(y, image.h)
    c = _clamp_index(c, image.c)
    return float(image.data[pixel_offset(image, x, y, c)])


def set_pixel(image: PlanarImage, x: int, y: int, c: int, v: float) -> None:
    """
    Set the sample at (x, y, c). Out-of-bounds writes are ignored.

    Args:
        image: Image to modify in place
        x: Column in [0, w)
        y: Row in [0, h)
        c: Channel in [0, c)
        v: Value to store
    """
    if not 0 <= x < image.w:
        return
    if not 0 <= y < image.h:
        return
    if not 0 <= c < image.c:
        return
    image.data[pixel_offset(image, x, y, c)] = v


class PixelAccessor:
    """Namespace grouping the pixel access functions."""

    get = staticmethod(get_pixel)
    set = staticmethod(set_pixel)
    offset = staticmethod(pixel_offset)
