"""
Geometric resampling for planar images.

Two interpolation kernels (nearest-neighbor and bilinear) and the
resize drivers that evaluate them over an output grid. Output pixel
centers are mapped back onto source pixel centers:

    src = ratio * dst + (-0.5 + 0.5 * ratio),  ratio = src_size / dst_size

Samples falling outside the source are resolved by get_pixel's
clamp-to-edge policy, so the kernels carry no boundary special cases.
"""

import logging
import math
from typing import Callable, Union

from planarvision.core.constants import ErrorMessages, ResampleConstants
from planarvision.core.enums import InterpolationMethod
from planarvision.core.image import PlanarImage, make_image
from planarvision.core.pixel_accessor import get_pixel, set_pixel
from planarvision.core.utils.decorators import timer
from planarvision.core.utils.enum_converter import enum_to_string, parse_enum
from planarvision.core.utils.math_utils import round_half_away

logger = logging.getLogger(__name__)

Kernel = Callable[[PlanarImage, float, float, int], float]


def nn_interpolate(image: PlanarImage, x: float, y: float, c: int) -> float:
    """
    Sample the pixel nearest to a real-valued coordinate.

    Args:
        image: Source image
        x: Real-valued column
        y: Real-valued row
        c: Channel

    Returns:
        Value of the nearest (edge-clamped) pixel
    """
    return get_pixel(image, round_half_away(x), round_half_away(y), c)


def bilinear_interpolate(image: PlanarImage, x: float, y: float, c: int) -> float:
    """
    Sample a real-valued coordinate by bilinear interpolation.

    The four surrounding pixels are blended vertically in each of the
    left and right columns, then horizontally between the two columns.
    On an integral coordinate the kernel returns the pixel itself.

    Args:
        image: Source image
        x: Real-valued column
        y: Real-valued row
        c: Channel

    Returns:
        Interpolated value
    """
    left = math.floor(x)
    right = math.ceil(x)
    top = math.floor(y)
    bottom = math.ceil(y)

    # Fractional offsets; weights on the far corner are dx and dy
    dx = x - left
    dy = y - top

    v1 = get_pixel(image, left, top, c)
    v2 = get_pixel(image, right, top, c)
    v3 = get_pixel(image, left, bottom, c)
    v4 = get_pixel(image, right, bottom, c)

    q1 = (1.0 - dy) * v1 + dy * v3
    q2 = (1.0 - dy) * v2 + dy * v4

    return (1.0 - dx) * q1 + dx * q2


_KERNELS = {
    InterpolationMethod.NEAREST: nn_interpolate,
    InterpolationMethod.BILINEAR: bilinear_interpolate,
}


def _resolve_kernel(method: Union[InterpolationMethod, str]) -> Kernel:
    parsed = parse_enum(method, InterpolationMethod, normalize=True)
    if parsed is None:
        raise ValueError(ErrorMessages.UNKNOWN_INTERPOLATION.format(method=method))
    return _KERNELS[parsed]


def _axis_mapping(src_size: int, dst_size: int):
    ratio = src_size / dst_size
    correction = -ResampleConstants.HALF_PIXEL + ResampleConstants.HALF_PIXEL * ratio
    return ratio, correction


def resize(
    image: PlanarImage,
    w: int,
    h: int,
    method: Union[InterpolationMethod, str] = ResampleConstants.DEFAULT_INTERPOLATION,
) -> PlanarImage:
    """
    Resize an image to w x h with the given interpolation kernel.

    Args:
        image: Source image (not modified)
        w: Output width
        h: Output height
        method: "nearest" or "bilinear" (or an InterpolationMethod)

    Returns:
        New image of size w x h with the source channel count

    Raises:
        ValueError: If the method is unknown or a size is negative
    """
    kernel = _resolve_kernel(method)
    resized = make_image(w, h, image.c)

    # No target pixels, or no source pixel to clamp to: leave zero-filled
    if w == 0 or h == 0 or image.w == 0 or image.h == 0:
        return resized

    ratio_x, correction_x = _axis_mapping(image.w, w)
    ratio_y, correction_y = _axis_mapping(image.h, h)

    with timer() as t:
        for row in range(h):
            y = ratio_y * row + correction_y
            for col in range(w):
                x = ratio_x * col + correction_x
                for z in range(image.c):
                    set_pixel(resized, col, row, z, kernel(image, x, y, z))

    logger.debug(
        f"Resized {image.w}x{image.h}x{image.c} -> {w}x{h} "
        f"({enum_to_string(method)}) in {t['ms']:.2f} ms"
    )
    return resized


def nn_resize(image: PlanarImage, w: int, h: int) -> PlanarImage:
    """Resize using nearest-neighbor interpolation."""
    return resize(image, w, h, InterpolationMethod.NEAREST)


def bilinear_resize(image: PlanarImage, w: int, h: int) -> PlanarImage:
    """Resize using bilinear interpolation."""
    return resize(image, w, h, InterpolationMethod.BILINEAR)
