"""
Colorspace conversions for planar images.

Provides:
- rgb_to_grayscale: luma-weighted single channel image (new image)
- shift_image: add a constant to one channel (in place)
- rgb_to_hsv / hsv_to_rgb: hexagonal HSV model (in place)

Hue, saturation and value are all expressed in [0, 1]. The HSV
conversions overwrite channels 0, 1 and 2 of the input image.
"""

import logging
import math

from planarvision.core.constants import ColorspaceConstants, ImageConstants
from planarvision.core.enums import HSVChannel, RGBChannel
from planarvision.core.exceptions import InvalidChannelCountError
from planarvision.core.image import PlanarImage, make_image
from planarvision.core.pixel_accessor import get_pixel, set_pixel
from planarvision.core.utils.math_utils import three_way_max, three_way_min

logger = logging.getLogger(__name__)


def _require_rgb(image: PlanarImage, exact: bool) -> None:
    channels = ImageConstants.RGB_CHANNELS
    if exact and image.c != channels:
        raise InvalidChannelCountError(channels, image.c)
    if not exact and image.c < channels:
        raise InvalidChannelCountError(f">={channels}", image.c)


def rgb_to_grayscale(image: PlanarImage) -> PlanarImage:
    """
    Convert an RGB image to grayscale using luma weights.

    Y' = 0.299 R + 0.587 G + 0.114 B

    Args:
        image: Source image with exactly 3 channels

    Returns:
        New single channel image

    Raises:
        InvalidChannelCountError: If the image does not have 3 channels
    """
    _require_rgb(image, exact=True)
    gray = make_image(image.w, image.h, ImageConstants.GRAYSCALE_CHANNELS)

    for x in range(image.w):
        for y in range(image.h):
            red = get_pixel(image, x, y, RGBChannel.RED)
            green = get_pixel(image, x, y, RGBChannel.GREEN)
            blue = get_pixel(image, x, y, RGBChannel.BLUE)
            luma = (
                red * ColorspaceConstants.LUMA_RED
                + green * ColorspaceConstants.LUMA_GREEN
                + blue * ColorspaceConstants.LUMA_BLUE
            )
            set_pixel(gray, x, y, 0, luma)

    return gray


def shift_image(image: PlanarImage, channel: int, delta: float) -> None:
    """
    Add delta to every pixel of one channel, in place.

    No range enforcement is applied; follow with clamp_image when the
    result must stay displayable. A channel outside [0, c) is ignored.

    Unlike the other conversions this writes through a plane view rather
    than set_pixel. Every index of a valid plane is in bounds, so the
    result is the same as a per-pixel get_pixel/set_pixel loop.

    Args:
        image: Image to modify
        channel: Channel index
        delta: Value added to each sample
    """
    if not 0 <= channel < image.c:
        logger.debug(f"Ignoring shift of channel {channel} on {image.c}-channel image")
        return
    image.plane(channel)[...] += delta


def rgb_to_hsv(image: PlanarImage) -> None:
    """
    Convert an image from RGB to HSV, in place.

    V is the largest component and S = (V - min) / V. Hue follows the
    hexagonal projection described in
    https://en.wikipedia.org/wiki/HSL_and_HSV#Hue_and_chroma and is
    normalized to [0, 1). Black pixels get S = 0 and achromatic pixels
    get H = 0.

    Args:
        image: RGB image with at least 3 channels

    Raises:
        InvalidChannelCountError: If the image has fewer than 3 channels
    """
    _require_rgb(image, exact=False)

    for x in range(image.w):
        for y in range(image.h):
            red = get_pixel(image, x, y, RGBChannel.RED)
            green = get_pixel(image, x, y, RGBChannel.GREEN)
            blue = get_pixel(image, x, y, RGBChannel.BLUE)

            value = three_way_max(red, green, blue)
            diff = value - three_way_min(red, green, blue)

            saturation = diff / value if value > 0 else 0.0

            hue = 0.0
            if diff != 0:
                if value == red:
                    hue = (green - blue) / diff
                elif value == green:
                    hue = (blue - red) / diff + ColorspaceConstants.GREEN_SECTOR_OFFSET
                else:
                    hue = (red - green) / diff + ColorspaceConstants.BLUE_SECTOR_OFFSET

                hue /= ColorspaceConstants.HUE_SECTORS
                if hue < 0:
                    hue += 1.0

            set_pixel(image, x, y, HSVChannel.HUE, hue)
            set_pixel(image, x, y, HSVChannel.SATURATION, saturation)
            set_pixel(image, x, y, HSVChannel.VALUE, value)


def _hue_sector_components(h: float, chroma: float, secondary: float):
    # Sectors are closed intervals checked in order; the first match wins on a boundary.
    if 0.0 <= h <= 1.0:
        return chroma, secondary, 0.0
    if 1.0 <= h <= 2.0:
        return secondary, chroma, 0.0
    if 2.0 <= h <= 3.0:
        return 0.0, chroma, secondary
    if 3.0 <= h <= 4.0:
        return 0.0, secondary, chroma
    if 4.0 <= h <= 5.0:
        return secondary, 0.0, chroma
    if 5.0 <= h <= 6.0:
        return chroma, 0.0, secondary
    return 0.0, 0.0, 0.0


def hsv_to_rgb(image: PlanarImage) -> None:
    """
    Convert an image from HSV back to RGB, in place.

    Inverse of rgb_to_hsv. See
    https://en.wikipedia.org/wiki/HSL_and_HSV#HSV_to_RGB

    Args:
        image: HSV image with at least 3 channels

    Raises:
        InvalidChannelCountError: If the image has fewer than 3 channels
    """
    _require_rgb(image, exact=False)

    for x in range(image.w):
        for y in range(image.h):
            hue = get_pixel(image, x, y, HSVChannel.HUE)
            saturation = get_pixel(image, x, y, HSVChannel.SATURATION)
            value = get_pixel(image, x, y, HSVChannel.VALUE)

            chroma = value * saturation
            h = hue * ColorspaceConstants.HUE_SECTORS
            secondary = chroma * (1 - abs(math.fmod(h, 2.0) - 1))
            offset = value - chroma

            red, green, blue = _hue_sector_components(h, chroma, secondary)

            set_pixel(image, x, y, RGBChannel.RED, red + offset)
            set_pixel(image, x, y, RGBChannel.GREEN, green + offset)
            set_pixel(image, x, y, RGBChannel.BLUE, blue + offset)
