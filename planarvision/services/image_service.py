"""
Image Processing Service - applies processing operations from validated parameters.

This service sits between callers holding loose parameters (dicts,
configuration) and the processing functions, adding validation,
configured defaults, timing and logging.
"""

import logging
from typing import Any, Dict, Optional, Union

from planarvision.config import Settings, get_settings
from planarvision.core.image import PlanarImage
from planarvision.core.utils.decorators import timer
from planarvision.core.utils.enum_converter import enum_to_string
from planarvision.core.utils.params_processor import params_to_dict, prepare_params
from planarvision.processing.clamping import clamp_image
from planarvision.processing.colorspace import (
    hsv_to_rgb,
    rgb_to_grayscale,
    rgb_to_hsv,
    shift_image,
)
from planarvision.processing.resampling import resize
from planarvision.schemas import ResizeParams, ShiftParams

logger = logging.getLogger(__name__)


class ImageProcessingService:
    """
    Service for planar image processing operations.

    Operations that allocate (resize, to_grayscale) return a new image.
    All other operations mutate the given image in place and return it
    for chaining.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize image processing service.

        Args:
            settings: Settings instance (defaults to the cached global settings)
        """
        self.settings = settings or get_settings()

    def resize(
        self, image: PlanarImage, params: Union[ResizeParams, Dict[str, Any]]
    ) -> PlanarImage:
        """
        Resize image.

        Args:
            image: Source image (not modified)
            params: Resize parameters; a missing method uses the configured default

        Returns:
            Resized image
        """
        params = prepare_params(params, ResizeParams)
        method = params.method or self.settings.processing.default_interpolation

        with timer() as t:
            result = resize(image, params.width, params.height, method)

        logger.debug(
            f"resize {params_to_dict(params)} method={enum_to_string(method)} "
            f"took {t['ms']:.2f} ms"
        )
        return result

    def shift(self, image: PlanarImage, params: Union[ShiftParams, Dict[str, Any]]) -> PlanarImage:
        """
        Shift one channel by a constant, clamping afterwards if configured.

        Args:
            image: Image to modify in place
            params: Shift parameters

        Returns:
            The same image
        """
        params = prepare_params(params, ShiftParams)

        with timer() as t:
            shift_image(image, params.channel, params.delta)
            if self.settings.processing.clamp_after_shift:
                clamp_image(image)

        logger.debug(f"shift {params_to_dict(params)} took {t['ms']:.2f} ms")
        return image

    def to_grayscale(self, image: PlanarImage) -> PlanarImage:
        with timer() as t:
            gray = rgb_to_grayscale(image)
        logger.debug(f"grayscale {image.w}x{image.h} took {t['ms']:.2f} ms")
        return gray

    def to_hsv(self, image: PlanarImage) -> PlanarImage:
        with timer() as t:
            rgb_to_hsv(image)
        logger.debug(f"rgb->hsv {image.w}x{image.h} took {t['ms']:.2f} ms")
        return image

    def to_rgb(self, image: PlanarImage) -> PlanarImage:
        with timer() as t:
            hsv_to_rgb(image)
        logger.debug(f"hsv->rgb {image.w}x{image.h} took {t['ms']:.2f} ms")
        return image

    def clamp(self, image: PlanarImage) -> PlanarImage:
        with timer() as t:
            clamp_image(image)
        logger.debug(f"clamp {image.w}x{image.h}x{image.c} took {t['ms']:.2f} ms")
        return image
