"""
Pytest configuration and fixtures for planarvision tests
"""

import numpy as np
import pytest

from planarvision.config import ProcessingSettings, Settings
from planarvision.core.image import PlanarImage, make_image
from planarvision.services.image_service import ImageProcessingService


def image_from_rows(rows):
    """Build an image from an (h, w, c) nested list of RGB-style pixels"""
    array = np.asarray(rows, dtype=np.float32)
    h, w, c = array.shape
    return PlanarImage(w, h, c, np.ascontiguousarray(np.transpose(array, (2, 0, 1))).ravel())


@pytest.fixture
def gradient_image():
    """4x3 RGB image with distinct samples in every position"""
    image = make_image(4, 3, 3)
    image.data[:] = np.linspace(0.0, 1.0, image.size, dtype=np.float32)
    return image


@pytest.fixture
def red_corner_image():
    """2x2 RGB image, red at (0, 0) and black elsewhere"""
    return image_from_rows(
        [
            [[1.0, 0.0, 0.0], [0.0, 0.0, 0.0]],
            [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]],
        ]
    )


@pytest.fixture
def random_rgb_image():
    """Seeded random RGB image with samples in [0, 1]"""
    rng = np.random.default_rng(42)
    image = make_image(7, 5, 3)
    image.data[:] = rng.random(image.size, dtype=np.float32)
    return image


@pytest.fixture
def settings():
    """Default settings, independent of the environment"""
    return Settings(_env_prefix="PLANARVISION_TEST_UNUSED_")


@pytest.fixture
def image_service(settings):
    """Create ImageProcessingService instance for testing"""
    return ImageProcessingService(settings=settings)


@pytest.fixture
def clamping_service():
    """ImageProcessingService that clamps after every shift"""
    settings = Settings(
        _env_prefix="PLANARVISION_TEST_UNUSED_",
        processing=ProcessingSettings(clamp_after_shift=True),
    )
    return ImageProcessingService(settings=settings)
