"""
Tests for interpolation kernels and resize drivers
"""

import numpy as np
import pytest

from planarvision.core.enums import InterpolationMethod
from planarvision.core.image import PlanarImage, make_image
from planarvision.core.pixel_accessor import get_pixel
from planarvision.processing.resampling import (
    bilinear_interpolate,
    bilinear_resize,
    nn_interpolate,
    nn_resize,
    resize,
)
from tests.conftest import image_from_rows


@pytest.fixture
def ramp_image():
    """3x1 single channel image with values 0, 1, 2"""
    return PlanarImage(3, 1, 1, np.array([0.0, 1.0, 2.0], dtype=np.float32))


@pytest.fixture
def grid_image():
    """4x4 single channel image whose value is y * 4 + x"""
    return PlanarImage(4, 4, 1, np.arange(16, dtype=np.float32))


class TestNearestNeighbor:
    """Test nearest-neighbor sampling"""

    @pytest.mark.parametrize(
        "x,expected",
        [(0.0, 0.0), (0.49, 0.0), (0.5, 1.0), (1.49, 1.0), (1.5, 2.0), (2.5, 2.0), (-0.6, 0.0)],
    )
    def test_rounds_half_away_from_zero(self, ramp_image, x, expected):
        assert nn_interpolate(ramp_image, x, 0.0, 0) == expected

    def test_clamps_outside_image(self, grid_image):
        assert nn_interpolate(grid_image, 10.2, -4.0, 0) == get_pixel(grid_image, 3, 0, 0)


class TestBilinear:
    """Test bilinear sampling"""

    def test_symmetric_center_of_red_corner(self, red_corner_image):
        """Test the center of a 2x2 grid weights each corner by 0.25"""
        assert bilinear_interpolate(red_corner_image, 0.5, 0.5, 0) == pytest.approx(0.25)
        assert bilinear_interpolate(red_corner_image, 0.5, 0.5, 1) == pytest.approx(0.0)

    def test_integral_coordinate_returns_pixel(self, grid_image):
        """Test left == right and top == bottom degenerate to the pixel itself"""
        for x in range(4):
            for y in range(4):
                assert bilinear_interpolate(grid_image, float(x), float(y), 0) == get_pixel(
                    grid_image, x, y, 0
                )

    def test_integral_x_interpolates_y(self, grid_image):
        assert bilinear_interpolate(grid_image, 2.0, 1.5, 0) == pytest.approx(8.0)

    def test_horizontal_blend(self, ramp_image):
        assert bilinear_interpolate(ramp_image, 0.25, 0.0, 0) == pytest.approx(0.25)
        assert bilinear_interpolate(ramp_image, 1.75, 0.0, 0) == pytest.approx(1.75)

    def test_general_position(self, grid_image):
        """Bilinear interpolation of a linear ramp is exact"""
        assert bilinear_interpolate(grid_image, 1.25, 2.5, 0) == pytest.approx(2.5 * 4 + 1.25)

    def test_edges_clamp(self, grid_image):
        """Test corners beyond the last column reuse the edge pixel"""
        assert bilinear_interpolate(grid_image, 3.6, 0.0, 0) == pytest.approx(3.0)
        assert bilinear_interpolate(grid_image, -0.5, -0.5, 0) == pytest.approx(0.0)


class TestResize:
    """Test the resize drivers"""

    def test_nn_resize_same_size_is_identity(self, random_rgb_image):
        resized = nn_resize(random_rgb_image, random_rgb_image.w, random_rgb_image.h)

        assert resized is not random_rgb_image
        np.testing.assert_array_equal(resized.data, random_rgb_image.data)

    def test_bilinear_resize_same_size_is_identity(self, random_rgb_image):
        resized = bilinear_resize(random_rgb_image, random_rgb_image.w, random_rgb_image.h)
        np.testing.assert_allclose(resized.data, random_rgb_image.data, atol=1e-6)

    def test_bilinear_uniform_upscale(self):
        """Test a uniform 2x2 image upscales to a uniform 4x4 image"""
        color = [0.2, 0.4, 0.6]
        image = image_from_rows([[color, color], [color, color]])

        resized = bilinear_resize(image, 4, 4)

        assert (resized.w, resized.h, resized.c) == (4, 4, 3)
        for c, value in enumerate(color):
            np.testing.assert_allclose(resized.plane(c), np.full((4, 4), value), atol=1e-6)

    def test_nn_downscale_samples_centers(self, grid_image):
        """Test 4x4 -> 2x2 maps output centers onto source pixels 1 and 3"""
        resized = nn_resize(grid_image, 2, 2)
        np.testing.assert_array_equal(resized.plane(0), [[5.0, 7.0], [13.0, 15.0]])

    def test_nn_upscale_duplicates(self):
        image = PlanarImage(2, 1, 1, np.array([0.0, 1.0], dtype=np.float32))
        resized = nn_resize(image, 4, 1)
        np.testing.assert_array_equal(resized.data, [0.0, 0.0, 1.0, 1.0])

    def test_bilinear_upscale_half_pixel_correction(self):
        """Test 2 -> 4 columns samples at -0.25, 0.25, 0.75 and 1.25"""
        image = PlanarImage(2, 1, 1, np.array([0.0, 1.0], dtype=np.float32))
        resized = bilinear_resize(image, 4, 1)
        np.testing.assert_allclose(resized.data, [0.0, 0.25, 0.75, 1.0], atol=1e-6)

    def test_bilinear_downscale_averages(self, grid_image):
        resized = bilinear_resize(grid_image, 2, 2)
        np.testing.assert_allclose(resized.plane(0), [[2.5, 4.5], [10.5, 12.5]], atol=1e-6)

    def test_source_untouched(self, random_rgb_image):
        before = random_rgb_image.data.tobytes()
        resize(random_rgb_image, 11, 3, InterpolationMethod.BILINEAR)
        assert random_rgb_image.data.tobytes() == before

    def test_preserves_channel_count(self, random_rgb_image):
        resized = resize(random_rgb_image, 3, 9, "nearest")
        assert (resized.w, resized.h, resized.c) == (3, 9, 3)

    def test_method_string_case_insensitive(self, grid_image):
        upper = resize(grid_image, 2, 2, "NEAREST")
        np.testing.assert_array_equal(upper.data, nn_resize(grid_image, 2, 2).data)

    def test_unknown_method(self, grid_image):
        with pytest.raises(ValueError):
            resize(grid_image, 2, 2, "bicubic")

    def test_negative_size(self, grid_image):
        with pytest.raises(ValueError):
            resize(grid_image, -1, 2)

    def test_zero_size(self, grid_image):
        resized = resize(grid_image, 0, 5)
        assert resized.size == 0
        assert resized.h == 5

    @pytest.mark.parametrize("w,h", [(0, 2), (3, 0), (0, 0)])
    @pytest.mark.parametrize("method", ["nearest", "bilinear"])
    def test_empty_source(self, w, h, method):
        """Test an image without pixels resizes to a zero-filled image"""
        resized = resize(make_image(w, h, 3), 2, 2, method)

        assert (resized.w, resized.h, resized.c) == (2, 2, 3)
        np.testing.assert_array_equal(resized.data, np.zeros(12, dtype=np.float32))

    def test_default_method_is_bilinear(self, grid_image):
        np.testing.assert_array_equal(
            resize(grid_image, 3, 3).data, bilinear_resize(grid_image, 3, 3).data
        )

    def test_new_image_each_call(self):
        image = make_image(2, 2, 1)
        first = nn_resize(image, 2, 2)
        second = nn_resize(image, 2, 2)
        assert first.data is not second.data
