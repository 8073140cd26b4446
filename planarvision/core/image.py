"""
Planar image model.

A PlanarImage stores its samples as one flat float32 buffer where each
channel occupies a contiguous plane of ``w * h`` samples and, inside a
plane, the sample for ``(x, y)`` lives at ``y * w + x``.
"""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from planarvision.core.constants import ErrorMessages, ImageConstants


@dataclass(eq=False)
class PlanarImage:
    """
    Image with width, height, channel count and an owned planar buffer.

    A buffer passed to the constructor is copied, so no two images share
    samples.
    """

    w: int
    h: int
    c: int
    data: Optional[np.ndarray] = field(default=None, repr=False)

    def __post_init__(self):
        if self.data is None:
            self.data = np.zeros(self.w * self.h * self.c, dtype=ImageConstants.DTYPE)
            return

        self.data = np.array(self.data, dtype=ImageConstants.DTYPE, copy=True)
        if self.data.ndim != 1 or self.data.size != self.w * self.h * self.c:
            raise ValueError(
                ErrorMessages.INVALID_BUFFER_LENGTH.format(
                    length=self.data.size, w=self.w, h=self.h, c=self.c
                )
            )

    @property
    def shape(self):
        """(c, h, w) shape of the planar buffer"""
        return (self.c, self.h, self.w)

    @property
    def size(self) -> int:
        return self.data.size

    def plane(self, channel: int) -> np.ndarray:
        """
        Borrowed (h, w) view of one channel.

        Writes through the view mutate this image. Callers must not keep
        the view past the lifetime of exclusive access to the image.

        Args:
            channel: Channel index in [0, c)

        Returns:
            View of the channel plane
        """
        if not 0 <= channel < self.c:
            raise IndexError(f"Channel {channel} out of range for {self.c} channels")
        plane_size = self.w * self.h
        start = channel * plane_size
        return self.data[start : start + plane_size].reshape(self.h, self.w)


def make_image(w: int, h: int, c: int) -> PlanarImage:
    """
    Allocate a zero-filled image.

    Args:
        w: Width in pixels
        h: Height in pixels
        c: Number of channels

    Returns:
        New image owning a buffer of exactly w*h*c samples
    """
    if w < 0 or h < 0 or c < 0:
        raise ValueError(ErrorMessages.INVALID_DIMENSIONS.format(w=w, h=h, c=c))
    return PlanarImage(w, h, c)


def copy_image(image: PlanarImage) -> PlanarImage:
    """Exclusive deep copy of an image."""
    return PlanarImage(image.w, image.h, image.c, image.data)
