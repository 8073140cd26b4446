"""
Exceptions raised by the planarvision core.
"""

from planarvision.core.constants import ErrorMessages


class PlanarImageError(Exception):
    """Base exception for planar image processing errors"""


class InvalidChannelCountError(PlanarImageError, ValueError):
    """Raised when an operation receives an image with an unsupported channel count"""

    def __init__(self, expected, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            ErrorMessages.INVALID_CHANNEL_COUNT.format(expected=expected, actual=actual)
        )
