"""
Constants and configuration values for planarvision.
Centralizes all magic numbers used by the processing modules.
"""


# Image Model Constants
class ImageConstants:
    """Constants related to the planar image model."""

    # Working sample type
    DTYPE = "float32"

    # Displayable value range
    MIN_VALUE = 0.0
    MAX_VALUE = 1.0

    # 8-bit conversion scale
    UINT8_SCALE = 255.0

    RGB_CHANNELS = 3
    GRAYSCALE_CHANNELS = 1


# Colorspace Constants
class ColorspaceConstants:
    """Constants for colorspace conversions."""

    # Luma weights (ITU-R BT.601)
    LUMA_RED = 0.299
    LUMA_GREEN = 0.587
    LUMA_BLUE = 0.114

    # Hue hexagon
    HUE_SECTORS = 6.0
    GREEN_SECTOR_OFFSET = 2.0
    BLUE_SECTOR_OFFSET = 4.0


# Resampling Constants
class ResampleConstants:
    """Constants for geometric resampling."""

    # Half-pixel center alignment: correction = HALF_PIXEL * ratio - HALF_PIXEL
    HALF_PIXEL = 0.5

    DEFAULT_INTERPOLATION = "bilinear"


# System Constants
class SystemConstants:
    """Constants for system operations."""

    # Logging
    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    ENV_PREFIX = "PLANARVISION_"


# Error Messages
class ErrorMessages:
    """Standard error messages."""

    INVALID_CHANNEL_COUNT = "Expected {expected} channels, got {actual}"
    INVALID_DIMENSIONS = "Image dimensions must be non-negative: {w}x{h}x{c}"
    INVALID_BUFFER_LENGTH = "Buffer length {length} does not match {w}x{h}x{c}"
    INVALID_ARRAY_SHAPE = "Expected a 2D or 3D array, got shape {shape}"
    UNKNOWN_INTERPOLATION = "Unknown interpolation method: {method}"
