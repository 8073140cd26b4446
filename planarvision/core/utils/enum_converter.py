"""
Enum conversion utilities.

Provides standardized methods for converting between enums and strings,
with support for case-insensitive parsing and fallback defaults.
"""

from enum import Enum
from typing import Any, Optional, Type, TypeVar

T = TypeVar("T")


def parse_enum(
    value: Any, enum_class: Type[T], default: Optional[T] = None, normalize: bool = False
) -> Optional[T]:
    """
    Parse value to enum with fallback to default.

    Args:
        value: Value to parse (string, enum, or None)
        enum_class: Enum class to parse to
        default: Value returned if parsing fails
        normalize: Whether to lowercase string before parsing
            (for case-insensitive matching)

    Returns:
        Parsed enum value or default

    Example:
        >>> parse_enum("BILINEAR", InterpolationMethod, normalize=True)
        <InterpolationMethod.BILINEAR: 'bilinear'>
    """
    # Already an enum instance
    if isinstance(value, enum_class):
        return value

    if value is None:
        return default

    try:
        str_value = value.lower() if normalize else value
        return enum_class(str_value)
    except (ValueError, AttributeError):
        return default


def enum_to_string(value: Any) -> Any:
    """
    Value of an enum member; anything else is returned unchanged.

    Example:
        >>> enum_to_string(InterpolationMethod.NEAREST)
        'nearest'
    """
    if isinstance(value, Enum):
        return value.value
    return value
