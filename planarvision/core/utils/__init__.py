"""
Utility modules for core functionality.

Modules:
- decorators: Timing helpers
- enum_converter: Enum parsing and conversion
- math_utils: Scalar helpers shared by the processing kernels
- params_processor: Parameter model preparation
"""

from .decorators import timer
from .enum_converter import enum_to_string, parse_enum
from .math_utils import round_half_away, three_way_max, three_way_min
from .params_processor import params_to_dict, prepare_params

__all__ = [
    "timer",
    "parse_enum",
    "enum_to_string",
    "round_half_away",
    "three_way_max",
    "three_way_min",
    "prepare_params",
    "params_to_dict",
]
