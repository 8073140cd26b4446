"""
Schemas Package

Pydantic models validating the parameters of processing operations.
"""

from .params import ResizeParams, ShiftParams

__all__ = ["ResizeParams", "ShiftParams"]
