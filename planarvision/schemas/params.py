"""
Processing operation parameter models.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from planarvision.core.enums import InterpolationMethod


class ResizeParams(BaseModel):
    """Parameters for resizing an image"""

    width: int = Field(..., ge=0, description="Output width in pixels")
    height: int = Field(..., ge=0, description="Output height in pixels")
    method: Optional[InterpolationMethod] = Field(
        default=None,
        description="Interpolation kernel (nearest, bilinear); None uses the configured default",
    )

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, v: Any) -> Any:
        """Accept method names in any case, as resize() does."""
        if isinstance(v, str):
            return v.lower()
        return v


class ShiftParams(BaseModel):
    """Parameters for shifting one channel by a constant"""

    channel: int = Field(..., ge=0, description="Channel index")
    delta: float = Field(..., description="Value added to every sample of the channel")
