"""
Service layer for planarvision.
"""

from .image_service import ImageProcessingService

__all__ = ["ImageProcessingService"]
