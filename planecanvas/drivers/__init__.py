"""
Display driver layer.
"""
from .base import DisplayDriver

__all__ = ["DisplayDriver"]
