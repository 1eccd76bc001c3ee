"""
Unified models library.

This package provides the Pydantic data models shared across the runtime
and games:
- Primitives: Basic geometric types (Point2D, Vector2D, Resolution)
- Enums: Input event types

Usage:
    >>> from models import Point2D, Resolution
    >>> from models.enums import EventType
"""

from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    Resolution,
)
from .enums import EventType

__all__ = [
    'Point2D',
    'Vector2D',
    'Resolution',
    'EventType',
]
