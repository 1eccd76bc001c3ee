"""
Shared primitive data types.

This module provides basic geometric types used by the runtime, input
layer and games.
"""

from pydantic import BaseModel, Field, computed_field, ConfigDict


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions and coordinates.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> pos.as_tuple()
        (100.0, 200.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def as_tuple(self) -> tuple:
        return (self.x, self.y)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


# Alias used by input code
Vector2D = Point2D


class Resolution(BaseModel):
    """Pixel dimensions of a drawing surface.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> surface = Resolution(width=800, height=600)
        >>> surface.aspect_ratio
        1.3333333333333333
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio (width / height)."""
        return self.width / self.height

    model_config = ConfigDict(frozen=True)

    def as_tuple(self) -> tuple:
        return (self.width, self.height)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Resolution({self.width}x{self.height})"
