"""Pydantic models for simple geometric values."""

from typing import Any

from pydantic import BaseModel


class Rectangle(BaseModel):
    """Axis-aligned rectangle.

    Attributes:
        width: Horizontal size
        height: Vertical size

    """

    width: int | float
    height: int | float

    def __init__(self, width: int | float, height: int | float, **data: Any):
        """Initialize a rectangle from positional or keyword sizes."""
        super().__init__(width=width, height=height, **data)

    def area(self) -> int | float:
        """Return width * height, computed on every call."""
        return self.width * self.height
