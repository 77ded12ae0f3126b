"""Pydantic models for selector parts and shapes."""

from selectorkit.models.selectors import PRECEDENCE, SINGLE_OCCURRENCE, SelectorCategory, SelectorParts
from selectorkit.models.shapes import Rectangle

__all__ = [
    'PRECEDENCE',
    'SINGLE_OCCURRENCE',
    'Rectangle',
    'SelectorCategory',
    'SelectorParts',
]
