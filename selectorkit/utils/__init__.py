"""Utility components for selectorkit."""

from selectorkit.utils.logging import resolve_level, setup_logging

__all__ = [
    'resolve_level',
    'setup_logging',
]
