"""
Plugins - Extension point for new shape kinds.

New Shape variants are registered here instead of being added to a
switch statement somewhere, which keeps existing code closed for
modification.
"""

from .registry import ShapeFactory, ShapeRegistry, default_registry

__all__ = [
    "ShapeFactory",
    "ShapeRegistry",
    "default_registry",
]
