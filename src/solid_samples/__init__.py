"""
solid-samples - Small teaching samples for SOLID object-oriented design.

Open/Closed Principle:
    Shape, BaseShape, Rectangle, Circle - new shapes extend the hierarchy
    without touching existing classes.

Single Responsibility Principle:
    UserDataHolder - one class, one reason to change.
"""

from .core.domain import BaseShape, Circle, Rectangle, Shape, UserDataHolder
from .core.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    SolidSamplesError,
    UnknownShapeError,
)

__version__ = "1.0.0"

__all__ = [
    "Shape",
    "BaseShape",
    "Rectangle",
    "Circle",
    "UserDataHolder",
    "SolidSamplesError",
    "InvalidArgumentError",
    "UnknownShapeError",
    "ConfigurationError",
]
