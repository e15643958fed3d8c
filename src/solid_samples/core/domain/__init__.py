"""
Domain Layer - Pure value objects with no I/O and no logging.

Contents:
- shapes: the Shape capability and its Rectangle/Circle/BaseShape variants
- user_data: UserDataHolder, a single-field entity
"""

from .shapes import BaseShape, Circle, Rectangle, Shape
from .user_data import UserDataHolder

__all__ = [
    "Shape",
    "BaseShape",
    "Rectangle",
    "Circle",
    "UserDataHolder",
]
