"""
Application Layer - Use cases built on the domain.

This layer contains:
- area: polymorphic area calculation across any Shape variants
"""

from .area import AreaCalculator, AreaSummary

__all__ = [
    "AreaCalculator",
    "AreaSummary",
]
