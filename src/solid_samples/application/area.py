"""
Area Calculator - Sum areas across shapes.

The calculator only ever calls ``Shape.compute_area()``. Adding a shape
kind never requires changing it.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from ..core.domain.shapes import Shape


@dataclass
class AreaSummary:
    """Result of summarizing a collection of shapes."""
    
    total: float = 0.0
    count: int = 0
    by_kind: dict[str, float] = field(default_factory=dict)
    
    def add(self, kind: str, area: float) -> None:
        """Account for one shape's area."""
        self.total += area
        self.count += 1
        self.by_kind[kind] = self.by_kind.get(kind, 0.0) + area


class AreaCalculator:
    """
    Computes areas polymorphically.
    
    In strict mode every shape is validated before its area is computed.
    """
    
    def __init__(self, strict: bool = False):
        self.strict = strict
        self.logger = logging.getLogger("AreaCalculator")
    
    def area(self, shape: Shape) -> float:
        """
        Compute one shape's area.
        
        Raises:
            InvalidArgumentError: In strict mode, if the shape is invalid
        """
        if self.strict:
            shape.ensure_valid()
        
        area = shape.compute_area()
        self.logger.debug(f"{shape!r} -> {area}")
        return area
    
    def total_area(self, shapes: Iterable[Shape]) -> float:
        """Sum of the areas of all shapes."""
        return sum((self.area(shape) for shape in shapes), 0.0)
    
    def summarize(self, shapes: Iterable[Shape]) -> AreaSummary:
        """Total, count and per-kind totals for all shapes."""
        summary = AreaSummary()
        for shape in shapes:
            summary.add(shape.kind, self.area(shape))
        
        self.logger.info(f"Summarized {summary.count} shape(s), total area {summary.total}")
        return summary
