"""
Shapes - The Open/Closed Principle in miniature.

Shape is closed for modification: code that needs an area talks to
``compute_area()`` and nothing else. It is open for extension: a new
variant subclasses Shape and implements ``compute_area()`` without any
existing class changing.

Construction never validates. Negative dimensions are accepted and simply
produce a meaningless area; callers that want stricter contracts call
``ensure_valid()``.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import astuple, dataclass, fields, is_dataclass
from typing import ClassVar

from ..exceptions import InvalidArgumentError


class Shape(ABC):
    """
    Capability shared by every shape: compute its own area.
    
    Subclasses are frozen dataclasses whose fields are the shape's
    dimensions, in constructor order.
    """
    
    kind: ClassVar[str] = "shape"
    
    @abstractmethod
    def compute_area(self) -> float:
        """Return the geometric area for this shape's dimensions."""
        ...
    
    @property
    def dimensions(self) -> tuple[float, ...]:
        """Dimension values in constructor order."""
        if not is_dataclass(self):
            return ()
        return astuple(self)
    
    def validate(self) -> list[str]:
        """
        Check the shape's dimensions.
        
        Returns:
            List of problems (empty if every dimension is a finite,
            non-negative number)
        """
        problems = []
        if not is_dataclass(self):
            return problems
        
        for dim in fields(self):
            value = getattr(self, dim.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                problems.append(f"{dim.name} must be a number, got {value!r}")
            elif not math.isfinite(value):
                problems.append(f"{dim.name} must be finite, got {value}")
            elif value < 0:
                problems.append(f"{dim.name} must be non-negative, got {value}")
        
        return problems
    
    def ensure_valid(self) -> "Shape":
        """
        Raise InvalidArgumentError if any dimension is invalid.
        
        Returns:
            The shape itself, so calls can be chained
        """
        problems = self.validate()
        if problems:
            raise InvalidArgumentError(
                f"Invalid {self.kind}: {'; '.join(problems)}",
                problems=problems,
            )
        return self


@dataclass(frozen=True)
class BaseShape(Shape):
    """Placeholder variant with no state; its area is always zero."""
    
    kind: ClassVar[str] = "base"
    
    def compute_area(self) -> float:
        return 0.0


@dataclass(frozen=True)
class Rectangle(Shape):
    """Axis-aligned rectangle."""
    
    kind: ClassVar[str] = "rectangle"
    
    width: float
    height: float
    
    def compute_area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Circle(Shape):
    """Circle given by its radius."""
    
    kind: ClassVar[str] = "circle"
    
    radius: float
    
    def compute_area(self) -> float:
        return math.pi * self.radius * self.radius
