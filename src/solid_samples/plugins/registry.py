"""
Shape Registry - Build shapes by kind name.
"""

import logging
from typing import Callable, Optional

from ..core.domain.shapes import BaseShape, Circle, Rectangle, Shape
from ..core.exceptions import InvalidArgumentError, UnknownShapeError


class ShapeFactory:
    """
    A named builder for one shape kind.
    
    ``arity`` is the number of dimensions the builder takes.
    """
    
    def __init__(
        self,
        kind: str,
        builder: Callable[..., Shape],
        arity: int,
        description: str = "",
    ):
        self.kind = kind.lower()
        self.builder = builder
        self.arity = arity
        self.description = description
    
    def __call__(self, *dimensions: float) -> Shape:
        """Build the shape."""
        if len(dimensions) != self.arity:
            raise InvalidArgumentError(
                f"{self.kind} takes {self.arity} dimension(s), got {len(dimensions)}"
            )
        return self.builder(*dimensions)
    
    def __repr__(self) -> str:
        return f"ShapeFactory({self.kind!r}, arity={self.arity})"


class ShapeRegistry:
    """
    Maps shape kinds to factories.
    
    Usage:
        registry = default_registry()
        
        @registry.shape("square", arity=1)
        def square(side):
            return Rectangle(side, side)
        
        registry.create("square", 3).compute_area()  # 9
    """
    
    def __init__(self):
        self._factories: dict[str, ShapeFactory] = {}
        self.logger = logging.getLogger("ShapeRegistry")
    
    def register(self, factory: ShapeFactory) -> None:
        """Register a factory, replacing any existing one for the same kind."""
        if factory.kind in self._factories:
            self.logger.warning(f"Replacing factory for shape kind: {factory.kind}")
        self._factories[factory.kind] = factory
        self.logger.debug(f"Registered shape kind: {factory.kind} (arity={factory.arity})")
    
    def unregister(self, kind: str) -> bool:
        """Unregister a kind. Returns False if it was not registered."""
        return self._factories.pop(kind.lower(), None) is not None
    
    def get(self, kind: str) -> ShapeFactory:
        """
        Get the factory for a kind.
        
        Raises:
            UnknownShapeError: If no factory is registered for the kind
        """
        factory = self._factories.get(kind.lower())
        if factory is None:
            raise UnknownShapeError(kind, self.kinds())
        return factory
    
    def kinds(self) -> list[str]:
        """Registered kinds, sorted."""
        return sorted(self._factories)
    
    def __contains__(self, kind: str) -> bool:
        return kind.lower() in self._factories
    
    def __len__(self) -> int:
        return len(self._factories)
    
    def create(self, kind: str, *dimensions: float, strict: bool = False) -> Shape:
        """
        Build a shape of the given kind.
        
        Args:
            kind: Registered kind name (case-insensitive)
            dimensions: Positional dimensions for the factory
            strict: Validate the shape before returning it
            
        Raises:
            UnknownShapeError: Unknown kind
            InvalidArgumentError: Wrong number of dimensions, or invalid
                dimensions in strict mode
        """
        shape = self.get(kind)(*dimensions)
        self.logger.debug(f"Created {shape!r}")
        
        if strict:
            shape.ensure_valid()
        
        return shape
    
    def shape(
        self,
        kind: Optional[str] = None,
        arity: int = 0,
        description: str = "",
    ) -> Callable:
        """
        Decorator to register a builder function.
        
        The function name is used as the kind when none is given.
        """
        def decorator(func: Callable[..., Shape]) -> Callable[..., Shape]:
            self.register(ShapeFactory(kind or func.__name__, func, arity, description))
            return func
        return decorator


def default_registry() -> ShapeRegistry:
    """Create a registry preloaded with the built-in shapes."""
    registry = ShapeRegistry()
    registry.register(ShapeFactory(Rectangle.kind, Rectangle, 2, "width height"))
    registry.register(ShapeFactory(Circle.kind, Circle, 1, "radius"))
    registry.register(ShapeFactory(BaseShape.kind, BaseShape, 0, "always zero"))
    return registry
