"""Tests for AreaCalculator."""

import math
from dataclasses import dataclass
from typing import ClassVar

import pytest

from solid_samples.application import AreaCalculator, AreaSummary
from solid_samples.core.domain import BaseShape, Circle, Rectangle, Shape
from solid_samples.core.exceptions import InvalidArgumentError
from solid_samples.plugins import default_registry


class TestAreaSummary:
    """Tests for AreaSummary."""
    
    def test_add(self):
        summary = AreaSummary()
        summary.add("rectangle", 12.0)
        summary.add("rectangle", 3.0)
        
        assert summary.total == 15.0
        assert summary.count == 2
        assert summary.by_kind == {"rectangle": 15.0}


class TestAreaCalculator:
    """Tests for AreaCalculator."""
    
    @pytest.fixture
    def shapes(self):
        return [Rectangle(3, 4), Circle(2), BaseShape(), Rectangle(0, 5)]
    
    def test_area(self):
        assert AreaCalculator().area(Rectangle(3, 4)) == 12.0
    
    def test_total_area(self, shapes):
        assert AreaCalculator().total_area(shapes) == pytest.approx(12 + 4 * math.pi)
    
    def test_total_area_empty(self):
        assert AreaCalculator().total_area([]) == 0.0
    
    def test_summarize(self, shapes):
        summary = AreaCalculator().summarize(shapes)
        
        assert summary.count == 4
        assert summary.by_kind["rectangle"] == 12.0
        assert summary.by_kind["circle"] == pytest.approx(4 * math.pi)
        assert summary.by_kind["base"] == 0.0
    
    def test_works_with_generator(self):
        shapes = (Rectangle(1, n) for n in range(4))
        
        assert AreaCalculator().total_area(shapes) == 6.0
    
    def test_permissive_by_default(self):
        assert AreaCalculator().area(Rectangle(-1, 2)) == -2
    
    def test_strict_rejects_invalid(self):
        with pytest.raises(InvalidArgumentError):
            AreaCalculator(strict=True).total_area([Rectangle(3, 4), Circle(-1)])
    
    def test_summarize_kind_registered_later(self):
        registry = default_registry()
        
        @registry.shape("triangle", arity=2)
        @dataclass(frozen=True)
        class Triangle(Shape):
            kind: ClassVar[str] = "triangle"
            
            base: float
            height: float
            
            def compute_area(self) -> float:
                return self.base * self.height / 2
        
        shapes = [
            registry.create("triangle", 4, 3),
            registry.create("triangle", 2, 2),
            registry.create("rectangle", 3, 4),
        ]
        
        summary = AreaCalculator().summarize(shapes)
        
        assert summary.count == 3
        assert summary.total == 20.0
        assert summary.by_kind == {"triangle": 8.0, "rectangle": 12.0}
