"""Shape creation module: builder and factories."""

from .builder import ShapeBuilder
from .base import ShapeFactory
from .factories import CircleFactory, ConcreteShapeFactory, FACTORIES, factory_for

__all__ = [
    "ShapeBuilder",
    "ShapeFactory",
    "CircleFactory",
    "ConcreteShapeFactory",
    "FACTORIES",
    "factory_for",
]
