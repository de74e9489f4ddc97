"""Shape hierarchy module."""

from .shape import Shape, ShapeKind, ConcreteShape, Circle

__all__ = [
    "Shape",
    "ShapeKind",
    "ConcreteShape",
    "Circle",
]
