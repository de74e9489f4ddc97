"""Fluent builder for plain shapes."""

from ..shapes.shape import ConcreteShape


class ShapeBuilder:
    """
    Accumulates color and size, then builds a ConcreteShape.

    Setters return the builder so calls can be chained. Unset fields
    keep their defaults (empty color, zero size). The builder can be
    reused; every build() returns a new shape.
    """

    def __init__(self, name: str):
        self._name = name
        self._color = ""
        self._size = 0

    def set_color(self, color: str) -> "ShapeBuilder":
        self._color = color
        return self

    def set_size(self, size: int) -> "ShapeBuilder":
        self._size = size
        return self

    def build(self) -> ConcreteShape:
        """Build a new shape from the accumulated state."""
        return ConcreteShape(self._name, self._color, self._size)

    def __repr__(self) -> str:
        return f"ShapeBuilder(name={self._name!r}, color={self._color!r}, size={self._size!r})"
