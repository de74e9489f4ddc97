"""Concrete shape factories."""

from typing import Dict, Type, Union
from .base import ShapeFactory
from ..shapes.shape import Circle, ConcreteShape, ShapeKind


class CircleFactory(ShapeFactory):
    """
    Produces circles.

    Every circle starts with radius 0 and default color and size.
    """

    @property
    def shape_kind(self) -> ShapeKind:
        return ShapeKind.CIRCLE

    def create_shape(self, name: str) -> Circle:
        return Circle(name, 0)


class ConcreteShapeFactory(ShapeFactory):
    """Produces plain shapes with default color and size."""

    @property
    def shape_kind(self) -> ShapeKind:
        return ShapeKind.CONCRETE

    def create_shape(self, name: str) -> ConcreteShape:
        return ConcreteShape(name)


FACTORIES: Dict[ShapeKind, Type[ShapeFactory]] = {
    ShapeKind.CIRCLE: CircleFactory,
    ShapeKind.CONCRETE: ConcreteShapeFactory,
}


def factory_for(kind: Union[ShapeKind, str]) -> ShapeFactory:
    """
    Get a factory for the given shape kind.

    Args:
        kind: A ShapeKind or a kind name such as "circle"

    Returns:
        A new factory instance

    Raises:
        ValueError: If the kind name is not recognised
    """
    if not isinstance(kind, ShapeKind):
        kind = ShapeKind.from_name(kind)
    return FACTORIES[kind]()
