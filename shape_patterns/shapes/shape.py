"""Core shape data structures."""

from abc import ABC, abstractmethod
from enum import Enum


class ShapeKind(Enum):
    """Concrete shape variants."""
    CIRCLE = "Circle"
    CONCRETE = "ConcreteShape"

    @classmethod
    def from_name(cls, name: str) -> "ShapeKind":
        """Parse a shape kind from its variant name or member name."""
        key = name.strip().lower()
        for kind in cls:
            if kind.value.lower() == key or kind.name.lower() == key:
                return kind
        raise ValueError(f"Unknown shape kind: {name}")


class Shape(ABC):
    """
    Abstract base class for all shapes.

    The name is fixed at construction. Color and size can be changed
    afterwards and default to an empty string and zero.
    """

    def __init__(self, name: str, color: str = "", size: int = 0):
        self._name = name
        self.color = color
        self.size = size

    @property
    def name(self) -> str:
        """Get the shape name."""
        return self._name

    @property
    @abstractmethod
    def kind(self) -> ShapeKind:
        """Get the variant of this shape."""
        pass

    @abstractmethod
    def describe(self) -> str:
        """Human-readable description including every attribute."""
        pass

    def __str__(self) -> str:
        return self.describe()


class ConcreteShape(Shape):
    """A plain shape with no attributes beyond name, color and size."""

    def __init__(self, name: str, color: str = "", size: int = 0):
        super().__init__(name, color, size)

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.CONCRETE

    def describe(self) -> str:
        return f"ConcreteShape(Name: {self.name}, Color: {self.color}, Size: {self.size})"

    def __repr__(self) -> str:
        return f"ConcreteShape(name={self.name!r}, color={self.color!r}, size={self.size!r})"


class Circle(Shape):
    """A circle with a radius. Serves as a prototype via clone()."""

    def __init__(self, name: str, radius: int):
        super().__init__(name)
        self.radius = radius

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.CIRCLE

    def clone(self) -> "Circle":
        """Create an independent copy of this circle."""
        copy = Circle(self.name, self.radius)
        copy.color = self.color
        copy.size = self.size
        return copy

    def describe(self) -> str:
        return (
            f"Circle(Name: {self.name}, Radius: {self.radius}, "
            f"Color: {self.color}, Size: {self.size})"
        )

    def __repr__(self) -> str:
        return (
            f"Circle(name={self.name!r}, radius={self.radius!r}, "
            f"color={self.color!r}, size={self.size!r})"
        )
