"""Base factory interface."""

from abc import ABC, abstractmethod
from ..shapes.shape import Shape, ShapeKind


class ShapeFactory(ABC):
    """Abstract base class for all shape factories."""

    @property
    @abstractmethod
    def shape_kind(self) -> ShapeKind:
        """Get the kind of shape this factory produces."""
        pass

    @abstractmethod
    def create_shape(self, name: str) -> Shape:
        """
        Create a new shape.

        Args:
            name: Name given to the new shape

        Returns:
            A freshly constructed shape of this factory's kind
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
