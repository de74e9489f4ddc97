"""Ordered registry of shapes."""

import threading
from typing import ClassVar, Iterator, List, Optional, TextIO

from ..shapes.shape import Shape


class ShapeManager:
    """
    Collects shapes in registration order and prints them.

    A manager can be created directly and passed to whatever needs it.
    For code that wants one registry per process, instance() returns a
    shared manager created on first access.
    """

    _instance: ClassVar[Optional["ShapeManager"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, debug: bool = False):
        self._shapes: List[Optional[Shape]] = []
        self.debug = debug

    @classmethod
    def instance(cls) -> "ShapeManager":
        """Get the shared manager, creating it on first access."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared manager so the next instance() call creates a new one."""
        with cls._instance_lock:
            cls._instance = None

    def set_debug(self, enabled: bool) -> None:
        """Enable or disable debug logging."""
        self.debug = enabled

    def _debug(self, msg: str) -> None:
        """Print debug message if debug mode is enabled."""
        if self.debug:
            print(f"[manager] {msg}")

    def add_shape(self, shape: Optional[Shape]) -> None:
        """Append a shape. Duplicates and None are accepted as-is."""
        self._shapes.append(shape)
        self._debug(f"Registered {shape!r} ({len(self._shapes)} total)")

    def list_shapes(self, file: Optional[TextIO] = None) -> None:
        """Print every registered shape, one per line, in registration order."""
        self._debug(f"Listing {len(self._shapes)} shapes")
        for shape in self._shapes:
            print(shape, file=file)

    @property
    def shapes(self) -> List[Optional[Shape]]:
        """Get a copy of the registered shapes."""
        return list(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Optional[Shape]]:
        return iter(list(self._shapes))

    def __repr__(self) -> str:
        return f"ShapeManager(shapes={len(self._shapes)})"
