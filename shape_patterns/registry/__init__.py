"""Shape registry module."""

from .manager import ShapeManager

__all__ = ["ShapeManager"]
