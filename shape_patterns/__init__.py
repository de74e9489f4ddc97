"""Shape Patterns - creational design patterns over a small shape domain."""

__version__ = "0.1.0"
