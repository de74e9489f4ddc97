"""Demo scenario wiring the builder, prototype, factory and registry together."""

from dataclasses import dataclass
from typing import List, Optional, TextIO

from .shapes.shape import Circle, Shape, ShapeKind
from .creation.builder import ShapeBuilder
from .creation.factories import factory_for
from .registry.manager import ShapeManager


@dataclass
class DemoConfig:
    """Values used by the demo scenario. Defaults reproduce the standard output."""
    builder_name: str = "Circle"
    builder_color: str = "Red"
    builder_size: int = 5
    prototype_name: str = "Circle"
    prototype_radius: int = 5
    factory_kind: ShapeKind = ShapeKind.CIRCLE
    factory_name: str = "New Circle"


def run_demo(
    manager: Optional[ShapeManager] = None,
    config: Optional[DemoConfig] = None,
    verbose: bool = False,
    file: Optional[TextIO] = None,
) -> List[Shape]:
    """
    Build one shape per pattern, register them and print the registry.

    Args:
        manager: Registry to fill (default: the shared manager)
        config: Demo values (default: DemoConfig())
        verbose: Print progress messages
        file: Stream for the shape listing (default: stdout)

    Returns:
        The three shapes created, in registration order
    """
    if manager is None:
        manager = ShapeManager.instance()
    if config is None:
        config = DemoConfig()

    def log(msg: str) -> None:
        if verbose:
            print(f"[demo] {msg}")

    # Builder
    built = (
        ShapeBuilder(config.builder_name)
        .set_color(config.builder_color)
        .set_size(config.builder_size)
        .build()
    )
    log(f"Built {built!r}")

    # Prototype
    prototype = Circle(config.prototype_name, config.prototype_radius)
    cloned = prototype.clone()
    log(f"Cloned {prototype!r}")

    # Factory method
    factory = factory_for(config.factory_kind)
    created = factory.create_shape(config.factory_name)
    log(f"{factory!r} created {created!r}")

    shapes = [built, cloned, created]
    for shape in shapes:
        manager.add_shape(shape)

    manager.list_shapes(file=file)
    return shapes
