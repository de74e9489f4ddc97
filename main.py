#!/usr/bin/env python3
"""
Shape Patterns - Main Entry Point

Builds a shape with a builder, clones a prototype circle, creates a shape
through a factory, registers all three and prints them.
"""

import argparse
import sys

from shape_patterns.demo import DemoConfig, run_demo
from shape_patterns.registry.manager import ShapeManager
from shape_patterns.shapes.shape import ShapeKind


def build_parser() -> argparse.ArgumentParser:
    defaults = DemoConfig()
    parser = argparse.ArgumentParser(
        description="Shape Patterns - Singleton, Builder, Prototype and Factory Method demo"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress and registry debug messages"
    )
    parser.add_argument(
        "--color",
        default=defaults.builder_color,
        help=f"Color of the built shape (default: {defaults.builder_color})"
    )
    parser.add_argument(
        "--size",
        type=int,
        default=defaults.builder_size,
        help=f"Size of the built shape (default: {defaults.builder_size})"
    )
    parser.add_argument(
        "--radius",
        type=int,
        default=defaults.prototype_radius,
        help=f"Radius of the prototype circle (default: {defaults.prototype_radius})"
    )
    parser.add_argument(
        "--factory",
        default=defaults.factory_kind.value,
        help=f"Kind of shape the factory creates: Circle or ConcreteShape (default: {defaults.factory_kind.value})"
    )
    parser.add_argument(
        "--factory-name",
        default=defaults.factory_name,
        help=f"Name of the factory-made shape (default: {defaults.factory_name})"
    )
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        factory_kind = ShapeKind.from_name(args.factory)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    config = DemoConfig(
        builder_color=args.color,
        builder_size=args.size,
        prototype_radius=args.radius,
        factory_kind=factory_kind,
        factory_name=args.factory_name,
    )

    manager = ShapeManager.instance()
    manager.set_debug(args.verbose)
    run_demo(manager, config, verbose=args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
