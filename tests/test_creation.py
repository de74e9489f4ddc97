"""Tests for the creation module."""

import pytest
from shape_patterns.shapes.shape import ShapeKind, ConcreteShape, Circle
from shape_patterns.creation.builder import ShapeBuilder
from shape_patterns.creation.base import ShapeFactory
from shape_patterns.creation.factories import CircleFactory, ConcreteShapeFactory, factory_for


class TestShapeBuilder:
    """Tests for ShapeBuilder."""

    def test_build_chained(self):
        shape = ShapeBuilder("Circle").set_color("Red").set_size(5).build()
        assert isinstance(shape, ConcreteShape)
        assert str(shape) == "ConcreteShape(Name: Circle, Color: Red, Size: 5)"

    def test_setters_return_builder(self):
        builder = ShapeBuilder("Circle")
        assert builder.set_color("Red") is builder
        assert builder.set_size(5) is builder

    def test_order_does_not_matter(self):
        a = ShapeBuilder("X").set_color("Red").set_size(5).build()
        b = ShapeBuilder("X").set_size(5).set_color("Red").build()
        assert str(a) == str(b)

    def test_build_without_setters(self):
        shape = ShapeBuilder("Plain").build()
        assert str(shape) == "ConcreteShape(Name: Plain, Color: , Size: 0)"

    def test_reuse_builds_new_instances(self):
        builder = ShapeBuilder("Circle").set_color("Red")
        first = builder.build()
        second = builder.set_size(9).build()

        assert first is not second
        assert first.size == 0
        assert second.size == 9


class TestShapeFactory:
    """Tests for the factory classes."""

    def test_cannot_instantiate_base(self):
        with pytest.raises(TypeError):
            ShapeFactory()

    def test_circle_factory(self):
        shape = CircleFactory().create_shape("New Circle")
        assert isinstance(shape, Circle)
        assert shape.radius == 0
        assert shape.name == "New Circle"
        assert str(shape) == "Circle(Name: New Circle, Radius: 0, Color: , Size: 0)"

    def test_circle_factory_returns_fresh_shapes(self):
        factory = CircleFactory()
        assert factory.create_shape("A") is not factory.create_shape("A")

    def test_concrete_factory(self):
        factory = ConcreteShapeFactory()
        shape = factory.create_shape("Plain")
        assert factory.shape_kind == ShapeKind.CONCRETE
        assert str(shape) == "ConcreteShape(Name: Plain, Color: , Size: 0)"

    def test_factory_for_kind(self):
        assert isinstance(factory_for(ShapeKind.CIRCLE), CircleFactory)
        assert isinstance(factory_for("concreteshape"), ConcreteShapeFactory)

    def test_factory_for_unknown(self):
        with pytest.raises(ValueError):
            factory_for("triangle")

    def test_repr(self):
        assert repr(CircleFactory()) == "CircleFactory()"
