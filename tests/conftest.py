"""Shared fixtures."""
import pytest

from creational import Registry, Singleton
from shapes import Circle, Shape, ShapeKind, Square


@pytest.fixture
def shape_registry():
    """Registry with two shape producers, still open for registration."""
    registry = Registry('shape', key_type=ShapeKind, contract=Shape)
    registry.register(ShapeKind.CIRCLE, Circle)
    registry.register(ShapeKind.SQUARE, Square)
    return registry


@pytest.fixture
def singleton_cls():
    """A singleton class nobody has requested yet."""
    class Versioned(Singleton):
        def __init__(self, version):
            self.version = version

    return Versioned
