"""Small shape catalogue used to exercise the registry."""
from abc import ABC, abstractmethod
from enum import Enum


class Shape(ABC):
    """Capability contract."""

    @abstractmethod
    def operate(self) -> str:
        pass


class Circle(Shape):
    def __init__(self):
        self.radius = 1

    def operate(self) -> str:
        return 'circle'


class Square(Shape):
    def __init__(self):
        self.side = 1

    def operate(self) -> str:
        return 'square'


class ShapeKind(str, Enum):
    CIRCLE = 'circle'
    SQUARE = 'square'
