"""
Factory Method: each factory subclass decides which car to make.

Callers hold a ``CarFactory`` and get back a ``BaseCar``; neither side
names the concrete car class. ``create_factory`` replaces direct
construction of factories with a keyed lookup.
"""
from abc import ABC, abstractmethod
from typing import Union

from creational.registry import Registry
from utils.logging_config import get_logger
from .catalog import CarModel

logger = get_logger(__name__)


class BaseCar(ABC):
    """Product contract."""

    @abstractmethod
    def show_cost(self) -> str:
        pass


class MastodonCar(BaseCar):
    def show_cost(self) -> str:
        return '[MASTODON] Car Cost: 300,000 MXN'


class RhinoCar(BaseCar):
    def show_cost(self) -> str:
        return '[RHINO] Car Cost: 100,000 MXN'


class CarFactory(ABC):
    """Creator contract; ``make_car`` is the factory method."""

    @abstractmethod
    def make_car(self) -> BaseCar:
        pass


class MastodonCarFactory(CarFactory):
    def make_car(self) -> BaseCar:
        return MastodonCar()


class RhinoCarFactory(CarFactory):
    def make_car(self) -> BaseCar:
        return RhinoCar()


car_factories: Registry[CarFactory] = Registry(
    'car factory', key_type=CarModel, contract=CarFactory
)
car_factories.register(CarModel.MASTODON, MastodonCarFactory)
car_factories.register(CarModel.RHINO, RhinoCarFactory)
car_factories.freeze()


def create_factory(model: Union[CarModel, str]) -> CarFactory:
    """Create the factory for ``model`` without naming its class."""
    factory = car_factories.create(model)
    logger.debug(f"Created {type(factory).__name__}")
    return factory
