"""
Abstract Factory: one factory per body style builds a whole family of cars.

Every family has a Mastodon and a Rhino product. Swapping the factory
swaps the whole family while callers keep talking to the same product
contracts.
"""
from abc import ABC, abstractmethod
from typing import Union

from creational.registry import Registry
from utils.exceptions import UnknownKeyError
from utils.logging_config import get_logger
from .catalog import BodyStyle, CarModel

logger = get_logger(__name__)


# Product contracts
class MastodonCar(ABC):
    @abstractmethod
    def use_gps(self) -> str:
        pass


class RhinoCar(ABC):
    @abstractmethod
    def use_gps(self) -> str:
        pass


# Concrete products, one per (brand, style)
class MastodonSedanCar(MastodonCar):
    def use_gps(self) -> str:
        return '[SEDAN] Mastodon GPS'


class MastodonHatchbackCar(MastodonCar):
    def use_gps(self) -> str:
        return '[HATCHBACK] Mastodon GPS'


class RhinoSedanCar(RhinoCar):
    def use_gps(self) -> str:
        return '[SEDAN] Rhino GPS'


class RhinoHatchbackCar(RhinoCar):
    def use_gps(self) -> str:
        return '[HATCHBACK] Rhino GPS'


class CarAbstractFactory(ABC):
    """Declares one creation method per product."""

    @abstractmethod
    def create_mastodon(self) -> MastodonCar:
        pass

    @abstractmethod
    def create_rhino(self) -> RhinoCar:
        pass

    def create(self, model: Union[CarModel, str]) -> Union[MastodonCar, RhinoCar]:
        """Create the product for ``model`` from this factory's family."""
        try:
            model = CarModel(model)
        except ValueError:
            raise UnknownKeyError(
                f"Unknown car model '{model}'",
                details={
                    'key': model,
                    'available_keys': [member.value for member in CarModel]
                }
            ) from None

        if model is CarModel.MASTODON:
            return self.create_mastodon()
        return self.create_rhino()


class SedanCarFactory(CarAbstractFactory):
    def create_mastodon(self) -> MastodonCar:
        return MastodonSedanCar()

    def create_rhino(self) -> RhinoCar:
        return RhinoSedanCar()


class HatchbackCarFactory(CarAbstractFactory):
    def create_mastodon(self) -> MastodonCar:
        return MastodonHatchbackCar()

    def create_rhino(self) -> RhinoCar:
        return RhinoHatchbackCar()


family_factories: Registry[CarAbstractFactory] = Registry(
    'car family', key_type=BodyStyle, contract=CarAbstractFactory
)
family_factories.register(BodyStyle.SEDAN, SedanCarFactory)
family_factories.register(BodyStyle.HATCHBACK, HatchbackCarFactory)
family_factories.freeze()


def create_factory(style: Union[BodyStyle, str]) -> CarAbstractFactory:
    """Create the factory for a body style without naming its class."""
    factory = family_factories.create(style)
    logger.debug(f"Created {type(factory).__name__}")
    return factory


def create_car(
    style: Union[BodyStyle, str],
    model: Union[CarModel, str]
) -> Union[MastodonCar, RhinoCar]:
    """Shortcut for ``create_factory(style).create(model)``."""
    return create_factory(style).create(model)
