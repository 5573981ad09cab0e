"""
Builder: a production line customizes a car one step at a time.

``SedanProductionLine`` implements the steps, ``Director`` knows the step
sequences for each named edition, and ``build`` hands over the finished
car and puts a fresh one on the line.
"""
from abc import abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from creational.builder import Builder
from creational.registry import Producer, Registry
from utils.exceptions import BuilderError
from utils.logging_config import get_logger
from validation import (
    CompositeValidator,
    MinimumValidator,
    TypeValidator,
    ensure_type
)
from .catalog import CarModel

logger = get_logger(__name__)

_air_bags_validator = CompositeValidator(
    TypeValidator(int, name='air_bags'),
    MinimumValidator(0, name='air_bags'),
    name='air_bags'
)
_color_validator = TypeValidator(str, name='color')
_edition_validator = TypeValidator(str, name='edition')


@dataclass
class Car:
    """Base product; fresh cars carry these defaults."""
    edition: str = ''
    model: str = ''
    air_bags: int = 2
    color: str = 'black'

    brand: ClassVar[Optional[CarModel]] = None


@dataclass
class MastodonSedanCar(Car):
    model: str = 'sedan'

    brand: ClassVar[Optional[CarModel]] = CarModel.MASTODON


@dataclass
class RhinoSedanCar(Car):
    model: str = 'sedan'

    brand: ClassVar[Optional[CarModel]] = CarModel.RHINO


class CarProductionLine(Builder):
    """Builder contract: the customization steps every line offers."""

    @abstractmethod
    def set_air_bags(self, how_many: int) -> 'CarProductionLine':
        pass

    @abstractmethod
    def set_color(self, color: str) -> 'CarProductionLine':
        pass

    @abstractmethod
    def set_edition(self, edition: str) -> 'CarProductionLine':
        pass

    @abstractmethod
    def reset_production_line(self):
        """Put a fresh car on the line."""
        pass

    def reset(self):
        self.reset_production_line()


sedan_models: Registry[Car] = Registry('sedan model', key_type=CarModel, contract=Car)
sedan_models.register(CarModel.MASTODON, MastodonSedanCar)
sedan_models.register(CarModel.RHINO, RhinoSedanCar)
sedan_models.freeze()


class SedanProductionLine(CarProductionLine):
    """Customizes sedans of one brand."""

    def __init__(self, model_to_customize_in_line: Union[CarModel, str]):
        self.logger = get_logger(self.__class__.__name__)
        self._producer: Producer[Car] = sedan_models.resolve(model_to_customize_in_line)
        self.sedan_car: Car = self._producer.produce()

    @property
    def model_to_customize_in_line(self) -> CarModel:
        return self._producer.key

    def set_model_to_build(self, model: Union[CarModel, str]):
        """Switch brand; applies from the next fresh car on the line."""
        self._producer = sedan_models.resolve(model)

    def set_air_bags(self, how_many: int) -> 'SedanProductionLine':
        self.sedan_car.air_bags = _air_bags_validator.validate(how_many)
        return self

    def set_color(self, color: str) -> 'SedanProductionLine':
        self.sedan_car.color = _color_validator.validate(color)
        return self

    def set_edition(self, edition: str) -> 'SedanProductionLine':
        self.sedan_car.edition = _edition_validator.validate(edition)
        return self

    def reset_production_line(self):
        self.sedan_car = self._producer.produce()

    def build(self) -> Car:
        """Return the customized car and restart the line."""
        sedan_car = self.sedan_car
        self.reset_production_line()
        self.logger.debug(f"Built {type(sedan_car).__name__} edition={sedan_car.edition!r}")
        return sedan_car


class Director:
    """Knows the step sequence for each edition."""

    def __init__(self, production_line: Optional[CarProductionLine] = None):
        self.production_line: Optional[CarProductionLine] = None
        if production_line is not None:
            self.set_production_line(production_line)

    def set_production_line(self, production_line: CarProductionLine):
        self.production_line = ensure_type(
            production_line, CarProductionLine, name='production_line'
        )

    def construct_cvt_edition(self) -> CarProductionLine:
        return self._line().set_air_bags(4).set_color('blue').set_edition('cvt')

    def construct_signature_edition(self) -> CarProductionLine:
        return self._line().set_air_bags(8).set_color('red').set_edition('signature')

    def _line(self) -> CarProductionLine:
        if self.production_line is None:
            raise BuilderError("Director has no production line; call set_production_line() first")
        return self.production_line
