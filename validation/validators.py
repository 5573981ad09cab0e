"""
Validators for builder steps and configuration values.
"""
from typing import Any, List, Tuple, Union
from utils.logging_config import get_logger
from utils.exceptions import ValidationError

logger = get_logger(__name__)


class Validator:
    """Base validator class."""

    def __init__(self, name: str = "value"):
        self.name = name

    def validate(self, value: Any) -> Any:
        """Validate and return the value."""
        return value


class TypeValidator(Validator):
    """Validates value type."""

    def __init__(
        self,
        expected_type: Union[type, Tuple[type, ...]],
        name: str = "value",
        allow_bool: bool = False
    ):
        super().__init__(name)
        self.expected_type = expected_type
        self.allow_bool = allow_bool

    def validate(self, value: Any) -> Any:
        """Validate type."""
        # bool is a subclass of int; only accept it when asked to
        is_stray_bool = (
            isinstance(value, bool)
            and not self.allow_bool
            and not self._expects_bool()
        )
        if is_stray_bool or not isinstance(value, self.expected_type):
            raise ValidationError(
                f"{self.name} must be of type {self.expected_type}, got {type(value)}",
                details={'expected': str(self.expected_type), 'actual': str(type(value))}
            )
        return value

    def _expects_bool(self) -> bool:
        if isinstance(self.expected_type, tuple):
            return bool in self.expected_type
        return self.expected_type is bool


class MinimumValidator(Validator):
    """Rejects numbers below a lower bound, e.g. a negative air bag count."""

    def __init__(self, minimum: Union[int, float], name: str = "value"):
        super().__init__(name)
        self.minimum = minimum

    def validate(self, value: Union[int, float]) -> Union[int, float]:
        if value < self.minimum:
            raise ValidationError(
                f"{self.name} must be >= {self.minimum}, got {value}",
                details={'minimum': self.minimum, 'actual': value}
            )
        return value


class ChoiceValidator(Validator):
    """Validates value is in allowed choices."""

    def __init__(self, choices: List[Any], name: str = "value"):
        super().__init__(name)
        self.choices = choices

    def validate(self, value: Any) -> Any:
        """Validate choice."""
        if value not in self.choices:
            raise ValidationError(
                f"{self.name} must be one of {self.choices}, got {value}",
                details={'allowed': self.choices, 'actual': value}
            )
        return value


class EachValidator(Validator):
    """Applies a validator to every element of a sequence."""

    def __init__(self, item_validator: Validator, name: str = "sequence"):
        super().__init__(name)
        self.item_validator = item_validator

    def validate(self, value: Any) -> Any:
        return [self.item_validator.validate(item) for item in value]


class NonEmptyValidator(Validator):
    """Rejects empty sequences, e.g. a singleton demo with no versions."""

    def __init__(self, name: str = "sequence"):
        super().__init__(name)

    def validate(self, value: Any) -> Any:
        if len(value) == 0:
            raise ValidationError(f"{self.name} must not be empty")
        return value


class CompositeValidator(Validator):
    """Combines multiple validators."""

    def __init__(self, *validators: Validator, name: str = "value"):
        super().__init__(name)
        self.validators = validators

    def validate(self, value: Any) -> Any:
        """Apply all validators in sequence."""
        for validator in self.validators:
            value = validator.validate(value)
        return value
