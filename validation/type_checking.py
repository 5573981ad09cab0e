"""
Runtime type checking utilities.
"""
from typing import Any, Tuple, Union
from utils.exceptions import ValidationError


def ensure_type(
    value: Any,
    expected_type: Union[type, Tuple[type, ...]],
    name: str = "value"
) -> Any:
    """
    Ensure value is of expected type, raise ValidationError if not.
    """
    if not isinstance(value, expected_type):
        raise ValidationError(
            f"{name} must be {expected_type}, got {type(value)}",
            details={'expected': str(expected_type), 'actual': str(type(value))}
        )
    return value
