"""
Validation utilities for the creational patterns library.
"""
from .validators import (
    Validator,
    TypeValidator,
    MinimumValidator,
    ChoiceValidator,
    EachValidator,
    NonEmptyValidator,
    CompositeValidator
)
from .type_checking import ensure_type
from .schema import (
    Schema,
    DemoConfigSchema,
    KNOWN_DEMOS
)

__all__ = [
    'Validator',
    'TypeValidator',
    'MinimumValidator',
    'ChoiceValidator',
    'EachValidator',
    'NonEmptyValidator',
    'CompositeValidator',
    'ensure_type',
    'Schema',
    'DemoConfigSchema',
    'KNOWN_DEMOS',
]
