"""
Schema validation for configuration dictionaries.
"""
from typing import Any, Dict, Sequence
from utils.logging_config import get_logger
from utils.exceptions import ValidationError
from .validators import (
    Validator,
    TypeValidator,
    ChoiceValidator,
    EachValidator,
    NonEmptyValidator,
    CompositeValidator
)

logger = get_logger(__name__)

KNOWN_DEMOS = ('factory', 'abstract-factory', 'builder', 'singleton')
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


class Schema:
    """Schema for validating dictionaries."""

    def __init__(self, schema: Dict[str, Any], strict: bool = False):
        """
        Initialize schema.

        Args:
            schema: Dictionary defining expected structure
            strict: If True, reject extra keys not in schema
        """
        self.schema = schema
        self.strict = strict

    def validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate data against schema."""
        if not isinstance(data, dict):
            raise ValidationError(
                f"Expected dict, got {type(data)}",
                details={'actual_type': str(type(data))}
            )

        validated = {}
        errors = []

        for key, spec in self.schema.items():
            if key not in data:
                if isinstance(spec, dict) and not spec.get('required', True):
                    # Optional field, use default if provided
                    if 'default' in spec:
                        validated[key] = self._copy_default(spec['default'])
                    continue
                else:
                    errors.append(f"Missing required field: {key}")
                    continue

            try:
                validated[key] = self._validate_field(key, data[key], spec)
            except ValidationError as e:
                errors.append(f"Field '{key}': {e.message}")
                errors.extend(e.details.get('errors', []))

        if self.strict:
            extra_keys = set(data.keys()) - set(self.schema.keys())
            if extra_keys:
                errors.append(f"Unexpected fields: {sorted(extra_keys)}")
        else:
            for key in data:
                if key not in validated and key not in self.schema:
                    validated[key] = data[key]

        if errors:
            logger.debug(f"Schema validation failed with {len(errors)} error(s)")
            raise ValidationError(
                "Schema validation failed",
                details={'errors': errors}
            )

        return validated

    def _validate_field(self, key: str, value: Any, spec: Any) -> Any:
        """Validate a single field."""
        if isinstance(spec, type):
            if not isinstance(value, spec):
                raise ValidationError(
                    f"Expected {spec}, got {type(value)}",
                    details={'expected': str(spec), 'actual': str(type(value))}
                )
            return value

        if isinstance(spec, dict):
            expected_type = spec.get('type')
            if expected_type and not isinstance(value, expected_type):
                raise ValidationError(
                    f"Expected {expected_type}, got {type(value)}",
                    details={'expected': str(expected_type), 'actual': str(type(value))}
                )

            if 'validator' in spec:
                validator = spec['validator']
                value = validator.validate(value)

            if 'choices' in spec and value not in spec['choices']:
                raise ValidationError(
                    f"Must be one of {spec['choices']}, got {value}",
                    details={'allowed': spec['choices'], 'actual': value}
                )

            return value

        return value

    @staticmethod
    def _copy_default(default: Any) -> Any:
        if isinstance(default, dict):
            return {k: Schema._copy_default(v) for k, v in default.items()}
        if isinstance(default, list):
            return list(default)
        return default


class DemoConfigSchema(Schema):
    """Schema for the demo runner configuration."""

    def __init__(self, demo_names: Sequence[str] = KNOWN_DEMOS):
        logging_schema = Schema({
            'log_level': {
                'type': str,
                'required': False,
                'default': 'WARNING',
                'validator': _UpperCase(),
                'choices': LOG_LEVELS
            },
            'enable_structured': {
                'type': bool,
                'required': False,
                'default': False
            },
            'log_dir': {
                'type': str,
                'required': False
            }
        }, strict=True)

        demos_schema = Schema({
            'enabled': {
                'type': list,
                'required': False,
                'default': list(demo_names),
                'validator': EachValidator(
                    ChoiceValidator(list(demo_names), name='demo'),
                    name='enabled'
                )
            }
        }, strict=True)

        singleton_schema = Schema({
            'versions': {
                'type': list,
                'required': False,
                'default': ['v-1', 'v-2', 'v-3'],
                'validator': CompositeValidator(
                    NonEmptyValidator(name='versions'),
                    EachValidator(TypeValidator(str, name='version'), name='versions'),
                    name='versions'
                )
            }
        }, strict=True)

        schema = {
            'logging': {
                'type': dict,
                'required': False,
                'default': logging_schema.validate({}),
                'validator': logging_schema
            },
            'demos': {
                'type': dict,
                'required': False,
                'default': demos_schema.validate({}),
                'validator': demos_schema
            },
            'singleton': {
                'type': dict,
                'required': False,
                'default': singleton_schema.validate({}),
                'validator': singleton_schema
            }
        }
        super().__init__(schema, strict=False)


class _UpperCase(Validator):
    """Normalizes a string to upper case."""

    def validate(self, value: str) -> str:
        return value.upper()
