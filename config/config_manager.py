"""
Configuration management for the demo runner.
"""
import os
import json
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from copy import deepcopy
from utils.logging_config import get_logger
from utils.exceptions import ConfigurationError, ValidationError
from validation.schema import Schema, DemoConfigSchema

logger = get_logger(__name__)

ENV_PREFIX = "CREATIONAL_"
# CREATIONAL_LOGGING__LOG_LEVEL -> logging.log_level
ENV_NESTING = "__"

_MISSING = object()


class Config:
    """Configuration container with dot notation access."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data = data or {}

    def __getattr__(self, key: str) -> Any:
        """Get config value using dot notation."""
        if key.startswith('_'):
            return object.__getattribute__(self, key)

        if key not in self._data:
            raise AttributeError(f"Config has no attribute '{key}'")

        value = self._data[key]
        if isinstance(value, dict):
            return Config(value)
        return value

    def __getitem__(self, key: str) -> Any:
        """Get config value using bracket notation."""
        return self._data[key]

    def __setitem__(self, key: str, value: Any):
        """Set config value using bracket notation."""
        self._data[key] = value

    def __contains__(self, key: str) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value with default."""
        try:
            keys = key.split('.')
            value = self._data
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any):
        """Set config value using dot notation."""
        keys = key.split('.')
        data = self._data
        for k in keys[:-1]:
            if k not in data or not isinstance(data[k], dict):
                data[k] = {}
            data = data[k]
        data[keys[-1]] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return deepcopy(self._data)

    def update(self, other: Dict[str, Any]):
        """Update configuration with another dict."""
        self._deep_update(self._data, other)

    @staticmethod
    def _deep_update(base: Dict, update: Dict):
        """Recursively update nested dictionaries."""
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                Config._deep_update(base[key], value)
            else:
                base[key] = deepcopy(value)


class ConfigManager:
    """
    Configuration management with file, environment and dict sources.

    Sources are merged in the order they are loaded; later sources win.
    ``validate()`` runs the registered schema over the merged result and
    fills in defaults.
    """

    def __init__(self, schema: Optional[Schema] = None):
        self._config = Config()
        self._schema = schema if schema is not None else DemoConfigSchema()
        self.logger = get_logger(self.__class__.__name__)

    def load_from_file(self, filepath: str, validate: bool = True):
        """
        Load configuration from file (JSON or YAML).

        Args:
            filepath: Path to configuration file
            validate: Whether to validate the merged configuration
        """
        path = Path(filepath)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {filepath}",
                details={'filepath': str(path)}
            )

        if path.suffix not in ('.yaml', '.yml', '.json'):
            raise ConfigurationError(
                f"Unsupported file format: {path.suffix}",
                details={'filepath': str(path)}
            )

        try:
            with open(path, 'r') as f:
                if path.suffix == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {filepath}: {e}",
                details={'filepath': str(path), 'error': str(e)}
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping: {filepath}",
                details={'filepath': str(path), 'actual_type': type(data).__name__}
            )

        self._config.update(data)
        self.logger.info(f"Loaded configuration from {filepath}")

        if validate:
            self.validate()

    def load_from_env(self, prefix: str = ENV_PREFIX, environ: Optional[Dict[str, str]] = None) -> int:
        """
        Load configuration from environment variables.

        Nested keys are separated by a double underscore, so
        ``CREATIONAL_LOGGING__LOG_LEVEL=DEBUG`` sets ``logging.log_level``.
        Values are parsed as JSON when possible.

        Args:
            prefix: Prefix for environment variables
            environ: Mapping to read instead of ``os.environ``

        Returns:
            Number of values loaded
        """
        environ = os.environ if environ is None else environ
        loaded = 0

        for key, value in environ.items():
            if not key.startswith(prefix):
                continue

            config_key = key[len(prefix):].lower().replace(ENV_NESTING, '.')
            if not config_key:
                continue

            try:
                parsed_value = json.loads(value)
            except json.JSONDecodeError:
                parsed_value = value

            self._config.set(config_key, parsed_value)
            loaded += 1

        self.logger.info(f"Loaded {loaded} configuration values from environment")
        return loaded

    def load_from_dict(self, data: Dict[str, Any], validate: bool = False):
        """
        Load configuration from dictionary.

        Args:
            data: Configuration dictionary
            validate: Whether to validate the merged configuration
        """
        self._config.update(data)
        self.logger.info("Loaded configuration from dictionary")

        if validate:
            self.validate()

    def validate(self) -> Config:
        """Validate the merged configuration and apply schema defaults."""
        try:
            validated = self._schema.validate(self._config.to_dict())
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.message}",
                details=e.details
            ) from e

        self._config = Config(validated)
        self.logger.debug("Validated configuration")
        return self._config

    def save_to_file(self, filepath: str, format: str = 'yaml'):
        """
        Save configuration to file.

        Args:
            filepath: Path to save configuration
            format: File format ('yaml' or 'json')
        """
        if format not in ('yaml', 'json'):
            raise ConfigurationError(f"Unsupported format: {format}")

        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(path, 'w') as f:
                if format == 'yaml':
                    yaml.safe_dump(self._config.to_dict(), f, default_flow_style=False)
                else:
                    json.dump(self._config.to_dict(), f, indent=2)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to save configuration to {filepath}: {e}",
                details={'filepath': str(path), 'error': str(e)}
            ) from e

        self.logger.info(f"Saved configuration to {filepath}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set configuration value."""
        self._config.set(key, value)
        self.logger.debug(f"Set config: {key} = {value}")

    def get_config(self) -> Config:
        """Get the full configuration object."""
        return self._config

    def clear(self):
        """Clear all configuration."""
        self._config = Config()
        self.logger.info("Cleared all configuration")

