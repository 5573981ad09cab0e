"""
Predefined configuration presets for the demo runner.
"""
from typing import Dict, Any

from validation.schema import KNOWN_DEMOS


class ConfigPresets:
    """Collection of predefined configuration presets."""

    @staticmethod
    def default() -> Dict[str, Any]:
        """Run every demo with warnings-only logging."""
        return {
            'logging': {
                'log_level': 'WARNING',
                'enable_structured': False
            },
            'demos': {
                'enabled': list(KNOWN_DEMOS)
            },
            'singleton': {
                'versions': ['v-1', 'v-2', 'v-3']
            }
        }

    @staticmethod
    def verbose() -> Dict[str, Any]:
        """Debug logging, useful for watching registries resolve keys."""
        config = ConfigPresets.default()
        config['logging']['log_level'] = 'DEBUG'
        return config

    @staticmethod
    def quiet() -> Dict[str, Any]:
        config = ConfigPresets.default()
        config['logging']['log_level'] = 'ERROR'
        return config
