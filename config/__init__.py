"""
Configuration management for the demo runner.
"""
from .config_manager import Config, ConfigManager
from .presets import ConfigPresets

__all__ = [
    'Config',
    'ConfigManager',
    'ConfigPresets',
]
