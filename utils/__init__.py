"""
Utility modules for the creational patterns library.
"""
from .logging_config import get_logger, LoggerFactory, LogContext
from .exceptions import *
from .error_handlers import handle_errors

__all__ = [
    'get_logger',
    'LoggerFactory',
    'LogContext',
    'handle_errors',
    'CreationalError',
    'RegistryError',
    'UnknownKeyError',
    'DuplicateKeyError',
    'RegistryFrozenError',
    'ContractViolationError',
    'InstantiationError',
    'BuilderError',
    'ConfigurationError',
    'ValidationError',
]
