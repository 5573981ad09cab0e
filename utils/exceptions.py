"""
Custom exception hierarchy for the creational patterns library.
"""
from typing import Any, Dict, Optional


class CreationalError(Exception):
    """Base exception for all creational pattern errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


# Registry Exceptions
class RegistryError(CreationalError):
    """Base exception for registry errors."""
    pass


class UnknownKeyError(RegistryError, KeyError):
    """Raised when a registry is asked for a key it has no producer for."""
    pass


class DuplicateKeyError(RegistryError):
    """Raised when a key is registered twice in the same registry."""
    pass


class RegistryFrozenError(RegistryError):
    """Raised when registering into a frozen registry."""
    pass


# Product Exceptions
class ContractViolationError(CreationalError, TypeError):
    """Raised when a producer returns an object outside its contract."""
    pass


class InstantiationError(CreationalError):
    """Raised when a singleton class is constructed directly."""
    pass


class BuilderError(CreationalError):
    """Raised when a builder or director is used out of order."""
    pass


# Configuration Exceptions
class ConfigurationError(CreationalError):
    """Raised when configuration is invalid."""
    pass


# Data Exceptions
class ValidationError(CreationalError):
    """Raised when input validation fails."""
    pass
