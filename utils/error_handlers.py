"""
Error handling utilities and decorators.
"""
import functools
from typing import Any, Callable
from .logging_config import get_logger
from .exceptions import CreationalError


logger = get_logger(__name__)


def handle_errors(
    default_return: Any = None,
    raise_on_error: bool = False,
    log_level: str = "ERROR"
):
    """
    Decorator for handling errors in functions.

    Args:
        default_return: Value to return on error
        raise_on_error: Whether to re-raise the exception
        log_level: Logging level for errors
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            log_method = getattr(logger, log_level.lower())
            try:
                return func(*args, **kwargs)
            except CreationalError as e:
                log_method(
                    f"Creational error in {func.__name__}: {e.message}",
                    extra={'error_details': e.to_dict()}
                )
                if raise_on_error:
                    raise
                return default_return
            except Exception as e:
                log_method(
                    f"Unexpected error in {func.__name__}: {e}",
                    exc_info=True
                )
                if raise_on_error:
                    raise
                return default_return

        return wrapper
    return decorator

