"""
Singleton pattern for single-instance classes.
"""
from typing import Any, Callable, Generic, Optional, TypeVar
import threading
from utils.logging_config import get_logger
from utils.exceptions import InstantiationError

logger = get_logger(__name__)

T = TypeVar('T')


class Memoizer(Generic[T]):
    """
    Lazily creates one instance and hands it out forever after.

    The first ``get_instance`` call constructs the instance from its
    arguments. Every later call returns that same object and ignores its
    arguments, so the first caller's configuration is permanent. There is
    no reset.

    Construction is guarded with double-checked locking: concurrent first
    calls build exactly one instance. If the factory raises, the memoizer
    stays uninitialized and the next call tries again.
    """

    def __init__(self, factory: Callable[..., T], name: Optional[str] = None):
        self._factory = factory
        self._name = name or getattr(factory, '__name__', repr(factory))
        self._instance: Optional[T] = None
        self._initialized = False
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def initialized(self) -> bool:
        return self._initialized

    def get_instance(self, *args: Any, **kwargs: Any) -> T:
        """Create or return the memoized instance."""
        if not self._initialized:
            with self._lock:
                # Double-checked locking
                if not self._initialized:
                    self._instance = self._factory(*args, **kwargs)
                    self._initialized = True
                    logger.debug(f"Created singleton instance of {self._name}")
                    return self._instance

        if args or kwargs:
            logger.debug(f"Ignoring arguments for already created {self._name}")
        return self._instance


class SingletonMeta(type):
    """
    Thread-safe Singleton metaclass.

    Each class using this metaclass owns a ``Memoizer``. The instance is
    obtained through ``Cls.get_instance(...)``; calling ``Cls(...)``
    directly raises ``InstantiationError``.
    """

    def __init__(cls, name, bases, namespace, **kwargs):
        super().__init__(name, bases, namespace, **kwargs)
        cls._memoizer = Memoizer(cls._construct, name=name)

    def __call__(cls, *args, **kwargs):
        raise InstantiationError(
            f"{cls.__name__} is a singleton; use {cls.__name__}.get_instance()",
            details={'class': cls.__name__}
        )

    def _construct(cls, *args, **kwargs):
        return super().__call__(*args, **kwargs)

    def get_instance(cls, *args, **kwargs):
        """Create or return the single instance of this class."""
        return cls._memoizer.get_instance(*args, **kwargs)

    def is_initialized(cls) -> bool:
        return cls._memoizer.initialized


class Singleton(metaclass=SingletonMeta):
    """
    Base class for singleton objects.

    Copying returns the instance itself and unpickling resolves back
    through ``get_instance``, so neither produces a second object.
    """

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (type(self).get_instance, ())
