"""
Keyed producer registry.

A ``Registry`` maps a discriminant key to a ``Producer``. Callers resolve a
key and produce objects through the producer, never naming the concrete
class. Unknown keys fail loudly with ``UnknownKeyError``.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, Type, TypeVar
from utils.logging_config import get_logger
from utils.exceptions import (
    ContractViolationError,
    DuplicateKeyError,
    RegistryFrozenError,
    UnknownKeyError
)
from .singleton import Memoizer

logger = get_logger(__name__)

T = TypeVar('T')


class Producer(ABC, Generic[T]):
    """Produces objects satisfying a capability contract."""

    def __init__(self, key: Hashable, contract: Optional[Type] = None):
        self._key = key
        self._contract = contract

    @property
    def key(self) -> Hashable:
        return self._key

    @property
    def contract(self) -> Optional[Type]:
        return self._contract

    @abstractmethod
    def produce(self) -> T:
        """Return an object satisfying the contract."""
        pass

    def _check_contract(self, product: Any) -> T:
        if self._contract is not None and not isinstance(product, self._contract):
            raise ContractViolationError(
                f"Producer '{_key_label(self._key)}' returned {type(product).__name__}, "
                f"expected {self._contract.__name__}",
                details={
                    'key': _key_label(self._key),
                    'expected': self._contract.__name__,
                    'actual': type(product).__name__
                }
            )
        return product


class CallableProducer(Producer[T]):
    """Calls a class or closure to build a fresh object every time."""

    def __init__(
        self,
        key: Hashable,
        factory: Callable[[], T],
        contract: Optional[Type] = None
    ):
        super().__init__(key, contract)
        self._factory = factory

    def produce(self) -> T:
        return self._check_contract(self._factory())

    def __repr__(self) -> str:
        return f"CallableProducer(key={_key_label(self._key)!r})"


class MemoizedProducer(Producer[T]):
    """Builds one object on first use and returns it on every call."""

    def __init__(
        self,
        key: Hashable,
        factory: Callable[[], T],
        contract: Optional[Type] = None
    ):
        super().__init__(key, contract)
        self._memoizer: Memoizer[T] = Memoizer(
            lambda: self._check_contract(factory()),
            name=str(_key_label(key))
        )

    def produce(self) -> T:
        return self._memoizer.get_instance()

    def __repr__(self) -> str:
        return f"MemoizedProducer(key={_key_label(self._key)!r})"


class Registry(Generic[T]):
    """
    Mapping from key to producer.

    Args:
        name: Label used in log lines and error messages
        key_type: Optional ``Enum`` closing the key space; string values of
            its members are accepted and normalized to the member
        contract: Optional type every product must be an instance of
    """

    def __init__(
        self,
        name: str,
        key_type: Optional[Type[Enum]] = None,
        contract: Optional[Type] = None
    ):
        self.name = name
        self.key_type = key_type
        self.contract = contract
        self._producers: Dict[Hashable, Producer[T]] = {}
        self._frozen = False

    def register(
        self,
        key: Hashable,
        factory: Callable[[], T],
        memoize: bool = False
    ) -> Producer[T]:
        """Register a factory under ``key`` and return its producer."""
        if self._frozen:
            raise RegistryFrozenError(
                f"{self.name} registry is frozen; cannot register {_key_label(key)!r}",
                details={'registry': self.name, 'key': _key_label(key)}
            )

        key = self._normalize(key)
        if key in self._producers:
            raise DuplicateKeyError(
                f"{self.name} registry already has key {_key_label(key)!r}",
                details={'registry': self.name, 'key': _key_label(key)}
            )

        producer_cls = MemoizedProducer if memoize else CallableProducer
        producer = producer_cls(key, factory, self.contract)
        self._producers[key] = producer
        logger.debug(f"Registered {_key_label(key)} in {self.name}")
        return producer

    def register_as(self, key: Hashable, memoize: bool = False):
        """Decorator for registering a class or factory function."""
        def decorator(factory):
            self.register(key, factory, memoize=memoize)
            return factory
        return decorator

    def freeze(self) -> 'Registry[T]':
        """Make the registry read-only."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def resolve(self, key: Hashable) -> Producer[T]:
        """Return the producer registered under ``key``."""
        normalized = self._normalize(key)
        producer = self._producers.get(normalized)
        if producer is None:
            available = self.keys()
            raise UnknownKeyError(
                f"Unknown {self.name} '{_key_label(key)}'",
                details={
                    'registry': self.name,
                    'key': _key_label(key),
                    'available_keys': available
                }
            )
        logger.debug(f"Resolved {_key_label(normalized)} in {self.name}")
        return producer

    def create(self, key: Hashable) -> T:
        """Resolve ``key`` and produce an object."""
        return self.resolve(key).produce()

    def keys(self) -> List[Any]:
        """List registered keys as plain labels."""
        return [_key_label(key) for key in self._producers]

    def __contains__(self, key: Hashable) -> bool:
        try:
            return self._normalize(key) in self._producers
        except UnknownKeyError:
            return False

    def __len__(self) -> int:
        return len(self._producers)

    def __repr__(self) -> str:
        return f"Registry(name={self.name!r}, keys={self.keys()!r})"

    def _normalize(self, key: Hashable) -> Hashable:
        if self.key_type is None or isinstance(key, self.key_type):
            return key
        try:
            return self.key_type(key)
        except ValueError:
            raise UnknownKeyError(
                f"Unknown {self.name} '{key}'",
                details={
                    'registry': self.name,
                    'key': key,
                    'available_keys': [member.value for member in self.key_type]
                }
            ) from None


def _key_label(key: Hashable) -> Any:
    return key.value if isinstance(key, Enum) else key
