"""
Reusable creational core: keyed producers, memoized singletons and builders.
"""
from .registry import (
    Producer,
    CallableProducer,
    MemoizedProducer,
    Registry
)
from .singleton import (
    Memoizer,
    Singleton,
    SingletonMeta
)
from .builder import Builder

__all__ = [
    'Producer',
    'CallableProducer',
    'MemoizedProducer',
    'Registry',
    'Memoizer',
    'Singleton',
    'SingletonMeta',
    'Builder',
]
