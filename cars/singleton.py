"""
Singleton: one application release per process.

The version passed to the first ``AppRelease.get_instance`` call is kept
for good; later calls get the same object whatever version they pass.
``AppRelease(...)`` raises ``InstantiationError``.
"""
from creational.singleton import Singleton


class AppRelease(Singleton):

    def __init__(self, version: str):
        self._version = version

    @property
    def version(self) -> str:
        return self._version

    def __repr__(self) -> str:
        return f"AppRelease(version={self._version!r})"
