"""
Builder contract shared by production lines.
"""
from abc import ABC, abstractmethod
from typing import Any


class Builder(ABC):
    """
    A production line that assembles one product at a time.

    Concrete lines expose chainable customization steps (air bags, color,
    edition, ...). ``build`` hands the customized product to the caller and
    puts a fresh, default product on the line, so two consecutive builds
    never share state.
    """

    @abstractmethod
    def reset(self):
        """Discard the product on the line and start a default one."""

    @abstractmethod
    def build(self) -> Any:
        """Hand over the customized product, then ``reset`` the line."""
