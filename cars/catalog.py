"""Closed key spaces for the car catalogue."""
from enum import Enum


class CarModel(str, Enum):
    """Car brands built by the factories."""
    MASTODON = 'mastodon'
    RHINO = 'rhino'


class BodyStyle(str, Enum):
    """Body styles, one product family per style."""
    SEDAN = 'sedan'
    HATCHBACK = 'hatchback'
