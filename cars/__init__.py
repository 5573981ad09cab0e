"""
Creational pattern demonstrations built around a small car catalogue.
"""
from .catalog import CarModel, BodyStyle
from .singleton import AppRelease
from .demos import (
    app_factory,
    app_car_factory,
    app_builder,
    app_singleton,
    run_demo,
    run_all
)

__all__ = [
    'CarModel',
    'BodyStyle',
    'AppRelease',
    'app_factory',
    'app_car_factory',
    'app_builder',
    'app_singleton',
    'run_demo',
    'run_all',
]
