"""
Console demonstrations for each creational pattern.

Every ``app_*`` function takes an already selected component, drives it
through its contract only, writes the resulting lines through ``out``
and returns them.
"""
from typing import Callable, Dict, List, Optional, Sequence

from utils.error_handlers import handle_errors
from utils.exceptions import UnknownKeyError
from utils.logging_config import LogContext, get_logger
from validation import KNOWN_DEMOS, NonEmptyValidator
from . import abstract_factory, factory_method
from .builder import Director, SedanProductionLine
from .catalog import BodyStyle, CarModel
from .singleton import AppRelease

logger = get_logger(__name__)

Output = Callable[[str], None]

DEFAULT_VERSIONS = ('v-1', 'v-2', 'v-3')
_versions_validator = NonEmptyValidator(name="versions")


def _emit(lines: List[str], out: Output) -> List[str]:
    for line in lines:
        out(line)
    return lines


def app_factory(
    factory: Optional[factory_method.CarFactory],
    out: Output = print
) -> List[str]:
    """Make a car with any factory and show its cost."""
    lines = ['--- Calling app_factory ---', '']
    if factory is None:
        lines.append('--- No factory provided ---')
        return _emit(lines, out)

    car = factory.make_car()
    lines.append(car.show_cost())
    return _emit(lines, out)


def app_car_factory(
    factory: Optional[abstract_factory.CarAbstractFactory],
    out: Output = print
) -> List[str]:
    """Make one car of each brand from a family factory and use their GPS."""
    lines = ['--- Calling app_car_factory ---', '']
    if factory is None:
        lines.append('--- No factory provided ---')
        return _emit(lines, out)

    mastodon = factory.create_mastodon()
    rhino = factory.create_rhino()
    lines.append(mastodon.use_gps())
    lines.append(rhino.use_gps())
    return _emit(lines, out)


def app_builder(director: Optional[Director], out: Output = print) -> List[str]:
    """Build a CVT and a Signature Mastodon sedan on the same line."""
    lines = ['--- Calling app_builder ---', '']
    if director is None:
        lines.append('--- No director provided ---')
        return _emit(lines, out)

    line = SedanProductionLine(CarModel.MASTODON)
    director.set_production_line(line)

    director.construct_cvt_edition()
    cvt = line.build()
    lines.extend(['--- Mastodon Sedan CVT ---', '', repr(cvt)])

    director.construct_signature_edition()
    signature = line.build()
    lines.extend(['', '--- Mastodon Sedan Signature ---', '', repr(signature)])
    return _emit(lines, out)


def app_singleton(
    versions: Sequence[str] = DEFAULT_VERSIONS,
    out: Output = print
) -> List[str]:
    """Request the release several times and check every call got one object."""
    _versions_validator.validate(versions)
    releases = [AppRelease.get_instance(version) for version in versions]
    first = releases[0]
    lines = [str(first is other) for other in releases[1:]]
    lines.append(f"version: {first.version}")
    return _emit(lines, out)


def _factory_demo(out: Output, versions: Sequence[str]) -> List[str]:
    lines = []
    lines += app_factory(factory_method.MastodonCarFactory(), out)
    lines += app_factory(factory_method.RhinoCarFactory(), out)
    # Same again, picking the factory by key instead of by class
    for model in CarModel:
        lines += app_factory(factory_method.create_factory(model), out)
    return lines


def _abstract_factory_demo(out: Output, versions: Sequence[str]) -> List[str]:
    lines = []
    lines += app_car_factory(abstract_factory.HatchbackCarFactory(), out)
    lines += app_car_factory(abstract_factory.SedanCarFactory(), out)
    for style in (BodyStyle.HATCHBACK, BodyStyle.SEDAN):
        lines += app_car_factory(abstract_factory.create_factory(style), out)
    return lines


def _builder_demo(out: Output, versions: Sequence[str]) -> List[str]:
    return app_builder(Director(), out)


def _singleton_demo(out: Output, versions: Sequence[str]) -> List[str]:
    return app_singleton(versions, out)


DEMOS: Dict[str, Callable[[Output, Sequence[str]], List[str]]] = {
    'factory': _factory_demo,
    'abstract-factory': _abstract_factory_demo,
    'builder': _builder_demo,
    'singleton': _singleton_demo,
}


@handle_errors(default_return=None)
def run_demo(
    name: str,
    out: Output = print,
    versions: Sequence[str] = DEFAULT_VERSIONS
) -> Optional[List[str]]:
    """Run one demo by name; errors are logged and yield ``None``."""
    if name not in DEMOS:
        raise UnknownKeyError(
            f"Unknown demo '{name}'",
            details={'key': name, 'available_keys': list(DEMOS)}
        )

    with LogContext(logger, demo=name):
        logger.info(f"Running demo {name}")
        return DEMOS[name](out, versions)


def run_all(
    names: Optional[Sequence[str]] = None,
    out: Output = print,
    versions: Sequence[str] = DEFAULT_VERSIONS
) -> Dict[str, Optional[List[str]]]:
    """Run the named demos (all by default) and collect their output."""
    results = {}
    for name in (names if names is not None else KNOWN_DEMOS):
        results[name] = run_demo(name, out=out, versions=versions)
    return results
