"""Example script: drive each pattern directly, without the CLI."""
from cars import AppRelease, BodyStyle, CarModel, app_builder, app_car_factory, app_factory
from cars.abstract_factory import create_car, create_factory as create_family_factory
from cars.builder import Director
from cars.factory_method import create_factory
from utils.exceptions import UnknownKeyError


def run_factory_method():
    """Pick a factory by key and let it decide which car to make."""
    for model in CarModel:
        app_factory(create_factory(model))


def run_abstract_factory():
    """Swap whole product families by swapping the factory."""
    for style in BodyStyle:
        app_car_factory(create_family_factory(style))

    print(create_car('sedan', 'rhino').use_gps())


def run_builder():
    app_builder(Director())


def run_singleton():
    first = AppRelease.get_instance('v-1')
    second = AppRelease.get_instance('v-2')
    print(first is second, first.version)


def run_unknown_key():
    """Unknown keys fail loudly instead of falling back to a default."""
    try:
        create_factory('tesla')
    except UnknownKeyError as e:
        print(f"{e.message} (available: {e.details['available_keys']})")


if __name__ == "__main__":
    print("=" * 60)
    print("Factory Method")
    print("=" * 60)
    run_factory_method()

    print("\n" + "=" * 60)
    print("Abstract Factory")
    print("=" * 60)
    run_abstract_factory()

    print("\n" + "=" * 60)
    print("Builder")
    print("=" * 60)
    run_builder()

    print("\n" + "=" * 60)
    print("Singleton")
    print("=" * 60)
    run_singleton()

    print("\n" + "=" * 60)
    print("Unknown key")
    print("=" * 60)
    run_unknown_key()
