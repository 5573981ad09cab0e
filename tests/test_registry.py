"""Tests for the keyed producer registry."""
import pytest

from creational import CallableProducer, MemoizedProducer, Registry
from utils.exceptions import (
    ContractViolationError,
    DuplicateKeyError,
    RegistryError,
    RegistryFrozenError,
    UnknownKeyError
)
from shapes import Circle, Shape, ShapeKind, Square


class TestResolve:
    """Tests for resolving keys to producers."""

    def test_every_key_produces_contract_object(self, shape_registry):
        """Test all registered keys produce objects honouring the contract."""
        for kind in ShapeKind:
            product = shape_registry.resolve(kind).produce()
            assert isinstance(product, Shape)
            assert product.operate() == kind.value

    def test_string_keys_are_normalized(self, shape_registry):
        """Test string values of enum members resolve like the members."""
        assert isinstance(shape_registry.create('circle'), Circle)
        assert shape_registry.resolve('square') is shape_registry.resolve(ShapeKind.SQUARE)

    def test_unknown_key_raises(self, shape_registry):
        """Test an unknown key fails loudly instead of defaulting."""
        with pytest.raises(UnknownKeyError) as exc_info:
            shape_registry.resolve('triangle')

        assert exc_info.value.details['available_keys'] == ['circle', 'square']
        assert 'triangle' in str(exc_info.value)

    def test_unknown_key_is_a_key_error(self, shape_registry):
        """Test callers can catch the standard KeyError too."""
        with pytest.raises(KeyError):
            shape_registry.create('triangle')

    def test_registered_but_unused_member(self):
        """Test an enum member without a producer is still unknown."""
        registry = Registry('shape', key_type=ShapeKind)
        registry.register(ShapeKind.CIRCLE, Circle)

        with pytest.raises(UnknownKeyError):
            registry.resolve(ShapeKind.SQUARE)

    def test_resolve_is_idempotent(self, shape_registry):
        """Test repeated resolution gives behaviourally equivalent producers."""
        first = shape_registry.resolve(ShapeKind.CIRCLE)
        second = shape_registry.resolve(ShapeKind.CIRCLE)

        assert first.key == second.key
        assert first.produce().operate() == second.produce().operate()

    def test_plain_keys_without_enum(self):
        """Test a registry without key_type uses keys as given."""
        registry = Registry('numbers')
        registry.register(1, lambda: 'one')

        assert registry.create(1) == 'one'
        with pytest.raises(UnknownKeyError):
            registry.resolve('1')


class TestProducers:
    """Tests for producer behaviour."""

    def test_fresh_instances_are_independent(self, shape_registry):
        """Test mutating one product leaves the next one untouched."""
        producer = shape_registry.resolve(ShapeKind.CIRCLE)
        first = producer.produce()
        second = producer.produce()

        first.radius = 10

        assert first is not second
        assert second.radius == 1

    def test_memoized_producer_returns_same_instance(self):
        """Test memoized registration hands out one object."""
        registry = Registry('shape', key_type=ShapeKind, contract=Shape)
        producer = registry.register(ShapeKind.SQUARE, Square, memoize=True)

        assert isinstance(producer, MemoizedProducer)
        assert registry.create('square') is registry.create('square')

    def test_callable_producer_type(self, shape_registry):
        """Test default registration builds fresh-instance producers."""
        assert isinstance(shape_registry.resolve('circle'), CallableProducer)

    def test_closure_producer(self):
        """Test producers can wrap closures capturing context."""
        registry = Registry('greeting')
        name = 'mastodon'
        registry.register('hello', lambda: f'hello {name}')

        assert registry.create('hello') == 'hello mastodon'

    def test_contract_violation(self):
        """Test a product outside the contract is rejected."""
        registry = Registry('shape', contract=Shape)
        registry.register('bogus', lambda: 'not a shape')

        with pytest.raises(ContractViolationError) as exc_info:
            registry.create('bogus')

        assert exc_info.value.details['actual'] == 'str'
        assert isinstance(exc_info.value, TypeError)

    def test_memoized_contract_violation_stays_uninitialized(self):
        """Test a failing memoized producer retries on the next call."""
        attempts = []

        def flaky():
            attempts.append(1)
            return 'oops' if len(attempts) == 1 else Circle()

        registry = Registry('shape', contract=Shape)
        registry.register('flaky', flaky, memoize=True)

        with pytest.raises(ContractViolationError):
            registry.create('flaky')
        assert isinstance(registry.create('flaky'), Circle)
        assert len(attempts) == 2


class TestRegistration:
    """Tests for registering producers."""

    def test_duplicate_key_rejected(self, shape_registry):
        """Test a key cannot be registered twice."""
        with pytest.raises(DuplicateKeyError):
            shape_registry.register('circle', Square)

    def test_frozen_registry_rejects_registration(self, shape_registry):
        """Test freeze() makes the registry read-only."""
        shape_registry.freeze()

        assert shape_registry.frozen
        with pytest.raises(RegistryFrozenError):
            shape_registry.register('other', Circle)
        assert isinstance(shape_registry.create('circle'), Circle)

    def test_register_unknown_enum_value(self):
        """Test registering a string outside the key enumeration fails."""
        registry = Registry('shape', key_type=ShapeKind)

        with pytest.raises(UnknownKeyError):
            registry.register('triangle', Circle)

    def test_register_as_decorator(self):
        """Test decorator registration returns the class unchanged."""
        registry = Registry('shape', contract=Shape)

        @registry.register_as('hexagon')
        class Hexagon(Shape):
            def operate(self) -> str:
                return 'hexagon'

        assert Hexagon.__name__ == 'Hexagon'
        assert registry.create('hexagon').operate() == 'hexagon'

    def test_membership_and_len(self, shape_registry):
        """Test container helpers."""
        assert 'circle' in shape_registry
        assert ShapeKind.SQUARE in shape_registry
        assert 'triangle' not in shape_registry
        assert len(shape_registry) == 2
        assert shape_registry.keys() == ['circle', 'square']

    def test_errors_share_base(self):
        """Test registry errors are catchable as RegistryError."""
        assert issubclass(UnknownKeyError, RegistryError)
        assert issubclass(DuplicateKeyError, RegistryError)
        assert issubclass(RegistryFrozenError, RegistryError)
