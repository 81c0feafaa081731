"""Tests for the built-in ServiceFactory implementations."""

import pytest
from injectkit.services import (
    CallableFactory,
    InstanceFactory,
    MappingFactory,
    ServiceFactory,
)

from .conftest import (
    DefaultScoreSystem,
    NeedsArgumentsScoreSystem,
    TestService,
    TestServiceFactory,
)


class TestServiceFactoryProtocol:
    """Test protocol compliance of built-in and user factories."""

    @pytest.mark.parametrize(
        "factory",
        [
            CallableFactory(TestService),
            MappingFactory(TestService),
            InstanceFactory(TestService()),
            TestServiceFactory(),
        ],
    )
    def test_factories_satisfy_protocol(self, factory):
        assert isinstance(factory, ServiceFactory)


class TestCallableFactory:
    def test_create_invokes_callable_each_time(self):
        factory = CallableFactory(TestService)

        assert factory.create() is not factory.create()
        assert factory.can_create()

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError, match="must be callable"):
            CallableFactory(42)  # type: ignore[arg-type]


class TestMappingFactory:
    def test_create_default_constructs_implementation(self):
        factory = MappingFactory(DefaultScoreSystem)

        assert isinstance(factory.create(), DefaultScoreSystem)
        assert factory.implementation is DefaultScoreSystem

    def test_can_create_false_for_required_constructor_arguments(self):
        """Verify can_create() detects a missing default constructor without calling it."""
        factory = MappingFactory(NeedsArgumentsScoreSystem)

        assert not factory.can_create()
        with pytest.raises(TypeError):
            factory.create()

    def test_can_create_true_for_optional_arguments(self):
        class Configurable:
            def __init__(self, level: int = 1) -> None:
                self.level = level

        assert MappingFactory(Configurable).can_create()


class TestInstanceFactory:
    def test_create_returns_same_instance(self):
        instance = TestService()
        factory = InstanceFactory(instance)

        assert factory.create() is instance
        assert factory.create() is instance
        assert factory.can_create()
