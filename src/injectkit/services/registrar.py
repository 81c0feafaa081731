"""Two-phase service registration.

Registrations are split into two phases:

- Static services: type mappings and fresh-construction factories. They do
  not depend on any existing object and can be registered at any time.
- Runtime services: already-existing instances. They can only be registered
  once those instances exist.

The registry itself does not enforce phases. The only requirement is that a
type is registered before it is resolved.
"""

from __future__ import annotations

import abc
import logging
from collections.abc import Callable
from typing import Self

from injectkit.services.lifecycle import ServiceLifetime
from injectkit.services.registry import ServiceRegistry

logger = logging.getLogger(__name__)


class ServiceCollection:
    """Registration façade handed to ServiceRegistrar phases.

    Every method returns the collection so registrations can be chained.
    """

    def __init__(self, registry: ServiceRegistry) -> None:
        """Wrap the registry that receives registrations."""
        self._registry = registry

    @property
    def registry(self) -> ServiceRegistry:
        """Get the registry this collection writes to."""
        return self._registry

    def add_singleton[T](
        self, service_type: type[T], implementation: type[T] | None = None
    ) -> Self:
        """Map a type to a class constructed once, on first resolution."""
        self._registry.register_mapping(
            service_type, implementation, ServiceLifetime.SINGLETON
        )
        return self

    def add_transient[T](
        self, service_type: type[T], implementation: type[T] | None = None
    ) -> Self:
        """Map a type to a class constructed on every resolution."""
        self._registry.register_mapping(
            service_type, implementation, ServiceLifetime.TRANSIENT
        )
        return self

    def add_factory[T](
        self,
        service_type: type[T],
        factory: Callable[[], T],
        lifetime: ServiceLifetime | str = ServiceLifetime.SINGLETON,
    ) -> Self:
        """Register a zero-argument callable building the service."""
        self._registry.register_factory(service_type, factory, lifetime)
        return self

    def add_instance[T](self, service_type: type[T], instance: T) -> Self:
        """Register an existing instance as a singleton."""
        self._registry.register_instance(service_type, instance)
        return self


class ServiceRegistrar(abc.ABC):
    """Base class grouping registrations into static and runtime phases.

    Example:
        ```python
        class GameServices(ServiceRegistrar):
            def __init__(self, manager: GameManager) -> None:
                self._manager = manager

            def configure_static_services(self, services: ServiceCollection) -> None:
                services.add_transient(GameService).add_singleton(
                    ScoreSystem, DefaultScoreSystem
                )

            def configure_runtime_services(self, services: ServiceCollection) -> None:
                services.add_instance(GameManager, self._manager)

        registrar = GameServices(manager)
        registrar.register_static_services()
        # ... once the runtime objects exist ...
        registrar.register_runtime_services()
        ```

    """

    @abc.abstractmethod
    def configure_static_services(self, services: ServiceCollection) -> None:
        """Register services that do not require existing instances."""

    @abc.abstractmethod
    def configure_runtime_services(self, services: ServiceCollection) -> None:
        """Register services bound to already-existing instances."""

    def register_static_services(self, registry: ServiceRegistry | None = None) -> None:
        """Run the static phase. Safe to call at any time.

        Args:
            registry: Target registry (defaults to the shared registry)

        """
        logger.debug("Registering static services from %s", type(self).__name__)
        self.configure_static_services(self._collection(registry))

    def register_runtime_services(
        self, registry: ServiceRegistry | None = None
    ) -> None:
        """Run the runtime phase. Call only once the bound instances exist.

        Args:
            registry: Target registry (defaults to the shared registry)

        """
        logger.debug("Registering runtime services from %s", type(self).__name__)
        self.configure_runtime_services(self._collection(registry))

    def register_all(self, registry: ServiceRegistry | None = None) -> None:
        """Run the static phase followed by the runtime phase."""
        self.register_static_services(registry)
        self.register_runtime_services(registry)

    @staticmethod
    def _collection(registry: ServiceRegistry | None) -> ServiceCollection:
        return ServiceCollection(
            ServiceRegistry.shared() if registry is None else registry
        )
