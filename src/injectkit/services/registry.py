"""Service registry for dependency injection."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any, ClassVar, TypedDict

from injectkit.errors import RegistrationNotFoundError, type_name
from injectkit.services.factories import CallableFactory, MappingFactory
from injectkit.services.lifecycle import RegistrationEntry, ServiceLifetime
from injectkit.services.protocols import ServiceFactory

logger = logging.getLogger(__name__)


def _is_subclass(implementation: type, service_type: type) -> bool:
    try:
        return issubclass(implementation, service_type)
    except TypeError:
        # Non-runtime-checkable protocols cannot be checked
        return True


class RegistryState(TypedDict):
    """State snapshot for ServiceRegistry.

    Used for test isolation - captures and restores registry state
    to prevent test pollution.
    """

    entries: dict[type, RegistrationEntry[Any]]


class ServiceRegistry:
    """Thread-safe registry mapping types to their registrations.

    A later registration for a type replaces the earlier one. Registrations
    are resolved lazily: factories run on resolve(), never on register.

    The process-wide registry used by the injection lifecycle hooks is
    available through shared(). Independent registries can be created
    directly, e.g. for tests or for isolated sessions.

    Example:
        >>> registry = ServiceRegistry()
        >>> registry.register_mapping(ScoreSystem, DefaultScoreSystem)
        >>> registry.register_factory(Enemy, lambda: Enemy(level=1), "transient")
        >>> registry.register_instance(GameManager, manager)
        >>>
        >>> registry.resolve(ScoreSystem) is registry.resolve(ScoreSystem)
        True

    """

    _shared_lock: ClassVar[threading.Lock] = threading.Lock()
    _shared: ClassVar[ServiceRegistry | None] = None

    def __init__(self) -> None:
        """Initialise an empty registry."""
        # Store entries directly - type uses Any for heterogeneous storage
        # Type safety is enforced at the public API level through generics
        self._entries: dict[type, RegistrationEntry[Any]] = {}
        self._lock = threading.RLock()
        logger.debug("ServiceRegistry initialised")

    @classmethod
    def shared(cls) -> ServiceRegistry:
        """Get the process-wide registry, creating it on first access.

        Uses double-checked locking so concurrent first calls agree on a
        single instance.

        Returns:
            The shared ServiceRegistry instance

        """
        if cls._shared is None:
            with cls._shared_lock:
                # Double-check after acquiring lock
                if cls._shared is None:
                    cls._shared = cls()
        return cls._shared

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register[T](
        self,
        service_type: type[T],
        factory: ServiceFactory[T],
        lifetime: ServiceLifetime | str = ServiceLifetime.SINGLETON,
    ) -> None:
        """Register a service factory under a type.

        Args:
            service_type: The type the service is resolved by
            factory: Factory creating service instances on demand
            lifetime: Service lifetime ("singleton" or "transient")

        """
        self._store(RegistrationEntry(service_type, factory, ServiceLifetime(lifetime)))

    def register_instance[T](self, service_type: type[T], instance: T) -> None:
        """Register an existing instance as a singleton.

        Args:
            service_type: The type the instance is resolved by
            instance: The instance every resolution returns

        Raises:
            ValueError: If instance is None

        """
        if instance is None:
            raise ValueError(
                f"Cannot register None as instance of {type_name(service_type)}"
            )
        self._store(RegistrationEntry.from_instance(service_type, instance))

    def register_factory[T](
        self,
        service_type: type[T],
        factory: Callable[[], T],
        lifetime: ServiceLifetime | str = ServiceLifetime.SINGLETON,
    ) -> None:
        """Register a zero-argument callable that builds the service.

        Args:
            service_type: The type the service is resolved by
            factory: Callable invoked on resolution
            lifetime: Service lifetime ("singleton" or "transient")

        """
        self.register(service_type, CallableFactory(factory), lifetime)

    def register_mapping[T](
        self,
        service_type: type[T],
        implementation: type[T] | None = None,
        lifetime: ServiceLifetime | str = ServiceLifetime.SINGLETON,
    ) -> None:
        """Register an implementation class constructed with no arguments.

        The constructor is not called until the service is resolved, so a
        class that needs constructor arguments is accepted here and fails
        with FactoryConstructionError on resolve().

        Args:
            service_type: The contract the service is resolved by
            implementation: Concrete class to construct (defaults to service_type)
            lifetime: Service lifetime ("singleton" or "transient")

        Raises:
            TypeError: If implementation is not a class, or is not a subclass
                of service_type

        """
        implementation = service_type if implementation is None else implementation
        if not isinstance(implementation, type):
            raise TypeError(
                f"Implementation for {type_name(service_type)} must be a class, "
                f"got {implementation!r}"
            )
        if isinstance(service_type, type) and not _is_subclass(
            implementation, service_type
        ):
            raise TypeError(
                f"{type_name(implementation)} is not a subclass of "
                f"{type_name(service_type)}"
            )
        self.register(service_type, MappingFactory(implementation), lifetime)

    def _store(self, entry: RegistrationEntry[Any]) -> None:
        with self._lock:
            replaced = entry.service_type in self._entries
            self._entries[entry.service_type] = entry
        if replaced:
            logger.debug(
                "Replaced existing registration for %s",
                type_name(entry.service_type),
            )
        logger.debug(
            "Registered service: %s with lifetime: %s",
            type_name(entry.service_type),
            entry.lifetime.value,
        )

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def resolve[T](self, service_type: type[T]) -> T:
        """Get a service instance from the registry.

        Args:
            service_type: The type of service to retrieve

        Returns:
            Service instance

        Raises:
            RegistrationNotFoundError: If no registration exists for the type
            FactoryConstructionError: If the factory fails or returns None

        """
        with self._lock:
            entry = self._entries.get(service_type)
        if entry is None:
            raise RegistrationNotFoundError(service_type)
        return entry.get_instance()

    def get_entry[T](self, service_type: type[T]) -> RegistrationEntry[T] | None:
        """Get the registration for a type, or None if not registered."""
        with self._lock:
            return self._entries.get(service_type)

    def is_registered(self, service_type: type) -> bool:
        """Check whether a registration exists for the type."""
        with self._lock:
            return service_type in self._entries

    def can_resolve(self, service_type: type) -> bool:
        """Check whether the type is registered and its factory reports availability.

        A cached singleton is always resolvable. Otherwise the factory's
        can_create() decides; the factory itself is not invoked.
        """
        entry = self.get_entry(service_type)
        if entry is None:
            return False
        return entry.has_instance or entry.factory.can_create()

    def registered_types(self) -> tuple[type, ...]:
        """Get all registered types in registration order."""
        with self._lock:
            return tuple(self._entries)

    def __contains__(self, service_type: object) -> bool:
        """Check whether a type is registered."""
        with self._lock:
            return service_type in self._entries

    def __len__(self) -> int:
        """Get the number of registrations."""
        with self._lock:
            return len(self._entries)

    # -------------------------------------------------------------------------
    # Clearing
    # -------------------------------------------------------------------------

    def clear_singleton(self, service_type: type) -> None:
        """Remove the registration for a single type.

        Removes the entry whatever its lifetime. Unknown types are ignored.
        """
        with self._lock:
            removed = self._entries.pop(service_type, None)
        if removed is not None:
            logger.debug("Cleared registration: %s", type_name(service_type))

    def clear_all(self) -> None:
        """Remove every registration."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.debug("Cleared all registrations (%d removed)", count)

    def snapshot_state(self) -> RegistryState:
        """Capture current registrations for later restoration.

        This is primarily used for test isolation - save state before tests,
        restore after tests to prevent global state pollution.

        Returns:
            State dictionary containing the registered entries

        """
        with self._lock:
            return {"entries": self._entries.copy()}

    def restore_state(self, state: RegistryState) -> None:
        """Restore registrations from a previously captured snapshot.

        Args:
            state: State dictionary from snapshot_state()

        """
        with self._lock:
            self._entries = state["entries"].copy()
