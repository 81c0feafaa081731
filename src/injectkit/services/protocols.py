"""Service protocols for dependency injection."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ServiceFactory[T](Protocol):
    """Protocol for deferred service construction.

    Every registration stored by the ServiceRegistry holds a ServiceFactory.
    The registry calls create() when a service is resolved, never at
    registration time, so registrations may be made in any order.

    The protocol methods (create, can_create) take NO parameters. Anything a
    factory needs is held by the factory instance, not passed per-call.

    Built-in implementations:
        - CallableFactory: wraps a zero-argument callable
        - MappingFactory: default-constructs an implementation class
        - InstanceFactory: always returns one pre-built instance

    Example:
        ```python
        class ConnectionPoolFactory:
            def __init__(self, config: PoolConfiguration) -> None:
                self._config = config

            def can_create(self) -> bool:
                return self._config.size > 0

            def create(self) -> ConnectionPool | None:
                return ConnectionPool(self._config.size)

        registry.register(ConnectionPool, ConnectionPoolFactory(config))
        ```

    """

    def create(self) -> T | None:
        """Create a service instance.

        Returns:
            Service instance, or None if service unavailable.

        """
        ...

    def can_create(self) -> bool:
        """Check if factory can create service instance.

        Returns:
            True if service is available and can be created, False otherwise.

        """
        ...
