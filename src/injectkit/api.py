"""Module-level shortcuts operating on the shared registry and injector."""

from __future__ import annotations

from collections.abc import Callable

from injectkit.injection import FieldInjector, InjectionReport
from injectkit.services import ServiceLifetime, ServiceRegistry


def register_instance[T](service_type: type[T], instance: T) -> None:
    """Register an existing instance as a singleton in the shared registry."""
    ServiceRegistry.shared().register_instance(service_type, instance)


def register_factory[T](
    service_type: type[T],
    factory: Callable[[], T],
    lifetime: ServiceLifetime | str = ServiceLifetime.SINGLETON,
) -> None:
    """Register a factory callable in the shared registry."""
    ServiceRegistry.shared().register_factory(service_type, factory, lifetime)


def register_mapping[T](
    service_type: type[T],
    implementation: type[T] | None = None,
    lifetime: ServiceLifetime | str = ServiceLifetime.SINGLETON,
) -> None:
    """Register an implementation class in the shared registry."""
    ServiceRegistry.shared().register_mapping(service_type, implementation, lifetime)


def resolve[T](service_type: type[T]) -> T:
    """Resolve a service from the shared registry."""
    return ServiceRegistry.shared().resolve(service_type)


def clear_singleton(service_type: type) -> None:
    """Remove one registration from the shared registry."""
    ServiceRegistry.shared().clear_singleton(service_type)


def clear_all() -> None:
    """Remove every registration from the shared registry."""
    ServiceRegistry.shared().clear_all()


def inject_into(target: object | None) -> InjectionReport | None:
    """Inject marked fields of target using the shared injector."""
    return FieldInjector.shared().inject_into(target)
