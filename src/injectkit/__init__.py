"""injectkit - In-process service registry with declarative field injection.

This package provides a thread-safe service registry with singleton and
transient lifetimes, and a field injector that populates ``Inject``-marked
fields of an object from that registry.
"""

__version__ = "0.1.0"

from injectkit.api import (
    clear_all,
    clear_singleton,
    inject_into,
    register_factory,
    register_instance,
    register_mapping,
    resolve,
)
from injectkit.bindings import (
    BindingsDocument,
    ServiceBinding,
    apply_bindings,
    load_bindings,
    parse_bindings,
)
from injectkit.errors import (
    BindingsParseError,
    FactoryConstructionError,
    FieldAssignmentError,
    InjectionError,
    RegistrationNotFoundError,
    UnresolvedAnnotationError,
)
from injectkit.injection import (
    FieldDescriptor,
    FieldInjector,
    Inject,
    Injectable,
    InjectableComponent,
    InjectionReport,
    InjectorConfiguration,
    SupportsInjection,
)
from injectkit.services import (
    BaseServiceConfiguration,
    RegistrationEntry,
    ServiceCollection,
    ServiceFactory,
    ServiceLifetime,
    ServiceRegistrar,
    ServiceRegistry,
)

__all__ = [
    # Version
    "__version__",
    # Shared registry shortcuts
    "clear_all",
    "clear_singleton",
    "inject_into",
    "register_factory",
    "register_instance",
    "register_mapping",
    "resolve",
    # Services
    "BaseServiceConfiguration",
    "RegistrationEntry",
    "ServiceCollection",
    "ServiceFactory",
    "ServiceLifetime",
    "ServiceRegistrar",
    "ServiceRegistry",
    # Injection
    "FieldDescriptor",
    "FieldInjector",
    "Inject",
    "Injectable",
    "InjectableComponent",
    "InjectionReport",
    "InjectorConfiguration",
    "SupportsInjection",
    # Bindings
    "BindingsDocument",
    "ServiceBinding",
    "apply_bindings",
    "load_bindings",
    "parse_bindings",
    # Errors
    "InjectionError",
    "BindingsParseError",
    "FactoryConstructionError",
    "FieldAssignmentError",
    "RegistrationNotFoundError",
    "UnresolvedAnnotationError",
]
