"""Service registration and lifetime management."""

from injectkit.services.configuration import BaseServiceConfiguration
from injectkit.services.factories import (
    CallableFactory,
    InstanceFactory,
    MappingFactory,
)
from injectkit.services.lifecycle import RegistrationEntry, ServiceLifetime
from injectkit.services.protocols import ServiceFactory
from injectkit.services.registrar import ServiceCollection, ServiceRegistrar
from injectkit.services.registry import RegistryState, ServiceRegistry

__all__ = [
    "BaseServiceConfiguration",
    "CallableFactory",
    "InstanceFactory",
    "MappingFactory",
    "RegistrationEntry",
    "RegistryState",
    "ServiceCollection",
    "ServiceFactory",
    "ServiceLifetime",
    "ServiceRegistrar",
    "ServiceRegistry",
]
