"""Service lifecycle management for dependency injection."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from injectkit.errors import FactoryConstructionError, type_name
from injectkit.services.factories import InstanceFactory
from injectkit.services.protocols import ServiceFactory

logger = logging.getLogger(__name__)

# Marks a singleton entry whose instance has not been materialised yet
_NOT_CREATED: Any = object()


class ServiceLifetime(str, Enum):
    """How many instances a registration produces."""

    SINGLETON = "singleton"
    """One instance is shared across all resolutions."""

    TRANSIENT = "transient"
    """A new instance is created for each resolution."""


@dataclass(eq=False)
class RegistrationEntry[T]:
    """A registration owned by the ServiceRegistry.

    Attributes:
        service_type: The type the entry is registered under
        factory: Factory that creates service instances
        lifetime: Service lifetime (singleton or transient)

    The cached singleton instance is set at most once, either eagerly by
    from_instance() or by the first successful get_instance() call. A failed
    factory call leaves the entry uncached so the next resolution retries.

    """

    service_type: type[T]
    factory: ServiceFactory[T]
    lifetime: ServiceLifetime = ServiceLifetime.SINGLETON
    _instance: Any = field(default=_NOT_CREATED, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Normalise the lifetime."""
        # Accept the plain strings "singleton" / "transient"
        self.lifetime = ServiceLifetime(self.lifetime)

    @classmethod
    def from_instance(cls, service_type: type[T], instance: T) -> RegistrationEntry[T]:
        """Create a singleton entry pre-populated with an existing instance.

        Args:
            service_type: The type the instance is registered under
            instance: The instance every resolution returns

        Returns:
            Singleton entry whose cache is already populated

        """
        entry = cls(service_type, InstanceFactory(instance), ServiceLifetime.SINGLETON)
        entry._instance = instance
        return entry

    @property
    def is_singleton(self) -> bool:
        """Check whether the entry shares one instance across resolutions."""
        return self.lifetime is ServiceLifetime.SINGLETON

    @property
    def has_instance(self) -> bool:
        """Check whether a singleton instance has been materialised."""
        return self._instance is not _NOT_CREATED

    def get_instance(self) -> T:
        """Return the instance for this registration.

        Transient entries call the factory every time. Singleton entries call
        it until one call succeeds. When concurrent callers race on an
        uncached singleton, the first result stored is returned to every
        caller and later results are discarded.

        Returns:
            Service instance

        Raises:
            FactoryConstructionError: If the factory raises or returns None

        """
        name = type_name(self.service_type)

        if self.lifetime is ServiceLifetime.TRANSIENT:
            logger.debug("Creating transient service: %s", name)
            return self._create(name)

        cached = self._instance
        if cached is not _NOT_CREATED:
            logger.debug("Returning cached singleton service: %s", name)
            return cached

        logger.debug("Creating singleton service: %s", name)
        # Factory runs outside the lock so it may resolve other services
        instance = self._create(name)

        with self._lock:
            if self._instance is _NOT_CREATED:
                self._instance = instance
                logger.debug("Singleton service created and cached: %s", name)
            else:
                logger.debug(
                    "Discarding concurrently created singleton service: %s", name
                )
            return self._instance

    def _create(self, name: str) -> T:
        try:
            instance = self.factory.create()
        except Exception as e:
            logger.debug("Factory for %s failed: %s", name, e)
            msg = f"Factory for {name} failed: {e}"
            raise FactoryConstructionError(self.service_type, msg) from e

        if instance is None:
            logger.debug("Factory for %s returned None - service unavailable", name)
            msg = f"Factory for {name} returned None - service unavailable"
            raise FactoryConstructionError(self.service_type, msg)
        return instance
