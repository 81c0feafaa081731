"""Field injection from the service registry."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from injectkit.errors import (
    FieldAssignmentError,
    UnresolvedAnnotationError,
    type_name,
)
from injectkit.injection.configuration import InjectorConfiguration
from injectkit.injection.discovery import FieldDescriptor, FieldDescriptorCache
from injectkit.services import ServiceRegistry

logger = logging.getLogger(__name__)

type DiagnosticSink = Callable[[FieldAssignmentError], None]


@dataclass(frozen=True)
class InjectionReport:
    """Outcome of a single inject_into() call.

    Attributes:
        target_type: Concrete type of the injection target
        injected: Names of the fields that were assigned
        failures: One error per field that could not be assigned

    """

    target_type: type
    injected: tuple[str, ...] = ()
    failures: tuple[FieldAssignmentError, ...] = ()

    @property
    def succeeded(self) -> bool:
        """Check whether every marked field was injected."""
        return not self.failures

    @property
    def failed_fields(self) -> tuple[str, ...]:
        """Get the names of the fields that could not be injected."""
        return tuple(failure.field_name for failure in self.failures)


class FieldInjector:
    """Populates fields marked with Inject from a ServiceRegistry.

    Each marked field is resolved and assigned independently. A field whose
    annotation cannot be evaluated, whose type is unregistered, whose factory
    fails or whose value cannot be assigned is reported to the diagnostic
    sink, and the remaining fields are still processed. Nothing is raised out
    of inject_into().

    Assignment goes through ``object.__setattr__`` so private names, custom
    ``__setattr__`` implementations and frozen dataclasses are all written.

    Example:
        ```python
        class Hud:
            _scores: Annotated[ScoreSystem, Inject]
            _audio: Annotated[AudioService, Inject]

        injector = FieldInjector(registry)
        report = injector.inject_into(hud)
        if not report.succeeded:
            print("Missing:", report.failed_fields)
        ```

    """

    _shared_lock: ClassVar[threading.Lock] = threading.Lock()
    _shared: ClassVar[FieldInjector | None] = None

    def __init__(
        self,
        registry: ServiceRegistry | None = None,
        config: InjectorConfiguration | None = None,
        sink: DiagnosticSink | None = None,
    ) -> None:
        """Initialise the injector.

        Args:
            registry: Registry to resolve fields from (defaults to the shared registry)
            config: Injector settings (defaults to InjectorConfiguration())
            sink: Callable receiving each per-field failure (defaults to logging)

        """
        self._registry = ServiceRegistry.shared() if registry is None else registry
        self._config = config or InjectorConfiguration()
        self._sink: DiagnosticSink = sink or self._log_failure
        self._descriptors = FieldDescriptorCache()

    @classmethod
    def shared(cls) -> FieldInjector:
        """Get the process-wide injector bound to the shared registry."""
        if cls._shared is None:
            with cls._shared_lock:
                if cls._shared is None:
                    cls._shared = cls(
                        ServiceRegistry.shared(),
                        InjectorConfiguration.from_properties({}),
                    )
        return cls._shared

    @property
    def registry(self) -> ServiceRegistry:
        """Get the registry fields are resolved from."""
        return self._registry

    @property
    def config(self) -> InjectorConfiguration:
        """Get the injector configuration."""
        return self._config

    def injectable_fields(self, target_type: type) -> tuple[FieldDescriptor, ...]:
        """Get the cached marked fields of a type."""
        return self._descriptors.get(target_type)

    def inject_into(self, target: object | None) -> InjectionReport | None:
        """Resolve and assign every marked field of the target.

        Calling this again on the same target re-resolves every field and
        overwrites the previous values.

        Args:
            target: Object whose concrete type is scanned for marked fields

        Returns:
            Report of injected and failed fields, or None if target is None

        """
        if target is None:
            return None

        target_type = type(target)
        descriptors = self._descriptors.get(target_type)
        if not descriptors:
            return InjectionReport(target_type)

        injected: list[str] = []
        failures: list[FieldAssignmentError] = []

        for descriptor in descriptors:
            try:
                self._assign(target, descriptor, self._resolve(descriptor))
            except Exception as e:
                failure = FieldAssignmentError(
                    target_type, descriptor.field_name, descriptor.field_type, e
                )
                failures.append(failure)
                self._report(failure)
            else:
                injected.append(descriptor.field_name)

        logger.debug(
            "Injected %d of %d field(s) into %s",
            len(injected),
            len(descriptors),
            type_name(target_type),
        )
        return InjectionReport(target_type, tuple(injected), tuple(failures))

    def _resolve(self, descriptor: FieldDescriptor) -> Any:  # noqa: ANN401
        if descriptor.evaluation_error is not None:
            raise UnresolvedAnnotationError(
                descriptor.declaring_type,
                descriptor.field_name,
                descriptor.evaluation_error,
            )
        return self._registry.resolve(descriptor.field_type)

    def _assign(
        self,
        target: object,
        descriptor: FieldDescriptor,
        value: Any,  # noqa: ANN401
    ) -> None:
        if self._config.verify_field_types and not _is_instance(
            value, descriptor.field_type
        ):
            raise TypeError(
                f"Resolved {type_name(type(value))} is not an instance of "
                f"{type_name(descriptor.field_type)}"
            )
        object.__setattr__(target, descriptor.field_name, value)

    def _report(self, failure: FieldAssignmentError) -> None:
        try:
            self._sink(failure)
        except Exception:
            logger.exception(
                "Diagnostic sink failed while reporting %s.%s",
                type_name(failure.target_type),
                failure.field_name,
            )

    def _log_failure(self, failure: FieldAssignmentError) -> None:
        logger.log(
            self._config.failure_log_level_number,
            "Dependency injection failed: Type: %s, Field: %s, Error: %s",
            type_name(failure.target_type),
            failure.field_name,
            failure.cause,
        )


def _is_instance(value: object, field_type: Any) -> bool:  # noqa: ANN401
    try:
        return isinstance(value, field_type)
    except TypeError:
        # Generic aliases and non-runtime protocols cannot be checked
        return True
