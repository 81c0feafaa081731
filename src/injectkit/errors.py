"""Error classes for injectkit.

This module provides:
- InjectionError: Base exception class for all injectkit errors
- RegistrationNotFoundError: Resolution of a type with no registration
- FactoryConstructionError: A registered factory or constructor failed
- FieldAssignmentError: A single marked field could not be injected
- UnresolvedAnnotationError: A marked field's annotation could not be evaluated
- BindingsParseError: A bindings document could not be loaded or applied
"""

from __future__ import annotations


def type_name(service_type: object) -> str:
    """Return a readable name for a type identifier."""
    return getattr(service_type, "__qualname__", None) or getattr(
        service_type, "__name__", repr(service_type)
    )


class InjectionError(Exception):
    """Base exception for all injectkit errors."""

    pass


class RegistrationNotFoundError(InjectionError, LookupError):
    """Raised when a type is resolved without a prior registration."""

    def __init__(self, service_type: object) -> None:
        """Initialise with the type that could not be resolved.

        Args:
            service_type: The unregistered type identifier

        """
        self.service_type = service_type
        self.type_name = type_name(service_type)
        super().__init__(f"No registration for type {self.type_name}")


class FactoryConstructionError(InjectionError, RuntimeError):
    """Raised when a registered factory or default constructor fails.

    The original exception, if any, is available as ``__cause__``.
    """

    def __init__(self, service_type: object, message: str) -> None:
        """Initialise with the type being constructed and a description."""
        self.service_type = service_type
        self.type_name = type_name(service_type)
        super().__init__(message)


class FieldAssignmentError(InjectionError):
    """Describes a single marked field that could not be injected.

    Instances are handed to the injector's diagnostic sink and collected in
    the injection report. They are never raised out of ``inject_into``.
    """

    def __init__(
        self,
        target_type: type,
        field_name: str,
        field_type: object,
        cause: BaseException,
    ) -> None:
        """Initialise with the failing field and the underlying cause.

        Args:
            target_type: Concrete type of the injection target
            field_name: Name of the marked field
            field_type: Declared type of the field
            cause: The error raised while resolving or assigning the field

        """
        self.target_type = target_type
        self.field_name = field_name
        self.field_type = field_type
        self.cause = cause
        super().__init__(
            "Dependency injection failed: "
            f"Type: {type_name(target_type)}, "
            f"Field: {field_name}, "
            f"Error: {cause}"
        )


class UnresolvedAnnotationError(InjectionError):
    """Raised for a marked field whose annotation cannot be evaluated.

    Typically the annotation names a type that only exists for type checkers,
    such as an import guarded by ``TYPE_CHECKING``.
    """

    def __init__(self, declaring_type: type, field_name: str, reason: str) -> None:
        """Initialise with the declaring class, the field and the evaluation error."""
        self.declaring_type = declaring_type
        self.field_name = field_name
        self.reason = reason
        super().__init__(
            f"Cannot evaluate annotation of {type_name(declaring_type)}.{field_name}: "
            f"{reason}"
        )


class BindingsParseError(InjectionError):
    """Raised when a bindings document cannot be read, validated or applied."""

    pass
