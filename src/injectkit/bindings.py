"""Declarative static-phase bindings.

A bindings document maps service types to implementation classes by import
reference, so the static registration phase can live in a YAML file:

```yaml
bindings:
  - service: game.services:ScoreSystem
    implementation: game.services.default:DefaultScoreSystem
    lifetime: singleton
  - service: game.services:EnemySpawner
    lifetime: transient
```

Runtime (instance) registrations cannot be expressed here since the bound
objects do not exist when the file is read.
"""

import importlib
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from injectkit.errors import BindingsParseError
from injectkit.services import ServiceLifetime, ServiceRegistry

logger = logging.getLogger(__name__)


class ServiceBinding(BaseModel):
    """A single type mapping from a bindings document."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    service: str
    """Import reference of the service type ("package.module:Name")."""

    implementation: str | None = None
    """Import reference of the class to construct (defaults to service)."""

    lifetime: ServiceLifetime = ServiceLifetime.SINGLETON

    @field_validator("service", "implementation")
    @classmethod
    def validate_reference(cls, v: str | None) -> str | None:
        """Validate the "package.module:Name" reference format."""
        if v is None:
            return v
        module_name, sep, attribute = v.partition(":")
        if not sep or not module_name.strip() or not attribute.strip():
            raise ValueError(
                f"Reference must look like 'package.module:Name', got: {v!r}"
            )
        return v.strip()


class BindingsDocument(BaseModel):
    """Validated contents of a bindings file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    bindings: list[ServiceBinding] = Field(default_factory=list)


def load_bindings(path: Path) -> BindingsDocument:
    """Read and validate a bindings YAML file.

    Args:
        path: Path to the bindings YAML file.

    Returns:
        Validated BindingsDocument.

    Raises:
        BindingsParseError: If the file cannot be read, the YAML is invalid,
            or validation fails.

    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise BindingsParseError(f"Bindings file not found: {path}") from e
    except yaml.YAMLError as e:
        raise BindingsParseError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise BindingsParseError(f"Cannot read bindings file {path}: {e}") from e

    # An empty file is an empty document
    return parse_bindings(data or {})


def parse_bindings(data: dict[str, Any]) -> BindingsDocument:
    """Validate a bindings document from a dictionary.

    Args:
        data: Dictionary containing a "bindings" list.

    Returns:
        Validated BindingsDocument.

    Raises:
        BindingsParseError: If the structure is invalid.

    """
    try:
        return BindingsDocument.model_validate(data)
    except ValidationError as e:
        raise BindingsParseError(f"Invalid bindings structure: {e}") from e


def import_reference(reference: str) -> Any:  # noqa: ANN401
    """Import the object named by a "package.module:Name" reference.

    Dotted names after the colon are followed as attributes, so nested
    classes can be referenced ("package.module:Outer.Inner").

    Raises:
        BindingsParseError: If the module or attribute cannot be found.

    """
    module_name, _, qualname = reference.partition(":")
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise BindingsParseError(f"Cannot import module for {reference!r}: {e}") from e

    for attribute in qualname.split("."):
        try:
            obj = getattr(obj, attribute)
        except AttributeError as e:
            raise BindingsParseError(
                f"Module {module_name!r} has no attribute {qualname!r}"
            ) from e
    return obj


def apply_bindings(
    document: BindingsDocument, registry: ServiceRegistry | None = None
) -> int:
    """Register every binding of a document as a type mapping.

    All references are imported and checked before anything is registered,
    so a document with a bad entry leaves the registry untouched.

    Args:
        document: Validated bindings document.
        registry: Target registry (defaults to the shared registry).

    Returns:
        Number of bindings registered.

    Raises:
        BindingsParseError: If a reference cannot be imported or an
            implementation is not compatible with its service.

    """
    target = ServiceRegistry.shared() if registry is None else registry

    resolved: list[tuple[Any, Any, ServiceLifetime]] = []
    for binding in document.bindings:
        service_type = import_reference(binding.service)
        implementation = (
            service_type
            if binding.implementation is None
            else import_reference(binding.implementation)
        )
        if not isinstance(service_type, type) or not isinstance(implementation, type):
            raise BindingsParseError(
                f"Binding {binding.service!r} must reference classes"
            )
        try:
            compatible = issubclass(implementation, service_type)
        except TypeError:
            # Non-runtime-checkable protocols cannot be checked
            compatible = True
        if not compatible:
            raise BindingsParseError(
                f"{binding.implementation} is not a subclass of {binding.service}"
            )
        resolved.append((service_type, implementation, binding.lifetime))

    for service_type, implementation, lifetime in resolved:
        target.register_mapping(service_type, implementation, lifetime)

    logger.debug("Applied %d binding(s)", len(resolved))
    return len(resolved)
