"""Discovery of injectable fields on a type."""

from __future__ import annotations

import inspect
import logging
import re
import sys
import threading
import types
from dataclasses import dataclass
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from injectkit.injection.markers import is_inject_marker

logger = logging.getLogger(__name__)

_INJECT_NAME = re.compile(r"\bInject\b")


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """A marked field of a concrete type.

    Attributes:
        declaring_type: The class in the MRO that declares the field
        field_name: Attribute name the resolved service is assigned to
        field_type: Type resolved from the registry for this field, or the
            raw annotation when it could not be evaluated
        evaluation_error: Why the annotation could not be evaluated, if so

    """

    declaring_type: type
    field_name: str
    field_type: Any
    evaluation_error: str | None = None


def discover_injectable_fields(target_type: type) -> tuple[FieldDescriptor, ...]:
    """Scan a type and its bases for fields marked with Inject.

    Classes are visited from the most basic to the most derived, so fields
    are ordered by declaration with base classes first. A subclass that
    re-declares a field replaces the base declaration, and drops the field
    if the new annotation is unmarked.

    Each annotation is evaluated on its own against the declaring class's
    module and namespace. Unmarked annotations that cannot be evaluated are
    ignored; marked ones are kept with their evaluation error so that the
    injector reports them as field failures.

    Args:
        target_type: Concrete type to scan

    Returns:
        Ordered descriptors of all marked fields

    """
    fields: dict[str, FieldDescriptor] = {}

    for klass in reversed(target_type.__mro__):
        for name, annotation in _own_annotations(klass).items():
            descriptor = _describe_field(klass, name, annotation)
            if descriptor is None:
                fields.pop(name, None)
            else:
                fields[name] = descriptor

    return tuple(fields.values())


def _own_annotations(klass: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(klass)
    except NameError:
        # Deferred annotations naming undefined types (Python 3.14+)
        import annotationlib

        return annotationlib.get_annotations(
            klass, format=annotationlib.Format.STRING
        )


def _describe_field(
    klass: type,
    name: str,
    annotation: Any,  # noqa: ANN401
) -> FieldDescriptor | None:
    try:
        hint = _evaluate_annotation(klass, name, annotation)
    except Exception as e:
        if not _mentions_inject(annotation):
            logger.debug(
                "Ignoring unresolvable annotation of unmarked field %s.%s: %s",
                klass.__qualname__,
                name,
                e,
            )
            return None
        logger.debug(
            "Cannot evaluate annotation of marked field %s.%s: %s",
            klass.__qualname__,
            name,
            e,
        )
        return FieldDescriptor(klass, name, annotation, str(e))

    field_type = _marked_field_type(hint)
    if field_type is None:
        return None
    return FieldDescriptor(klass, name, field_type)


def _evaluate_annotation(
    klass: type,
    name: str,
    annotation: Any,  # noqa: ANN401
) -> Any:  # noqa: ANN401
    module = sys.modules.get(klass.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    holder = types.SimpleNamespace(__annotations__={name: annotation})
    hints = get_type_hints(holder, globalns, dict(vars(klass)), include_extras=True)
    return hints[name]


def _mentions_inject(annotation: Any) -> bool:  # noqa: ANN401
    if isinstance(annotation, str):
        return _INJECT_NAME.search(annotation) is not None
    return _marked_field_type(annotation) is not None


def _marked_field_type(hint: Any) -> Any:  # noqa: ANN401
    # Accepts both Annotated[T | None, Inject] and Annotated[T, Inject] | None
    hint = _strip_optional(hint)
    if get_origin(hint) is not Annotated:
        return None
    if not any(is_inject_marker(item) for item in hint.__metadata__):
        return None
    return _strip_optional(get_args(hint)[0])


def _strip_optional(field_type: Any) -> Any:  # noqa: ANN401
    # Optional[X] / X | None resolves as X
    if get_origin(field_type) in (Union, types.UnionType):
        members = [arg for arg in get_args(field_type) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return field_type


class FieldDescriptorCache:
    """Per-type cache of discovered field descriptors.

    Entries are never invalidated since a type's annotations do not change
    after it is defined. Concurrent first lookups for the same type may each
    run discovery; only the first stored result is kept.
    """

    def __init__(self) -> None:
        """Initialise an empty cache."""
        self._descriptors: dict[type, tuple[FieldDescriptor, ...]] = {}
        self._lock = threading.Lock()

    def get(self, target_type: type) -> tuple[FieldDescriptor, ...]:
        """Get the descriptors for a type, discovering them on first access."""
        cached = self._descriptors.get(target_type)
        if cached is not None:
            return cached

        discovered = discover_injectable_fields(target_type)
        logger.debug(
            "Discovered %d injectable field(s) on %s",
            len(discovered),
            target_type.__qualname__,
        )
        with self._lock:
            return self._descriptors.setdefault(target_type, discovered)

    def __contains__(self, target_type: object) -> bool:
        """Check whether descriptors for a type are cached."""
        return target_type in self._descriptors

    def __len__(self) -> int:
        """Get the number of cached types."""
        return len(self._descriptors)
