"""Declarative field injection."""

from injectkit.injection.configuration import InjectorConfiguration
from injectkit.injection.discovery import (
    FieldDescriptor,
    FieldDescriptorCache,
    discover_injectable_fields,
)
from injectkit.injection.hooks import Injectable, InjectableComponent, SupportsInjection
from injectkit.injection.injector import DiagnosticSink, FieldInjector, InjectionReport
from injectkit.injection.markers import Inject, is_inject_marker

__all__ = [
    "DiagnosticSink",
    "FieldDescriptor",
    "FieldDescriptorCache",
    "FieldInjector",
    "Inject",
    "Injectable",
    "InjectableComponent",
    "InjectionReport",
    "InjectorConfiguration",
    "SupportsInjection",
    "discover_injectable_fields",
    "is_inject_marker",
]
