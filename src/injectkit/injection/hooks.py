"""Lifecycle hooks that trigger injection.

Injection is never implicit: each hook below makes exactly one call to
FieldInjector.inject_into() at a defined moment. Classes that cannot use
these bases must make that call themselves (see SupportsInjection).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from injectkit.injection.injector import FieldInjector, InjectionReport


@runtime_checkable
class SupportsInjection(Protocol):
    """Protocol for objects that inject their own fields.

    Implementations must call inject_dependencies() during initialisation,
    typically by delegating to ``FieldInjector.shared().inject_into(self)``.
    """

    def inject_dependencies(self) -> None:
        """Populate this object's marked fields."""
        ...


class Injectable:
    """Base class injecting marked fields at construction time.

    Injection runs in ``Injectable.__init__`` after the next ``__init__`` in
    the MRO, so cooperative bases are initialised first. Subclasses defining
    their own ``__init__`` must call ``super().__init__()`` first so injected
    fields are available to the rest of their constructor.
    """

    def __init__(self) -> None:
        """Initialise cooperative bases, then inject marked fields."""
        super().__init__()
        FieldInjector.shared().inject_into(self)


class InjectableComponent:
    """Base class injecting marked fields when the component is activated.

    Construction does not inject. The host calls activate() once the
    component is ready; marked fields are populated before on_activate()
    runs. Activating again re-resolves and overwrites every marked field.
    """

    def activate(self) -> InjectionReport | None:
        """Inject marked fields, then run the on_activate() hook.

        Returns:
            Report of injected and failed fields

        """
        report = FieldInjector.shared().inject_into(self)
        self.on_activate()
        return report

    def on_activate(self) -> None:
        """Override to run code after injection on activation."""
