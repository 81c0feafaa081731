"""Built-in ServiceFactory implementations."""

from __future__ import annotations

import inspect
from collections.abc import Callable


class CallableFactory[T]:
    """ServiceFactory wrapping a zero-argument callable."""

    def __init__(self, func: Callable[[], T]) -> None:
        """Wrap a zero-argument callable producing the service."""
        if not callable(func):
            raise TypeError(f"Factory must be callable, got {type(func).__name__}")
        self._func = func

    def create(self) -> T | None:
        """Call the wrapped callable."""
        return self._func()

    def can_create(self) -> bool:
        """Check whether the callable can be invoked (always True)."""
        return True

    def __repr__(self) -> str:
        """Describe the wrapped callable."""
        return f"CallableFactory({self._func!r})"


class MappingFactory[T]:
    """ServiceFactory that default-constructs an implementation class.

    Construction problems, such as a constructor with required parameters,
    only surface when create() is called.
    """

    def __init__(self, implementation: type[T]) -> None:
        """Construct instances of implementation with no arguments."""
        self._implementation = implementation

    @property
    def implementation(self) -> type[T]:
        """Get the class constructed by this factory."""
        return self._implementation

    def create(self) -> T | None:
        """Default-construct the implementation."""
        return self._implementation()

    def can_create(self) -> bool:
        """Check whether the implementation can be called with no arguments."""
        try:
            signature = inspect.signature(self._implementation)
        except (TypeError, ValueError):
            # Builtins without introspectable signatures
            return True
        try:
            signature.bind()
        except TypeError:
            return False
        return True

    def __repr__(self) -> str:
        """Describe the implementation class."""
        return f"MappingFactory({self._implementation.__qualname__})"


class InstanceFactory[T]:
    """ServiceFactory that always returns the same pre-built instance."""

    def __init__(self, instance: T) -> None:
        """Hold the instance returned by every create() call."""
        self._instance = instance

    def create(self) -> T | None:
        """Return the held instance."""
        return self._instance

    def can_create(self) -> bool:
        """Check whether an instance is held."""
        return self._instance is not None

    def __repr__(self) -> str:
        """Describe the held instance type."""
        return f"InstanceFactory({type(self._instance).__qualname__})"
