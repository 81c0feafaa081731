"""Field marker for declarative injection."""

from typing import Any, final


@final
class Inject:
    """Marks a class-level annotated field for injection.

    The marker takes no parameters; its presence in the ``Annotated``
    metadata is what opts the field in. Both the class and an instance are
    accepted.

    Example:
        ```python
        class ScoreBoard(Injectable):
            _scores: Annotated[ScoreSystem, Inject]
            _manager: Annotated[GameManager, Inject()]
            title: str = "Scores"  # not injected
        ```

    """

    __slots__ = ()

    def __repr__(self) -> str:
        """Render as the bare marker name."""
        return "Inject"


def is_inject_marker(metadata: Any) -> bool:  # noqa: ANN401
    """Check whether an ``Annotated`` metadata item is the Inject marker."""
    return metadata is Inject or isinstance(metadata, Inject)
