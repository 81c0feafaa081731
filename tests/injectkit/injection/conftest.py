"""Shared fixtures for injection tests.

Target classes are defined at module level so their annotations resolve
against this module's globals.
"""

from dataclasses import dataclass
from typing import Annotated, Protocol

import pytest
from injectkit.injection import FieldInjector, Inject
from injectkit.services import ServiceRegistry


class GameService:
    pass


class ScoreSystem:
    pass


class EnemyFactory:
    pass


class Foo:
    pass


class Bar:
    pass


class Greeter(Protocol):
    def greet(self) -> str: ...


class EnglishGreeter:
    def greet(self) -> str:
        return "hello"


class PlayerHud:
    """Target with two marked fields and two unmarked fields."""

    title: str = "HUD"
    _game_service: Annotated[GameService, Inject]
    _score_system: Annotated[ScoreSystem, Inject()]
    _enemy_factory: EnemyFactory

    def __init__(self) -> None:
        self.title = "Player"
        self._enemy_factory = EnemyFactory()


class FooBarConsumer:
    """Target with one registered and one unregistered dependency."""

    foo: Annotated[Foo, Inject]
    bar: Annotated[Bar, Inject]


class BaseWidget:
    _game_service: Annotated[GameService, Inject]


class ScoreWidget(BaseWidget):
    _score_system: Annotated[ScoreSystem, Inject]


class OverridingWidget(BaseWidget):
    # Re-declared without the marker: no longer injected
    _game_service: GameService


class NoMarkedFields:
    name: str
    count: int = 0


@dataclass(frozen=True)
class FrozenSettingsView:
    label: str = "settings"
    scores: Annotated[ScoreSystem | None, Inject] = None


class ReadOnlyAttributes:
    """Target whose __setattr__ rejects every write."""

    scores: Annotated[ScoreSystem, Inject]

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{name} is read-only")


class SlottedTarget:
    __slots__ = ("other",)

    scores: Annotated[ScoreSystem, Inject]


class GreeterConsumer:
    greeter: Annotated[Greeter, Inject]


@pytest.fixture
def registry() -> ServiceRegistry:
    """Provide a fresh, isolated registry."""
    return ServiceRegistry()


@pytest.fixture
def failures() -> list:
    """Collect failures reported to the diagnostic sink."""
    return []


@pytest.fixture
def injector(registry, failures) -> FieldInjector:
    """Provide an injector over the isolated registry recording failures."""
    return FieldInjector(registry, sink=failures.append)
