"""Shared test fixtures for services tests."""

import pytest
from injectkit.services import ServiceRegistry


class TestService:
    """Simple test service for testing registry behaviour."""

    pass


class ScoreSystem:
    """Contract used for mapping registrations."""

    def get_score(self) -> int:
        return 0


class DefaultScoreSystem(ScoreSystem):
    """Default-constructible ScoreSystem implementation."""

    pass


class NeedsArgumentsScoreSystem(ScoreSystem):
    """ScoreSystem implementation without a default constructor."""

    def __init__(self, start: int) -> None:
        self.start = start


class TestServiceFactory:
    """Factory that creates TestService instances.

    This factory is compliant with the ServiceFactory protocol.
    """

    def create(self) -> TestService:
        """Create a new TestService instance."""
        return TestService()

    def can_create(self) -> bool:
        """Check if factory can create service."""
        return True


@pytest.fixture
def registry() -> ServiceRegistry:
    """Provide a fresh, isolated registry."""
    return ServiceRegistry()
