"""Workspace-level pytest configuration and fixtures.

This file provides shared fixtures and configuration for all tests across
the workspace.
"""

import pytest
from injectkit.services import ServiceRegistry


@pytest.fixture(autouse=True, scope="function")
def isolate_shared_registry():
    """Automatically preserve and restore the shared ServiceRegistry for each test.

    This fixture ensures test isolation by:
    1. Capturing the shared registry's entries before each test
    2. Restoring the exact entries after each test completes
    3. Running automatically for ALL tests (autouse=True)

    Why this is needed:
    - ServiceRegistry.shared() is process-wide mutable state
    - Lifecycle hooks (Injectable, InjectableComponent) resolve from it
    - Without isolation, test execution order affects test results
    """
    registry = ServiceRegistry.shared()
    saved_state = registry.snapshot_state()

    yield  # Test runs here

    # Restore state after test completes (even if test fails)
    registry.restore_state(saved_state)
