"""Base configuration class for services.

This module provides the base configuration class that injectkit's own
settings and user service configurations inherit from. It provides
consistent validation, immutability, and factory patterns.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class BaseServiceConfiguration(BaseModel):
    """Base class for service configurations.

    Features:
        - Pydantic validation for type safety
        - Immutable by default (frozen) for configuration integrity
        - from_properties() factory method for dictionary-based creation
        - Strict validation (no extra fields allowed)

    Example:
        ```python
        class CacheServiceConfiguration(BaseServiceConfiguration):
            max_entries: int
            ttl_seconds: int | None = None

        config = CacheServiceConfiguration.from_properties({"max_entries": 128})
        registry.register_factory(
            Cache, lambda: LRUCache(config.max_entries), "singleton"
        )
        ```

    """

    model_config = ConfigDict(
        # Immutable - configuration cannot be modified after creation
        frozen=True,
        # Strict - extra fields not in the model are rejected
        extra="forbid",
        # Validate on assignment (if frozen is False in subclass)
        validate_assignment=True,
    )

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from properties dictionary with validation.

        Subclasses should override this method to add environment variable
        support and other preprocessing logic.

        Args:
            properties: Dictionary containing configuration properties

        Returns:
            Validated configuration instance

        Raises:
            ValidationError: If properties are invalid or missing required fields

        """
        return cls.model_validate(properties)
