"""Configuration for the field injector.

Configuration supports both explicit instantiation and environment variable
fallback, following the BaseServiceConfiguration pattern.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Self, override

from pydantic import Field, field_validator

from injectkit.services import BaseServiceConfiguration

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class InjectorConfiguration(BaseServiceConfiguration):
    """Settings controlling how the FieldInjector reports and verifies fields.

    Attributes:
        failure_log_level: Level at which the default sink logs field failures
        verify_field_types: Reject resolved values that are not instances of
            the declared field type

    Example:
        ```python
        # Explicit configuration
        config = InjectorConfiguration(failure_log_level="warning")

        # From properties dict with env fallback
        os.environ["INJECTKIT_VERIFY_FIELD_TYPES"] = "false"
        config = InjectorConfiguration.from_properties({})
        ```

    """

    failure_log_level: str = Field(
        default="ERROR", description="Log level for per-field injection failures"
    )
    verify_field_types: bool = Field(
        default=True,
        description="Check resolved values against the declared field type",
    )

    @field_validator("failure_log_level")
    @classmethod
    def validate_failure_log_level(cls, v: str) -> str:
        """Validate that the level is a standard logging level name.

        Args:
            v: Level name to validate

        Returns:
            Uppercase level name

        Raises:
            ValueError: If the level is not supported

        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Log level must be one of {_LOG_LEVELS}, got: {v}")
        return level

    @property
    def failure_log_level_number(self) -> int:
        """Get the numeric logging level for field failures."""
        return logging.getLevelNamesMapping()[self.failure_log_level]

    @classmethod
    @override
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from properties with environment fallback.

        Environment variables (used only for keys missing from properties):
            INJECTKIT_FAILURE_LOG_LEVEL: Level name (e.g. "WARNING")
            INJECTKIT_VERIFY_FIELD_TYPES: "true", "1" or "yes" to enable

        Args:
            properties: Configuration properties dictionary

        Returns:
            Validated configuration instance

        Raises:
            ValidationError: If the resulting configuration is invalid

        """
        config_data = properties.copy()

        if "failure_log_level" not in config_data:
            level = os.getenv("INJECTKIT_FAILURE_LOG_LEVEL")
            if level:
                config_data["failure_log_level"] = level

        if "verify_field_types" not in config_data:
            verify_env = os.getenv("INJECTKIT_VERIFY_FIELD_TYPES")
            if verify_env is not None:
                config_data["verify_field_types"] = verify_env.lower() in (
                    "true",
                    "1",
                    "yes",
                )

        return cls.model_validate(config_data)
