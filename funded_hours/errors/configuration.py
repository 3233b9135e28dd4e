"""
Configuration error classifications for provider settings.

Provider settings are validated once, at the settings boundary, before
they reach any calculator. Invalid values are never clamped silently.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigurationError(Exception):
    """Provider or engine configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list[ValidationError]] = None,
                 context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.errors = errors or []
        self.context = context or {}
        self.recoverable = False

    @property
    def fields(self) -> list[str]:
        """Names of the fields that failed validation."""
        return [error.field for error in self.errors]
