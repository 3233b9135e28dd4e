"""
Error classification for the funded hours engine.

Lookups inside the calculators never raise; they return ``None`` and the
caller branches. The exceptions below are raised only at the boundaries
where caller data enters the engine: record parsing, roster transitions
and provider settings validation.
"""

from .configuration import (
    ConfigurationError,
    ValidationError,
)
from .data_quality import (
    DataQualityError,
    DuplicateChildError,
    MalformedDataError,
    MissingDataError,
    UnknownEntitlementError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    "UnknownEntitlementError",
    "DuplicateChildError",
    # Configuration Errors
    "ConfigurationError",
    "ValidationError",
]
