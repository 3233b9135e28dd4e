"""
Data quality error classifications for child records.

These exceptions categorize the problems found in records handed to the
engine by the presentation layer. Each is local to one record, so a bad
child never prevents the rest of a roster from being processed.
"""

from typing import Any, Optional


class DataQualityError(Exception):
    """Base class for bad caller data that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingDataError(DataQualityError):
    """A required field is absent or empty."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class MalformedDataError(DataQualityError):
    """Data exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class UnknownEntitlementError(DataQualityError):
    """The entitlement does not name a scheme in the funding registry."""

    def __init__(self, message: str, scheme_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.scheme_id = scheme_id


class DuplicateChildError(DataQualityError):
    """A child with the same id is already on the roster."""

    def __init__(self, message: str, child_id: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.child_id = child_id
