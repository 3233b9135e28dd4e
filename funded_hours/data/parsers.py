"""
Parsers for child records supplied by the presentation layer.

Records are plain dicts using either the camelCase keys of the original
form state (``dob``, ``weeklyPattern``, ``hoursUsed``, ``stretchedOption``)
or the snake_case field names of the Child model.
"""

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable

import structlog

from ..errors import DataQualityError, MalformedDataError, MissingDataError
from ..funding.schemes import scheme_key
from ..models.roster import Child, WeeklyPattern
from ..state.roster import validate_child

logger = structlog.get_logger(__name__)

_FIELD_ALIASES = {
    "date_of_birth": ("date_of_birth", "dob", "dateOfBirth"),
    "weekly_pattern": ("weekly_pattern", "weeklyPattern"),
    "hours_used": ("hours_used", "hoursUsed"),
    "stretched": ("stretched", "stretchedOption"),
}


def _lookup(record: dict[str, Any], field_name: str) -> Any:
    for key in _FIELD_ALIASES.get(field_name, (field_name,)):
        if key in record:
            return record[key]
    return None


def parse_date(value: Any, field_name: str = "date_of_birth") -> date:
    """Parse an ISO date string or pass a date through."""
    if isinstance(value, date):
        return value
    if value is None or value == "":
        raise MissingDataError(f"{field_name} is required", field=field_name)
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise MalformedDataError(
            f"Invalid {field_name}: {value!r}",
            raw_data=str(value),
            expected_format="YYYY-MM-DD",
        )


def _parse_number(value: Any, field_name: str) -> float:
    """Parse a finite number; booleans, NaN and infinities are rejected."""
    if isinstance(value, bool):
        raise MalformedDataError(f"Invalid {field_name}: {value!r}",
                                 raw_data=str(value), expected_format="number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise MalformedDataError(f"Invalid {field_name}: {value!r}",
                                 raw_data=str(value), expected_format="number")
    if not math.isfinite(number):
        raise MalformedDataError(f"{field_name} must be a finite number",
                                 raw_data=str(value), expected_format="finite number")
    return number


def parse_hours(value: Any, field_name: str) -> float:
    """Parse a non-negative, finite hour count."""
    hours = _parse_number(value, field_name)
    if hours < 0:
        raise MalformedDataError(f"{field_name} must be a non-negative number",
                                 raw_data=str(value), expected_format="number >= 0")
    return hours


def parse_flag(value: Any, field_name: str) -> bool:
    """Parse a boolean field; absent means False."""
    if value is None:
        return False
    if not isinstance(value, bool):
        raise MalformedDataError(f"Invalid {field_name}: {value!r}",
                                 raw_data=str(value), expected_format="true or false")
    return value


def parse_weekly_pattern(value: Any) -> WeeklyPattern:
    """Parse a weekday -> hours mapping into a WeeklyPattern."""
    if value is None:
        return WeeklyPattern()
    if isinstance(value, WeeklyPattern):
        return value
    if not isinstance(value, dict):
        raise MalformedDataError("Weekly pattern must be a mapping of weekday to hours",
                                 raw_data=str(value), expected_format="{mon: hours, ...}")

    hours = {day: parse_hours(day_hours, f"weekly_pattern.{day}")
             for day, day_hours in value.items()}
    try:
        return WeeklyPattern.from_mapping(hours)
    except KeyError as e:
        raise MalformedDataError(f"Unknown weekday in weekly pattern: {e.args[0]}",
                                 raw_data=str(value), expected_format="mon..fri")


def parse_child(record: dict[str, Any]) -> Child:
    """
    Convert a child record into a validated Child.

    Hours used is clamped at zero. The entitlement must name a scheme in
    the funding registry.

    Raises:
        MissingDataError: id, name or date of birth missing
        MalformedDataError: a value has the wrong format
        UnknownEntitlementError: entitlement not in the registry
    """
    if not isinstance(record, dict):
        raise MalformedDataError("Child record must be a mapping", raw_data=str(record))

    child_id = record.get("id")
    if child_id is None:
        raise MissingDataError("Child id is required", field="id")

    name = record.get("name")
    if not isinstance(name, str) or not name.strip():
        raise MissingDataError("Child name is required", field="name",
                               context={"child_id": child_id})

    hours_used_raw = _lookup(record, "hours_used")
    hours_used = 0.0
    if hours_used_raw is not None:
        hours_used = max(0.0, _parse_number(hours_used_raw, "hours_used"))

    child = Child(
        id=child_id,
        name=name.strip(),
        date_of_birth=parse_date(_lookup(record, "date_of_birth")),
        entitlement=scheme_key(record.get("entitlement", "")),
        weekly_pattern=parse_weekly_pattern(_lookup(record, "weekly_pattern")),
        hours_used=hours_used,
        stretched=parse_flag(_lookup(record, "stretched"), "stretched"),
    )
    validate_child(child)
    return child


@dataclass(frozen=True)
class RosterParseResult:
    """Outcome of parsing a batch of child records"""
    children: tuple[Child, ...]
    errors: dict[int, DataQualityError] = field(default_factory=dict)  # record index -> error

    @property
    def success(self) -> bool:
        return not self.errors


def parse_roster(records: Iterable[dict[str, Any]]) -> RosterParseResult:
    """
    Parse many records, collecting failures instead of stopping.

    A bad record is reported by its index and left out; the remaining
    records are still parsed.
    """
    children: list[Child] = []
    errors: dict[int, DataQualityError] = {}

    for index, record in enumerate(records):
        try:
            children.append(parse_child(record))
        except DataQualityError as e:
            logger.warning("Rejected child record", index=index, error=str(e))
            errors[index] = e

    return RosterParseResult(children=tuple(children), errors=errors)


def child_to_record(child: Child) -> dict[str, Any]:
    """Convert a Child back to the camelCase record shape."""
    return {
        "id": child.id,
        "name": child.name,
        "dob": child.date_of_birth.isoformat(),
        "entitlement": scheme_key(child.entitlement),
        "weeklyPattern": child.weekly_pattern.as_dict(),
        "hoursUsed": child.hours_used,
        "stretchedOption": child.stretched,
    }
