"""
Child roster data models.

A Child references exactly one funding scheme by id and carries its
weekly attendance pattern and the funded hours used so far this year.
"""

import math
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Any, Mapping

from ..errors import MalformedDataError


class Weekday(str, Enum):
    """Weekdays on which a child can be booked."""
    MONDAY = "mon"
    TUESDAY = "tue"
    WEDNESDAY = "wed"
    THURSDAY = "thu"
    FRIDAY = "fri"


_WEEKDAY_ALIASES = {
    "mon": Weekday.MONDAY, "monday": Weekday.MONDAY,
    "tue": Weekday.TUESDAY, "tuesday": Weekday.TUESDAY,
    "wed": Weekday.WEDNESDAY, "wednesday": Weekday.WEDNESDAY,
    "thu": Weekday.THURSDAY, "thursday": Weekday.THURSDAY,
    "fri": Weekday.FRIDAY, "friday": Weekday.FRIDAY,
}


@dataclass(frozen=True)
class WeeklyPattern:
    """Booked hours for each weekday, Monday to Friday."""

    monday: float = 0.0
    tuesday: float = 0.0
    wednesday: float = 0.0
    thursday: float = 0.0
    friday: float = 0.0

    @classmethod
    def from_mapping(cls, hours: Mapping[str, float]) -> "WeeklyPattern":
        """
        Build a pattern from a weekday -> hours mapping.

        Keys may be short (``mon``) or full (``monday``) weekday names in
        any case. Missing days are zero; unknown keys raise KeyError.
        """
        values: dict[str, float] = {}
        for key, value in hours.items():
            weekday = _WEEKDAY_ALIASES[str(key).lower()]
            values[weekday.name.lower()] = float(value)
        return cls(**values)

    @classmethod
    def uniform(cls, hours_per_day: float, days: int = 5) -> "WeeklyPattern":
        """Book the same hours on the first ``days`` weekdays."""
        booked = [hours_per_day if i < days else 0.0 for i in range(5)]
        return cls(*booked)

    def hours_for(self, weekday: Weekday) -> float:
        return getattr(self, weekday.name.lower())

    def as_dict(self) -> dict[str, float]:
        """Hours keyed by short weekday name, in week order."""
        return {weekday.value: self.hours_for(weekday) for weekday in Weekday}

    def total(self) -> float:
        return sum(self.as_dict().values())

    def booked_days(self) -> int:
        """Number of weekdays with any hours booked."""
        return sum(1 for hours in self.as_dict().values() if hours > 0)

    def combine(self, other: "WeeklyPattern") -> "WeeklyPattern":
        """Per-day sum of two patterns."""
        return WeeklyPattern(
            monday=self.monday + other.monday,
            tuesday=self.tuesday + other.tuesday,
            wednesday=self.wednesday + other.wednesday,
            thursday=self.thursday + other.thursday,
            friday=self.friday + other.friday,
        )


@dataclass(frozen=True)
class Child:
    """A child on the provider's roster."""

    id: Any
    name: str
    date_of_birth: date
    entitlement: str                                 # FundingScheme id
    weekly_pattern: WeeklyPattern = field(default_factory=WeeklyPattern)
    hours_used: float = 0.0                          # Funded hours used this year
    stretched: bool = False                          # Spread over operating weeks

    def with_hours_used(self, hours: float) -> "Child":
        """
        Return a copy with hours used replaced, clamped at zero.

        Raises:
            MalformedDataError: hours is NaN or infinite
        """
        hours = float(hours)
        if not math.isfinite(hours):
            raise MalformedDataError(
                f"Hours used must be a finite number: {hours!r}",
                raw_data=str(hours),
                expected_format="finite number",
                context={"child_id": self.id},
            )
        return replace(self, hours_used=max(0.0, hours))

    def with_stretched(self, stretched: bool) -> "Child":
        return replace(self, stretched=stretched)

    def with_weekly_pattern(self, pattern: WeeklyPattern) -> "Child":
        """
        Return a copy booked on a new weekly pattern.

        Raises:
            MalformedDataError: any day is negative, NaN or infinite
        """
        for weekday, hours in pattern.as_dict().items():
            if not math.isfinite(hours) or hours < 0:
                raise MalformedDataError(
                    f"Invalid booked hours for {weekday}: {hours!r}",
                    raw_data=str(hours),
                    expected_format="finite number >= 0",
                    context={"child_id": self.id},
                )
        return replace(self, weekly_pattern=pattern)

    @property
    def first_name(self) -> str:
        return self.name.split(" ")[0]
