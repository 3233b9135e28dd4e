"""Funded and booked weekly hour calculations"""

import math
from dataclasses import dataclass
from typing import Optional

from ..models.roster import Child, WeeklyPattern
from .schemes import FundingScheme, find_scheme, list_schemes


def round2(value: float) -> float:
    """
    Round to 2 decimal places, half-up on the value scaled by 100.

    round2(22.352941) == 22.35, round2(0.125) == 0.13
    """
    return math.floor(value * 100 + 0.5) / 100


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


def weekly_booked_hours(pattern: WeeklyPattern) -> float:
    """
    Total hours booked across the five weekdays.

    No upper bound is enforced here; per-day limits belong to the form
    that collects the pattern.
    """
    return (pattern.monday + pattern.tuesday + pattern.wednesday
            + pattern.thursday + pattern.friday)


def funded_weekly_hours(scheme: FundingScheme, stretched: bool, operating_weeks: int) -> float:
    """
    Funded hours per week for a scheme.

    Term-time funding spreads the annual hours over the scheme's 38 term
    weeks; stretched funding spreads the same hours over the provider's
    operating weeks.

    Args:
        scheme: Funding scheme definition
        stretched: Whether the child takes stretched funding
        operating_weeks: Provider operating weeks, already validated (39-52)

    Returns:
        Weekly funded hours rounded to 2 decimal places
    """
    if stretched:
        return round2(scheme.hours_per_year / operating_weeks)
    return round2(scheme.hours_per_year / scheme.weeks_term_time)


@dataclass(frozen=True)
class FundingComparison:
    """Term-time vs stretched weekly hours for one scheme"""
    scheme: FundingScheme
    term_time_weekly: float
    stretched_weekly: float
    operating_weeks: int

    @property
    def weekly_difference(self) -> float:
        return self.term_time_weekly - self.stretched_weekly


def compare_funding_options(operating_weeks: int) -> list[FundingComparison]:
    """Weekly funded hours under both options for every scheme."""
    return [
        FundingComparison(
            scheme=scheme,
            term_time_weekly=funded_weekly_hours(scheme, False, operating_weeks),
            stretched_weekly=funded_weekly_hours(scheme, True, operating_weeks),
            operating_weeks=operating_weeks,
        )
        for scheme in list_schemes()
    ]


@dataclass(frozen=True)
class ChildUsage:
    """Annual funded hour usage for one child"""
    child: Child
    scheme: FundingScheme
    funded_hours: int
    used_hours: float
    remaining_hours: float                           # Negative when over-used
    usage_percent: int


def child_usage(child: Child) -> Optional[ChildUsage]:
    """
    Usage figures for a child, or None if the entitlement is unknown.

    Over-use is reported as is: remaining hours go negative and the
    percentage exceeds 100.
    """
    scheme = find_scheme(child.entitlement)
    if scheme is None:
        return None

    return ChildUsage(
        child=child,
        scheme=scheme,
        funded_hours=scheme.hours_per_year,
        used_hours=child.hours_used,
        remaining_hours=scheme.hours_per_year - child.hours_used,
        usage_percent=round_half_up(child.hours_used / scheme.hours_per_year * 100),
    )
