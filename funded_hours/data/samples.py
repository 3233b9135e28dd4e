"""Demonstration roster"""

from typing import Any

from ..models.roster import Child
from .parsers import parse_roster

SAMPLE_CHILD_RECORDS: tuple[dict[str, Any], ...] = (
    {
        "id": 1,
        "name": "Emma Thompson",
        "dob": "2022-03-15",
        "entitlement": "extended_30",
        "weeklyPattern": {"mon": 6, "tue": 6, "wed": 6, "thu": 6, "fri": 6},
        "hoursUsed": 456,
        "stretchedOption": False,
    },
    {
        "id": 2,
        "name": "Oliver Smith",
        "dob": "2023-06-20",
        "entitlement": "eligible_2yr",
        "weeklyPattern": {"mon": 5, "tue": 5, "wed": 5, "thu": 0, "fri": 0},
        "hoursUsed": 180,
        "stretchedOption": True,
    },
    {
        "id": 3,
        "name": "Sophia Williams",
        "dob": "2024-01-10",
        "entitlement": "expanded_under2",
        "weeklyPattern": {"mon": 4, "tue": 4, "wed": 4, "thu": 4, "fri": 0},
        "hoursUsed": 96,
        "stretchedOption": False,
    },
)


def sample_roster() -> tuple[Child, ...]:
    """The three sample children as validated Child models."""
    return parse_roster(SAMPLE_CHILD_RECORDS).children
