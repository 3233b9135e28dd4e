"""
Roster transitions.

Every function takes the current roster and returns a new tuple; the
roster passed in is never modified. The caller owns the roster and
decides when to replace its copy.
"""

from typing import Any, Callable, Iterable, Optional

import structlog

from ..errors import DuplicateChildError, MissingDataError, UnknownEntitlementError
from ..funding.entitlement import weekly_booked_hours
from ..funding.schemes import find_scheme, scheme_key
from ..logging.config import get_roster_logger, log_roster_change
from ..models.roster import Child, WeeklyPattern

Roster = tuple[Child, ...]

logger = structlog.get_logger(__name__)
roster_logger = get_roster_logger(__name__)


def find_child(roster: Iterable[Child], child_id: Any) -> Optional[Child]:
    """Return the child with the given id, or None."""
    for child in roster:
        if child.id == child_id:
            return child
    return None


def validate_child(child: Child) -> None:
    """Raise if the child cannot be placed on a roster."""
    if not child.name or not child.name.strip():
        raise MissingDataError(
            "Child name is required",
            field="name",
            context={"child_id": child.id},
        )

    if child.date_of_birth is None:
        raise MissingDataError(
            "Child date of birth is required",
            field="date_of_birth",
            context={"child_id": child.id},
        )

    if find_scheme(child.entitlement) is None:
        raise UnknownEntitlementError(
            f"Unknown funding scheme: {child.entitlement}",
            scheme_id=scheme_key(child.entitlement),
            context={"child_id": child.id},
        )


def add_child(roster: Iterable[Child], child: Child) -> Roster:
    """
    Append a validated child; ids must be unique.

    Raises:
        DataQualityError: invalid child, duplicate id or non-finite hours
    """
    current = tuple(roster)
    validate_child(child)

    if find_child(current, child.id) is not None:
        raise DuplicateChildError(
            f"Child {child.id} is already on the roster",
            child_id=child.id,
        )

    added = child.with_hours_used(child.hours_used).with_weekly_pattern(child.weekly_pattern)
    log_roster_change(roster_logger, "add", child.id,
                      context={"entitlement": scheme_key(child.entitlement)})
    return current + (added,)


def remove_child(roster: Iterable[Child], child_id: Any) -> Roster:
    """Drop the child with the given id. Unknown ids leave the roster unchanged."""
    current = tuple(roster)
    updated = tuple(child for child in current if child.id != child_id)

    if len(updated) == len(current):
        logger.info("Remove requested for unknown child", child_id=child_id)
    else:
        log_roster_change(roster_logger, "remove", child_id)

    return updated


def _update_child(
    roster: Iterable[Child],
    child_id: Any,
    action: str,
    change: Callable[[Child], Child]
) -> Roster:
    current = tuple(roster)
    if find_child(current, child_id) is None:
        logger.info("Update requested for unknown child", child_id=child_id, action=action)
        return current

    updated = tuple(change(child) if child.id == child_id else child for child in current)
    log_roster_change(roster_logger, action, child_id)
    return updated


def set_hours_used(roster: Iterable[Child], child_id: Any, hours: float) -> Roster:
    """
    Replace a child's used hours, clamped at zero and never capped.

    Raises:
        MalformedDataError: hours is NaN or infinite
    """
    return _update_child(roster, child_id, "set_hours_used",
                         lambda child: child.with_hours_used(hours))


def record_attended_week(roster: Iterable[Child], child_id: Any) -> Roster:
    """Add one week of the child's booked hours to hours used."""
    return _update_child(
        roster, child_id, "record_week",
        lambda child: child.with_hours_used(
            child.hours_used + weekly_booked_hours(child.weekly_pattern)
        ),
    )


def set_stretched(roster: Iterable[Child], child_id: Any, stretched: bool) -> Roster:
    """Switch a child between term-time and stretched funding."""
    return _update_child(roster, child_id, "set_stretched",
                         lambda child: child.with_stretched(stretched))


def set_weekly_pattern(roster: Iterable[Child], child_id: Any, pattern: WeeklyPattern) -> Roster:
    """Replace a child's booked weekly pattern."""
    return _update_child(roster, child_id, "set_weekly_pattern",
                         lambda child: child.with_weekly_pattern(pattern))
