"""
Date utilities for ages and term weeks.

The term-week estimate assumes continuous attendance from a single term
start date with no half-term breaks. It is a display and projection
helper, not an authoritative school calendar.
"""

from datetime import date
from typing import Callable, Optional

TERM_WEEKS = 38
DEFAULT_TERM_START = date(2025, 1, 6)

Clock = Callable[[], date]


def today(clock: Optional[Clock] = None) -> date:
    """
    Get the current date from the injected clock.

    Args:
        clock: Optional zero-argument callable returning a date

    Returns:
        The clock's date, falling back to the system date
    """
    if clock is not None:
        return clock()

    return date.today()


def age(date_of_birth: date, as_of: date) -> int:
    """
    Whole years between birth and the reference date.

    One year is taken off the naive year difference when the reference
    month/day falls before the birth month/day.

    Args:
        date_of_birth: Child's date of birth
        as_of: Reference date

    Returns:
        Age in completed years
    """
    years = as_of.year - date_of_birth.year
    if (as_of.month, as_of.day) < (date_of_birth.month, date_of_birth.day):
        years -= 1
    return years


def age_in_months(date_of_birth: date, as_of: date) -> int:
    """
    Calendar-month difference between birth and the reference date.

    Deliberately ignores the day of month, so it can disagree with
    ``age`` by up to one month around birthdays.

    Args:
        date_of_birth: Child's date of birth
        as_of: Reference date

    Returns:
        Age in months
    """
    return (as_of.year - date_of_birth.year) * 12 + (as_of.month - date_of_birth.month)


def current_term_week(as_of: date, term_start: date = DEFAULT_TERM_START) -> int:
    """
    Estimate the current term week.

    Args:
        as_of: Reference date
        term_start: Date of the first day of week 1

    Returns:
        Week number clamped to [1, 38]
    """
    weeks_elapsed = (as_of - term_start).days // 7
    return max(1, min(weeks_elapsed + 1, TERM_WEEKS))


def weeks_remaining(current_week: int) -> int:
    """Term weeks left after the given week."""
    return TERM_WEEKS - current_week
