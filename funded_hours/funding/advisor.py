"""Funding optimisation advisor"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional

import structlog

from ..config.defaults import AdvisorParams
from ..logging.config import get_advisor_logger, log_suggestion
from ..models.roster import Child
from ..models.settings import ProviderSettings
from ..utils.time import weeks_remaining as term_weeks_remaining
from .entitlement import funded_weekly_hours, round_half_up, weekly_booked_hours
from .schemes import FundingScheme, find_scheme

logger = structlog.get_logger(__name__)
advisor_logger = get_advisor_logger(__name__)


class Severity(str, Enum):
    """How a suggestion should be presented."""
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


class SuggestionKind(str, Enum):
    """Rule that produced a suggestion."""
    UNDER_UTILISATION = "under_utilisation"
    OVER_BOOKING = "over_booking"
    STRETCHING = "stretching"


@dataclass(frozen=True)
class Suggestion:
    """An advisory message about one child's funding."""
    severity: Severity
    kind: SuggestionKind
    child_id: Any
    child_name: str
    title: str
    message: str
    recommendation: str
    details: dict[str, Any] = field(default_factory=dict)


def _hours(value: float) -> str:
    """Render a booked-hours figure without a trailing .0"""
    return f"{value:g}"


def _under_utilisation(
    child: Child,
    scheme: FundingScheme,
    projected_usage: float,
    weeks_left: int,
    params: AdvisorParams
) -> Optional[Suggestion]:
    if projected_usage >= scheme.hours_per_year * params.under_utilisation_ratio:
        return None

    shortfall = scheme.hours_per_year - projected_usage

    if weeks_left > 0:
        recommended_increase: Optional[int] = math.ceil(shortfall / weeks_left)
        recommendation = (
            f"Consider increasing weekly hours by {recommended_increase} hours "
            f"to maximise funding."
        )
    else:
        recommended_increase = None
        recommendation = (
            "No term weeks remain to adjust bookings; unused hours will not "
            "carry over."
        )

    return Suggestion(
        severity=Severity.WARNING,
        kind=SuggestionKind.UNDER_UTILISATION,
        child_id=child.id,
        child_name=child.name,
        title="Under-utilisation projected",
        message=(
            f"{child.name} is on track to use only {round_half_up(projected_usage)} "
            f"of {scheme.hours_per_year} funded hours "
            f"({round_half_up(shortfall)} hours unused)."
        ),
        recommendation=recommendation,
        details={
            "projected_usage": projected_usage,
            "shortfall": shortfall,
            "weeks_remaining": weeks_left,
            "recommended_increase": recommended_increase,
        },
    )


def _over_booking(
    child: Child,
    weekly_booked: float,
    funded_weekly: float,
    params: AdvisorParams
) -> Optional[Suggestion]:
    if weekly_booked <= funded_weekly + params.over_booking_tolerance_hours:
        return None

    excess = weekly_booked - funded_weekly
    return Suggestion(
        severity=Severity.INFO,
        kind=SuggestionKind.OVER_BOOKING,
        child_id=child.id,
        child_name=child.name,
        title="Additional hours being used",
        message=(
            f"{child.name} is booked for {_hours(weekly_booked)}hrs/week but only "
            f"{funded_weekly:.1f}hrs/week are funded."
        ),
        recommendation=f"Parent will be charged for {excess:.1f} additional hours per week.",
        details={
            "weekly_booked": weekly_booked,
            "funded_weekly": funded_weekly,
            "excess_hours": excess,
        },
    )


def _stretching(
    child: Child,
    scheme: FundingScheme,
    weekly_booked: float,
    funded_weekly: float,
    operating_weeks: int,
    params: AdvisorParams
) -> Optional[Suggestion]:
    if child.stretched or weekly_booked <= funded_weekly:
        return None

    stretched_weekly = funded_weekly_hours(scheme, True, operating_weeks)
    if stretched_weekly < weekly_booked * params.stretch_coverage_ratio:
        return None

    return Suggestion(
        severity=Severity.SUCCESS,
        kind=SuggestionKind.STRETCHING,
        child_id=child.id,
        child_name=child.name,
        title="Stretching recommended",
        message=(
            f"Switching {child.name} to stretched funding would provide "
            f"{stretched_weekly:.1f}hrs/week over {operating_weeks} weeks."
        ),
        recommendation="This could reduce parent charges while maintaining the same booking pattern.",
        details={
            "weekly_booked": weekly_booked,
            "stretched_weekly": stretched_weekly,
            "operating_weeks": operating_weeks,
        },
    )


def advise_child(
    child: Child,
    settings: ProviderSettings,
    current_week: int,
    params: Optional[AdvisorParams] = None
) -> list[Suggestion]:
    """
    Evaluate every rule for one child.

    Returns an empty list when the child's entitlement is unknown.
    """
    params = params or AdvisorParams()

    scheme = find_scheme(child.entitlement)
    if scheme is None:
        logger.warning(
            "Skipping child with unknown entitlement",
            child_id=child.id,
            entitlement=child.entitlement,
        )
        return []

    weeks_left = term_weeks_remaining(current_week)
    weekly_booked = weekly_booked_hours(child.weekly_pattern)
    funded_weekly = funded_weekly_hours(scheme, child.stretched, settings.operating_weeks)
    projected_usage = child.hours_used + weekly_booked * weeks_left

    candidates = (
        _under_utilisation(child, scheme, projected_usage, weeks_left, params),
        _over_booking(child, weekly_booked, funded_weekly, params),
        _stretching(child, scheme, weekly_booked, funded_weekly,
                    settings.operating_weeks, params),
    )
    return [suggestion for suggestion in candidates if suggestion is not None]


def compute_optimisations(
    children: Iterable[Child],
    settings: ProviderSettings,
    current_week: int,
    params: Optional[AdvisorParams] = None
) -> list[Suggestion]:
    """
    Advisory suggestions for the whole roster.

    Each child is evaluated independently and may receive several
    suggestions. Nothing is cached; the list reflects exactly the roster
    and settings passed in.

    Args:
        children: Current roster
        settings: Validated provider settings
        current_week: Current term week (1-38)
        params: Advisor thresholds, defaults if omitted

    Returns:
        Suggestions in roster order
    """
    suggestions: list[Suggestion] = []

    for child in children:
        for suggestion in advise_child(child, settings, current_week, params):
            log_suggestion(
                advisor_logger,
                kind=suggestion.kind.value,
                severity=suggestion.severity.value,
                child_id=suggestion.child_id,
                title=suggestion.title,
                context=suggestion.details,
            )
            suggestions.append(suggestion)

    return suggestions
