"""Parent fee quotation engine"""

from dataclasses import dataclass
from typing import Iterable, Optional

import structlog

from ..models.roster import Child
from ..models.settings import ProviderSettings, QuotationRequest
from .entitlement import funded_weekly_hours, weekly_booked_hours
from .schemes import find_scheme

logger = structlog.get_logger(__name__)

# Consumables are charged for a full week regardless of attendance days
CONSUMABLES_DAYS_PER_WEEK = 5


def format_currency(amount: float) -> str:
    """Format an amount in pounds to 2 decimal places for display."""
    if amount < 0:
        return f"-£{-amount:,.2f}"
    return f"£{amount:,.2f}"


@dataclass(frozen=True)
class QuoteBreakdown:
    """
    Itemized weekly and period fees for one child.

    All amounts are unrounded; round only when displaying.
    """
    child: Child
    weeks: int
    weekly_booked: float
    funded_weekly: float
    chargeable_hours: float
    weekly_session_cost: float                       # Booked hours at full rate
    weekly_funded_value: float                       # Value of hours covered by funding
    weekly_chargeable_cost: float
    weekly_meals_cost: float
    weekly_consumables_cost: float
    weekly_total: float
    period_total: float

    def as_statement(self) -> dict[str, str]:
        """Display strings for each line of the quotation."""
        return {
            "child": self.child.name,
            "weeks": str(self.weeks),
            "weekly_booked": f"{self.weekly_booked:g} hrs",
            "funded_weekly": f"-{self.funded_weekly:.1f} hrs",
            "chargeable_hours": f"{self.chargeable_hours:.1f} hrs",
            "weekly_chargeable_cost": format_currency(self.weekly_chargeable_cost),
            "weekly_meals_cost": format_currency(self.weekly_meals_cost),
            "weekly_consumables_cost": format_currency(self.weekly_consumables_cost),
            "weekly_total": format_currency(self.weekly_total),
            "period_total": format_currency(self.period_total),
        }


def _resolve_child(children: Iterable[Child], child_id: object) -> Optional[Child]:
    for child in children:
        if child.id == child_id:
            return child
    return None


def generate_quote(
    children: Iterable[Child],
    settings: ProviderSettings,
    request: QuotationRequest
) -> Optional[QuoteBreakdown]:
    """
    Produce a fee breakdown for the child selected in the request.

    Funded hours offset booked hours first; anything booked beyond the
    funded weekly allowance is chargeable. Unused funded hours in a week
    are forfeited here and only surface through the optimisation advisor.

    Args:
        children: Current roster
        settings: Validated provider settings
        request: Quotation options

    Returns:
        QuoteBreakdown, or None when no child is selected, the child id is
        not on the roster, or the child's entitlement is unknown
    """
    if request.child_id is None:
        return None

    child = _resolve_child(children, request.child_id)
    if child is None:
        logger.info("Quote requested for unknown child", child_id=request.child_id)
        return None

    scheme = find_scheme(child.entitlement)
    if scheme is None:
        logger.warning(
            "Cannot quote child with unknown entitlement",
            child_id=child.id,
            entitlement=child.entitlement,
        )
        return None

    weekly_booked = weekly_booked_hours(child.weekly_pattern)
    funded_weekly = funded_weekly_hours(scheme, child.stretched, settings.operating_weeks)
    chargeable_hours = max(0.0, weekly_booked - funded_weekly)

    weekly_session_cost = weekly_booked * settings.hourly_rate
    weekly_funded_value = min(weekly_booked, funded_weekly) * settings.hourly_rate
    weekly_chargeable_cost = chargeable_hours * settings.hourly_rate
    weekly_meals_cost = (
        request.meals_per_week * settings.meal_charge if request.include_meals else 0.0
    )
    weekly_consumables_cost = (
        settings.consumables_charge * CONSUMABLES_DAYS_PER_WEEK
        if request.include_consumables else 0.0
    )

    weekly_total = weekly_chargeable_cost + weekly_meals_cost + weekly_consumables_cost
    period_total = weekly_total * request.weeks_to_quote

    logger.debug(
        "Quote generated",
        child_id=child.id,
        weeks=request.weeks_to_quote,
        chargeable_hours=chargeable_hours,
        period_total=period_total,
    )

    return QuoteBreakdown(
        child=child,
        weeks=request.weeks_to_quote,
        weekly_booked=weekly_booked,
        funded_weekly=funded_weekly,
        chargeable_hours=chargeable_hours,
        weekly_session_cost=weekly_session_cost,
        weekly_funded_value=weekly_funded_value,
        weekly_chargeable_cost=weekly_chargeable_cost,
        weekly_meals_cost=weekly_meals_cost,
        weekly_consumables_cost=weekly_consumables_cost,
        weekly_total=weekly_total,
        period_total=period_total,
    )
