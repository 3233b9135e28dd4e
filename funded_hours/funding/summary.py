"""Portfolio-wide funded hour totals"""

from dataclasses import dataclass
from typing import Iterable

import structlog

from ..models.roster import Child
from .entitlement import ChildUsage, child_usage, round_half_up

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PortfolioSummary:
    """Roll-up of funded and used hours across the roster"""
    total_children: int
    total_funded_hours: int
    total_used_hours: float
    total_remaining_hours: float                     # Negative when over-used
    average_utilisation: int                         # Percent, 0 when nothing is funded
    skipped_children: int = 0                        # Unknown entitlement, excluded from totals


def usage_breakdown(children: Iterable[Child]) -> list[ChildUsage]:
    """Per-child usage for every child with a known entitlement."""
    breakdown = []
    for child in children:
        usage = child_usage(child)
        if usage is not None:
            breakdown.append(usage)
    return breakdown


def compute_summary(children: Iterable[Child]) -> PortfolioSummary:
    """
    Aggregate funded, used and remaining hours for the roster.

    Children whose entitlement cannot be resolved are counted but add
    nothing to the hour totals.
    """
    roster = list(children)
    breakdown = usage_breakdown(roster)

    total_funded = sum(usage.funded_hours for usage in breakdown)
    total_used = sum(usage.used_hours for usage in breakdown)
    skipped = len(roster) - len(breakdown)

    if skipped:
        logger.warning("Children excluded from summary totals", skipped_children=skipped)

    average = round_half_up(total_used / total_funded * 100) if total_funded > 0 else 0

    return PortfolioSummary(
        total_children=len(roster),
        total_funded_hours=total_funded,
        total_used_hours=total_used,
        total_remaining_hours=total_funded - total_used,
        average_utilisation=average,
        skipped_children=skipped,
    )
