"""Funding calculation engine: schemes, entitlements, quotes, advice and totals"""

from .advisor import Severity, Suggestion, SuggestionKind, compute_optimisations
from .entitlement import (
    compare_funding_options,
    funded_weekly_hours,
    round2,
    weekly_booked_hours,
)
from .quotation import QuoteBreakdown, format_currency, generate_quote
from .schemes import FUNDING_SCHEMES, FundingScheme, SchemeId, find_scheme, list_schemes
from .summary import PortfolioSummary, compute_summary

__all__ = [
    "FUNDING_SCHEMES",
    "FundingScheme",
    "SchemeId",
    "find_scheme",
    "list_schemes",
    "round2",
    "weekly_booked_hours",
    "funded_weekly_hours",
    "compare_funding_options",
    "QuoteBreakdown",
    "generate_quote",
    "format_currency",
    "Severity",
    "Suggestion",
    "SuggestionKind",
    "compute_optimisations",
    "PortfolioSummary",
    "compute_summary",
]
