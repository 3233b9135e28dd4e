"""Default configuration parameters for the funded hours engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProviderParams:
    """Provider-wide charging parameters."""
    hourly_rate: float = 7.50                        # GBP per chargeable hour
    operating_weeks: int = 51                        # Stretched funding divisor (39-52)
    meal_charge: float = 3.50                        # GBP per meal
    consumables_charge: float = 1.50                 # GBP per day


@dataclass(frozen=True)
class QuotationParams:
    """Defaults for a new quotation request."""
    weeks_to_quote: int = 4
    include_meals: bool = True
    meals_per_week: int = 5
    include_consumables: bool = True


@dataclass(frozen=True)
class AdvisorParams:
    """Optimisation advisor thresholds."""
    under_utilisation_ratio: float = 0.85            # Projected usage floor vs annual hours
    over_booking_tolerance_hours: float = 2.0        # Weekly hours above funded before flagging
    stretch_coverage_ratio: float = 0.9              # Stretched hours needed vs booked hours


@dataclass(frozen=True)
class TermParams:
    """Term calendar approximation."""
    term_start: str = "2025-01-06"                   # ISO date anchoring week 1


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    provider: ProviderParams
    quotation: QuotationParams
    advisor: AdvisorParams
    term: TermParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        provider=ProviderParams(),
        quotation=QuotationParams(),
        advisor=AdvisorParams(),
        term=TermParams(),
    )
