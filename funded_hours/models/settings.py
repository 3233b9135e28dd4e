"""
Provider settings and quotation request models.

ProviderSettings is the single point of validation for provider-wide
values: calculators receive settings that have already passed through
``ProviderSettings.create`` and do not check ranges again.
"""

from dataclasses import asdict, dataclass, replace
from typing import Any, Optional

from ..config.validation import ConfigValidator
from ..errors import ConfigurationError


@dataclass(frozen=True)
class ProviderSettings:
    """Provider-wide charging configuration."""

    hourly_rate: float = 7.50
    operating_weeks: int = 51
    meal_charge: float = 3.50
    consumables_charge: float = 1.50

    @classmethod
    def create(cls, **values: Any) -> "ProviderSettings":
        """Build settings, raising ConfigurationError on invalid values."""
        errors = ConfigValidator.validate_provider_params(values)
        if errors:
            raise ConfigurationError(
                "Invalid provider settings",
                errors=errors,
                context={"values": values},
            )
        return cls(**values)

    def with_changes(self, **changes: Any) -> "ProviderSettings":
        """Return validated settings with the given fields replaced."""
        merged = {**asdict(self), **changes}
        return ProviderSettings.create(**merged)

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class QuotationRequest:
    """Parameters of a fee quotation for one child."""

    child_id: Optional[Any] = None                   # None means no child selected
    weeks_to_quote: int = 4
    include_meals: bool = True
    meals_per_week: int = 5
    include_consumables: bool = True

    @classmethod
    def create(cls, **values: Any) -> "QuotationRequest":
        """Build a request, raising ConfigurationError on invalid values."""
        errors = ConfigValidator.validate_quotation_params(values)
        if errors:
            raise ConfigurationError(
                "Invalid quotation request",
                errors=errors,
                context={"values": values},
            )
        return cls(**values)

    def for_child(self, child_id: Any) -> "QuotationRequest":
        """Return the same request pointed at another child."""
        return replace(self, child_id=child_id)
