"""
Funding engine facade.

Binds validated provider settings, advisor thresholds, the term anchor
and a clock to the pure calculators so a presentation layer can ask for
quotes, advice and totals without threading configuration through every
call. The engine is immutable; changing settings yields a new engine.
"""

from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path
from typing import Any, Iterable, Optional

import structlog

from .config.defaults import AdvisorParams, QuotationParams
from .config.loader import ConfigLoader
from .funding.advisor import Suggestion, compute_optimisations
from .funding.entitlement import FundingComparison, compare_funding_options
from .funding.quotation import QuoteBreakdown, generate_quote
from .funding.summary import PortfolioSummary, compute_summary
from .models.roster import Child
from .models.settings import ProviderSettings, QuotationRequest
from .utils.time import Clock, current_term_week, today

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class FundingEngine:
    """Entry point for the presentation layer."""

    settings: ProviderSettings
    advisor_params: AdvisorParams
    quotation_defaults: QuotationParams
    term_start: date
    clock: Optional[Clock] = None

    @classmethod
    def create(
        cls,
        config_dir: Optional[Path] = None,
        clock: Optional[Clock] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> "FundingEngine":
        """
        Build an engine from defaults, the provider file and overrides.

        Raises:
            ConfigurationError: if the merged configuration is invalid
        """
        loader = ConfigLoader.create(config_dir)
        config = loader.load_validated_config(overrides)

        engine = cls(
            settings=ProviderSettings.create(**config["provider"]),
            advisor_params=AdvisorParams(**config["advisor"]),
            quotation_defaults=QuotationParams(**config["quotation"]),
            term_start=loader.load_term_start(overrides),
            clock=clock,
        )
        logger.info(
            "Funding engine initialized",
            config_dir=str(loader.config_dir),
            operating_weeks=engine.settings.operating_weeks,
            hourly_rate=engine.settings.hourly_rate,
        )
        return engine

    def with_settings(self, **changes: Any) -> "FundingEngine":
        """
        Return an engine with updated provider settings.

        Raises:
            ConfigurationError: if any changed value is invalid
        """
        settings = self.settings.with_changes(**changes)
        logger.info("Provider settings updated", changes=changes)
        return replace(self, settings=settings)

    def today(self) -> date:
        return today(self.clock)

    def current_term_week(self) -> int:
        """Estimated term week for the engine's clock."""
        return current_term_week(self.today(), self.term_start)

    def new_quotation_request(self, child_id: Any = None) -> QuotationRequest:
        """A request pre-filled with the configured quotation defaults."""
        return QuotationRequest.create(
            child_id=child_id,
            weeks_to_quote=self.quotation_defaults.weeks_to_quote,
            include_meals=self.quotation_defaults.include_meals,
            meals_per_week=self.quotation_defaults.meals_per_week,
            include_consumables=self.quotation_defaults.include_consumables,
        )

    def quote(self, children: Iterable[Child], request: QuotationRequest) -> Optional[QuoteBreakdown]:
        return generate_quote(children, self.settings, request)

    def optimisations(self, children: Iterable[Child],
                      current_week: Optional[int] = None) -> list[Suggestion]:
        """Advice for the roster at the given (or clock-derived) term week."""
        week = current_week if current_week is not None else self.current_term_week()
        suggestions = compute_optimisations(children, self.settings, week, self.advisor_params)
        logger.info("Optimisations computed", current_week=week, suggestions=len(suggestions))
        return suggestions

    def summary(self, children: Iterable[Child]) -> PortfolioSummary:
        return compute_summary(children)

    def funding_comparison(self) -> list[FundingComparison]:
        """Term-time vs stretched weekly hours at the current operating weeks."""
        return compare_funding_options(self.settings.operating_weeks)
