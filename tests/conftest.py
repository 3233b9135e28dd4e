"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date

from funded_hours.models.roster import Child, WeeklyPattern
from funded_hours.models.settings import ProviderSettings, QuotationRequest


@pytest.fixture
def as_of() -> date:
    """Fixed reference date: term week 28, ten weeks remaining."""
    return date(2025, 7, 14)


@pytest.fixture
def provider_settings() -> ProviderSettings:
    """Default provider settings."""
    return ProviderSettings(
        hourly_rate=7.50,
        operating_weeks=51,
        meal_charge=3.50,
        consumables_charge=1.50,
    )


@pytest.fixture
def extended_child() -> Child:
    """Child on 30 hours, booked 6 hours a day."""
    return Child(
        id=1,
        name="Emma Thompson",
        date_of_birth=date(2022, 3, 15),
        entitlement="extended_30",
        weekly_pattern=WeeklyPattern.uniform(6),
        hours_used=456,
        stretched=False,
    )


@pytest.fixture
def two_year_old() -> Child:
    """Eligible two year old on stretched funding."""
    return Child(
        id=2,
        name="Oliver Smith",
        date_of_birth=date(2023, 6, 20),
        entitlement="eligible_2yr",
        weekly_pattern=WeeklyPattern(monday=5, tuesday=5, wednesday=5),
        hours_used=180,
        stretched=True,
    )


@pytest.fixture
def roster(extended_child: Child, two_year_old: Child) -> tuple:
    """Two-child roster."""
    return (extended_child, two_year_old)


@pytest.fixture
def quotation_request() -> QuotationRequest:
    """Four-week quote with meals and consumables for child 1."""
    return QuotationRequest(
        child_id=1,
        weeks_to_quote=4,
        include_meals=True,
        meals_per_week=5,
        include_consumables=True,
    )
