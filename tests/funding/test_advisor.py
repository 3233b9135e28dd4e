"""Tests for the optimisation advisor"""

import pytest
from dataclasses import replace
from datetime import date

from funded_hours.config.defaults import AdvisorParams
from funded_hours.funding.advisor import (
    Severity,
    SuggestionKind,
    advise_child,
    compute_optimisations,
)
from funded_hours.models.roster import Child, WeeklyPattern
from funded_hours.models.settings import ProviderSettings

WEEK_WITH_TEN_REMAINING = 28


def _child(**overrides) -> Child:
    values = dict(
        id=10,
        name="Test Child",
        date_of_birth=date(2021, 9, 1),
        entitlement="universal_15",
        weekly_pattern=WeeklyPattern.uniform(3),
        hours_used=400,
        stretched=False,
    )
    values.update(overrides)
    return Child(**values)


def _kinds(suggestions) -> list:
    return [s.kind for s in suggestions]


class TestUnderUtilisation:
    """Test the under-utilisation warning"""

    def test_extreme_shortfall_scenario(self, extended_child, provider_settings):
        """456 of 1140 used, 30 hrs/week, ten weeks left -> increase of 39 hrs/week."""
        suggestions = advise_child(extended_child, provider_settings, WEEK_WITH_TEN_REMAINING)

        assert _kinds(suggestions) == [SuggestionKind.UNDER_UTILISATION]
        warning = suggestions[0]
        assert warning.severity == Severity.WARNING
        assert warning.child_name == "Emma Thompson"
        assert warning.title == "Under-utilisation projected"
        assert warning.details["projected_usage"] == 756
        assert warning.details["shortfall"] == 384
        assert warning.details["weeks_remaining"] == 10
        assert warning.details["recommended_increase"] == 39
        assert warning.message == (
            "Emma Thompson is on track to use only 756 of 1140 funded hours "
            "(384 hours unused)."
        )
        assert warning.recommendation == (
            "Consider increasing weekly hours by 39 hours to maximise funding."
        )

    def test_no_warning_at_threshold(self, provider_settings):
        # 570 * 0.85 = 484.5; projected = 454.5 + 3 * 10 = 484.5
        child = _child(hours_used=454.5, weekly_pattern=WeeklyPattern(monday=3))
        suggestions = advise_child(child, provider_settings, WEEK_WITH_TEN_REMAINING)
        assert SuggestionKind.UNDER_UTILISATION not in _kinds(suggestions)

    def test_warning_just_below_threshold(self, provider_settings):
        child = _child(hours_used=454, weekly_pattern=WeeklyPattern(monday=3))
        suggestions = advise_child(child, provider_settings, WEEK_WITH_TEN_REMAINING)
        assert SuggestionKind.UNDER_UTILISATION in _kinds(suggestions)

    def test_no_weeks_remaining_suppresses_recommendation(self, extended_child, provider_settings):
        suggestions = advise_child(extended_child, provider_settings, current_week=38)

        warning = suggestions[0]
        assert warning.kind == SuggestionKind.UNDER_UTILISATION
        assert warning.details["weeks_remaining"] == 0
        assert warning.details["recommended_increase"] is None
        assert warning.details["shortfall"] == 684
        assert "No term weeks remain" in warning.recommendation

    def test_custom_ratio(self, extended_child, provider_settings):
        params = AdvisorParams(under_utilisation_ratio=0.5)
        suggestions = advise_child(extended_child, provider_settings,
                                   WEEK_WITH_TEN_REMAINING, params)
        assert suggestions == []


class TestOverBooking:
    """Test the over-booking notice"""

    def test_within_tolerance(self, provider_settings):
        child = _child(weekly_pattern=WeeklyPattern(monday=17))
        suggestions = advise_child(child, provider_settings, WEEK_WITH_TEN_REMAINING)
        assert SuggestionKind.OVER_BOOKING not in _kinds(suggestions)

    def test_beyond_tolerance(self, provider_settings):
        child = _child(weekly_pattern=WeeklyPattern(monday=17.5))
        suggestions = advise_child(child, provider_settings, WEEK_WITH_TEN_REMAINING)

        notice = next(s for s in suggestions if s.kind == SuggestionKind.OVER_BOOKING)
        assert notice.severity == Severity.INFO
        assert notice.details["excess_hours"] == pytest.approx(2.5)
        assert notice.message == (
            "Test Child is booked for 17.5hrs/week but only 15.0hrs/week are funded."
        )
        assert notice.recommendation == "Parent will be charged for 2.5 additional hours per week."

    def test_stretched_child(self, two_year_old, provider_settings):
        suggestions = advise_child(two_year_old, provider_settings, WEEK_WITH_TEN_REMAINING)

        notice = next(s for s in suggestions if s.kind == SuggestionKind.OVER_BOOKING)
        assert notice.details["funded_weekly"] == 11.18
        assert notice.message == (
            "Oliver Smith is booked for 15hrs/week but only 11.2hrs/week are funded."
        )
        assert notice.recommendation == "Parent will be charged for 3.8 additional hours per week."


class TestStretching:
    """Test the stretching recommendation"""

    def test_recommended_when_stretched_covers_ninety_percent(self):
        settings = ProviderSettings(operating_weeks=39)
        child = _child(weekly_pattern=WeeklyPattern.uniform(4, days=4))  # 16 hrs

        suggestions = advise_child(child, settings, WEEK_WITH_TEN_REMAINING)

        assert _kinds(suggestions) == [SuggestionKind.STRETCHING]
        tip = suggestions[0]
        assert tip.severity == Severity.SUCCESS
        assert tip.details["stretched_weekly"] == 14.62
        assert tip.message == (
            "Switching Test Child to stretched funding would provide "
            "14.6hrs/week over 39 weeks."
        )

    def test_not_recommended_when_coverage_too_low(self, provider_settings):
        child = _child(weekly_pattern=WeeklyPattern.uniform(4, days=4))
        suggestions = advise_child(child, provider_settings, WEEK_WITH_TEN_REMAINING)
        assert SuggestionKind.STRETCHING not in _kinds(suggestions)

    def test_not_recommended_when_already_stretched(self):
        settings = ProviderSettings(operating_weeks=39)
        child = _child(weekly_pattern=WeeklyPattern.uniform(4, days=4), stretched=True)
        suggestions = advise_child(child, settings, WEEK_WITH_TEN_REMAINING)
        assert SuggestionKind.STRETCHING not in _kinds(suggestions)

    def test_not_recommended_when_booking_within_funding(self):
        settings = ProviderSettings(operating_weeks=39)
        child = _child(weekly_pattern=WeeklyPattern.uniform(3))  # 15 hrs == funded
        suggestions = advise_child(child, settings, WEEK_WITH_TEN_REMAINING)
        assert SuggestionKind.STRETCHING not in _kinds(suggestions)


class TestComputeOptimisations:
    """Test roster-wide advice"""

    def test_multiple_suggestions_per_child(self, roster, provider_settings):
        suggestions = compute_optimisations(roster, provider_settings, WEEK_WITH_TEN_REMAINING)

        by_child = [(s.child_id, s.kind) for s in suggestions]
        assert by_child == [
            (1, SuggestionKind.UNDER_UTILISATION),
            (2, SuggestionKind.UNDER_UTILISATION),
            (2, SuggestionKind.OVER_BOOKING),
        ]

    def test_unknown_entitlement_is_skipped(self, roster, provider_settings, extended_child):
        broken = replace(extended_child, id=3, entitlement="retired_scheme")
        suggestions = compute_optimisations(roster + (broken,), provider_settings,
                                            WEEK_WITH_TEN_REMAINING)
        assert all(s.child_id != 3 for s in suggestions)
        assert len(suggestions) == 3

    def test_empty_roster(self, provider_settings):
        assert compute_optimisations([], provider_settings, 1) == []

    def test_recomputed_fresh_each_call(self, roster, provider_settings):
        first = compute_optimisations(roster, provider_settings, WEEK_WITH_TEN_REMAINING)
        second = compute_optimisations(roster, provider_settings, WEEK_WITH_TEN_REMAINING)
        assert first == second
        assert first is not second
