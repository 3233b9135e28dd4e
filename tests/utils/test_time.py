"""
Tests for date utilities.

Verifies age calculations around birthdays, the deliberately coarse
month count, and clamping of the term-week estimate.
"""

import pytest
from datetime import date, timedelta
from unittest.mock import patch

from funded_hours.utils.time import (
    DEFAULT_TERM_START,
    TERM_WEEKS,
    age,
    age_in_months,
    current_term_week,
    today,
    weeks_remaining,
)


class TestToday:
    """Test the injectable clock."""

    def test_uses_injected_clock(self):
        assert today(lambda: date(2025, 3, 1)) == date(2025, 3, 1)

    def test_falls_back_to_system_date(self):
        with patch('funded_hours.utils.time.date') as mock_date:
            mock_date.today.return_value = date(2025, 5, 5)

            assert today() == date(2025, 5, 5)
            mock_date.today.assert_called_once_with()


class TestAge:
    """Test whole-year age."""

    def test_on_birthday(self):
        assert age(date(2022, 3, 15), date(2025, 3, 15)) == 3

    def test_day_before_birthday(self):
        assert age(date(2022, 3, 15), date(2025, 3, 14)) == 2

    def test_earlier_month(self):
        assert age(date(2022, 3, 15), date(2025, 2, 28)) == 2

    def test_later_month(self):
        assert age(date(2022, 3, 15), date(2025, 4, 1)) == 3

    def test_across_year_boundary(self):
        assert age(date(2021, 12, 31), date(2025, 1, 1)) == 3
        assert age(date(2021, 12, 31), date(2024, 12, 31)) == 3

    def test_leap_day_birthday(self):
        assert age(date(2020, 2, 29), date(2025, 2, 28)) == 4
        assert age(date(2020, 2, 29), date(2025, 3, 1)) == 5

    def test_newborn(self):
        assert age(date(2025, 1, 10), date(2025, 7, 14)) == 0


class TestAgeInMonths:
    """Test month count without day adjustment."""

    def test_whole_months(self):
        assert age_in_months(date(2024, 1, 10), date(2025, 7, 10)) == 18

    def test_ignores_day_of_month(self):
        # One day short of 18 months still counts as 18
        assert age_in_months(date(2024, 1, 10), date(2025, 7, 9)) == 18

    def test_can_disagree_with_age(self):
        dob, as_of = date(2022, 3, 15), date(2025, 3, 1)
        assert age(dob, as_of) == 2
        assert age_in_months(dob, as_of) == 36


class TestCurrentTermWeek:
    """Test term week estimate."""

    def test_first_day_is_week_one(self):
        assert current_term_week(DEFAULT_TERM_START) == 1

    def test_seventh_day_still_week_one(self):
        assert current_term_week(DEFAULT_TERM_START + timedelta(days=6)) == 1

    def test_eighth_day_is_week_two(self):
        assert current_term_week(DEFAULT_TERM_START + timedelta(days=7)) == 2

    def test_week_with_ten_remaining(self):
        week = current_term_week(date(2025, 7, 14))
        assert week == 28
        assert weeks_remaining(week) == 10

    def test_clamped_below(self):
        assert current_term_week(date(2024, 12, 1)) == 1

    def test_clamped_above(self):
        assert current_term_week(date(2026, 6, 1)) == TERM_WEEKS

    def test_custom_term_start(self):
        assert current_term_week(date(2025, 9, 15), term_start=date(2025, 9, 1)) == 3

    @pytest.mark.parametrize("offset", range(-30, 400, 13))
    def test_always_in_range(self, offset):
        week = current_term_week(DEFAULT_TERM_START + timedelta(days=offset))
        assert 1 <= week <= TERM_WEEKS
