"""Tests for pure roster transitions"""

import pytest
from dataclasses import replace
from datetime import date

from funded_hours.errors import (
    DuplicateChildError,
    MalformedDataError,
    MissingDataError,
    UnknownEntitlementError,
)
from funded_hours.funding.summary import compute_summary
from funded_hours.models.roster import Child, WeeklyPattern
from funded_hours.state.roster import (
    add_child,
    find_child,
    record_attended_week,
    remove_child,
    set_hours_used,
    set_stretched,
    set_weekly_pattern,
)


@pytest.fixture
def new_child() -> Child:
    return Child(
        id=3,
        name="Sophia Williams",
        date_of_birth=date(2024, 1, 10),
        entitlement="expanded_under2",
        weekly_pattern=WeeklyPattern(monday=4, tuesday=4, wednesday=4, thursday=4),
        hours_used=96,
    )


class TestAddChild:
    """Test adding children"""

    def test_appends_without_mutating(self, roster, new_child):
        updated = add_child(roster, new_child)

        assert len(updated) == 3
        assert updated[-1] == new_child
        assert len(roster) == 2

    def test_accepts_list_roster(self, roster, new_child):
        assert isinstance(add_child(list(roster), new_child), tuple)

    def test_rejects_duplicate_id(self, roster, extended_child):
        with pytest.raises(DuplicateChildError) as exc_info:
            add_child(roster, extended_child)
        assert exc_info.value.child_id == 1

    def test_rejects_blank_name(self, roster, new_child):
        with pytest.raises(MissingDataError) as exc_info:
            add_child(roster, replace(new_child, name="   "))
        assert exc_info.value.field == "name"

    def test_rejects_unknown_entitlement(self, roster, new_child):
        with pytest.raises(UnknownEntitlementError) as exc_info:
            add_child(roster, replace(new_child, entitlement="universal_45"))
        assert exc_info.value.scheme_id == "universal_45"

    def test_clamps_negative_hours_used(self, roster, new_child):
        updated = add_child(roster, replace(new_child, hours_used=-20))
        assert updated[-1].hours_used == 0

    def test_rejects_infinite_hours_used(self, roster, new_child):
        with pytest.raises(MalformedDataError):
            add_child(roster, replace(new_child, hours_used=float("inf")))

    def test_rejects_infinite_booking(self, roster, new_child):
        pattern = WeeklyPattern(monday=float("inf"))
        with pytest.raises(MalformedDataError):
            add_child(roster, replace(new_child, weekly_pattern=pattern))


class TestRemoveChild:
    """Test removing children"""

    def test_removes_by_id(self, roster):
        updated = remove_child(roster, 1)
        assert [child.id for child in updated] == [2]

    def test_unknown_id_is_noop(self, roster):
        assert remove_child(roster, 42) == tuple(roster)


class TestHoursUsed:
    """Test updates to hours used"""

    def test_set_hours_used(self, roster):
        updated = set_hours_used(roster, 1, 500)
        assert find_child(updated, 1).hours_used == 500
        assert find_child(updated, 2).hours_used == 180

    def test_clamped_at_zero(self, roster):
        updated = set_hours_used(roster, 1, -10)
        assert find_child(updated, 1).hours_used == 0

    def test_not_capped_at_entitlement(self, roster):
        updated = set_hours_used(roster, 1, 5000)
        assert find_child(updated, 1).hours_used == 5000

    @pytest.mark.parametrize("hours", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_hours_rejected(self, roster, hours):
        with pytest.raises(MalformedDataError) as exc_info:
            set_hours_used(roster, 1, hours)

        assert exc_info.value.context == {"child_id": 1}
        assert compute_summary(roster).total_used_hours == 456 + 180

    def test_record_attended_week(self, roster):
        updated = record_attended_week(roster, 1)
        assert find_child(updated, 1).hours_used == 456 + 30

    def test_record_week_for_unknown_child(self, roster):
        assert record_attended_week(roster, 99) == tuple(roster)


class TestWeeklyPattern:
    """Test changing a child's booking"""

    def test_set_weekly_pattern(self, roster):
        pattern = WeeklyPattern.uniform(5, days=3)
        updated = set_weekly_pattern(roster, 1, pattern)

        assert find_child(updated, 1).weekly_pattern == pattern
        assert find_child(roster, 1).weekly_pattern == WeeklyPattern.uniform(6)

    def test_new_booking_used_for_attended_week(self, roster):
        updated = set_weekly_pattern(roster, 1, WeeklyPattern(monday=8))
        assert find_child(record_attended_week(updated, 1), 1).hours_used == 456 + 8

    @pytest.mark.parametrize("hours", [-1, float("inf"), float("nan")])
    def test_invalid_booking_rejected(self, roster, hours):
        with pytest.raises(MalformedDataError):
            set_weekly_pattern(roster, 1, WeeklyPattern(tuesday=hours))

    def test_unknown_child_is_noop(self, roster):
        assert set_weekly_pattern(roster, 99, WeeklyPattern()) == tuple(roster)


class TestStretched:
    """Test switching funding option"""

    def test_set_stretched(self, roster):
        updated = set_stretched(roster, 1, True)
        assert find_child(updated, 1).stretched is True
        assert find_child(roster, 1).stretched is False


def test_find_child(roster):
    assert find_child(roster, 2).name == "Oliver Smith"
    assert find_child(roster, 7) is None
