"""Tests for day grouping of trip activities."""
from datetime import date, datetime
from uuid import uuid4

from journey.schemas.itineraries.activity import ActivityRecord
from journey.services.itineraries.aggregator import group_activities_by_day

TRIP_ID = uuid4()
DAY_A = datetime(2024, 7, 2, 9, 0)
DAY_B = datetime(2024, 7, 3, 9, 0)


def _activity(title, occurs_at):
    return ActivityRecord(id=uuid4(), trip_id=TRIP_ID, title=title, occurs_at=occurs_at)


def _shape(groups):
    return [(g.date, [a.title for a in g.activities]) for g in groups]


class TestAdjacencyGrouping:
    def test_empty_input_gives_empty_list(self):
        groups = group_activities_by_day([])
        assert groups == []
        assert groups is not None

    def test_consecutive_same_day_activities_share_a_group(self):
        groups = group_activities_by_day([
            _activity("x", DAY_A),
            _activity("y", DAY_A.replace(hour=20)),
            _activity("z", DAY_B),
        ])
        assert _shape(groups) == [
            (date(2024, 7, 2), ["x", "y"]),
            (date(2024, 7, 3), ["z"]),
        ]

    def test_non_adjacent_same_day_opens_a_second_group(self):
        # Only neighbours are compared: A, B, A is three days in the view
        groups = group_activities_by_day([
            _activity("x", DAY_A),
            _activity("y", DAY_B),
            _activity("z", DAY_A),
        ])
        assert _shape(groups) == [
            (date(2024, 7, 2), ["x"]),
            (date(2024, 7, 3), ["y"]),
            (date(2024, 7, 2), ["z"]),
        ]

    def test_input_order_kept_within_a_day(self):
        groups = group_activities_by_day([
            _activity("dinner", DAY_A.replace(hour=20)),
            _activity("breakfast", DAY_A.replace(hour=8)),
        ])
        assert _shape(groups) == [(date(2024, 7, 2), ["dinner", "breakfast"])]

    def test_group_carries_activity_fields(self):
        activity = _activity("museum", DAY_A)
        [group] = group_activities_by_day([activity])
        [out] = group.activities
        assert out.id == activity.id
        assert out.occurs_at == DAY_A


class TestSortedGrouping:
    def test_non_adjacent_same_day_is_merged_when_sorting(self):
        groups = group_activities_by_day(
            [_activity("x", DAY_A), _activity("y", DAY_B), _activity("z", DAY_A)],
            sort_by_date=True,
        )
        assert _shape(groups) == [
            (date(2024, 7, 2), ["x", "z"]),
            (date(2024, 7, 3), ["y"]),
        ]

    def test_sort_is_stable_within_a_day(self):
        groups = group_activities_by_day(
            [
                _activity("late", DAY_B.replace(hour=22)),
                _activity("dinner", DAY_A.replace(hour=20)),
                _activity("early", DAY_B.replace(hour=6)),
            ],
            sort_by_date=True,
        )
        assert _shape(groups) == [
            (date(2024, 7, 2), ["dinner"]),
            (date(2024, 7, 3), ["late", "early"]),
        ]

    def test_empty_input_when_sorting(self):
        assert group_activities_by_day([], sort_by_date=True) == []
