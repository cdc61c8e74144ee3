"""
Day-by-day view of a trip's activities.

Grouping only ever compares an activity with the one right before it. Input
that is not ordered by date therefore produces repeated days: dates A, B, A
give three groups, not two. This is the long-standing behaviour and clients
rely on it, so it stays the default and runs in O(n).

``sort_by_date=True`` first does a stable sort on the calendar date, which
turns the same pass into a true group-by (O(n log n)). Activities keep their
input order inside a day either way.
"""

from datetime import date
from itertools import groupby
from typing import Iterable, List

from journey.schemas.itineraries.activity import ActivityDayGroup, ActivityOut, ActivityRecord


def _activity_day(activity: ActivityOut) -> date:
    return activity.occurs_at.date()


def group_activities_by_day(
    activities: Iterable[ActivityRecord],
    sort_by_date: bool = False,
) -> List[ActivityDayGroup]:
    items = [
        ActivityOut(id=activity.id, title=activity.title, occurs_at=activity.occurs_at)
        for activity in activities
    ]

    if sort_by_date:
        items.sort(key=_activity_day)

    # groupby opens a new group whenever the key differs from the previous item's
    return [
        ActivityDayGroup(date=day, activities=list(group))
        for day, group in groupby(items, key=_activity_day)
    ]
