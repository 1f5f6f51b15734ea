"""Response trends per calendar day and the timeline relative to the event date."""

import math
from collections import Counter, defaultdict
from collections.abc import Sequence
from datetime import date, datetime, timedelta

from src.dashboard.analytics.utils import as_utc, calendar_day, days_until_event
from src.dashboard.dtos import (
    Attendance,
    DailyTrend,
    EventSummary,
    Milestone,
    ResponsePattern,
    ResponseRecord,
    Timeline,
)

MILESTONE_FRACTIONS = (0.25, 0.5, 0.75, 1.0)

_TOTAL = "responses"
_GUESTS = "total_guests"


def compute_trends(responses: Sequence[ResponseRecord]) -> dict[str, DailyTrend]:
    """Per submission day: response count, attendance split and guests.

    Days appear in the order they are first seen in `responses`.
    """
    per_day: dict[str, Counter] = defaultdict(Counter)
    for response in responses:
        bucket = per_day[calendar_day(response.submitted_at)]
        bucket[_TOTAL] += 1
        bucket[response.attendance] += 1
        bucket[_GUESTS] += response.guest_count

    return {
        day: DailyTrend(
            responses=bucket[_TOTAL],
            attending=bucket[Attendance.YES],
            not_attending=bucket[Attendance.NO],
            maybe=bucket[Attendance.MAYBE],
            total_guests=bucket[_GUESTS],
        )
        for day, bucket in per_day.items()
    }


def compute_timeline(responses: Sequence[ResponseRecord], event: EventSummary) -> Timeline:
    if not responses:
        return Timeline()

    ordered = sorted(responses, key=lambda response: as_utc(response.submitted_at))
    return Timeline(
        days_until_event=[
            days_until_event(event.date, response.submitted_at) for response in responses
        ],
        response_patterns=_response_patterns(ordered, event.date),
        milestones=_milestones(ordered, event.date),
    )


def _response_patterns(
    ordered: Sequence[ResponseRecord], event_date: datetime
) -> dict[int, ResponsePattern]:
    """Walk back day by day from the event to the earliest response."""
    by_day: dict[date, list[ResponseRecord]] = defaultdict(list)
    for response in ordered:
        by_day[response.submitted_at.date()].append(response)

    total_days = days_until_event(event_date, ordered[0].submitted_at)

    patterns: dict[int, ResponsePattern] = {}
    for days_before in range(total_days + 1):
        day = (event_date - timedelta(days=days_before)).date()
        day_responses = by_day.get(day)
        if not day_responses:
            continue

        patterns[days_before] = ResponsePattern(
            date=day.isoformat(),
            responses=len(day_responses),
            attending=sum(1 for r in day_responses if r.attendance == Attendance.YES),
            total_guests=sum(r.guest_count for r in day_responses),
        )
    return patterns


def _milestones(ordered: Sequence[ResponseRecord], event_date: datetime) -> list[Milestone]:
    milestones = []
    for fraction in MILESTONE_FRACTIONS:
        # cumulative count reaches the target at this index for the first time
        target = math.ceil(len(ordered) * fraction)
        response = ordered[target - 1]
        milestones.append(
            Milestone(
                percentage=round(fraction * 100),
                count=target,
                date=response.submitted_at,
                days_until_event=days_until_event(event_date, response.submitted_at),
            )
        )
    return milestones
