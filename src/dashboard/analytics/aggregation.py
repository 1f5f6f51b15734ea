"""Dashboard snapshot: summary counts and analytics for one event."""

from collections import Counter
from collections.abc import Iterable, Sequence

from src.dashboard.analytics.breakdowns import (
    analyze_dietary_preferences,
    analyze_guest_counts,
    count_dietary_options,
    count_guest_counts,
)
from src.dashboard.analytics.timeline import compute_timeline, compute_trends
from src.dashboard.analytics.utils import calendar_day, days_between, ratio, round_one
from src.dashboard.dtos import (
    Attendance,
    DashboardAnalytics,
    DashboardSnapshot,
    DashboardSummary,
    EventSummary,
    InviteCounts,
    ResponseRecord,
)


def compute_summary(
    responses: Sequence[ResponseRecord], invite_counts: InviteCounts
) -> DashboardSummary:
    attendance = Counter(response.attendance for response in responses)
    return DashboardSummary(
        total_invites=invite_counts.total_invites,
        total_responses=len(responses),
        response_rate=invite_counts.response_rate,
        attending=attendance[Attendance.YES],
        not_attending=attendance[Attendance.NO],
        maybe=attendance[Attendance.MAYBE],
        total_guests=sum(response.guest_count for response in responses),
        pending_responses=max(0, invite_counts.total_invites - len(responses)),
    )


def compute_analytics(
    responses: Sequence[ResponseRecord], event: EventSummary
) -> DashboardAnalytics:
    """
    Rates, averages and peaks over the responses.

    Peak day and hour ties go to the value seen first in `responses`.
    """
    if not responses:
        return DashboardAnalytics()

    total = len(responses)
    attending = sum(1 for response in responses if response.attendance == Attendance.YES)
    total_guests = sum(response.guest_count for response in responses)
    response_days = [abs(days_between(event.date, response.submitted_at)) for response in responses]

    return DashboardAnalytics(
        attendance_rate=ratio(attending, total, scale=100),
        average_guests_per_response=ratio(total_guests, total),
        average_response_time=round_one(sum(response_days) / total),
        peak_response_day=_most_common(
            calendar_day(response.submitted_at) for response in responses
        ),
        peak_response_hour=_most_common(response.submitted_at.hour for response in responses),
        dietary_breakdown=count_dietary_options(responses),
        guest_count_distribution=count_guest_counts(responses),
    )


def _most_common(values: Iterable):
    # Counter keeps insertion order for equal counts
    most_common = Counter(values).most_common(1)
    return most_common[0][0] if most_common else None


def compute_dashboard(
    responses: Sequence[ResponseRecord],
    event: EventSummary,
    invite_counts: InviteCounts,
) -> DashboardSnapshot:
    """Build every aggregate of the dashboard from one response list."""
    responses = list(responses)
    return DashboardSnapshot(
        event=event,
        summary=compute_summary(responses, invite_counts),
        analytics=compute_analytics(responses, event),
        trends=compute_trends(responses),
        dietary_analysis=analyze_dietary_preferences(responses),
        guest_analysis=analyze_guest_counts(responses),
        timeline=compute_timeline(responses, event),
        responses=responses,
    )
