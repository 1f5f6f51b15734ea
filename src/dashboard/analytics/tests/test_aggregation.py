from datetime import UTC, datetime
from uuid import uuid4

from src.dashboard.analytics.aggregation import (
    compute_analytics,
    compute_dashboard,
    compute_summary,
)
from src.dashboard.dtos import Attendance, DashboardAnalytics, InviteCounts
from src.dashboard.tests.inmemory_store import create_test_event, create_test_response


def _scenario_a():
    return [
        create_test_response(attendance=Attendance.YES, guest_count=2),
        create_test_response(attendance=Attendance.YES, guest_count=1),
        create_test_response(attendance=Attendance.NO, guest_count=1),
        create_test_response(attendance=Attendance.MAYBE, guest_count=1),
    ]


def test_summary_counts_attendance_and_guests():
    summary = compute_summary(_scenario_a(), InviteCounts(total_invites=6, response_rate=66.7))

    assert summary.total_responses == 4
    assert summary.attending == 2
    assert summary.not_attending == 1
    assert summary.maybe == 1
    assert summary.total_guests == 5
    assert summary.total_invites == 6
    assert summary.response_rate == 66.7
    assert summary.pending_responses == 2


def test_pending_responses_never_negative():
    summary = compute_summary(_scenario_a(), InviteCounts(total_invites=2))

    assert summary.pending_responses == 0


def test_empty_dashboard_is_zeroed():
    event = create_test_event()
    snapshot = compute_dashboard([], event, InviteCounts(total_invites=10))

    assert snapshot.summary.total_responses == 0
    assert snapshot.summary.pending_responses == 10
    assert snapshot.analytics == DashboardAnalytics()
    assert snapshot.analytics.attendance_rate == 0
    assert snapshot.analytics.peak_response_day is None
    assert snapshot.analytics.peak_response_hour is None
    assert snapshot.trends == {}
    assert snapshot.dietary_analysis.total_with_dietary == 0
    assert snapshot.guest_analysis.max_group_size == 0
    assert snapshot.timeline.milestones == []
    assert snapshot.timeline.days_until_event == []
    assert snapshot.timeline.response_patterns == {}


def test_analytics_rates_and_averages():
    event = create_test_event(date=datetime(2026, 6, 20, 18, 0, tzinfo=UTC))
    responses = [
        create_test_response(
            attendance=Attendance.YES,
            guest_count=3,
            submitted_at=datetime(2026, 6, 10, 18, 0, tzinfo=UTC),
        ),
        create_test_response(
            attendance=Attendance.NO,
            guest_count=1,
            submitted_at=datetime(2026, 6, 15, 18, 0, tzinfo=UTC),
        ),
        # after the event: distance counts as a positive number of days
        create_test_response(
            attendance=Attendance.YES,
            guest_count=1,
            submitted_at=datetime(2026, 6, 22, 18, 0, tzinfo=UTC),
        ),
    ]

    analytics = compute_analytics(responses, event)

    assert analytics.attendance_rate == 66.7
    assert analytics.average_guests_per_response == 1.7
    assert analytics.average_response_time == 5.7
    assert analytics.guest_count_distribution == {3: 1, 1: 2}


def test_peak_day_and_hour_ties_go_to_first_seen():
    event = create_test_event()
    responses = [
        create_test_response(submitted_at=datetime(2026, 6, 3, 9, 0, tzinfo=UTC)),
        create_test_response(submitted_at=datetime(2026, 6, 1, 20, 0, tzinfo=UTC)),
        create_test_response(submitted_at=datetime(2026, 6, 1, 9, 30, tzinfo=UTC)),
        create_test_response(submitted_at=datetime(2026, 6, 3, 20, 15, tzinfo=UTC)),
    ]

    analytics = compute_analytics(responses, event)

    assert analytics.peak_response_day == "2026-06-03"
    assert analytics.peak_response_hour == 9


def test_peak_day_picks_most_frequent():
    event = create_test_event()
    responses = [
        create_test_response(submitted_at=datetime(2026, 6, 3, 9, 0, tzinfo=UTC)),
        create_test_response(submitted_at=datetime(2026, 6, 5, 14, 0, tzinfo=UTC)),
        create_test_response(submitted_at=datetime(2026, 6, 5, 14, 45, tzinfo=UTC)),
    ]

    analytics = compute_analytics(responses, event)

    assert analytics.peak_response_day == "2026-06-05"
    assert analytics.peak_response_hour == 14


def test_dietary_breakdown_counts_every_tag():
    event = create_test_event()
    responses = [
        create_test_response(dietary_options=("Vegan", "Gluten-Free", "Halal")),
        create_test_response(dietary_options=("Vegan",)),
        create_test_response(),
    ]

    analytics = compute_analytics(responses, event)

    assert analytics.dietary_breakdown == {"Vegan": 2, "Gluten-Free": 1, "Halal": 1}


def test_dashboard_counts_are_consistent():
    event_id = uuid4()
    event = create_test_event(event_id=event_id)
    responses = [
        create_test_response(event_id=event_id, attendance=a, guest_count=c)
        for a, c in [
            (Attendance.YES, 4),
            (Attendance.NO, 1),
            (Attendance.MAYBE, 2),
            (Attendance.YES, 1),
            (Attendance.YES, 4),
        ]
    ]

    snapshot = compute_dashboard(responses, event, InviteCounts(total_invites=8))
    summary = snapshot.summary
    distribution = snapshot.analytics.guest_count_distribution

    assert summary.attending + summary.not_attending + summary.maybe == summary.total_responses
    assert sum(distribution.values()) == summary.total_responses
    assert sum(count * n for count, n in distribution.items()) == summary.total_guests
    assert snapshot.guest_analysis.total_guests == summary.total_guests


def test_compute_dashboard_does_not_mutate_input():
    event = create_test_event()
    responses = [
        create_test_response(submitted_at=datetime(2026, 6, 5, tzinfo=UTC)),
        create_test_response(submitted_at=datetime(2026, 6, 1, tzinfo=UTC)),
        create_test_response(submitted_at=datetime(2026, 6, 3, tzinfo=UTC)),
    ]
    original = list(responses)

    snapshot = compute_dashboard(responses, event, InviteCounts())

    assert responses == original
    assert snapshot.responses == original
    assert snapshot.responses is not responses


def test_compute_dashboard_is_repeatable():
    event = create_test_event()
    responses = _scenario_a()

    first = compute_dashboard(responses, event, InviteCounts(total_invites=4))
    second = compute_dashboard(responses, event, InviteCounts(total_invites=4))

    assert first == second


def test_dashboard_accepts_mixed_naive_and_aware_timestamps():
    event = create_test_event(date=datetime(2026, 6, 20, 18, 0, tzinfo=UTC))
    aware = create_test_response(
        event_id=event.id, submitted_at=datetime(2026, 6, 1, 12, 0, tzinfo=UTC)
    )
    naive = create_test_response(event_id=event.id, submitted_at=datetime(2026, 6, 2, 12, 0))

    snapshot = compute_dashboard([naive, aware], event, InviteCounts())

    milestones = snapshot.timeline.milestones
    assert milestones[0].date == aware.submitted_at
    assert milestones[-1].date == naive.submitted_at
    assert snapshot.timeline.days_until_event == [19, 20]
    assert sorted(snapshot.timeline.response_patterns) == [18, 19]
    assert snapshot.summary.total_responses == 2
