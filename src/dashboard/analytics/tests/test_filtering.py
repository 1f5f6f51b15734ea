from datetime import UTC, datetime

from src.dashboard.analytics.filtering import filter_responses, sort_responses
from src.dashboard.dtos import Attendance, ResponseFilters
from src.dashboard.tests.inmemory_store import create_test_response


def _guests():
    return [
        create_test_response(
            guest_name="charlie Brown",
            guest_email="charlie@example.com",
            attendance=Attendance.NO,
            guest_count=1,
            submitted_at=datetime(2026, 6, 2, 10, 0, tzinfo=UTC),
            dietary_options=("Vegan",),
        ),
        create_test_response(
            guest_name="Alice Smith",
            guest_email="alice@example.com",
            attendance=Attendance.YES,
            guest_count=3,
            submitted_at=datetime(2026, 6, 1, 10, 0, tzinfo=UTC),
            message="Can't wait for the BBQ",
        ),
        create_test_response(
            guest_name="Bob Jones",
            guest_email="bob@example.com",
            attendance=Attendance.MAYBE,
            guest_count=3,
            submitted_at=datetime(2026, 6, 3, 10, 0, tzinfo=UTC),
            dietary_options=("Halal", "Gluten-Free"),
        ),
    ]


def _names(result):
    return [r.guest_name for r in result.responses]


def test_empty_list():
    result = filter_responses([], ResponseFilters(attendance="yes", search="x"))

    assert result.responses == []
    assert result.total_count == 0
    assert result.original_count == 0


def test_no_filters_is_identity():
    responses = _guests()

    result = filter_responses(responses, ResponseFilters())

    assert result.responses == responses
    assert result.total_count == len(responses)
    assert result.original_count == len(responses)


def test_attendance_filter():
    result = filter_responses(_guests(), ResponseFilters(attendance="maybe"))

    assert _names(result) == ["Bob Jones"]
    assert result.original_count == 3


def test_attendance_all_keeps_everything():
    result = filter_responses(_guests(), ResponseFilters(attendance="all"))

    assert result.total_count == 3


def test_search_is_case_insensitive_across_fields():
    assert _names(filter_responses(_guests(), ResponseFilters(search="SMITH"))) == ["Alice Smith"]
    assert _names(filter_responses(_guests(), ResponseFilters(search="bob@"))) == ["Bob Jones"]
    assert _names(filter_responses(_guests(), ResponseFilters(search="bbq"))) == ["Alice Smith"]
    assert filter_responses(_guests(), ResponseFilters(search="nobody")).total_count == 0


def test_dietary_filter_needs_any_shared_tag():
    result = filter_responses(
        _guests(), ResponseFilters(dietary_options=("Gluten-Free", "Vegan"))
    )

    assert _names(result) == ["charlie Brown", "Bob Jones"]


def test_guest_count_range():
    responses = [create_test_response(guest_count=count) for count in (1, 2, 3, 6)]

    result = filter_responses(responses, ResponseFilters(guest_count_min=2, guest_count_max=5))

    assert result.total_count == 2
    assert [r.guest_count for r in result.responses] == [2, 3]


def test_guest_count_single_bound():
    responses = [create_test_response(guest_count=count) for count in (1, 2, 3, 6)]

    result = filter_responses(responses, ResponseFilters(guest_count_min=3))

    assert [r.guest_count for r in result.responses] == [3, 6]


def test_date_range_is_inclusive():
    result = filter_responses(
        _guests(),
        ResponseFilters(
            date_start=datetime(2026, 6, 1, 10, 0, tzinfo=UTC),
            date_end=datetime(2026, 6, 2, 10, 0, tzinfo=UTC),
        ),
    )

    assert _names(result) == ["charlie Brown", "Alice Smith"]


def test_date_range_with_naive_bound():
    result = filter_responses(_guests(), ResponseFilters(date_start=datetime(2026, 6, 2, 12, 0)))

    assert _names(result) == ["Bob Jones"]


def test_filters_combine_with_and():
    result = filter_responses(
        _guests(), ResponseFilters(attendance="yes", guest_count_min=3, search="bob")
    )

    assert result.total_count == 0


def test_sort_by_name_ignores_case():
    result = filter_responses(_guests(), ResponseFilters(sort_by="name"))

    assert _names(result) == ["Alice Smith", "Bob Jones", "charlie Brown"]


def test_sort_by_attendance():
    result = filter_responses(_guests(), ResponseFilters(sort_by="attendance"))

    assert [r.attendance for r in result.responses] == [
        Attendance.MAYBE,
        Attendance.NO,
        Attendance.YES,
    ]


def test_sort_by_guest_count_descending_and_stable():
    result = filter_responses(_guests(), ResponseFilters(sort_by="guestCount"))

    assert _names(result) == ["Alice Smith", "Bob Jones", "charlie Brown"]


def test_sort_by_submitted_at_most_recent_first():
    result = filter_responses(_guests(), ResponseFilters(sort_by="submittedAt"))

    assert _names(result) == ["Bob Jones", "charlie Brown", "Alice Smith"]


def test_sort_by_submitted_at_is_idempotent_with_ties():
    same_time = datetime(2026, 6, 5, 8, 0, tzinfo=UTC)
    responses = [
        create_test_response(guest_name=name, submitted_at=same_time) for name in ("A", "B", "C")
    ]

    once = sort_responses(responses, "submittedAt")
    twice = sort_responses(once, "submittedAt")

    assert [r.guest_name for r in once] == ["A", "B", "C"]
    assert twice == once


def test_unknown_sort_keeps_order():
    responses = _guests()

    assert sort_responses(responses, "favouriteColour") == responses
    assert sort_responses(responses, None) == responses


def test_input_is_not_mutated():
    responses = _guests()
    original = list(responses)

    result = filter_responses(responses, ResponseFilters(sort_by="name"))

    assert responses == original
    assert result.responses is not responses


def test_sort_by_submitted_at_with_mixed_naive_and_aware_timestamps():
    responses = [
        create_test_response(guest_name="Naive", submitted_at=datetime(2026, 6, 2, 12, 0)),
        create_test_response(
            guest_name="Aware", submitted_at=datetime(2026, 6, 3, 12, 0, tzinfo=UTC)
        ),
        create_test_response(
            guest_name="Earliest", submitted_at=datetime(2026, 6, 1, 12, 0, tzinfo=UTC)
        ),
    ]

    result = sort_responses(responses, "submittedAt")

    assert [r.guest_name for r in result] == ["Aware", "Naive", "Earliest"]
