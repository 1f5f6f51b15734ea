"""Filter, search and sort a response list without touching the input."""

from collections.abc import Callable, Sequence
from typing import Any

from src.dashboard.analytics.utils import align, as_utc
from src.dashboard.dtos import FilteredResponses, ResponseFilters, ResponseRecord, SortBy

ALL_ATTENDANCE = "all"

# sort key -> (key function, descending)
_SORTS: dict[str, tuple[Callable[[ResponseRecord], Any], bool]] = {
    SortBy.NAME.value: (lambda r: r.guest_name.casefold(), False),
    SortBy.EMAIL.value: (lambda r: r.guest_email.casefold(), False),
    SortBy.ATTENDANCE.value: (lambda r: r.attendance.value, False),
    SortBy.GUEST_COUNT.value: (lambda r: r.guest_count, True),
    SortBy.SUBMITTED_AT.value: (lambda r: as_utc(r.submitted_at), True),
}


def _matches_attendance(response: ResponseRecord, filters: ResponseFilters) -> bool:
    if not filters.attendance or filters.attendance == ALL_ATTENDANCE:
        return True
    return response.attendance.value == filters.attendance


def _matches_search(response: ResponseRecord, filters: ResponseFilters) -> bool:
    if not filters.search:
        return True
    term = filters.search.lower()
    return any(
        term in field.lower()
        for field in (response.guest_name, response.guest_email, response.message or "")
    )


def _matches_dietary(response: ResponseRecord, filters: ResponseFilters) -> bool:
    if not filters.dietary_options:
        return True
    return not set(response.dietary_options).isdisjoint(filters.dietary_options)


def _matches_guest_count(response: ResponseRecord, filters: ResponseFilters) -> bool:
    if filters.guest_count_min is not None and response.guest_count < filters.guest_count_min:
        return False
    if filters.guest_count_max is not None and response.guest_count > filters.guest_count_max:
        return False
    return True


def _matches_date_range(response: ResponseRecord, filters: ResponseFilters) -> bool:
    submitted_at = response.submitted_at
    if filters.date_start is not None and submitted_at < align(submitted_at, filters.date_start):
        return False
    if filters.date_end is not None and submitted_at > align(submitted_at, filters.date_end):
        return False
    return True


_PREDICATES = (
    _matches_attendance,
    _matches_search,
    _matches_dietary,
    _matches_guest_count,
    _matches_date_range,
)


def sort_responses(responses: Sequence[ResponseRecord], sort_by: str | None) -> list[ResponseRecord]:
    """Stable sort; an unknown or empty key keeps the current order."""
    if sort_by not in _SORTS:
        return list(responses)
    key, descending = _SORTS[sort_by]
    return sorted(responses, key=key, reverse=descending)


def filter_responses(
    responses: Sequence[ResponseRecord], filters: ResponseFilters
) -> FilteredResponses:
    filtered = [
        response
        for response in responses
        if all(predicate(response, filters) for predicate in _PREDICATES)
    ]
    filtered = sort_responses(filtered, filters.sort_by)

    return FilteredResponses(
        responses=filtered,
        total_count=len(filtered),
        original_count=len(responses),
    )
