"""Validation of caller supplied filters and their conversion to ResponseFilters."""

from datetime import datetime

from pydantic import TypeAdapter, ValidationError

from src.dashboard.analytics.utils import align
from src.dashboard.dtos import Attendance, ResponseFilters, SortBy
from src.dashboard.schemas import FilterRequest

ATTENDANCE_FILTERS = {"all", *(attendance.value for attendance in Attendance)}
SORT_OPTIONS = {sort_by.value for sort_by in SortBy}
GUEST_COUNT_BOUNDS = (1, 100)

_timestamp_adapter = TypeAdapter(datetime)


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO date or datetime; None when missing or unparseable."""
    if not value:
        return None
    try:
        return _timestamp_adapter.validate_python(value)
    except ValidationError:
        return None


def validate_filters(request: FilterRequest) -> list[str]:
    """
    Check a filter request against the accepted vocabulary.

    Returns every problem found so a caller can show them all at once;
    an empty list means the filters are valid.

    A date range may give only one bound, leaving the other side open.
    Every bound that is given must parse as an ISO date or datetime.
    """
    errors: list[str] = []

    if request.attendance and request.attendance not in ATTENDANCE_FILTERS:
        errors.append("Invalid attendance filter value")

    if request.guest_count:
        low, high = GUEST_COUNT_BOUNDS
        minimum, maximum = request.guest_count.min, request.guest_count.max
        if minimum is not None and not low <= minimum <= high:
            errors.append(f"Guest count minimum must be between {low} and {high}")
        if maximum is not None and not low <= maximum <= high:
            errors.append(f"Guest count maximum must be between {low} and {high}")
        if minimum is not None and maximum is not None and minimum > maximum:
            errors.append("Guest count minimum cannot be greater than maximum")

    if request.date_range:
        raw_bounds = [b for b in (request.date_range.start, request.date_range.end) if b]
        parsed = [parse_timestamp(bound) for bound in raw_bounds]
        if any(bound is None for bound in parsed):
            errors.append("Invalid date format")
        elif len(parsed) == 2 and parsed[0] > align(parsed[0], parsed[1]):
            errors.append("Start date cannot be after end date")

    if request.sort_by and request.sort_by not in SORT_OPTIONS:
        errors.append("Invalid sort option")

    return errors


def to_response_filters(request: FilterRequest) -> ResponseFilters:
    """Convert a validated request into the engine's filter options."""
    guest_count = request.guest_count
    date_range = request.date_range
    return ResponseFilters(
        attendance=request.attendance,
        search=request.search,
        dietary_options=tuple(request.dietary_options),
        guest_count_min=guest_count.min if guest_count else None,
        guest_count_max=guest_count.max if guest_count else None,
        date_start=parse_timestamp(date_range.start) if date_range else None,
        date_end=parse_timestamp(date_range.end) if date_range else None,
        sort_by=request.sort_by,
    )
