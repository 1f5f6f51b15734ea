"""Date and rounding helpers shared by the analytics modules."""

import math
from datetime import UTC, datetime

SECONDS_PER_DAY = 24 * 60 * 60


def align(reference: datetime, moment: datetime) -> datetime:
    """Make `moment` comparable with `reference`.

    Naive timestamps are read as UTC when the other side is timezone-aware.
    """
    if reference.tzinfo is not None and moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    if reference.tzinfo is None and moment.tzinfo is not None:
        return moment.astimezone(UTC).replace(tzinfo=None)
    return moment


def days_between(later: datetime, earlier: datetime) -> float:
    return (later - align(later, earlier)).total_seconds() / SECONDS_PER_DAY


def days_until_event(event_date: datetime, submitted_at: datetime) -> int:
    """Signed whole days from submission to the event, rounded up."""
    return math.ceil(days_between(event_date, submitted_at))


def calendar_day(moment: datetime) -> str:
    # the stored timestamp's own timezone, no conversion
    return moment.date().isoformat()


def round_one(value: float) -> float:
    return round(value, 1)


def ratio(numerator: float, denominator: float, scale: float = 1) -> float:
    """`numerator / denominator * scale` to one decimal, 0 for an empty denominator."""
    if not denominator:
        return 0
    return round_one(numerator / denominator * scale)


def as_utc(moment: datetime) -> datetime:
    """Sort key for timestamps that may mix naive and aware values."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)
