"""Dietary and guest-count breakdowns of a response list."""

from collections import Counter
from collections.abc import Sequence

from src.dashboard.analytics.utils import ratio
from src.dashboard.dtos import DietaryAnalysis, GuestAnalysis, ResponseRecord


def count_dietary_options(responses: Sequence[ResponseRecord]) -> dict[str, int]:
    """Tag -> number of responses carrying that tag."""
    counter: Counter[str] = Counter()
    for response in responses:
        counter.update(response.dietary_options)
    return dict(counter)


def count_guest_counts(responses: Sequence[ResponseRecord]) -> dict[int, int]:
    """Exact guest count -> number of responses with that count."""
    return dict(Counter(response.guest_count for response in responses))


def analyze_dietary_preferences(responses: Sequence[ResponseRecord]) -> DietaryAnalysis:
    """
    Split responses by whether they picked any dietary tag and count
    tags, free-text restrictions and multi-tag combinations.

    Restrictions are grouped by exact text, so "no nuts" and "No nuts"
    are counted separately.
    """
    with_dietary = 0
    restrictions: Counter[str] = Counter()
    combinations: Counter[str] = Counter()

    for response in responses:
        if response.dietary_options:
            with_dietary += 1
            if len(response.dietary_options) > 1:
                combinations[", ".join(sorted(response.dietary_options))] += 1

        if response.dietary_restrictions and response.dietary_restrictions.strip():
            restrictions[response.dietary_restrictions] += 1

    return DietaryAnalysis(
        total_with_dietary=with_dietary,
        total_without_dietary=len(responses) - with_dietary,
        preferences=count_dietary_options(responses),
        restrictions=dict(restrictions),
        common_combinations=dict(combinations),
    )


def analyze_guest_counts(responses: Sequence[ResponseRecord]) -> GuestAnalysis:
    total_guests = sum(response.guest_count for response in responses)
    solo = sum(1 for response in responses if response.guest_count == 1)

    return GuestAnalysis(
        total_responses=len(responses),
        total_guests=total_guests,
        average_guests_per_response=ratio(total_guests, len(responses)),
        guest_count_distribution=count_guest_counts(responses),
        solo_attendees=solo,
        group_attendees=sum(1 for response in responses if response.guest_count > 1),
        max_group_size=max((response.guest_count for response in responses), default=0),
    )
