"""
Per-user profile aggregation.

Profiles are a pure function of the record store: the same records always
produce the same profiles, in the same order.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from movie_dashboard.core.models import CountEntry, Recommendation, UserProfile
from movie_dashboard.core.store import mean_rating

logger = logging.getLogger(__name__)

TOP_GENRE_COUNT = 3


def count_genres(records: Iterable[Recommendation]) -> Tuple[CountEntry, ...]:
    """
    Count records per genre in first-encounter order.

    Records without a genre are skipped.

    Args:
        records: Records to count

    Returns:
        Tuple of CountEntry, one per genre, ordered by first appearance
    """
    order: List[str] = []
    counts: Dict[str, int] = {}
    for record in records:
        if not record.genre:
            continue
        if record.genre not in counts:
            order.append(record.genre)
            counts[record.genre] = 0
        counts[record.genre] += 1
    return tuple(CountEntry(label=genre, count=counts[genre]) for genre in order)


def top_genres(counts: Sequence[CountEntry], n: int = TOP_GENRE_COUNT) -> Tuple[str, ...]:
    """
    Most frequent genres, highest count first.

    ``sorted`` is stable, so genres with equal counts keep their
    first-encounter order instead of being re-ordered alphabetically.
    """
    ranked = sorted(counts, key=lambda entry: entry.count, reverse=True)
    return tuple(entry.label for entry in ranked[:n])


def placeholder_location(user_id: str) -> str:
    """Display location derived from the user id."""
    return f"Location {user_id[-3:]}"


def build_user_profile(user_id: str, records: Sequence[Recommendation]) -> UserProfile:
    """
    Aggregate one user's records.

    Args:
        user_id: User identifier
        records: That user's records in store order

    Returns:
        UserProfile for the user
    """
    average, rated = mean_rating(records)
    return UserProfile(
        user_id=user_id,
        recommendation_count=len(records),
        average_rating=average,
        top_genres=top_genres(count_genres(records)),
        rated_count=rated,
        location=placeholder_location(user_id),
    )


def group_by_user(records: Iterable[Recommendation]) -> Dict[str, List[Recommendation]]:
    """Group records by user, keeping store order within and across groups."""
    groups: Dict[str, List[Recommendation]] = {}
    for record in records:
        groups.setdefault(record.user_id, []).append(record)
    return groups


def build_user_profiles(records: Iterable[Recommendation]) -> Dict[str, UserProfile]:
    """
    Build a profile for every distinct user.

    Args:
        records: Every record in the store

    Returns:
        Dictionary mapping user_id -> UserProfile, keyed in order of each
        user's first record
    """
    profiles = {
        user_id: build_user_profile(user_id, user_records)
        for user_id, user_records in group_by_user(records).items()
    }
    logger.debug(f"Built {len(profiles)} user profiles")
    return profiles


def get_profile(profiles: Dict[str, UserProfile], user_id: Optional[str]) -> Optional[UserProfile]:
    """Profile for ``user_id``, or None when no user is selected or known."""
    if not user_id:
        return None
    return profiles.get(user_id)
