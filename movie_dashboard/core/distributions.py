"""
Genre and rating distributions over a filtered subset.

Both summaries are ordered tuples of CountEntry and omit empty categories.
"""

from typing import Iterable, Sequence, Tuple

from movie_dashboard.core.models import CountEntry, Recommendation
from movie_dashboard.core.profiles import count_genres

# (label, lower bound, upper bound), both bounds inclusive, evaluated in order
RATING_BUCKETS: Tuple[Tuple[str, float, float], ...] = (
    ("4.5-5.0", 4.5, 5.0),
    ("4.0-4.4", 4.0, 4.4),
    ("3.5-3.9", 3.5, 3.9),
    ("3.0-3.4", 3.0, 3.4),
    ("Below 3.0", 0.0, 2.9),
)

DEFAULT_GENRE_COLOR = "#64748b"

GENRE_COLORS = {
    "Sci-Fi": "#8b5cf6",
    "Action": "#ef4444",
    "Romance": "#ec4899",
    "Comedy": "#f59e0b",
    "Drama": "#06b6d4",
    "Thriller": "#64748b",
    "Horror": "#dc2626",
    "Adventure": "#059669",
    "Animation": "#7c3aed",
    "Documentary": "#0891b2",
    "Fantasy": "#c026d3",
    "Mystery": "#4338ca",
    "Crime": "#dc2626",
    "Family": "#10b981",
    "Musical": "#f59e0b",
    "Western": "#92400e",
    "War": "#374151",
    "Biography": "#6b7280",
    "History": "#78716c",
    "Sport": "#16a34a",
}


def genre_color(genre: str) -> str:
    """Chart colour for a genre."""
    return GENRE_COLORS.get(genre, DEFAULT_GENRE_COLOR)


def genre_distribution(records: Iterable[Recommendation]) -> Tuple[CountEntry, ...]:
    """Records per genre, in first-encounter order within ``records``."""
    return count_genres(records)


def rating_distribution(records: Sequence[Recommendation]) -> Tuple[CountEntry, ...]:
    """
    Records per predicted-rating bucket.

    Records without a rating are excluded. A rating that falls between two
    buckets' bounds (e.g. 4.45) is counted in none of them.

    Args:
        records: Filtered subset

    Returns:
        Non-empty buckets in RATING_BUCKETS order
    """
    ratings = [r.predicted_rating for r in records if r.predicted_rating is not None]

    distribution = []
    for label, low, high in RATING_BUCKETS:
        count = sum(1 for rating in ratings if low <= rating <= high)
        if count > 0:
            distribution.append(CountEntry(label=label, count=count))
    return tuple(distribution)
