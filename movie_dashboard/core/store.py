"""
Immutable record store for one dashboard session.
"""

from typing import Iterable, Iterator, List, Tuple

from movie_dashboard.core.models import DatasetSummary, Recommendation


def mean_rating(records: Iterable[Recommendation]) -> Tuple[float, int]:
    """
    Mean of the ratings present in ``records``.

    Returns:
        Tuple of (mean, number of rated records); the mean is 0.0 when no
        record carries a rating
    """
    ratings = [r.predicted_rating for r in records if r.predicted_rating is not None]
    if not ratings:
        return 0.0, 0
    return sum(ratings) / len(ratings), len(ratings)


class RecordStore:
    """
    Read-only, ordered collection of validated recommendations.

    Consumers that need a different view (filtering, search) derive a new
    sequence; the store itself never changes after construction.
    """

    def __init__(self, records: Iterable[Recommendation]):
        self._records: Tuple[Recommendation, ...] = tuple(records)

    @property
    def records(self) -> Tuple[Recommendation, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Recommendation]:
        return iter(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def __repr__(self) -> str:
        return f"RecordStore({len(self._records)} records)"

    def user_ids(self) -> List[str]:
        """Distinct user ids, sorted."""
        return sorted({r.user_id for r in self._records})

    def genres(self) -> List[str]:
        """Distinct genres present in the store, sorted."""
        return sorted({r.genre for r in self._records if r.genre})

    def summary(self) -> DatasetSummary:
        """Headline statistics for the whole dataset."""
        average, _ = mean_rating(self._records)
        return DatasetSummary(
            total_recommendations=len(self._records),
            total_users=len(self.user_ids()),
            total_genres=len(self.genres()),
            average_rating=average,
        )
