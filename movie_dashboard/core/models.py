"""
Value types shared by the dashboard core.

All types are frozen dataclasses: the record store and everything derived
from it are read-only snapshots.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Optional, Tuple

ALL_GENRES = "all"
DEFAULT_TOP_N = 10
TOP_N_CHOICES = (5, 10, 20, 50, 100)


@dataclass(frozen=True)
class Recommendation:
    """One validated user/movie recommendation row."""

    user_id: str
    movie_title: str
    movie_id: str = ""
    genre: Optional[str] = None
    reason: Optional[str] = None
    predicted_rating: Optional[float] = None
    year: Optional[int] = None
    # Unrecognized columns keyed by their raw header
    extras: Dict[str, str] = field(default_factory=dict, compare=False, hash=False)

    def key(self) -> Tuple:
        """Tuple of the fields preserved by an export round-trip."""
        return (self.user_id, self.movie_title, self.genre, self.predicted_rating, self.year)


@dataclass(frozen=True)
class UserProfile:
    """Aggregate of every recommendation for one user."""

    user_id: str
    recommendation_count: int
    average_rating: float
    top_genres: Tuple[str, ...]
    rated_count: int = 0
    location: Optional[str] = None


@dataclass(frozen=True)
class CountEntry:
    label: str
    count: int


@dataclass(frozen=True)
class FilterCriteria:
    """
    Current filter selection.

    The defaults are the "cleared" state: no user, all genres, empty search
    and a cap of ``DEFAULT_TOP_N``.
    """

    user_id: Optional[str] = None
    genre: str = ALL_GENRES
    search: str = ""
    limit: int = DEFAULT_TOP_N


@dataclass(frozen=True)
class FilterResult:
    """Records selected by a FilterCriteria, in store order."""

    criteria: FilterCriteria
    records: Tuple[Recommendation, ...]
    matched: int

    @property
    def is_empty(self) -> bool:
        return not self.records


@dataclass(frozen=True)
class DatasetSummary:
    total_recommendations: int
    total_users: int
    total_genres: int
    average_rating: float


@dataclass(frozen=True)
class DashboardView:
    """Filtered subset together with the distributions computed over it."""

    result: FilterResult
    genre_distribution: Tuple[CountEntry, ...]
    rating_distribution: Tuple[CountEntry, ...]


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: str
    row_count: int
    exported_on: date
    media_type: str = "text/csv"
