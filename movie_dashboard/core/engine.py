"""
Dashboard engine orchestrator.

Combines ingestion, profile aggregation, filtering, distributions and
export into the high-level interface used by the API.
"""

import logging
from datetime import date, datetime, timezone
from typing import Dict, List, Optional, Union

from movie_dashboard.core.distributions import genre_distribution, rating_distribution
from movie_dashboard.core.exceptions import DatasetNotLoadedError
from movie_dashboard.core.export import build_export
from movie_dashboard.core.filtering import apply_filters
from movie_dashboard.core.ingestion.loader import ingest
from movie_dashboard.core.models import (
    DashboardView,
    DatasetSummary,
    ExportFile,
    FilterCriteria,
    UserProfile,
)
from movie_dashboard.core.profiles import build_user_profiles, get_profile
from movie_dashboard.core.store import RecordStore

logger = logging.getLogger(__name__)


class DashboardEngine:
    """
    High-level interface over one loaded recommendation dataset.

    This class orchestrates:
    - Ingestion of the raw dataset into an immutable RecordStore
    - Profile and summary computation (once per load)
    - Filtered views with their distributions (on every call)
    - Export of filtered subsets

    Nothing is recomputed implicitly: callers ask for a new view whenever
    their criteria change.

    Usage:
        engine = DashboardEngine(source="data/final_model_output.csv")
        engine.load(raw_bytes)
        view = engine.view(FilterCriteria(genre="Sci-Fi", search="mat"))
    """

    def __init__(self, source: Optional[str] = None):
        """
        Initialize an empty engine.

        Args:
            source: Description of where the dataset came from (for display)
        """
        self.source = source

        self.store: Optional[RecordStore] = None
        self.profiles: Dict[str, UserProfile] = {}
        self.summary: Optional[DatasetSummary] = None
        self.loaded_at: Optional[datetime] = None

    @property
    def is_loaded(self) -> bool:
        return self.store is not None

    def load(self, raw: Union[bytes, str]) -> DatasetSummary:
        """
        Ingest a dataset and derive profiles and summary.

        State is only replaced once ingestion succeeds; a failed load leaves
        the engine as it was.

        Args:
            raw: Dataset content

        Returns:
            DatasetSummary of the new store

        Raises:
            EmptyDatasetError: If no row survives validation
        """
        logger.info(f"Loading dataset from {self.source or 'memory'}...")

        store = ingest(raw)
        profiles = build_user_profiles(store)
        summary = store.summary()

        self.store = store
        self.profiles = profiles
        self.summary = summary
        self.loaded_at = datetime.now(timezone.utc)

        logger.info(
            f"Dataset loaded: {summary.total_recommendations} recommendations, "
            f"{summary.total_users} users, {summary.total_genres} genres"
        )
        return summary

    def _require_store(self) -> RecordStore:
        if self.store is None:
            raise DatasetNotLoadedError("Dataset must be loaded first. Call load().")
        return self.store

    def user_ids(self) -> List[str]:
        return self._require_store().user_ids()

    def genres(self) -> List[str]:
        return self._require_store().genres()

    def profile(self, user_id: Optional[str]) -> Optional[UserProfile]:
        """Profile of ``user_id``, or None if no such user."""
        self._require_store()
        return get_profile(self.profiles, user_id)

    def view(self, criteria: Optional[FilterCriteria] = None) -> DashboardView:
        """
        Filter the store and summarize the result.

        Args:
            criteria: Filter selection (default: cleared filters)

        Returns:
            DashboardView with the filtered subset and its genre and rating
            distributions
        """
        store = self._require_store()
        result = apply_filters(store, criteria or FilterCriteria())
        return DashboardView(
            result=result,
            genre_distribution=genre_distribution(result.records),
            rating_distribution=rating_distribution(result.records),
        )

    def export(self, criteria: Optional[FilterCriteria] = None, day: Optional[date] = None) -> ExportFile:
        """
        Export the subset selected by ``criteria``.

        Args:
            criteria: Filter selection (default: cleared filters)
            day: Date stamped into the filename (default: today)

        Returns:
            ExportFile ready for download
        """
        store = self._require_store()
        result = apply_filters(store, criteria or FilterCriteria())
        export = build_export(result.records, day=day)
        logger.info(f"Exported {export.row_count} recommendations to {export.filename}")
        return export
