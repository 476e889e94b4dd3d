"""
FastAPI dependency injection for the loaded dataset and filter criteria.
"""

import logging
from datetime import datetime, timezone

from fastapi import Depends, HTTPException, Query

from movie_dashboard.api.config import get_dataset_source, get_dataset_timeout, get_default_top_n
from movie_dashboard.core.engine import DashboardEngine
from movie_dashboard.core.exceptions import AcquisitionError, DashboardError, EmptyDatasetError
from movie_dashboard.core.models import ALL_GENRES, FilterCriteria
from movie_dashboard.data.source import load_engine

logger = logging.getLogger(__name__)

ERROR_ACQUISITION = "acquisition_failed"
ERROR_EMPTY_DATASET = "empty_dataset"
ERROR_NOT_LOADED = "not_loaded"


def error_kind(error: DashboardError | None) -> str:
    """Classify a load failure so clients can give matching guidance."""
    if isinstance(error, AcquisitionError):
        return ERROR_ACQUISITION
    if isinstance(error, EmptyDatasetError):
        return ERROR_EMPTY_DATASET
    return ERROR_NOT_LOADED


class DatasetState:
    """
    Holds the session's engine and the outcome of the last load attempt.

    A failed reload keeps the previously loaded engine; the error is still
    recorded so it can be reported.
    """

    def __init__(self, source: str, timeout: float = 10):
        self.source = source
        self.timeout = timeout
        self.engine: DashboardEngine | None = None
        self.error: DashboardError | None = None
        self.attempted_at: datetime | None = None

    def load(self) -> DashboardEngine:
        """Fetch and ingest the dataset; raises the load failure unchanged."""
        self.attempted_at = datetime.now(timezone.utc)
        try:
            engine = load_engine(self.source, timeout=self.timeout)
        except DashboardError as e:
            logger.error("Dataset load failed (%s): %s", error_kind(e), e)
            self.error = e
            raise
        self.engine = engine
        self.error = None
        return engine

    def unavailable(self) -> HTTPException:
        """503 describing why no dataset is available."""
        message = str(self.error) if self.error else "Dataset has not been loaded"
        return HTTPException(
            status_code=503,
            detail={"error": error_kind(self.error), "message": message},
        )


# Singleton dataset state
_dataset_state: DatasetState | None = None


def get_dataset_state() -> DatasetState:
    """Get or create the singleton DatasetState, loading on first use."""
    global _dataset_state
    if _dataset_state is None:
        _dataset_state = DatasetState(get_dataset_source(), timeout=get_dataset_timeout())
        try:
            _dataset_state.load()
        except DashboardError:
            # Reported by /api/health and as 503 on data endpoints
            pass
    return _dataset_state


def get_engine(state: DatasetState = Depends(get_dataset_state)) -> DashboardEngine:
    """Loaded engine for data endpoints; 503 if none is available."""
    if state.engine is None:
        raise state.unavailable()
    return state.engine


def get_filter_criteria(
    user_id: str | None = Query(None, description="Exact user id; empty selects every user"),
    genre: str = Query(ALL_GENRES, description="Genre, or 'all' for no genre filter"),
    search: str = Query("", description="Case-insensitive substring of the movie title"),
    limit: int | None = Query(None, description="Result cap; zero or negative returns nothing"),
) -> FilterCriteria:
    """Build FilterCriteria from query parameters."""
    return FilterCriteria(
        user_id=user_id or None,
        genre=genre or ALL_GENRES,
        search=search,
        limit=get_default_top_n() if limit is None else limit,
    )
