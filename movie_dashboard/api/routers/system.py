"""
System API endpoints (health, dataset summary, reload).
"""

from fastapi import APIRouter, Depends

from movie_dashboard.api.dependencies import DatasetState, error_kind, get_dataset_state, get_engine
from movie_dashboard.api.models.dataset import DatasetSummaryResponse, HealthResponse
from movie_dashboard.core.engine import DashboardEngine
from movie_dashboard.core.exceptions import DashboardError

router = APIRouter(prefix="/api", tags=["system"])


def _summary_response(engine: DashboardEngine) -> DatasetSummaryResponse:
    summary = engine.summary
    return DatasetSummaryResponse(
        source=engine.source,
        loaded_at=engine.loaded_at,
        total_recommendations=summary.total_recommendations,
        total_users=summary.total_users,
        total_genres=summary.total_genres,
        average_rating=summary.average_rating,
    )


@router.get("/health", response_model=HealthResponse)
def health_check(state: DatasetState = Depends(get_dataset_state)):
    """Health check: whether a dataset is loaded, and why not if it isn't."""
    engine = state.engine
    return HealthResponse(
        status="healthy" if engine is not None else "unhealthy",
        dataset_loaded=engine is not None,
        source=state.source,
        records=len(engine.store) if engine is not None else 0,
        error=error_kind(state.error) if state.error else None,
        message=str(state.error) if state.error else None,
    )


@router.get("/dataset/summary", response_model=DatasetSummaryResponse)
def dataset_summary(engine: DashboardEngine = Depends(get_engine)):
    """Headline statistics of the loaded dataset."""
    return _summary_response(engine)


@router.post("/dataset/reload", response_model=DatasetSummaryResponse)
def reload_dataset(state: DatasetState = Depends(get_dataset_state)):
    """Fetch and ingest the dataset again from the configured source."""
    try:
        engine = state.load()
    except DashboardError:
        raise state.unavailable()
    return _summary_response(engine)
