"""
Record and genre listing endpoints.
"""

from fastapi import APIRouter, Depends, Query

from movie_dashboard.api.dependencies import get_engine
from movie_dashboard.api.models.dataset import GenreList
from movie_dashboard.api.models.recommendation import RecommendationItem, RecommendationList
from movie_dashboard.core.engine import DashboardEngine

router = APIRouter(prefix="/api", tags=["records"])


@router.get("/records", response_model=RecommendationList)
def list_records(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    engine: DashboardEngine = Depends(get_engine),
):
    """List every loaded recommendation in dataset order, with pagination."""
    records = engine.store.records
    return RecommendationList(
        recommendations=[RecommendationItem.model_validate(r) for r in records[skip:skip + limit]],
        total=len(records),
        skip=skip,
        limit=limit,
    )


@router.get("/genres", response_model=GenreList)
def list_genres(engine: DashboardEngine = Depends(get_engine)):
    """Distinct genres in the dataset, sorted."""
    genres = engine.genres()
    return GenreList(genres=genres, total=len(genres))
