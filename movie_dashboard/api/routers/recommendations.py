"""
Filtered recommendation endpoints (view and export).
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from movie_dashboard.api.dependencies import get_engine, get_filter_criteria
from movie_dashboard.api.models.distribution import GenreCount, RatingBucketCount
from movie_dashboard.api.models.recommendation import (
    FilterApplied,
    FilteredRecommendations,
    RecommendationItem,
)
from movie_dashboard.core.distributions import genre_color
from movie_dashboard.core.engine import DashboardEngine
from movie_dashboard.core.models import FilterCriteria

router = APIRouter(prefix="/api", tags=["recommendations"])


@router.get("/recommendations", response_model=FilteredRecommendations)
def get_recommendations(
    criteria: FilterCriteria = Depends(get_filter_criteria),
    engine: DashboardEngine = Depends(get_engine),
):
    """Filter by user, genre and title search, then cap; with distributions."""
    view = engine.view(criteria)
    items = [RecommendationItem.model_validate(r) for r in view.result.records]
    return FilteredRecommendations(
        criteria=FilterApplied.model_validate(criteria),
        recommendations=items,
        n=len(items),
        matched=view.result.matched,
        genre_distribution=[
            GenreCount(genre=e.label, count=e.count, fill=genre_color(e.label))
            for e in view.genre_distribution
        ],
        rating_distribution=[
            RatingBucketCount(range=e.label, count=e.count) for e in view.rating_distribution
        ],
    )


@router.get("/export")
def export_recommendations(
    criteria: FilterCriteria = Depends(get_filter_criteria),
    engine: DashboardEngine = Depends(get_engine),
):
    """Download the filtered recommendations as a date-stamped CSV file."""
    export = engine.export(criteria)
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{export.filename}"',
            "X-Row-Count": str(export.row_count),
        },
    )
