"""
Pydantic schemas for API request/response validation.
"""

from movie_dashboard.api.models.dataset import DatasetSummaryResponse, GenreList, HealthResponse
from movie_dashboard.api.models.distribution import GenreCount, RatingBucketCount
from movie_dashboard.api.models.recommendation import (
    FilterApplied,
    FilteredRecommendations,
    RecommendationItem,
    RecommendationList,
)
from movie_dashboard.api.models.user import UserList, UserProfileResponse

__all__ = [
    "DatasetSummaryResponse",
    "GenreList",
    "HealthResponse",
    "GenreCount",
    "RatingBucketCount",
    "FilterApplied",
    "FilteredRecommendations",
    "RecommendationItem",
    "RecommendationList",
    "UserList",
    "UserProfileResponse",
]
