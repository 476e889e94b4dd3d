"""
Pydantic schemas for Recommendation API.
"""

from pydantic import BaseModel

from movie_dashboard.api.models.distribution import GenreCount, RatingBucketCount


class RecommendationItem(BaseModel):
    """Single recommendation row."""

    user_id: str
    movie_id: str
    movie_title: str
    genre: str | None
    reason: str | None
    predicted_rating: float | None
    year: int | None

    class Config:
        from_attributes = True


class RecommendationList(BaseModel):
    """Page of the full, unfiltered record list."""

    recommendations: list[RecommendationItem]
    total: int
    skip: int
    limit: int


class FilterApplied(BaseModel):
    """Echo of the criteria a response was computed with."""

    user_id: str | None
    genre: str
    search: str
    limit: int

    class Config:
        from_attributes = True


class FilteredRecommendations(BaseModel):
    """Filtered, capped recommendations with distributions over them."""

    criteria: FilterApplied
    recommendations: list[RecommendationItem]
    n: int
    matched: int
    genre_distribution: list[GenreCount]
    rating_distribution: list[RatingBucketCount]
