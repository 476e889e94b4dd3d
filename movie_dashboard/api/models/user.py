"""
Pydantic schemas for User API.
"""

from pydantic import BaseModel


class UserList(BaseModel):
    """Sorted list of distinct user ids."""

    users: list[str]
    total: int


class UserProfileResponse(BaseModel):
    """Response model for an aggregated user profile."""

    user_id: str
    recommendation_count: int
    average_rating: float
    rated_count: int
    top_genres: list[str]
    location: str | None = None

    class Config:
        from_attributes = True
