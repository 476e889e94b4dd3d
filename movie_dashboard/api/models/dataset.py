"""
Pydantic schemas for dataset and system endpoints.
"""

from datetime import datetime

from pydantic import BaseModel


class DatasetSummaryResponse(BaseModel):
    """Headline statistics of the loaded dataset."""

    source: str | None
    loaded_at: datetime | None
    total_recommendations: int
    total_users: int
    total_genres: int
    average_rating: float


class GenreList(BaseModel):
    genres: list[str]
    total: int


class HealthResponse(BaseModel):
    """Dataset availability and the last load failure, if any."""

    status: str
    dataset_loaded: bool
    source: str
    records: int
    error: str | None = None
    message: str | None = None
