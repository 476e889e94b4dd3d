"""
Pydantic schemas for chart distributions.
"""

from pydantic import BaseModel


class GenreCount(BaseModel):
    """Records per genre, with the chart colour for the genre."""

    genre: str
    count: int
    fill: str


class RatingBucketCount(BaseModel):
    """Records per predicted-rating bucket."""

    range: str
    count: int
