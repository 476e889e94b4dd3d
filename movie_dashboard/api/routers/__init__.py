"""
API route handlers.
"""

from movie_dashboard.api.routers import records, recommendations, system, users

__all__ = ["records", "recommendations", "system", "users"]
