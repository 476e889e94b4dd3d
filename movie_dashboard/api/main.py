"""
FastAPI application entry point for the Movie Recommendation Dashboard API.

Run: uvicorn movie_dashboard.api.main:app --host 0.0.0.0 --port 8000
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movie_dashboard.api.config import get_api_host, get_api_port, get_log_level
from movie_dashboard.api.routers import records, recommendations, system, users
from movie_dashboard.utils.logging_config import configure_api_logging

app = FastAPI(
    title="Movie Recommendation Dashboard API",
    description="Read-only REST API for browsing, filtering and exporting model recommendations",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(system.router)
app.include_router(records.router)
app.include_router(users.router)
app.include_router(recommendations.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Recommendation Dashboard API",
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    configure_api_logging(level=get_log_level())
    uvicorn.run(app, host=get_api_host(), port=get_api_port())
