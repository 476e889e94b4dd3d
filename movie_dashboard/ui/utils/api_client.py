"""
FastAPI client wrapper for Streamlit UI.
"""

import os
import re
from urllib.parse import quote

import requests


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")


def filter_params(
    user_id: str | None = None,
    genre: str = "all",
    search: str = "",
    limit: int = 10,
) -> dict:
    """Query parameters for the filtered endpoints."""
    params = {"genre": genre, "search": search, "limit": limit}
    if user_id:
        params["user_id"] = user_id
    return params


def unavailable_reason(error: requests.HTTPError) -> dict | None:
    """Extract ``{"error", "message"}`` from a 503 dataset response, if it is one."""
    response = error.response
    if response is None or response.status_code != 503:
        return None
    try:
        detail = response.json().get("detail")
    except ValueError:
        return None
    return detail if isinstance(detail, dict) else None


def health_check() -> dict:
    """Check API health and dataset availability."""
    r = requests.get(f"{get_api_base_url()}/api/health", timeout=5)
    r.raise_for_status()
    return r.json()


def get_dataset_summary() -> dict:
    """Get headline statistics of the loaded dataset."""
    r = requests.get(f"{get_api_base_url()}/api/dataset/summary", timeout=10)
    r.raise_for_status()
    return r.json()


def reload_dataset() -> dict:
    """Ask the API to fetch and ingest the dataset again."""
    r = requests.post(f"{get_api_base_url()}/api/dataset/reload", timeout=60)
    r.raise_for_status()
    return r.json()


def get_users() -> list[str]:
    """Get the sorted user ids."""
    r = requests.get(f"{get_api_base_url()}/api/users", timeout=10)
    r.raise_for_status()
    return r.json()["users"]


def get_genres() -> list[str]:
    """Get the sorted genres."""
    r = requests.get(f"{get_api_base_url()}/api/genres", timeout=10)
    r.raise_for_status()
    return r.json()["genres"]


def get_user_profile(user_id: str) -> dict:
    """Get the aggregated profile of a user."""
    r = requests.get(f"{get_api_base_url()}/api/users/{quote(user_id, safe='')}/profile", timeout=10)
    r.raise_for_status()
    return r.json()


def get_recommendations(**criteria) -> dict:
    """Get filtered recommendations with genre and rating distributions."""
    r = requests.get(
        f"{get_api_base_url()}/api/recommendations",
        params=filter_params(**criteria),
        timeout=30,
    )
    r.raise_for_status()
    return r.json()


def export_recommendations(**criteria) -> tuple[str, bytes]:
    """Download the filtered recommendations; returns (filename, csv bytes)."""
    r = requests.get(
        f"{get_api_base_url()}/api/export",
        params=filter_params(**criteria),
        timeout=30,
    )
    r.raise_for_status()
    match = re.search(r'filename="?([^";]+)"?', r.headers.get("Content-Disposition", ""))
    filename = match.group(1) if match else "movie_recommendations_filtered.csv"
    return filename, r.content
