"""
Session state helpers for Streamlit.

Filter selections live in session state; every rerun sends them to the API
as a fresh set of criteria.
"""

import streamlit as st

from movie_dashboard.core.models import ALL_GENRES, DEFAULT_TOP_N

DEFAULT_FILTERS = {
    "selected_user": "",
    "selected_genre": ALL_GENRES,
    "top_n": DEFAULT_TOP_N,
    "search_query": "",
}


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    for key, value in DEFAULT_FILTERS.items():
        if key not in st.session_state:
            st.session_state[key] = value


def clear_filters() -> None:
    """Reset every filter to its default."""
    for key, value in DEFAULT_FILTERS.items():
        st.session_state[key] = value


def get_filter_criteria() -> dict:
    """Current filter selection as keyword arguments for the API client."""
    return {
        "user_id": st.session_state.get("selected_user") or None,
        "genre": st.session_state.get("selected_genre", "all"),
        "search": st.session_state.get("search_query", ""),
        "limit": int(st.session_state.get("top_n", 10)),
    }


def get_selected_user() -> str | None:
    """Get the selected user id, if any."""
    return st.session_state.get("selected_user") or None
