"""
Sidebar filter panel component.
"""

import streamlit as st

from movie_dashboard.core.models import ALL_GENRES, TOP_N_CHOICES
from movie_dashboard.ui.utils.session_state import clear_filters


def render_filter_panel(users: list[str], genres: list[str], total: int) -> None:
    """
    Render the filter widgets; selections are stored in session state.

    Args:
        users: Sorted user ids
        genres: Sorted genres
        total: Number of recommendations in the dataset
    """
    st.header("Filters")
    st.caption(f"{total:,} total recommendations")

    st.selectbox(
        f"Select User ({len(users)} users)",
        options=[""] + users,
        format_func=lambda u: u or "Choose a user...",
        key="selected_user",
    )
    st.selectbox(
        f"Genre Filter ({len(genres)} genres)",
        options=[ALL_GENRES] + genres,
        format_func=lambda g: "All Genres" if g == ALL_GENRES else g,
        key="selected_genre",
    )
    st.selectbox(
        "Top N Movies",
        options=list(TOP_N_CHOICES),
        format_func=lambda n: f"Top {n}",
        key="top_n",
    )
    st.text_input("Search Movies", placeholder="Search movie titles...", key="search_query")
    st.button("Clear Filters", on_click=clear_filters, use_container_width=True)
