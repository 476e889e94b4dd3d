"""
User profile panel component.
"""

import streamlit as st


def render_profile_panel(profile: dict) -> None:
    """Render an aggregated user profile."""
    st.subheader("User Profile")
    col1, col2 = st.columns(2)
    with col1:
        st.metric("User ID", profile["user_id"])
        st.metric("Recommendations", profile["recommendation_count"])
    with col2:
        if profile["average_rating"] > 0:
            st.metric("Avg Rating", f"{profile['average_rating']:.1f} ★")
        if profile.get("location"):
            st.metric("Location", profile["location"])
    if profile["top_genres"]:
        st.markdown("**Top Genres:** " + ", ".join(profile["top_genres"]))
