"""
Recommendation display card component.
"""

import streamlit as st


def render_recommendation_card(
    movie_title: str,
    user_id: str,
    genre: str | None = None,
    year: int | None = None,
    predicted_rating: float | None = None,
    reason: str | None = None,
    movie_id: str = "",
) -> None:
    """
    Render one recommendation.

    Args:
        movie_title: Movie title
        user_id: User the movie is recommended to
        genre: Genre, if known
        year: Release year, if known
        predicted_rating: Model's predicted rating, if any
        reason: Model's explanation, if any
        movie_id: Movie identifier (may be empty)
    """
    with st.container():
        col1, col2 = st.columns([3, 1])
        with col1:
            st.markdown(f"**{movie_title}**")
            meta = []
            if year:
                meta.append(str(year))
            if genre:
                meta.append(genre)
            meta.append(f"User {user_id}")
            if movie_id:
                meta.append(f"#{movie_id}")
            st.caption(" | ".join(meta))
            if reason:
                st.write(reason)
        with col2:
            if predicted_rating is not None:
                st.metric("Predicted", f"{predicted_rating:.1f} ★")
        st.divider()
