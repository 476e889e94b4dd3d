"""
Streamlit main app for the Movie Recommendation Dashboard.

Run: streamlit run movie_dashboard/ui/app.py --server.port 8501
"""

import sys
from pathlib import Path

import streamlit as st

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from movie_dashboard.ui.components.charts import render_genre_chart, render_rating_chart
from movie_dashboard.ui.components.filter_panel import render_filter_panel
from movie_dashboard.ui.components.profile_panel import render_profile_panel
from movie_dashboard.ui.components.recommendation_card import render_recommendation_card
from movie_dashboard.ui.components.status_screens import render_error_screen
from movie_dashboard.ui.utils.api_client import (
    export_recommendations,
    get_dataset_summary,
    get_genres,
    get_recommendations,
    get_user_profile,
    get_users,
    health_check,
)
from movie_dashboard.ui.utils.session_state import (
    get_filter_criteria,
    get_selected_user,
    init_session_state,
)
from movie_dashboard.utils.logging_config import configure_dashboard_logging

st.set_page_config(
    page_title="Movie Recommendation Dashboard",
    page_icon="🎬",
    layout="wide",
    initial_sidebar_state="expanded",
)

configure_dashboard_logging()
init_session_state()

st.title("🎬 AI-Powered Movie Recommendation System")
st.markdown("Discover personalized movie picks from the recommendation model's output.")

# Dataset availability
try:
    with st.spinner("Loading recommendation data..."):
        health = health_check()
except Exception as e:
    st.error(f"API not available: {e}")
    st.info("Start the API with: uvicorn movie_dashboard.api.main:app --host 0.0.0.0 --port 8000")
    st.stop()

if not health.get("dataset_loaded"):
    render_error_screen(health.get("error") or "not_loaded", health.get("message") or "")
    st.stop()

try:
    summary = get_dataset_summary()
    users = get_users()
    genres = get_genres()
except Exception as e:
    st.error(f"Failed to load dataset details: {e}")
    st.stop()

col1, col2, col3, col4 = st.columns(4)
with col1:
    st.metric("Recommendations", f"{summary['total_recommendations']:,}")
with col2:
    st.metric("Users", summary["total_users"])
with col3:
    st.metric("Genres", summary["total_genres"])
with col4:
    st.metric("Avg Rating", f"{summary['average_rating']:.1f}")
st.success(f"Data loaded from {summary['source']} ({summary['total_recommendations']} records)")

with st.sidebar:
    render_filter_panel(users, genres, summary["total_recommendations"])

criteria = get_filter_criteria()

try:
    data = get_recommendations(**criteria)
except Exception as e:
    st.error(f"Failed to load recommendations: {e}")
    st.stop()

recs = data.get("recommendations", [])

with st.sidebar:
    if recs:
        try:
            filename, content = export_recommendations(**criteria)
            st.download_button(
                "Export Filtered Data",
                data=content,
                file_name=filename,
                mime="text/csv",
                use_container_width=True,
            )
        except Exception as e:
            st.error(f"Export failed: {e}")
    else:
        st.button("Export Filtered Data", disabled=True, use_container_width=True)

    selected_user = get_selected_user()
    if selected_user:
        st.divider()
        try:
            render_profile_panel(get_user_profile(selected_user))
        except Exception as e:
            st.error(f"Failed to load profile: {e}")

st.divider()

if recs:
    chart_col1, chart_col2 = st.columns(2)
    with chart_col1:
        render_genre_chart(data.get("genre_distribution", []))
    with chart_col2:
        render_rating_chart(data.get("rating_distribution", []))

    st.subheader(f"Showing {data['n']} of {data['matched']} matching recommendations")
    for r in recs:
        render_recommendation_card(
            movie_title=r["movie_title"],
            user_id=r["user_id"],
            genre=r.get("genre"),
            year=r.get("year"),
            predicted_rating=r.get("predicted_rating"),
            reason=r.get("reason"),
            movie_id=r.get("movie_id", ""),
        )
else:
    st.info("No recommendations match the current filters. Try clearing them.")
