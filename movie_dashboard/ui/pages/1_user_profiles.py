"""
User profiles page - aggregated profile and recommendations per user.
"""

import streamlit as st
import sys
from pathlib import Path

import pandas as pd

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from movie_dashboard.ui.components.profile_panel import render_profile_panel
from movie_dashboard.ui.utils.api_client import get_recommendations, get_user_profile, get_users
from movie_dashboard.ui.utils.session_state import init_session_state

init_session_state()
st.title("👤 User Profiles")

try:
    users = get_users()
except Exception as e:
    st.error(f"Failed to load users: {e}")
    st.info("Make sure the API is running and the dataset is loaded.")
    st.stop()

if not users:
    st.info("No users in the dataset.")
    st.stop()

current = st.session_state.get("selected_user")
user_id = st.selectbox(
    "User",
    options=users,
    index=users.index(current) if current in users else 0,
)

try:
    render_profile_panel(get_user_profile(user_id))
    data = get_recommendations(user_id=user_id, limit=100)
except Exception as e:
    st.error(f"Failed to load profile: {e}")
    st.stop()

st.subheader("Recommendations")
recs = data.get("recommendations", [])
if recs:
    df = pd.DataFrame(recs)[["movie_title", "genre", "predicted_rating", "year", "reason"]]
    st.dataframe(df, use_container_width=True, hide_index=True)
    if data["matched"] > len(recs):
        st.caption(f"... and {data['matched'] - len(recs)} more")
else:
    st.info("No recommendations for this user.")

if st.button("Show on dashboard"):
    st.session_state["selected_user"] = user_id
    st.switch_page("app.py")
