"""
Loading and error screens shown while no dataset is available.
"""

import streamlit as st

from movie_dashboard.ui.utils.api_client import reload_dataset

GUIDANCE = {
    "acquisition_failed": (
        "The dataset could not be read. Check that DATASET_SOURCE points to an "
        "existing file or a reachable URL."
    ),
    "empty_dataset": (
        "The dataset was read but contains no valid rows. Every row needs a "
        "user id and a movie title."
    ),
    "not_loaded": "The dataset has not been loaded yet.",
}


def render_error_screen(error: str, message: str) -> None:
    """
    Render a data loading error with a retry button.

    Args:
        error: Failure kind reported by the API
        message: Failure message reported by the API
    """
    st.error("Data Loading Error")
    st.write(message)
    st.info(GUIDANCE.get(error, GUIDANCE["not_loaded"]))
    if st.button("Retry Loading"):
        try:
            with st.spinner("Loading recommendation data..."):
                reload_dataset()
        except Exception as e:
            st.error(f"Reload failed: {e}")
        else:
            st.rerun()
