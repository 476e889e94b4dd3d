"""
Genre and rating distribution charts.
"""

import pandas as pd
import plotly.express as px
import streamlit as st


def genre_frame(distribution: list[dict]) -> pd.DataFrame:
    """DataFrame with genre, count and fill columns, in API order."""
    return pd.DataFrame(distribution, columns=["genre", "count", "fill"])


def rating_frame(distribution: list[dict]) -> pd.DataFrame:
    """DataFrame with range and count columns, in bucket order."""
    return pd.DataFrame(distribution, columns=["range", "count"])


def render_genre_chart(distribution: list[dict]) -> None:
    """Pie chart of recommendations per genre."""
    df = genre_frame(distribution)
    if df.empty:
        st.caption("No genre information in the current selection.")
        return
    fig = px.pie(
        df,
        names="genre",
        values="count",
        color="genre",
        color_discrete_map=dict(zip(df["genre"], df["fill"])),
        title="Genre Distribution",
    )
    st.plotly_chart(fig, use_container_width=True)


def render_rating_chart(distribution: list[dict]) -> None:
    """Bar chart of recommendations per predicted-rating bucket."""
    df = rating_frame(distribution)
    if df.empty:
        st.caption("No predicted ratings in the current selection.")
        return
    fig = px.bar(
        df,
        x="range",
        y="count",
        title="Rating Distribution",
        labels={"range": "Predicted rating", "count": "Movies"},
    )
    fig.update_xaxes(categoryorder="array", categoryarray=list(df["range"]))
    st.plotly_chart(fig, use_container_width=True)
