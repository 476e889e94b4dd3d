"""
Streamlit dashboard that renders the values served by the API.
"""
