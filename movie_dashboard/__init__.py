"""
Movie Recommendation Dashboard package.

This package contains the dataset ingestion core, the dataset source
adapter, the REST API, the Streamlit dashboard, and shared utilities.
"""

__version__ = "1.0.0"
