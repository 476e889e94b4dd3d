"""
Dataset source adapters.

Acquires the raw dataset bytes from a local file or an HTTP(S) URL.
"""

from movie_dashboard.data.source import fetch_dataset, load_engine

__all__ = ['fetch_dataset', 'load_engine']
