"""
Dataset ingestion package.

Header normalization, row parsing and validation, and the ingestion
boundary that turns raw bytes into a RecordStore.
"""

from movie_dashboard.core.ingestion.headers import map_headers, normalize_header
from movie_dashboard.core.ingestion.loader import ingest
from movie_dashboard.core.ingestion.parser import parse_records

__all__ = ['map_headers', 'normalize_header', 'parse_records', 'ingest']
