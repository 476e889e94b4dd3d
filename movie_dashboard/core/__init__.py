"""
Dashboard core: ingestion, profiles, filtering, distributions and export.

This package contains:
- Header normalization and row parsing/validation
- The immutable record store
- Per-user profile aggregation
- Filter engine and distribution calculator
- CSV exporter
- The DashboardEngine orchestrator
"""

from movie_dashboard.core.engine import DashboardEngine
from movie_dashboard.core.exceptions import (
    AcquisitionError,
    DashboardError,
    DatasetNotLoadedError,
    EmptyDatasetError,
)
from movie_dashboard.core.ingestion import ingest
from movie_dashboard.core.models import FilterCriteria, Recommendation, UserProfile
from movie_dashboard.core.store import RecordStore

__all__ = [
    'DashboardEngine',
    'DashboardError',
    'AcquisitionError',
    'EmptyDatasetError',
    'DatasetNotLoadedError',
    'FilterCriteria',
    'Recommendation',
    'UserProfile',
    'RecordStore',
    'ingest',
]
