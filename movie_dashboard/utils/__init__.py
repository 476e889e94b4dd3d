"""
Shared utilities package.

This package contains the logging configuration used by the API,
the dashboard and the maintenance scripts.
"""

from movie_dashboard.utils.logging_config import setup_logging, get_logger

__all__ = ['setup_logging', 'get_logger']
