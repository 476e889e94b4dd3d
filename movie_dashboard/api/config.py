"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

from movie_dashboard.core.models import DEFAULT_TOP_N


def get_dataset_source() -> str:
    """Get dataset location (file path or http(s) URL) from env or default."""
    return os.getenv("DATASET_SOURCE", "") or str(
        Path(__file__).resolve().parents[2] / "data" / "final_model_output.csv"
    )


def get_dataset_timeout() -> float:
    """Get dataset download timeout in seconds."""
    return float(os.getenv("DATASET_TIMEOUT", "10"))


def get_default_top_n() -> int:
    """Get the result cap used when a request does not give one."""
    return int(os.getenv("DEFAULT_TOP_N", str(DEFAULT_TOP_N)))


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))
