"""
Dataset acquisition from a file path or an HTTP(S) URL.

The core never performs I/O; this module supplies it with bytes and turns
every acquisition failure into an AcquisitionError.
"""

import logging
from pathlib import Path

import requests

from movie_dashboard.core.engine import DashboardEngine
from movie_dashboard.core.exceptions import AcquisitionError

logger = logging.getLogger(__name__)


def is_url(location: str) -> bool:
    return location.lower().startswith(("http://", "https://"))


def _fetch_url(url: str, timeout: float) -> bytes:
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        reason = e.response.reason if e.response is not None else ""
        raise AcquisitionError(
            f"Failed to load dataset: {status} {reason}".strip(), source=url, status_code=status
        ) from e
    except requests.RequestException as e:
        raise AcquisitionError(f"Failed to load dataset: {e}", source=url) from e
    return r.content


def _read_file(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except FileNotFoundError as e:
        raise AcquisitionError(f"Dataset file not found: {path}", source=str(path)) from e
    except OSError as e:
        raise AcquisitionError(f"Failed to read dataset file {path}: {e}", source=str(path)) from e


def fetch_dataset(location: str, timeout: float = 10) -> bytes:
    """
    Read the raw dataset.

    No retry is attempted; retrying means calling this function again.

    Args:
        location: ``http(s)://`` URL or filesystem path
        timeout: Request timeout in seconds (URLs only)

    Returns:
        Dataset bytes

    Raises:
        AcquisitionError: If the dataset cannot be obtained
    """
    logger.info(f"Fetching dataset from {location}")
    if is_url(location):
        return _fetch_url(location, timeout)
    return _read_file(Path(location))


def load_engine(location: str, timeout: float = 10) -> DashboardEngine:
    """
    Fetch a dataset and load it into a new DashboardEngine.

    Raises:
        AcquisitionError: If the dataset cannot be obtained
        EmptyDatasetError: If the dataset holds no valid rows
    """
    raw = fetch_dataset(location, timeout=timeout)
    engine = DashboardEngine(source=location)
    engine.load(raw)
    return engine
