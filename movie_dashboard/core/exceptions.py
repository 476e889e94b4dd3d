"""
Exceptions raised by the dashboard core.

Only the ingestion boundary raises. Filtering, aggregation, distributions
and export operate on an already validated store and never fail.
"""


class DashboardError(Exception):
    pass


class AcquisitionError(DashboardError):
    """The dataset byte stream could not be obtained."""

    def __init__(self, message: str, source: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.source = source
        self.status_code = status_code


class EmptyDatasetError(DashboardError):
    """Ingestion accepted zero records."""

    def __init__(self, message: str = "No valid data found in dataset", total_rows: int = 0, rejected_rows: int = 0):
        super().__init__(message)
        self.total_rows = total_rows
        self.rejected_rows = rejected_rows


class DatasetNotLoadedError(DashboardError):
    pass
