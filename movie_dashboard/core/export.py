"""
Export of a record subset back to delimited text.

The output uses header names the ingestion alias table recognizes, so an
exported file can be loaded again as a dataset.
"""

from datetime import date, datetime, timezone
from typing import Iterable, List, Optional, Sequence

from movie_dashboard.core.models import ExportFile, Recommendation

EXPORT_HEADER = ("User ID", "Movie ID", "Movie Title", "Genre", "Reason", "Predicted Rating", "Year")
EXPORT_PREFIX = "movie_recommendations_filtered"


def _text(value) -> str:
    return "" if value is None else str(value)


def export_row(record: Recommendation) -> List[str]:
    """Cell values of one record, in EXPORT_HEADER order."""
    return [
        record.user_id,
        record.movie_id,
        record.movie_title,
        _text(record.genre),
        _text(record.reason),
        _text(record.predicted_rating),
        _text(record.year),
    ]


def _quote_row(cells: Sequence[str]) -> str:
    return ",".join(f'"{cell}"' for cell in cells)


def export_csv(records: Iterable[Recommendation]) -> str:
    """
    Serialize records to quoted CSV text.

    Args:
        records: Records in the order they should be written

    Returns:
        CSV text: the fixed header row, then one row per record, every
        field wrapped in double quotes
    """
    lines = [_quote_row(EXPORT_HEADER)]
    lines.extend(_quote_row(export_row(record)) for record in records)
    return "\n".join(lines)


def export_filename(day: date) -> str:
    return f"{EXPORT_PREFIX}_{day.isoformat()}.csv"


def build_export(records: Sequence[Recommendation], day: Optional[date] = None) -> ExportFile:
    """
    Package an export for download.

    Args:
        records: Subset to export
        day: Date stamped into the filename (default: today, UTC)

    Returns:
        ExportFile with filename and CSV content
    """
    day = day or datetime.now(timezone.utc).date()
    records = tuple(records)
    return ExportFile(
        filename=export_filename(day),
        content=export_csv(records),
        row_count=len(records),
        exported_on=day,
    )
