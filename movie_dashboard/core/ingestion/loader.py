"""
Ingestion boundary: raw dataset bytes in, immutable RecordStore out.
"""

import logging
from typing import Union

from movie_dashboard.core.exceptions import AcquisitionError, EmptyDatasetError
from movie_dashboard.core.ingestion.parser import parse_records
from movie_dashboard.core.store import RecordStore

logger = logging.getLogger(__name__)


def decode_dataset(raw: Union[bytes, str], encoding: str = "utf-8") -> str:
    """
    Decode dataset bytes, dropping a leading byte-order mark.

    Raises:
        AcquisitionError: If ``raw`` is not valid in ``encoding``
    """
    if isinstance(raw, bytes):
        # utf-8-sig also strips the BOM some spreadsheet exports prepend
        codec = "utf-8-sig" if encoding.lower() in ("utf-8", "utf8") else encoding
        try:
            return raw.decode(codec)
        except UnicodeDecodeError as e:
            raise AcquisitionError(
                f"Dataset is not valid {encoding} text: byte {e.start} cannot be decoded"
            ) from e
    return raw.lstrip("\ufeff")


def ingest(raw: Union[bytes, str], encoding: str = "utf-8") -> RecordStore:
    """
    Parse and validate a dataset into a RecordStore.

    Each row is accepted or rejected on its own, but the dataset as a whole
    either yields at least one record or fails.

    Args:
        raw: Dataset content as bytes or already decoded text
        encoding: Encoding of ``raw`` when given as bytes

    Returns:
        RecordStore holding the accepted records in input order

    Raises:
        EmptyDatasetError: If no row survives validation
        AcquisitionError: If ``raw`` is not valid in ``encoding``
    """
    report = parse_records(decode_dataset(raw, encoding))

    if report.rejected_rows:
        logger.warning(
            f"Dropped {report.rejected_rows} of {report.total_rows} rows missing user_id or movie_title"
        )

    if not report.records:
        if report.total_rows == 0:
            message = "No valid data found in dataset: no data rows"
        else:
            message = f"No valid data found in dataset: all {report.total_rows} rows were rejected"
        raise EmptyDatasetError(message, total_rows=report.total_rows, rejected_rows=report.rejected_rows)

    logger.info(f"Ingested {report.accepted_rows} recommendations ({report.total_rows} rows read)")
    return RecordStore(report.records)
