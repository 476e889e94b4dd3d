"""
Row parsing and validation.

Turns delimited text into Recommendation records. Numeric fields degrade to
"absent" when they do not parse; rows without a user or a title are
dropped by the validator rather than failing the whole dataset.
"""

import math
import re
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from movie_dashboard.core.ingestion.headers import (
    GENRE,
    MOVIE_ID,
    MOVIE_TITLE,
    PREDICTED_RATING,
    REASON,
    USER_ID,
    YEAR,
    HeaderMapping,
    clean_value,
    map_headers,
)
from movie_dashboard.core.models import Recommendation

logger = logging.getLogger(__name__)

DELIMITER = ","

_DECIMAL = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_INTEGER = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True)
class ParseReport:
    """Outcome of parsing one dataset."""

    records: tuple
    mapping: HeaderMapping
    total_rows: int
    rejected_rows: int

    @property
    def accepted_rows(self) -> int:
        return len(self.records)


def split_line(line: str) -> List[str]:
    """Split a row on the delimiter and clean every value."""
    return [clean_value(value) for value in line.split(DELIMITER)]


def parse_rating(value: str) -> Optional[float]:
    """
    Parse a predicted rating.

    Args:
        value: Cleaned cell value

    Returns:
        Finite float, or None for empty, malformed, NaN or infinite values
    """
    value = value.strip()
    if not _DECIMAL.match(value):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def parse_year(value: str) -> Optional[int]:
    """
    Parse a release year.

    Integral decimals such as ``2010.0`` (what a float column with gaps is
    written as) are accepted as the integer they represent.
    """
    value = value.strip()
    if _INTEGER.match(value):
        return int(value)
    number = parse_rating(value)
    if number is not None and number.is_integer():
        return int(number)
    return None


def build_record(values: Sequence[str], mapping: HeaderMapping) -> Recommendation:
    """
    Build a candidate record from one row of cleaned values.

    Columns missing at the end of a short row read as empty strings. When
    several columns map to the same field, the later column wins.

    Args:
        values: Cleaned cell values in column order
        mapping: Header mapping for the dataset

    Returns:
        Candidate Recommendation (not yet validated)
    """
    def cell(index: int) -> str:
        return values[index] if index < len(values) else ""

    text: Dict[str, str] = {}
    for index, canonical in mapping.fields.items():
        text[canonical] = cell(index)

    extras = {header: cell(index) for index, header in mapping.extensions.items()}

    return Recommendation(
        user_id=text.get(USER_ID, ""),
        movie_title=text.get(MOVIE_TITLE, ""),
        movie_id=text.get(MOVIE_ID, ""),
        genre=text.get(GENRE) or None,
        reason=text.get(REASON) or None,
        predicted_rating=parse_rating(text.get(PREDICTED_RATING, "")),
        year=parse_year(text.get(YEAR, "")),
        extras=extras,
    )


def is_valid(record: Recommendation) -> bool:
    """A record is kept only if it names both a user and a movie title."""
    return bool(record.user_id) and bool(record.movie_title)


def parse_records(text: str) -> ParseReport:
    """
    Parse a whole dataset.

    The first line is the header row. Every following line is a data row,
    blank lines included (they are rejected by the validator).

    Args:
        text: Decoded dataset text

    Returns:
        ParseReport with accepted records in input order
    """
    text = text.strip()
    if not text:
        return ParseReport(records=(), mapping=HeaderMapping(), total_rows=0, rejected_rows=0)

    lines = [line.rstrip("\r") for line in text.split("\n")]
    mapping = map_headers(lines[0].split(DELIMITER))

    accepted = []
    rejected = 0
    for line_number, line in enumerate(lines[1:], start=2):
        candidate = build_record(split_line(line), mapping)
        if is_valid(candidate):
            accepted.append(candidate)
        else:
            rejected += 1
            logger.debug(f"Rejected line {line_number}: missing user_id or movie_title")

    return ParseReport(
        records=tuple(accepted),
        mapping=mapping,
        total_rows=len(lines) - 1,
        rejected_rows=rejected,
    )
