"""
Header normalization for recommendation datasets.

Model outputs name their columns inconsistently (``userId``, ``User ID``,
``recommended_movie_title``, ``score`` ...). This module maps every raw
header onto the canonical record fields using a fixed alias table.
"""

import re
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

logger = logging.getLogger(__name__)

USER_ID = "user_id"
MOVIE_ID = "movie_id"
MOVIE_TITLE = "movie_title"
GENRE = "genre"
REASON = "reason"
PREDICTED_RATING = "predicted_rating"
YEAR = "year"

CANONICAL_FIELDS = (USER_ID, MOVIE_ID, MOVIE_TITLE, GENRE, REASON, PREDICTED_RATING, YEAR)

HEADER_ALIASES: Dict[str, tuple] = {
    USER_ID: ("user_id", "userid", "user"),
    MOVIE_ID: ("recommended_movie_id", "movie_id", "movieid", "id"),
    MOVIE_TITLE: ("recommended_movie_title", "movie_title", "title", "movie"),
    GENRE: ("genre", "genres", "category"),
    REASON: ("reason", "recommendation_reason", "explanation"),
    PREDICTED_RATING: ("predicted_rating", "rating", "score", "prediction"),
    YEAR: ("year", "release_year", "movie_year"),
}

_SEPARATORS = re.compile(r"[\s_\-]+")


def clean_value(raw: str) -> str:
    """Trim surrounding whitespace and drop double-quote characters."""
    return raw.strip().replace('"', "")


def _match_key(name: str) -> str:
    return _SEPARATORS.sub("", name.lower())


_ALIAS_LOOKUP: Dict[str, str] = {
    _match_key(alias): canonical
    for canonical, aliases in HEADER_ALIASES.items()
    for alias in aliases
}


def normalize_header(raw: str) -> Optional[str]:
    """
    Resolve a raw column name to its canonical field.

    Matching ignores case, surrounding quotes and whitespace, and the
    separators ``_``, ``-`` and spaces, so ``UserID``, ``user_id`` and
    ``User ID`` all resolve to ``user_id``.

    Args:
        raw: Column name as read from the header row

    Returns:
        Canonical field name, or None if the header is not recognized
    """
    return _ALIAS_LOOKUP.get(_match_key(clean_value(raw)))


@dataclass(frozen=True)
class HeaderMapping:
    """Column position -> canonical field, plus out-of-band extension columns."""

    fields: Dict[int, str] = field(default_factory=dict)
    extensions: Dict[int, str] = field(default_factory=dict)

    @property
    def missing_fields(self) -> tuple:
        mapped = set(self.fields.values())
        return tuple(name for name in CANONICAL_FIELDS if name not in mapped)


def map_headers(headers: Iterable[str]) -> HeaderMapping:
    """
    Build the column mapping for a header row.

    Args:
        headers: Raw column names in file order

    Returns:
        HeaderMapping with recognized and extension columns
    """
    fields: Dict[int, str] = {}
    extensions: Dict[int, str] = {}

    for index, raw in enumerate(headers):
        canonical = normalize_header(raw)
        if canonical is None:
            extensions[index] = clean_value(raw)
        else:
            fields[index] = canonical

    mapping = HeaderMapping(fields=fields, extensions=extensions)
    if extensions:
        logger.debug(f"Extension columns kept out of band: {list(extensions.values())}")
    if USER_ID in mapping.missing_fields or MOVIE_TITLE in mapping.missing_fields:
        logger.warning(f"Header row lacks required columns: {mapping.missing_fields}")
    return mapping
