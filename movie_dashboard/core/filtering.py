"""
Filter engine: user, genre and title-search predicates plus a result cap.
"""

import logging
from typing import Iterable, List

from movie_dashboard.core.models import ALL_GENRES, FilterCriteria, FilterResult, Recommendation

logger = logging.getLogger(__name__)


def matches(record: Recommendation, criteria: FilterCriteria) -> bool:
    """
    Check a record against every active predicate.

    Inactive criteria (no user, the ``"all"`` genre, an empty search) pass
    every record.
    """
    if criteria.user_id and record.user_id != criteria.user_id:
        return False
    if criteria.genre != ALL_GENRES and record.genre != criteria.genre:
        return False
    if criteria.search and criteria.search.lower() not in record.movie_title.lower():
        return False
    return True


def apply_filters(records: Iterable[Recommendation], criteria: FilterCriteria) -> FilterResult:
    """
    Select the records matching ``criteria``.

    The cap is applied after all predicates, so ``limit`` bounds the number
    of matches returned rather than the number of records inspected.

    Args:
        records: Records in store order
        criteria: Filter selection

    Returns:
        FilterResult with the first ``criteria.limit`` matches in store
        order; a non-positive limit gives an empty result
    """
    selected: List[Recommendation] = [r for r in records if matches(r, criteria)]
    capped = selected[:criteria.limit] if criteria.limit > 0 else []

    logger.debug(f"Filter {criteria} matched {len(selected)}, returning {len(capped)}")
    return FilterResult(criteria=criteria, records=tuple(capped), matched=len(selected))


def clear_filters() -> FilterCriteria:
    """Criteria with every filter reset."""
    return FilterCriteria()
