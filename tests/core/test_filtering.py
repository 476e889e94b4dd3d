"""
Unit tests for the filter engine.
"""

import pytest

from movie_dashboard.core.filtering import apply_filters, clear_filters, matches
from movie_dashboard.core.models import FilterCriteria, Recommendation


def rec(title, user_id="u1", genre=None):
    return Recommendation(user_id=user_id, movie_title=title, genre=genre)


@pytest.fixture
def records():
    return [
        rec("Inception", "u1", "Sci-Fi"),
        rec("The Matrix", "u1", "Sci-Fi"),
        rec("Titanic", "u2", "Romance"),
        rec("Matilda", "u2", "Family"),
        rec("The Matrix Reloaded", "u3", "Sci-Fi"),
    ]


class TestFilterEngine:
    """Tests for apply_filters."""

    def test_genre_and_search_scenario(self):
        """Genre and title search combine; search is case-insensitive."""
        records = [rec("Inception", genre="Sci-Fi"), rec("The Matrix", genre="Sci-Fi")]
        result = apply_filters(records, FilterCriteria(genre="Sci-Fi", search="mat"))

        assert [r.movie_title for r in result.records] == ["The Matrix"]

    def test_cap_applied_after_filters(self):
        """The cap keeps the first matches in store order."""
        records = [rec(f"Movie {i}", genre="Drama") for i in range(7)]
        records.insert(0, rec("Other", genre="Comedy"))
        result = apply_filters(records, FilterCriteria(genre="Drama", limit=5))

        assert [r.movie_title for r in result.records] == [f"Movie {i}" for i in range(5)]
        assert result.matched == 7

    def test_no_criteria_passes_everything_up_to_cap(self, records):
        result = apply_filters(records, FilterCriteria(limit=100))
        assert list(result.records) == records

    def test_default_cap(self):
        records = [rec(f"Movie {i}") for i in range(15)]
        assert len(apply_filters(records, FilterCriteria()).records) == 10

    def test_user_filter_exact_match(self, records):
        result = apply_filters(records, FilterCriteria(user_id="u2"))
        assert [r.movie_title for r in result.records] == ["Titanic", "Matilda"]

        assert apply_filters(records, FilterCriteria(user_id="u")).records == ()

    def test_genre_all_sentinel(self, records):
        assert len(apply_filters(records, FilterCriteria(genre="all")).records) == 5

    def test_genre_filter_is_exact(self, records):
        assert apply_filters(records, FilterCriteria(genre="sci-fi")).records == ()

    def test_search_case_insensitive(self, records):
        result = apply_filters(records, FilterCriteria(search="MATRIX"))
        assert [r.movie_title for r in result.records] == ["The Matrix", "The Matrix Reloaded"]

    @pytest.mark.parametrize("limit", [0, -3])
    def test_non_positive_cap_empty(self, records, limit):
        """A cap of zero or less yields nothing, while matches are still counted."""
        result = apply_filters(records, FilterCriteria(limit=limit))

        assert result.records == ()
        assert result.is_empty
        assert result.matched == 5

    def test_empty_result_is_a_value(self, records):
        result = apply_filters(records, FilterCriteria(search="zzz"))

        assert result is not None
        assert result.records == ()
        assert result.criteria.search == "zzz"

    def test_idempotent(self, records):
        """Identical criteria give identical, order-identical results."""
        criteria = FilterCriteria(search="ma", limit=3)
        assert apply_filters(records, criteria) == apply_filters(records, criteria)

    def test_does_not_modify_input(self, records):
        before = list(records)
        apply_filters(records, FilterCriteria(user_id="u1", limit=1))
        assert records == before

    def test_matches_without_genre(self):
        assert not matches(rec("Up"), FilterCriteria(genre="Animation"))
        assert matches(rec("Up"), FilterCriteria())

    def test_clear_filters(self):
        assert clear_filters() == FilterCriteria(user_id=None, genre="all", search="", limit=10)
