"""
End-to-end integration test for the dashboard flow.

Tests the complete session:
1. Load the bundled dataset from disk
2. Inspect summary and profiles
3. Apply filters and read distributions
4. Export the filtered subset
5. Re-load the export as a new dataset
"""

from datetime import date
from pathlib import Path

import pytest

from movie_dashboard.core.engine import DashboardEngine
from movie_dashboard.core.exceptions import DatasetNotLoadedError, EmptyDatasetError
from movie_dashboard.core.models import FilterCriteria
from movie_dashboard.data.source import fetch_dataset, load_engine
from movie_dashboard.utils.logging_config import configure_dashboard_logging

DATASET_PATH = Path(__file__).resolve().parents[2] / "data" / "final_model_output.csv"


@pytest.fixture
def engine():
    """Engine loaded from the bundled sample dataset."""
    configure_dashboard_logging(debug=True)
    return load_engine(str(DATASET_PATH))


class TestDashboardFlow:
    """Test complete dashboard flow."""

    def test_end_to_end_flow(self, engine):
        """
        Test complete end-to-end dashboard flow.

        This test simulates a user browsing, filtering and exporting.
        """
        # Step 1: Dataset loaded
        summary = engine.summary
        assert summary.total_recommendations == 30
        assert summary.total_users == 6
        assert engine.loaded_at is not None

        # Step 2: Profiles
        profile = engine.profile("u1001")
        assert profile.recommendation_count == 5
        assert profile.top_genres == ("Sci-Fi", "Action", "Crime")
        assert profile.average_rating == pytest.approx((4.8 + 4.6 + 4.7 + 4.5 + 4.1) / 5)

        # Step 3: Filtered view
        view = engine.view(FilterCriteria(genre="Sci-Fi", limit=5))
        titles = [r.movie_title for r in view.result.records]
        assert titles == ["Inception", "The Matrix", "Interstellar", "Star Wars", "Back to the Future"]
        assert view.result.matched == 6
        assert [e.label for e in view.genre_distribution] == ["Sci-Fi"]
        # Back to the Future has no rating
        assert sum(e.count for e in view.rating_distribution) == 4

        # Step 4: Export
        export = engine.export(FilterCriteria(genre="Sci-Fi", limit=5), day=date(2024, 5, 1))
        assert export.filename == "movie_recommendations_filtered_2024-05-01.csv"
        assert export.row_count == 5

        # Step 5: Re-load the export
        reloaded = DashboardEngine(source=export.filename)
        reloaded.load(export.content.encode("utf-8"))
        assert [r.key() for r in reloaded.store] == [r.key() for r in view.result.records]

    def test_user_selection(self, engine):
        view = engine.view(FilterCriteria(user_id="u1005", limit=100))
        assert view.result.matched == 5
        assert [e.label for e in view.rating_distribution] == ["4.5-5.0", "4.0-4.4", "Below 3.0"]

    def test_views_are_recomputed_not_cached(self, engine):
        first = engine.view(FilterCriteria(search="the"))
        second = engine.view(FilterCriteria(search="the", limit=2))
        assert len(second.result.records) == 2
        assert engine.view(FilterCriteria(search="the")) == first

    def test_user_and_genre_lists(self, engine):
        assert engine.user_ids() == ["u1001", "u1002", "u1003", "u1004", "u1005", "u1006"]
        assert "Sci-Fi" in engine.genres()
        assert engine.genres() == sorted(engine.genres())

    def test_failed_load_keeps_previous_state(self, engine):
        with pytest.raises(EmptyDatasetError):
            engine.load(b"user_id,title\n")
        assert engine.summary.total_recommendations == 30

    def test_unloaded_engine(self):
        engine = DashboardEngine()
        assert not engine.is_loaded
        with pytest.raises(DatasetNotLoadedError):
            engine.view()
        with pytest.raises(DatasetNotLoadedError):
            engine.export()

    def test_bundled_dataset_is_readable(self):
        assert fetch_dataset(str(DATASET_PATH)).startswith(b"user_id,")
