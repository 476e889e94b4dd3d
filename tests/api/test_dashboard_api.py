"""
API tests for dataset, user, recommendation and export endpoints.

Uses FastAPI TestClient with the dataset state pointed at a temporary CSV.
"""

import pytest
from fastapi.testclient import TestClient

from movie_dashboard.api.dependencies import DatasetState, get_dataset_state
from movie_dashboard.api.main import app

CSV = """UserID,MovieID,MovieTitle,Category,Explanation,Score,Year
u1,m1,Inception,Sci-Fi,Similar to Interstellar,4.8,2010
u1,m2,The Matrix,Sci-Fi,Users like you loved it,4.6,1999
u1,m3,Heat,Crime,Matches your taste,4.1,1995
u2,m4,Titanic,Romance,Epic romance,4.2,1997
u2,m5,The Notebook,Romance,,3.2,2004
u3,m6,Up,Animation,Family favourite,,2009
"""


@pytest.fixture
def dataset_path(tmp_path):
    path = tmp_path / "final_model_output.csv"
    path.write_text(CSV, encoding="utf-8")
    return path


@pytest.fixture
def client(dataset_path):
    """TestClient over a loaded dataset."""
    state = DatasetState(str(dataset_path))
    state.load()
    app.dependency_overrides[get_dataset_state] = lambda: state
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_state(tmp_path):
    """Dataset state whose source does not exist."""
    state = DatasetState(str(tmp_path / "missing.csv"))
    with pytest.raises(Exception):
        state.load()
    app.dependency_overrides[get_dataset_state] = lambda: state
    yield state
    app.dependency_overrides.clear()


class TestSystemEndpoints:
    """Tests for /api/health, /api/dataset/summary and /api/dataset/reload."""

    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["health"] == "/api/health"

    def test_health_loaded(self, client):
        r = client.get("/api/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "healthy"
        assert data["dataset_loaded"] is True
        assert data["records"] == 6
        assert data["error"] is None

    def test_summary(self, client):
        r = client.get("/api/dataset/summary")
        assert r.status_code == 200
        data = r.json()
        assert data["total_recommendations"] == 6
        assert data["total_users"] == 3
        assert data["total_genres"] == 4
        assert data["average_rating"] == pytest.approx((4.8 + 4.6 + 4.1 + 4.2 + 3.2) / 5)

    def test_reload(self, client, dataset_path):
        dataset_path.write_text(CSV + "u4,m7,Alien,Horror,,4.0,1979\n", encoding="utf-8")
        r = client.post("/api/dataset/reload")
        assert r.status_code == 200
        assert r.json()["total_recommendations"] == 7

    def test_reload_failure_keeps_previous_dataset(self, client, dataset_path):
        dataset_path.write_text("user_id,title\n", encoding="utf-8")
        r = client.post("/api/dataset/reload")
        assert r.status_code == 503
        assert r.json()["detail"]["error"] == "empty_dataset"

        assert client.get("/api/dataset/summary").json()["total_recommendations"] == 6

    def test_reload_undecodable_file(self, client, dataset_path):
        dataset_path.write_bytes("user_id,title\nu1,Amélie\n".encode("latin-1"))
        r = client.post("/api/dataset/reload")
        assert r.status_code == 503
        assert r.json()["detail"]["error"] == "acquisition_failed"

        health = client.get("/api/health").json()
        assert health["dataset_loaded"] is True
        assert health["error"] == "acquisition_failed"
        assert client.get("/api/dataset/summary").json()["total_recommendations"] == 6


class TestUnavailableDataset:
    """Data endpoints report why the dataset is missing."""

    def test_health_reports_acquisition_failure(self, failing_state):
        r = TestClient(app).get("/api/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "unhealthy"
        assert data["dataset_loaded"] is False
        assert data["error"] == "acquisition_failed"

    @pytest.mark.parametrize("path", ["/api/dataset/summary", "/api/users", "/api/recommendations", "/api/export"])
    def test_data_endpoints_503(self, failing_state, path):
        r = TestClient(app).get(path)
        assert r.status_code == 503
        detail = r.json()["detail"]
        assert detail["error"] == "acquisition_failed"
        assert "not found" in detail["message"]

    def test_empty_dataset_kind(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("user_id,title\n,Inception\n", encoding="utf-8")
        state = DatasetState(str(path))
        with pytest.raises(Exception):
            state.load()
        app.dependency_overrides[get_dataset_state] = lambda: state
        try:
            r = TestClient(app).get("/api/recommendations")
        finally:
            app.dependency_overrides.clear()
        assert r.status_code == 503
        assert r.json()["detail"]["error"] == "empty_dataset"


class TestRecordEndpoints:
    """Tests for /api/records, /api/genres and /api/users."""

    def test_records_in_dataset_order(self, client):
        r = client.get("/api/records")
        assert r.status_code == 200
        data = r.json()
        assert data["total"] == 6
        assert [x["movie_title"] for x in data["recommendations"]][:2] == ["Inception", "The Matrix"]

    def test_records_pagination(self, client):
        data = client.get("/api/records?skip=4&limit=10").json()
        assert [x["movie_title"] for x in data["recommendations"]] == ["The Notebook", "Up"]

    def test_record_fields(self, client):
        item = client.get("/api/records?limit=1").json()["recommendations"][0]
        assert item == {
            "user_id": "u1",
            "movie_id": "m1",
            "movie_title": "Inception",
            "genre": "Sci-Fi",
            "reason": "Similar to Interstellar",
            "predicted_rating": 4.8,
            "year": 2010,
        }

    def test_genres_sorted(self, client):
        assert client.get("/api/genres").json()["genres"] == ["Animation", "Crime", "Romance", "Sci-Fi"]

    def test_users_sorted(self, client):
        data = client.get("/api/users").json()
        assert data["users"] == ["u1", "u2", "u3"]
        assert data["total"] == 3

    def test_user_profile(self, client):
        r = client.get("/api/users/u1/profile")
        assert r.status_code == 200
        data = r.json()
        assert data["recommendation_count"] == 3
        assert data["average_rating"] == pytest.approx(4.5)
        assert data["top_genres"] == ["Sci-Fi", "Crime"]

    def test_unrated_user_profile(self, client):
        data = client.get("/api/users/u3/profile").json()
        assert data["average_rating"] == 0
        assert data["rated_count"] == 0

    def test_user_profile_not_found(self, client):
        r = client.get("/api/users/nobody/profile")
        assert r.status_code == 404
        assert "not found" in r.json()["detail"].lower()


class TestRecommendationEndpoints:
    """Tests for GET /api/recommendations."""

    def test_default_criteria(self, client):
        data = client.get("/api/recommendations").json()
        assert data["criteria"] == {"user_id": None, "genre": "all", "search": "", "limit": 10}
        assert data["n"] == 6
        assert data["matched"] == 6

    def test_genre_and_search(self, client):
        data = client.get("/api/recommendations?genre=Sci-Fi&search=mat").json()
        assert [x["movie_title"] for x in data["recommendations"]] == ["The Matrix"]
        assert data["genre_distribution"] == [{"genre": "Sci-Fi", "count": 1, "fill": "#8b5cf6"}]
        assert data["rating_distribution"] == [{"range": "4.5-5.0", "count": 1}]

    def test_user_filter_and_distributions(self, client):
        data = client.get("/api/recommendations?user_id=u2").json()
        assert [x["movie_title"] for x in data["recommendations"]] == ["Titanic", "The Notebook"]
        assert data["rating_distribution"] == [
            {"range": "4.0-4.4", "count": 1},
            {"range": "3.0-3.4", "count": 1},
        ]

    def test_empty_user_means_all(self, client):
        assert client.get("/api/recommendations?user_id=").json()["n"] == 6

    def test_limit_applied_last(self, client):
        data = client.get("/api/recommendations?limit=2").json()
        assert [x["movie_title"] for x in data["recommendations"]] == ["Inception", "The Matrix"]
        assert data["matched"] == 6

    def test_zero_limit_empty(self, client):
        data = client.get("/api/recommendations?limit=0").json()
        assert data["recommendations"] == []
        assert data["genre_distribution"] == []
        assert data["rating_distribution"] == []

    def test_no_match(self, client):
        data = client.get("/api/recommendations?search=zzz").json()
        assert data["n"] == 0
        assert data["matched"] == 0


class TestExportEndpoint:
    """Tests for GET /api/export."""

    def test_export_csv(self, client):
        r = client.get("/api/export?genre=Romance")
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/csv")
        assert "movie_recommendations_filtered_" in r.headers["content-disposition"]
        assert r.headers["x-row-count"] == "2"

        lines = r.text.split("\n")
        assert lines[0] == '"User ID","Movie ID","Movie Title","Genre","Reason","Predicted Rating","Year"'
        assert lines[1] == '"u2","m4","Titanic","Romance","Epic romance","4.2","1997"'
        assert lines[2] == '"u2","m5","The Notebook","Romance","","3.2","2004"'

    def test_export_matches_view(self, client):
        view = client.get("/api/recommendations?search=the&limit=5").json()
        export = client.get("/api/export?search=the&limit=5").text
        assert len(export.split("\n")) - 1 == view["n"]
