"""
API tests for movie endpoints.

Each test gets its own app and seeded memory store (see conftest.py), so
mutations never leak between tests.
"""

import pytest

DARK_KNIGHT = "11111111-1111-4111-8111-111111111111"
FORREST_GUMP = "22222222-2222-4222-8222-222222222222"


class TestListMovies:
    """Tests for GET /movies."""

    def test_list_all(self, client):
        r = client.get("/movies")
        assert r.status_code == 200
        titles = [m["title"] for m in r.json()]
        assert titles == ["The Dark Knight", "Forrest Gump", "The Matrix"]

    @pytest.mark.parametrize("genre", ["Action", "action", "ACTION"])
    def test_filter_by_genre_case_insensitive(self, client, genre):
        r = client.get("/movies", params={"genre": genre})
        assert r.status_code == 200
        titles = {m["title"] for m in r.json()}
        assert titles == {"The Dark Knight", "The Matrix"}

    def test_filter_multi_word_genre(self, client, movie_payload):
        movie_payload["genre"] = ["Sci-Fi & Fantasy"]
        client.post("/movies", json=movie_payload)
        r = client.get("/movies", params={"genre": "sci-fi & fantasy"})
        assert [m["title"] for m in r.json()] == ["X"]

    def test_filter_with_no_match_is_empty(self, client):
        r = client.get("/movies", params={"genre": "Western"})
        assert r.status_code == 200
        assert r.json() == []

    def test_empty_genre_returns_all(self, client):
        r = client.get("/movies", params={"genre": ""})
        assert len(r.json()) == 3


class TestGetMovie:
    """Tests for GET /movies/{id}."""

    def test_get_existing(self, client):
        r = client.get(f"/movies/{FORREST_GUMP}")
        assert r.status_code == 200
        data = r.json()
        assert data["id"] == FORREST_GUMP
        assert data["title"] == "Forrest Gump"
        assert data["genre"] == ["Drama", "Romance"]

    def test_get_not_found(self, client):
        r = client.get("/movies/999999")
        assert r.status_code == 404
        assert r.json() == {"error": "Movie not found"}


class TestCreateMovie:
    """Tests for POST /movies."""

    def test_create(self, client, movie_payload):
        r = client.post("/movies", json=movie_payload)
        assert r.status_code == 201
        data = r.json()
        assert data["id"]
        assert data["rate"] == 5
        for key, value in movie_payload.items():
            assert data[key] == value

    def test_created_movie_is_listed(self, client, movie_payload):
        created = client.post("/movies", json=movie_payload).json()
        ids = [m["id"] for m in client.get("/movies").json()]
        assert ids[-1] == created["id"]

    def test_identical_creates_get_distinct_ids(self, client, movie_payload):
        first = client.post("/movies", json=movie_payload).json()
        second = client.post("/movies", json=movie_payload).json()
        assert first["id"] != second["id"]

        ids = [m["id"] for m in client.get("/movies").json()]
        assert first["id"] in ids
        assert second["id"] in ids

    def test_client_id_ignored(self, client, movie_payload):
        movie_payload["id"] = DARK_KNIGHT
        r = client.post("/movies", json=movie_payload)
        assert r.status_code == 201
        assert r.json()["id"] != DARK_KNIGHT
        assert client.get(f"/movies/{DARK_KNIGHT}").json()["title"] == "The Dark Knight"

    def test_invalid_body_returns_field_errors(self, client, movie_payload):
        movie_payload["year"] = 1800
        movie_payload["genre"] = ["Cartoon"]
        r = client.post("/movies", json=movie_payload)
        assert r.status_code == 400
        errors = r.json()["error"]
        assert [e["field"] for e in errors] == ["year", "genre.0"]
        assert all({"field", "message", "code"} <= set(e) for e in errors)

    def test_invalid_body_not_stored(self, client, movie_payload):
        del movie_payload["title"]
        client.post("/movies", json=movie_payload)
        assert len(client.get("/movies").json()) == 3

    def test_malformed_json(self, client):
        r = client.post(
            "/movies",
            content=b'{"title": ',
            headers={"Content-Type": "application/json"},
        )
        assert r.status_code == 400
        assert isinstance(r.json()["error"], list)

    def test_missing_body(self, client):
        r = client.post("/movies")
        assert r.status_code == 400
        assert r.json()["error"][0]["field"] == "body"


class TestDeleteMovie:
    """Tests for DELETE /movies/{id}."""

    def test_delete(self, client):
        r = client.delete(f"/movies/{DARK_KNIGHT}")
        assert r.status_code == 204
        assert r.content == b""
        assert client.get(f"/movies/{DARK_KNIGHT}").status_code == 404

    def test_delete_not_found_leaves_collection(self, client):
        before = client.get("/movies").json()
        r = client.delete("/movies/not-a-real-id")
        assert r.status_code == 404
        assert r.json() == {"error": "Movie not found"}
        assert client.get("/movies").json() == before

    def test_delete_twice(self, client):
        assert client.delete(f"/movies/{DARK_KNIGHT}").status_code == 204
        assert client.delete(f"/movies/{DARK_KNIGHT}").status_code == 404


class TestUpdateMovie:
    """Tests for PATCH /movies/{id}."""

    def test_patch_merges_fields(self, client):
        r = client.patch(f"/movies/{DARK_KNIGHT}", json={"year": 2009, "rate": 9.5})
        assert r.status_code == 200
        data = r.json()
        assert data["year"] == 2009
        assert data["rate"] == 9.5
        assert data["title"] == "The Dark Knight"
        assert data["genre"] == ["Action", "Crime", "Drama"]

    def test_patch_is_stored(self, client):
        client.patch(f"/movies/{DARK_KNIGHT}", json={"title": "Batman"})
        assert client.get(f"/movies/{DARK_KNIGHT}").json()["title"] == "Batman"

    def test_empty_patch_returns_unchanged_movie(self, client):
        before = client.get(f"/movies/{DARK_KNIGHT}").json()
        r = client.patch(f"/movies/{DARK_KNIGHT}", json={})
        assert r.status_code == 200
        assert r.json() == before

    def test_patch_cannot_change_id(self, client):
        r = client.patch(f"/movies/{DARK_KNIGHT}", json={"id": "new-id", "duration": 160})
        assert r.status_code == 200
        assert r.json()["id"] == DARK_KNIGHT
        assert client.get("/movies/new-id").status_code == 404

    def test_invalid_patch_returns_400_and_changes_nothing(self, client):
        before = client.get(f"/movies/{DARK_KNIGHT}").json()
        r = client.patch(f"/movies/{DARK_KNIGHT}", json={"title": "Ok", "rate": 42})
        assert r.status_code == 400
        assert [e["field"] for e in r.json()["error"]] == ["rate"]
        assert client.get(f"/movies/{DARK_KNIGHT}").json() == before

    def test_invalid_patch_on_unknown_id_is_400(self, client):
        """Validation runs before the lookup and stops the request."""
        r = client.patch("/movies/unknown", json={"poster": "nope"})
        assert r.status_code == 400

    def test_patch_non_object_body(self, client):
        """Non-object bodies get a client-facing message, not a schema class name."""
        r = client.patch(f"/movies/{DARK_KNIGHT}", json=[1, 2])
        assert r.status_code == 400
        assert r.json()["error"] == [
            {"field": "body", "message": "Movie must be a JSON object", "code": "invalid_type"}
        ]

    def test_patch_not_found(self, client):
        r = client.patch("/movies/unknown", json={"year": 2000})
        assert r.status_code == 404
        assert r.json() == {"error": "Movie not found"}


class TestMovieLifecycle:
    """End-to-end scenario across all movie endpoints."""

    def test_create_read_update_delete(self, client, movie_payload):
        r = client.post("/movies", json=movie_payload)
        assert r.status_code == 201
        created = r.json()
        movie_id = created["id"]
        assert created["rate"] == 5

        r = client.get(f"/movies/{movie_id}")
        assert r.status_code == 200
        assert r.json() == created

        r = client.patch(f"/movies/{movie_id}", json={"year": 2021})
        assert r.status_code == 200
        assert r.json() == {**created, "year": 2021}
        assert client.get(f"/movies/{movie_id}").json()["year"] == 2021

        r = client.delete(f"/movies/{movie_id}")
        assert r.status_code == 204

        r = client.get(f"/movies/{movie_id}")
        assert r.status_code == 404


class TestSystemEndpoints:
    """Tests for /, /health and request tracking headers."""

    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["movies"] == "/movies"

    def test_health_counts_movies(self, client, movie_payload):
        assert client.get("/health").json() == {"status": "healthy", "movies": 3}
        client.post("/movies", json=movie_payload)
        assert client.get("/health").json()["movies"] == 4

    def test_request_id_generated(self, client):
        r = client.get("/movies")
        assert r.headers["x-request-id"]
        assert "x-process-time" in r.headers

    def test_request_id_echoed(self, client):
        r = client.get("/movies", headers={"X-Request-ID": "abc-123"})
        assert r.headers["x-request-id"] == "abc-123"
