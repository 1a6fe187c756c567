"""
Tests for API Routes.

Requires Python 3.11+.
"""

from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from api.dependencies import set_session
from api.main import app
from workspace.session import IntellisenseSession


@pytest.fixture
def client(session: IntellisenseSession) -> Generator[TestClient, None, None]:
    """Create a test client bound to the sample workspace session."""
    set_session(session)
    yield TestClient(app)
    set_session(None)


@pytest.fixture
def main_request(workspace: Path) -> dict:
    """Request body for the sample markup document."""
    path = workspace / "qml" / "Main.qml"
    return {"path": str(path), "text": path.read_text(), "language_id": "qml"}


class TestHealthEndpoint:
    """Test cases for health endpoint."""

    def test_health_check(self, client: TestClient):
        """Test health check returns valid response."""
        response = client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["session"] == "active"
        assert "version" in data


class TestEditorEndpoints:
    """Test cases for editor endpoints."""

    def test_complete(self, client: TestClient, main_request: dict):
        """Test function completion over HTTP."""
        line = main_request["text"].split("\n")[8]
        character = line.index("UtilJS.") + len("UtilJS.")

        response = client.post("/complete", json={**main_request, "line": 8, "character": character})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["items"][0]["label"]["label"] == "clamp"
        assert data["items"][0]["kind"] == "method"

    def test_hover(self, client: TestClient, main_request: dict):
        """Test hover over HTTP."""
        line = main_request["text"].split("\n")[7]
        character = line.index("formatBalance")

        response = client.post("/hover", json={**main_request, "line": 7, "character": character})

        assert response.status_code == 200
        assert "formatBalance" in response.json()["hover"]["contents"]

    def test_hover_nothing(self, client: TestClient, main_request: dict):
        """Test hover with no match returns a null hover."""
        response = client.post("/hover", json={**main_request, "line": 0, "character": 0})

        assert response.status_code == 200
        assert response.json()["hover"] is None

    def test_definition(self, client: TestClient, main_request: dict):
        """Test go-to-definition over HTTP."""
        line = main_request["text"].split("\n")[8]
        character = line.index("clamp")

        response = client.post("/definition", json={**main_request, "line": 8, "character": character})

        assert response.status_code == 200
        assert response.json()["location"]["path"].endswith("util.js")

    def test_references(self, client: TestClient, workspace: Path):
        """Test find-references over HTTP."""
        path = workspace / "js" / "util.js"
        body = {"path": str(path), "text": path.read_text(), "line": 0, "character": 10}

        response = client.post("/references", json=body)

        assert response.status_code == 200
        assert response.json()["total"] == 1

    def test_code_actions(self, client: TestClient, workspace: Path):
        """Test auto-import code actions over HTTP."""
        body = {
            "path": str(workspace / "qml" / "New.qml"),
            "text": "Item { x: Acc.add() }",
            "line": 0,
            "character": 11,
        }

        response = client.post("/code-actions", json=body)

        assert response.status_code == 200
        actions = response.json()["actions"]
        assert actions[0]["title"] == "Import 'AccountHelperJS' from account-helper.js"
        assert actions[0]["is_preferred"] is True

    def test_invalid_position(self, client: TestClient, main_request: dict):
        """Test negative positions are rejected."""
        response = client.post("/hover", json={**main_request, "line": -1, "character": 0})

        assert response.status_code == 422


class TestAnalysisEndpoints:
    """Test cases for analysis endpoints."""

    def test_imports(self, client: TestClient, sample_qml_code: str):
        """Test import extraction over HTTP."""
        response = client.post("/analyze/imports", json={"text": sample_qml_code})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert data["imports"][1] == {"file": "../js/util.js", "alias": "UtilJS"}

    def test_functions(self, client: TestClient, sample_js_code: str):
        """Test function extraction over HTTP."""
        response = client.post("/analyze/functions", json={"text": sample_js_code})

        assert response.status_code == 200
        assert [f["name"] for f in response.json()["functions"]][:2] == ["formatBalance", "add"]

    def test_insertion_point(self, client: TestClient):
        """Test insertion planning over HTTP."""
        response = client.post("/analyze/insertion-point", json={"text": "import QtQuick 2.15"})

        assert response.json() == {
            "line": 1,
            "needs_blank_line": True,
            "needs_trailing_blank_line": True,
        }

    def test_resolve_alias(self, client: TestClient, main_request: dict):
        """Test alias resolution over HTTP."""
        body = {"text": main_request["text"], "path": main_request["path"], "alias": "UtilJS"}

        data = client.post("/analyze/resolve-alias", json=body).json()

        assert data["path"].endswith("util.js")
        assert data["functions"][0]["name"] == "clamp"

    def test_resolve_unknown_alias(self, client: TestClient, main_request: dict):
        """Test unknown aliases resolve to null."""
        body = {"text": main_request["text"], "path": main_request["path"], "alias": "Nope"}

        data = client.post("/analyze/resolve-alias", json=body).json()

        assert data["path"] is None
        assert data["functions"] is None


class TestCacheEndpoints:
    """Test cases for cache endpoints."""

    def test_stats_and_clear(self, client: TestClient, session: IntellisenseSession, workspace: Path):
        """Test cache statistics and clearing."""
        session.cache.get_functions(workspace / "js" / "util.js")

        stats = client.get("/cache/stats").json()
        assert stats["cached_files"] == 1
        assert stats["watching"] is False

        assert client.delete("/cache").json() == {"cleared": 1}
        assert len(session.cache) == 0


class TestWithoutSession:
    """Test cases for requests without a session."""

    def test_service_unavailable(self):
        """Test session-bound routes answer 503 without a session."""
        set_session(None)
        client = TestClient(app)

        response = client.post("/complete", json={"path": "/x.qml", "line": 0, "character": 0})

        assert response.status_code == 503
        assert client.get("/health").json()["session"] == "inactive"
