"""
Unit tests using FastAPI TestClient (no separate server or network needed).
"""

import json
from types import SimpleNamespace

import httpx
import openai
import pytest
from fastapi.testclient import TestClient

from lexcoll.config import Settings
from lexcoll.server.deps import get_client_factory, get_dataset, get_settings
from lexcoll.server.main import app, log_routes, route_table

from conftest import RUN_ENTRY


class FakeClient:
    def __init__(self, text=None, error=None):
        def create(**kwargs):
            if error:
                raise error
            message = SimpleNamespace(content=text)
            return SimpleNamespace(choices=[SimpleNamespace(message=message)])
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=create))


@pytest.fixture
def client(dataset):
    app.dependency_overrides[get_settings] = lambda: Settings(gemini_api_key="test-key", model="m")
    app.dependency_overrides[get_dataset] = lambda: dataset
    yield TestClient(app)
    app.dependency_overrides.clear()


def upstream(text=None, error=None):
    app.dependency_overrides[get_client_factory] = lambda: (lambda settings: FakeClient(text, error))


class TestRoot:
    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["name"] == "LexCollocations API"

    def test_route_table(self):
        paths = [path for _, path, _ in route_table(app)]
        assert paths == sorted(paths)
        assert ("POST", "/api/generate", "generate") in route_table(app)

    def test_routes_logged(self, caplog):
        with caplog.at_level("INFO", logger="lexcoll.server.main"):
            log_routes(app)
        assert "/api/words/{word}/graph" in caplog.text


class TestGenerate:
    @pytest.mark.parametrize("body", [{}, {"word": None}, {"word": 12}, {"word": "   "}])
    def test_bad_word(self, client, body):
        upstream(text="{}")
        r = client.post("/api/generate", json=body)
        assert r.status_code == 400
        assert r.json()["detail"]["kind"] == "validation"

    def test_missing_credential(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(gemini_api_key=None)
        r = client.post("/api/generate", json={"word": "run"})
        assert r.status_code == 500
        detail = r.json()["detail"]
        assert detail["error"] == "GOOGLE_GEMINI_API_KEY is not configured"
        assert detail["kind"] == "config"
        assert detail["retryable"] is False

    def test_upstream_failure(self, client):
        request = httpx.Request("POST", "https://example.test")
        error = openai.APIStatusError(
            "bad", response=httpx.Response(429, text="quota exceeded", request=request), body=None,
        )
        upstream(error=error)
        r = client.post("/api/generate", json={"word": "run"})
        assert r.status_code == 502
        detail = r.json()["detail"]
        assert detail["kind"] == "upstream"
        assert detail["retryable"] is True
        assert detail["details"] == "quota exceeded"

    def test_unparseable_reply(self, client):
        upstream(text="Sorry, I can't help with that.")
        r = client.post("/api/generate", json={"word": "run"})
        assert r.status_code == 500
        assert r.json()["detail"]["error"] == "Failed to parse JSON from model response"

    def test_unexpected_failure(self, client):
        upstream(error=KeyError("boom"))
        r = client.post("/api/generate", json={"word": "run"})
        assert r.status_code == 500
        assert r.json()["detail"]["kind"] == "internal"

    def test_success_with_fenced_json(self, client):
        upstream(text="```json\n" + json.dumps(RUN_ENTRY) + "\n```")
        r = client.post("/api/generate", json={"word": "run"})
        assert r.status_code == 200
        data = r.json()
        assert data["word"] == "run"
        assert data["senses"] == [{"id": "run.s1", "label": "motion", "gloss": ""}]
        assert data["graph"] == {
            "nodes": [
                {"id": "run", "group": "target"},
                {"id": "fast", "group": "collocation", "weight": 10},
                {"id": "marathon", "group": "collocation", "weight": 8},
            ],
            "links": [
                {"source": "run", "target": "fast", "weight": 10},
                {"source": "run", "target": "marathon", "weight": 8},
            ],
        }

    def test_partially_malformed_reply_still_renders(self, client):
        reply = {
            "senses": "not a list",
            "profiles": [{"sense_id": "run.s1", "top_collocations": [
                {"token": "RUN FAST", "freq": "12.9", "pmi": None, "position": "BEFORE"},
            ]}],
        }
        upstream(text=json.dumps(reply))
        r = client.post("/api/generate", json={"word": "run"})
        assert r.status_code == 200
        data = r.json()
        assert data["senses"] == []
        assert data["profiles"][0]["top_collocations"][0] == {
            "token": "run fast", "freq": 12, "pmi": 0.0, "position": "left",
        }
        assert data["graph"]["links"] == [{"source": "run", "target": "run fast", "weight": 12}]


class TestWords:
    def test_list(self, client):
        r = client.get("/api/words")
        assert r.status_code == 200
        assert r.json()["words"] == ["bank", "run"]

    def test_get(self, client):
        r = client.get("/api/words/Bank")
        assert r.status_code == 200
        assert [s["id"] for s in r.json()["senses"]] == ["bank.s1", "bank.s2"]

    def test_not_found(self, client):
        r = client.get("/api/words/walk")
        assert r.status_code == 404

    def test_graph_without_layout(self, client):
        r = client.get("/api/words/run/graph", params={"layout": "false", "top_n": 20})
        assert r.status_code == 200
        graph = r.json()["graph"]
        assert [n["id"] for n in graph["nodes"]] == ["run", "fast", "marathon"]
        assert "x" not in graph["nodes"][0]

    def test_graph_with_layout(self, client):
        r = client.get("/api/words/bank/graph", params={"iterations": 30})
        assert r.status_code == 200
        graph = r.json()["graph"]
        assert graph["width"] == 800
        assert all("x" in n and "y" in n for n in graph["nodes"])
        assert graph["nodes"][0]["radius"] >= max(n["radius"] for n in graph["nodes"])

    def test_graph_sense_filter(self, client):
        r = client.get("/api/words/bank/graph", params={"sense": ["bank.s2"], "layout": "false"})
        data = r.json()
        assert data["senses"] == ["bank.s2"]
        assert [l["target"] for l in data["graph"]["links"]] == ["river", "steep"]
        assert len(data["examples"]) == 1
