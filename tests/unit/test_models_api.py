# ---------------------------------------------------------------------------
# Unit Tests: Models HTTP API
#
# Drives the FastAPI app through TestClient with a fresh registry per test:
#   - camelCase wire format for create, read and update
#   - 400 for empty required fields, 404 "Model not found" for missing ids
#   - explicit null vs omitted keys in partial updates
#   - list, search by type / tag, enums, health and reset endpoints
# ---------------------------------------------------------------------------
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from ai_model_registry.api.routers.models import get_registry
from ai_model_registry.main import app
from ai_model_registry.services.registry import RegistryService

BERT = {
    "name": "bert-base-uncased",
    "description": "Bidirectional encoder",
    "modelType": "NLP",
    "tags": ["nlp", "transformer"],
    "link": "https://huggingface.co/google-bert/bert-base-uncased",
    "submitterName": "Alex",
    "submitterLink": "https://example.com/alex",
    "complexity": "Intermediate",
    "licenseType": "OpenSource",
    "githubStars": 3100,
    "paperLink": "https://arxiv.org/abs/1810.04805",
    "frameworkUsed": "PyTorch",
    "performanceMetrics": {"accuracy": 0.93, "trainingTime": "4 days", "modelSize": "110M"},
}

WHISPER = {
    "name": "whisper-small",
    "modelType": "AudioModel",
    "tags": ["speech", "NLP"],
    "link": "https://github.com/openai/whisper",
    "complexity": "Beginner",
    "licenseType": "OpenSource",
}


@pytest.fixture
def client():
    registry = RegistryService()
    app.dependency_overrides[get_registry] = lambda: registry
    yield TestClient(app)
    app.dependency_overrides.clear()


def create(client, payload):
    r = client.post("/api/models", json=payload)
    assert r.status_code == 201, r.text
    return r.json()["id"]


def test_create_and_get_roundtrip_fields(client):
    model_id = create(client, BERT)
    assert model_id == 1

    r = client.get(f"/api/models/{model_id}")
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == 1
    assert body["name"] == "bert-base-uncased"
    assert body["modelType"] == "NLP"
    assert body["licenseType"] == "OpenSource"
    assert body["performanceMetrics"]["trainingTime"] == "4 days"
    assert datetime.fromisoformat(body["publishedDate"].replace("Z", "+00:00"))


def test_create_minimal_payload_defaults(client):
    model_id = create(client, WHISPER)
    body = client.get(f"/api/models/{model_id}").json()
    assert body["description"] == ""
    assert body["githubStars"] is None
    assert body["performanceMetrics"] is None


def test_create_empty_name(client):
    r = client.post("/api/models", json={**BERT, "name": ""})
    assert r.status_code == 400
    assert r.json()["detail"] == "'Model Name' cannot be empty"


def test_create_empty_link(client):
    r = client.post("/api/models", json={**BERT, "link": ""})
    assert r.status_code == 400
    assert "Model Link/URL" in r.json()["detail"]


def test_create_invalid_enum_rejected(client):
    r = client.post("/api/models", json={**BERT, "modelType": "Quantum"})
    assert r.status_code == 422


def test_get_missing_is_404(client):
    r = client.get("/api/models/12")
    assert r.status_code == 404
    assert r.json()["detail"] == "Model not found"


def test_patch_updates_only_given_fields(client):
    model_id = create(client, BERT)
    before = client.get(f"/api/models/{model_id}").json()

    r = client.patch(f"/api/models/{model_id}", json={"name": "Z"})
    assert r.status_code == 200
    after = r.json()

    assert after["name"] == "Z"
    assert {k: v for k, v in after.items() if k != "name"} == {
        k: v for k, v in before.items() if k != "name"
    }


def test_patch_null_plain_vs_optional(client):
    model_id = create(client, BERT)
    r = client.patch(
        f"/api/models/{model_id}",
        json={"name": None, "githubStars": None, "performanceMetrics": None},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["name"] == "bert-base-uncased"
    assert body["githubStars"] is None
    assert body["performanceMetrics"] is None
    assert body["paperLink"] == "https://arxiv.org/abs/1810.04805"


def test_put_is_accepted_as_partial_update(client):
    model_id = create(client, BERT)
    r = client.put(f"/api/models/{model_id}", json={"complexity": "Research"})
    assert r.status_code == 200
    assert r.json()["complexity"] == "Research"
    assert r.json()["name"] == "bert-base-uncased"


def test_update_missing_is_404(client):
    r = client.patch("/api/models/5", json={"name": "ghost"})
    assert r.status_code == 404
    assert r.json()["detail"] == "Model not found"
    assert client.get("/api/models").json() == []


def test_delete_lifecycle(client):
    model_id = create(client, BERT)
    assert client.delete(f"/api/models/{model_id}").status_code == 204

    assert client.get(f"/api/models/{model_id}").status_code == 404
    r = client.patch(f"/api/models/{model_id}", json={"name": "back"})
    assert r.json()["detail"] == "Model not found"
    assert client.delete(f"/api/models/{model_id}").status_code == 404

    assert create(client, WHISPER) == 2


def test_list_models(client):
    ids = [create(client, BERT), create(client, WHISPER), create(client, BERT)]
    client.delete(f"/api/models/{ids[0]}")

    r = client.get("/api/models")
    assert r.status_code == 200
    entries = r.json()
    assert [e["id"] for e in entries] == [2, 3]
    assert entries[0]["model"]["name"] == "whisper-small"


def test_search_by_type(client):
    create(client, BERT)
    whisper_id = create(client, WHISPER)

    r = client.get("/api/models/search/by-type/AudioModel")
    assert r.status_code == 200
    assert [e["id"] for e in r.json()] == [whisper_id]

    assert client.get("/api/models/search/by-type/LLM").json() == []
    assert client.get("/api/models/search/by-type/Quantum").status_code == 422


def test_search_by_tag_exact(client):
    bert_id = create(client, BERT)
    create(client, WHISPER)

    r = client.get("/api/models/search/by-tag", params={"tag": "nlp"})
    assert [e["id"] for e in r.json()] == [bert_id]

    r = client.get("/api/models/search/by-tag", params={"tag": "transform"})
    assert r.json() == []


def test_enums(client):
    r = client.get("/api/enums")
    assert r.status_code == 200
    body = r.json()
    assert body["modelTypes"] == [
        "Tabular", "ComputerVision", "NLP", "LLM", "VisionModel", "AudioModel", "Agents",
    ]
    assert body["complexities"] == ["Beginner", "Intermediate", "Advanced", "Research"]
    assert body["licenseTypes"] == ["OpenSource", "Commercial", "Academic", "ResearchOnly"]


def test_health_and_reset(client):
    create(client, BERT)
    create(client, WHISPER)

    health = client.get("/api/health").json()
    assert health["status"] == "ok"
    assert health["models"] == 2

    assert client.delete("/api/reset").json() == {"status": "reset"}
    assert client.get("/api/health").json()["models"] == 0
    assert create(client, BERT) == 3


def test_options_preflight(client):
    r = client.options("/api/models")
    assert r.status_code == 204
    assert "PATCH" in r.headers["Access-Control-Allow-Methods"]
