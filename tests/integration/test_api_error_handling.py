from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from task_manager_api.core.application.ports.task_store_port import TaskStorePort
from task_manager_api.infrastructure.entrypoints.api.app_factory import create_app


@pytest.mark.parametrize(
    "body, headers",
    [
        ("{not json", {"Content-Type": "application/json"}),
        ("", {"Content-Type": "application/json"}),
    ],
)
def test_unparseable_body_is_malformed_input(client, body, headers):
    response = client.post("/api/tasks", content=body, headers=headers)

    assert response.status_code == 400
    assert response.json()["error"] == "malformed_input"


@pytest.mark.parametrize("body", [["title"], "just a string", 42])
def test_non_object_json_is_malformed_input(client, body):
    response = client.post("/api/tasks", json=body)

    assert response.status_code == 400
    assert response.json() == {
        "error": "malformed_input",
        "message": "Request body must be a JSON object",
    }


def test_non_object_update_body_is_malformed_input(client):
    response = client.put("/api/tasks/any-id", json=[{"status": "completed"}])
    assert response.status_code == 400
    assert response.json()["error"] == "malformed_input"


def test_unexpected_failure_returns_generic_500(settings):
    store = MagicMock(spec=TaskStorePort)
    store.list.side_effect = RuntimeError("internal invariant broken: secret detail")
    app = create_app(settings, store=store)

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/api/tasks")

    assert response.status_code == 500
    assert response.json() == {
        "error": "internal_error",
        "message": "An unexpected error occurred.",
    }
    assert "secret" not in response.text


def test_undecodable_body_is_malformed_input(client):
    response = client.post(
        "/api/tasks",
        content=b'{"title":"\xff"}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "malformed_input"
    assert set(body) == {"error", "message"}


def test_unrouted_method_uses_error_body(client):
    response = client.patch("/api/tasks/any-id", json={"status": "completed"})

    assert response.status_code == 405
    assert response.json()["error"] == "method_not_allowed"
    assert "allow" in response.headers


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/unknown")

    assert response.status_code == 404
    assert response.json() == {"error": "not_found", "message": "Not Found"}


def test_internal_error_carries_correlation_id(settings):
    store = MagicMock(spec=TaskStorePort)
    store.get.side_effect = RuntimeError("boom")
    app = create_app(settings, store=store)

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/api/tasks/x", headers={"X-Correlation-ID": "abc"})

    assert response.status_code == 500
    assert response.headers["x-correlation-id"] == "abc"
