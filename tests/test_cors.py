from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tarefas_api.config import Settings
from tarefas_api.main import create_app

from .conftest import ALLOWED_ORIGIN

OTHER_ORIGIN = "http://evil.example.com"


def _preflight(client: TestClient, origin: str, method: str = "POST", path: str = "/api/tarefas"):
    return client.options(
        path,
        headers={
            "Origin": origin,
            "Access-Control-Request-Method": method,
            "Access-Control-Request-Headers": "content-type, x-requested-with",
        },
    )


def test_preflight_from_allowed_origin(client: TestClient) -> None:
    response = _preflight(client, ALLOWED_ORIGIN)

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
    assert response.headers["access-control-allow-methods"] == "GET, POST, PUT, DELETE, OPTIONS"
    assert response.headers["access-control-allow-credentials"] == "true"
    # wildcard headers + credentials: requested headers are echoed
    assert response.headers["access-control-allow-headers"] == "content-type, x-requested-with"


def test_preflight_does_not_reach_router(client: TestClient) -> None:
    # the router has no OPTIONS route for this path and answers 405 by itself
    plain = client.options("/api/tarefas/1")
    assert plain.status_code == 405

    response = _preflight(client, ALLOWED_ORIGIN, method="DELETE", path="/api/tarefas/1")

    assert response.status_code == 200
    assert response.text == "OK"
    assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN


def test_preflight_from_unknown_origin(client: TestClient) -> None:
    response = _preflight(client, OTHER_ORIGIN)

    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


def test_preflight_disallowed_method(client: TestClient) -> None:
    response = _preflight(client, ALLOWED_ORIGIN, method="PATCH")

    assert response.status_code == 400


def test_actual_request_from_allowed_origin(client: TestClient) -> None:
    response = client.get("/api/tarefas", headers={"Origin": ALLOWED_ORIGIN})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
    assert response.headers["access-control-allow-credentials"] == "true"


def test_actual_request_from_unknown_origin_still_served(client: TestClient) -> None:
    response = client.post(
        "/api/tarefas", json={"titulo": "x"}, headers={"Origin": OTHER_ORIGIN}
    )

    # the browser hides it; the server still answers
    assert response.status_code == 201
    assert "access-control-allow-origin" not in response.headers


def test_policy_only_applies_to_prefix(client: TestClient) -> None:
    response = client.get("/health", headers={"Origin": ALLOWED_ORIGIN})

    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers


def test_prefix_does_not_match_lookalike_path(client: TestClient) -> None:
    response = _preflight(client, ALLOWED_ORIGIN, path="/api/tarefasx")

    assert "access-control-allow-origin" not in response.headers


def test_origins_come_from_settings() -> None:
    config = Settings(
        DATABASE_URL="sqlite://",
        LOG_TO_FILE=False,
        CORS_ALLOWED_ORIGINS="https://app.example.com, https://admin.example.com",
    )

    with TestClient(create_app(config)) as client:
        allowed = _preflight(client, "https://admin.example.com")
        dev = _preflight(client, ALLOWED_ORIGIN)

    assert allowed.headers["access-control-allow-origin"] == "https://admin.example.com"
    assert "access-control-allow-origin" not in dev.headers


def test_wildcard_origin_with_credentials_rejected() -> None:
    config = Settings(DATABASE_URL="sqlite://", LOG_TO_FILE=False, CORS_ALLOWED_ORIGINS="*")

    with pytest.raises(ValueError):
        config.cors_policy()
