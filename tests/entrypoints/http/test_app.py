"""
Unit tests for FastAPI application setup and configuration.

- build_app() creates a properly configured FastAPI instance
- Router registration (health, auth, search)
- OpenAPI schema generation
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from doggy_dream.entrypoints.http.app import build_app


def test_build_app_returns_fastapi_instance() -> None:
    assert isinstance(build_app(), FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    assert build_app() is not build_app()


def test_app_has_correct_title() -> None:
    assert build_app().title == "Doggy Dream Home API"


def test_app_registers_routes() -> None:
    app = build_app()

    paths = {route.path for route in app.routes}  # type: ignore[attr-defined]

    assert {"/health", "/auth", "/search"} <= paths


def test_health_endpoint_is_served() -> None:
    client = TestClient(build_app())

    response = client.get("/health")

    assert response.status_code == 200


def test_openapi_schema_documents_search() -> None:
    client = TestClient(build_app())

    schema = client.get("/openapi.json").json()

    assert "get" in schema["paths"]["/search"]
    assert "post" in schema["paths"]["/search"]
    assert "post" in schema["paths"]["/auth"]
