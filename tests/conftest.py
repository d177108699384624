"""Shared pytest fixtures.

store   : empty in-memory store
app     : FastAPI app bound to ``store``
client  : TestClient with startup hooks run (demo user and legends seeded)
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from planner_backend.main import create_app
from planner_backend.settings import reset_settings
from planner_backend.storage import MemStorage


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in ("STORAGE_BACKEND", "DATABASE_URL", "DEMO_USER_ID", "DEMO_USERNAME", "DEMO_PASSWORD"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def store() -> MemStorage:
    return MemStorage()


@pytest.fixture
def app(store):
    return create_app(storage=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def meeting_payload() -> dict:
    return {"title": "Standup", "startTime": "09:30", "duration": 15, "date": "2025-06-02"}


@pytest.fixture
def todo_payload() -> dict:
    return {"title": "Write report", "priority": "high", "estimatedDuration": 45}


@pytest.fixture
def api_transport(client):
    """``QueryClient`` transport that talks to the in-process app."""
    from planner_dashboard.data.api_client import ApiError

    calls = []

    def transport(method, path, params=None, json=None):
        calls.append((method, path))
        response = client.request(method, path, params=params, json=json)
        if response.status_code >= 400:
            raise ApiError(response.status_code, response.json()["message"])
        return response.json()

    transport.calls = calls
    return transport
