"""Cache keys and invalidation in the dashboard query client."""
from __future__ import annotations

import pytest

from planner_dashboard.data.api_client import ApiError
from planner_dashboard.data.query_client import QueryClient


class FakeTransport:
    def __init__(self):
        self.calls = []
        self.fail = False

    def __call__(self, method, path, params=None, json=None):
        self.calls.append((method, path, params, json))
        if self.fail:
            raise ApiError(500, "Failed to create health score")
        return {"path": path, "n": len(self.calls)}


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def query_client(transport):
    return QueryClient(transport)


class TestQuery:
    def test_second_query_is_cached(self, query_client, transport) -> None:
        first = query_client.query(("/api/todos",), "/api/todos")
        second = query_client.query(("/api/todos",), "/api/todos")

        assert first == second
        assert len(transport.calls) == 1

    def test_filters_are_separate_keys(self, query_client, transport) -> None:
        query_client.query(("/api/meetings", "2025-06-01"), "/api/meetings/2025-06-01")
        query_client.query(("/api/meetings", "2025-06-02"), "/api/meetings/2025-06-02")

        assert len(transport.calls) == 2

    def test_null_result_is_cached(self, query_client) -> None:
        calls = []

        def returns_none(method, path, params=None, json=None):
            calls.append(path)
            return None

        client = QueryClient(returns_none)
        client.query(("/api/health-scores", 6, 2025), "/api/health-scores/6/2025")
        client.query(("/api/health-scores", 6, 2025), "/api/health-scores/6/2025")

        assert len(calls) == 1


class TestMutate:
    def test_success_invalidates_by_prefix(self, query_client) -> None:
        query_client.query(("/api/health-scores",), "/api/health-scores")
        query_client.query(("/api/health-scores", 6, 2025), "/api/health-scores/6/2025")
        query_client.query(("/api/todos",), "/api/todos")

        query_client.mutate("POST", "/api/health-scores", json={"month": 6}, invalidate=[("/api/health-scores",)])

        assert not query_client.cached(("/api/health-scores",))
        assert not query_client.cached(("/api/health-scores", 6, 2025))
        assert query_client.cached(("/api/todos",))

    def test_failure_leaves_cache_intact(self, query_client, transport) -> None:
        query_client.query(("/api/health-scores",), "/api/health-scores")
        transport.fail = True

        with pytest.raises(ApiError) as excinfo:
            query_client.mutate("POST", "/api/health-scores", json={}, invalidate=[("/api/health-scores",)])

        assert excinfo.value.status_code == 500
        assert query_client.cached(("/api/health-scores",))

    def test_longer_prefix_does_not_match_shorter_key(self, query_client) -> None:
        query_client.query(("/api/meetings",), "/api/meetings")

        assert query_client.invalidate(("/api/meetings", "2025-06-01")) == 0
        assert query_client.cached(("/api/meetings",))

    def test_string_prefix_is_accepted(self, query_client) -> None:
        query_client.query(("/api/goals",), "/api/goals")

        assert query_client.invalidate("/api/goals") == 1
