"""Keyed response cache in front of the planner API.

Keys are tuples whose first element is the request path, followed by any
filters (``("/api/meetings", "2025-06-01")``). A successful mutation drops
every cached key that starts with one of the prefixes it names; a failed
mutation leaves the cache as it was.
"""
import logging
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from planner_dashboard.data import api_client

logger = logging.getLogger(__name__)

QueryKey = Tuple[Any, ...]


def _normalize_key(key) -> QueryKey:
    if isinstance(key, tuple):
        return key
    if isinstance(key, list):
        return tuple(key)
    return (key,)


def _has_prefix(key: QueryKey, prefix: QueryKey) -> bool:
    return len(prefix) <= len(key) and key[: len(prefix)] == prefix


class QueryClient:
    def __init__(self, transport: Optional[Callable[..., Any]] = None):
        self._transport = transport or api_client.request
        self._cache: Dict[QueryKey, Any] = {}

    def query(self, key, path: str, params: Optional[dict] = None) -> Any:
        key = _normalize_key(key)
        if key in self._cache:
            return self._cache[key]
        value = self._transport("GET", path, params=params)
        self._cache[key] = value
        return value

    def mutate(self, method: str, path: str, json: Optional[dict] = None, invalidate: Iterable = ()) -> Any:
        result = self._transport(method, path, json=json)
        self.invalidate(*invalidate)
        return result

    def invalidate(self, *prefixes) -> int:
        normalized = [_normalize_key(prefix) for prefix in prefixes]
        stale = [key for key in self._cache if any(_has_prefix(key, prefix) for prefix in normalized)]
        for key in stale:
            del self._cache[key]
        if stale:
            logger.debug("Invalidated %s cached queries", len(stale))
        return len(stale)

    def cached(self, key) -> bool:
        return _normalize_key(key) in self._cache

    def clear(self):
        self._cache.clear()
