import logging
import os
from typing import Any

import requests
from requests.adapters import HTTPAdapter

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 10

_SECRET_GETTER = None


class ApiError(Exception):
    """Non-2xx response from the planner API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"API error {status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _build_session():
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=10, pool_maxsize=10)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


_SESSION = _build_session()


def configure(secret_getter):
    global _SECRET_GETTER
    _SECRET_GETTER = secret_getter


def _get_secret(path, default=None):
    if _SECRET_GETTER is None:
        return default
    return _SECRET_GETTER(path, default)


def api_base_url():
    return (
        _get_secret(("app", "API_BASE_URL"))
        or _get_secret(("API_BASE_URL",))
        or os.getenv("API_BASE_URL")
        or DEFAULT_API_BASE_URL
    )


def _error_message(response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason or "Request failed"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return str(body)


def request(
    method: str,
    path: str,
    params: dict | None = None,
    json: dict | None = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> Any:
    url = f"{api_base_url().rstrip('/')}{path}"
    response = _SESSION.request(method, url, params=params, json=json, timeout=timeout)
    if not response.ok:
        message = _error_message(response)
        logger.warning("%s %s failed with %s: %s", method, path, response.status_code, message)
        raise ApiError(response.status_code, message)
    if response.status_code == 204 or not response.content:
        return None
    return response.json()
