from __future__ import annotations

from fastapi import Request

from planner_backend.settings import get_settings
from planner_backend.storage import Storage


async def current_user_id() -> int:
    # No authentication: every request acts as the configured demo user.
    return get_settings().demo_user_id


async def get_store(request: Request) -> Storage:
    return request.app.state.storage
