from __future__ import annotations

import logging

from sqlalchemy import text as sql_text
from sqlalchemy.ext.asyncio import AsyncEngine

from planner_backend.db import get_engine
from planner_backend.storage import COUNTER_TABLE, RECORDS_TABLE, Storage

logger = logging.getLogger(__name__)

DEFAULT_HABIT_LEGENDS = [
    {"icon_key": "completed", "label": "Completed", "icon": "CheckCircle", "color": "#10B981"},
    {"icon_key": "not_completed", "label": "Not Completed", "icon": "X", "color": "#EF4444"},
    {"icon_key": "not_applicable", "label": "Not Applicable", "icon": "Minus", "color": "#6B7280"},
    {"icon_key": "partial", "label": "Partial", "icon": "Circle", "color": "#F59E0B"},
]


async def init_db(engine: AsyncEngine | None = None) -> None:
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.execute(
            sql_text(
                f"""
                CREATE TABLE IF NOT EXISTS {RECORDS_TABLE} (
                    id INTEGER PRIMARY KEY,
                    kind TEXT NOT NULL,
                    user_id INTEGER,
                    payload_json TEXT NOT NULL
                )
                """
            )
        )
        await conn.execute(
            sql_text(
                f"""
                CREATE TABLE IF NOT EXISTS {COUNTER_TABLE} (
                    name TEXT PRIMARY KEY,
                    value INTEGER NOT NULL
                )
                """
            )
        )
        await conn.execute(
            sql_text(
                f"CREATE INDEX IF NOT EXISTS idx_{RECORDS_TABLE}_kind_user "
                f"ON {RECORDS_TABLE} (kind, user_id)"
            )
        )


async def seed_demo_data(store: Storage, username: str = "demo", password: str = "demo") -> dict:
    """Create the demo user and its default habit legends unless the user exists.

    The creates are independent; a failure part-way leaves whatever was
    already written in place.
    """
    existing = await store.get_user_by_username(username)
    if existing:
        return existing
    user = await store.create_user({"username": username, "password": password})
    for legend in DEFAULT_HABIT_LEGENDS:
        await store.create_habit_legend({"user_id": user["id"], **legend})
    logger.info("Seeded demo user %s (#%s) with %s habit legends", username, user["id"], len(DEFAULT_HABIT_LEGENDS))
    return user
