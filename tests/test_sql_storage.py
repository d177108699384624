"""SqlStorage against a temporary SQLite file (aiosqlite)."""
from __future__ import annotations

import asyncio

from sqlalchemy.ext.asyncio import create_async_engine

from planner_backend.db import _normalize_database_url
from planner_backend.db_init import init_db, seed_demo_data
from planner_backend.storage import SqlStorage


def _engine(tmp_path):
    return create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'planner.db'}")


class TestSqlStorage:
    def test_crud_round(self, tmp_path) -> None:
        async def scenario():
            engine = _engine(tmp_path)
            try:
                await init_db(engine)
                store = SqlStorage(engine)
                user = await seed_demo_data(store)
                todo = await store.create_todo({"user_id": user["id"], "title": "T", "priority": "high"})
                updated = await store.update_todo(todo["id"], {"completed": True})
                listed = await store.get_todos_by_user(user["id"])
                deleted = await store.delete_todo(todo["id"])
                missing = await store.delete_todo(todo["id"])
                return user, todo, updated, listed, deleted, missing
            finally:
                await engine.dispose()

        user, todo, updated, listed, deleted, missing = asyncio.run(scenario())

        assert user["id"] == 1
        assert todo["id"] == 6
        assert updated["completed"] is True and updated["priority"] == "high"
        assert [item["id"] for item in listed] == [todo["id"]]
        assert deleted is True
        assert missing is False

    def test_data_survives_new_store(self, tmp_path) -> None:
        async def scenario():
            engine = _engine(tmp_path)
            try:
                await init_db(engine)
                await SqlStorage(engine).create_meeting({"user_id": 1, "title": "M", "date": "2025-06-02"})
                reopened = SqlStorage(engine)
                meetings = await reopened.get_meetings_by_user_and_date(1, "2025-06-02")
                next_record = await reopened.create_project({"user_id": 1, "name": "P"})
                return meetings, next_record
            finally:
                await engine.dispose()

        meetings, next_record = asyncio.run(scenario())

        assert [m["title"] for m in meetings] == ["M"]
        assert next_record["id"] == 2

    def test_kinds_do_not_collide(self, tmp_path) -> None:
        async def scenario():
            engine = _engine(tmp_path)
            try:
                await init_db(engine)
                store = SqlStorage(engine)
                goal = await store.create_goal({"user_id": 1, "title": "G"})
                return goal, await store.get_todos_by_user(1), await store.update_todo(goal["id"], {"title": "x"})
            finally:
                await engine.dispose()

        goal, todos, update = asyncio.run(scenario())

        assert goal["id"] == 1
        assert todos == []
        assert update is None


class TestDatabaseUrl:
    def test_postgres_urls_use_asyncpg(self) -> None:
        assert _normalize_database_url("postgres://u:p@db/app").startswith("postgresql+asyncpg://")
        assert _normalize_database_url("postgresql://u:p@db/app").startswith("postgresql+asyncpg://")

    def test_sslmode_becomes_ssl(self) -> None:
        url = _normalize_database_url("postgresql://u:p@db/app?sslmode=require")

        assert "sslmode" not in url
        assert "ssl=true" in url

    def test_sqlite_uses_aiosqlite(self) -> None:
        assert _normalize_database_url("sqlite:///planner.db") == "sqlite+aiosqlite:///planner.db"
