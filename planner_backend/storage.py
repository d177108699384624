"""Entity store for the planner API.

Every entity kind lives in its own id -> record map. A single store-wide
counter issues ids for all kinds, so an id is unique across the whole store,
not just within its kind. Records are plain JSON-ready dicts with snake_case
keys; route handlers convert them to camelCase on the way out.

``Storage`` implements the typed operations on top of five primitives
(``_next_id``, ``_get``, ``_put``, ``_remove``, ``_values``). ``MemStorage``
keeps the maps in process memory; ``SqlStorage`` keeps them in a single
SQLAlchemy table. Neither offers transactions or locking: ``update`` is a read,
a shallow merge and a write.
"""
from __future__ import annotations

import json
import logging
from datetime import date, datetime

from sqlalchemy import text as sql_text
from sqlalchemy.ext.asyncio import AsyncEngine

from planner_backend.db import get_engine, get_sessionmaker
from planner_backend.settings import get_settings

logger = logging.getLogger(__name__)

USERS = "users"
MEETINGS = "meetings"
TODOS = "todos"
PROJECTS = "projects"
SCHEDULED_ITEMS = "scheduled_items"
PASSWORDS = "passwords"
GOALS = "goals"
HABIT_TRACKING = "habit_tracking"
HABIT_LEGENDS = "habit_legends"
ACCOUNTS = "accounts"
TRANSACTIONS = "transactions"
FINANCIAL_GOALS = "financial_goals"
HEALTH_SCORES = "health_scores"

KINDS = (
    USERS,
    MEETINGS,
    TODOS,
    PROJECTS,
    SCHEDULED_ITEMS,
    PASSWORDS,
    GOALS,
    HABIT_TRACKING,
    HABIT_LEGENDS,
    ACCOUNTS,
    TRANSACTIONS,
    FINANCIAL_GOALS,
    HEALTH_SCORES,
)

# Optional fields stored as null when a create payload omits them.
NULLABLE_FIELDS = {
    MEETINGS: ("color",),
    TODOS: ("description", "priority", "estimated_duration", "completed", "project_id", "due_date"),
    PROJECTS: ("description", "color"),
    SCHEDULED_ITEMS: ("original_id", "color"),
    PASSWORDS: ("url", "username", "email", "notes"),
    GOALS: ("description", "target_value", "current_value", "unit", "target_date", "is_active"),
    ACCOUNTS: ("balance", "currency", "is_active"),
    TRANSACTIONS: ("description",),
    FINANCIAL_GOALS: ("current_amount", "weekly_allocation", "target_date", "is_active"),
    HEALTH_SCORES: ("notes",),
}

CREATED_AT_KINDS = {TODOS, PASSWORDS, TRANSACTIONS}
UPDATED_AT_KINDS = {PASSWORDS}


def _now_iso() -> str:
    return datetime.utcnow().isoformat()


def _month_and_year(value) -> tuple[int, int] | None:
    if isinstance(value, date):
        return value.month, value.year
    try:
        parsed = date.fromisoformat(str(value)[:10])
    except (TypeError, ValueError):
        return None
    return parsed.month, parsed.year


class Storage:
    """Typed CRUD operations over per-kind record maps."""

    async def _next_id(self) -> int:
        raise NotImplementedError

    async def _get(self, kind: str, record_id: int) -> dict | None:
        raise NotImplementedError

    async def _put(self, kind: str, record_id: int, record: dict) -> None:
        raise NotImplementedError

    async def _remove(self, kind: str, record_id: int) -> bool:
        raise NotImplementedError

    async def _values(self, kind: str) -> list[dict]:
        raise NotImplementedError

    async def create(self, kind: str, fields: dict) -> dict:
        record_id = await self._next_id()
        record = {key: None for key in NULLABLE_FIELDS.get(kind, ())}
        record.update({key: value for key, value in fields.items() if key != "id"})
        record["id"] = record_id
        if kind in CREATED_AT_KINDS:
            record["created_at"] = _now_iso()
        if kind in UPDATED_AT_KINDS:
            record["updated_at"] = record.get("created_at") or _now_iso()
        await self._put(kind, record_id, record)
        logger.debug("Created %s #%s", kind, record_id)
        return dict(record)

    async def get(self, kind: str, record_id: int) -> dict | None:
        record = await self._get(kind, record_id)
        return dict(record) if record is not None else None

    async def update(self, kind: str, record_id: int, partial: dict) -> dict | None:
        existing = await self._get(kind, record_id)
        if existing is None:
            return None
        updated = {**existing, **{key: value for key, value in partial.items() if key != "id"}}
        if kind in UPDATED_AT_KINDS:
            updated["updated_at"] = _now_iso()
        await self._put(kind, record_id, updated)
        return dict(updated)

    async def delete(self, kind: str, record_id: int) -> bool:
        deleted = await self._remove(kind, record_id)
        if deleted:
            logger.debug("Deleted %s #%s", kind, record_id)
        return deleted

    async def filter(self, kind: str, **match) -> list[dict]:
        return [
            dict(record)
            for record in await self._values(kind)
            if all(record.get(key) == value for key, value in match.items())
        ]

    # Users

    async def get_user(self, user_id: int) -> dict | None:
        return await self.get(USERS, user_id)

    async def get_user_by_username(self, username: str) -> dict | None:
        matches = await self.filter(USERS, username=username)
        return matches[0] if matches else None

    async def create_user(self, fields: dict) -> dict:
        return await self.create(USERS, fields)

    # Meetings

    async def get_meetings_by_user_and_date(self, user_id: int, day: str) -> list[dict]:
        return await self.filter(MEETINGS, user_id=user_id, date=day)

    async def create_meeting(self, fields: dict) -> dict:
        return await self.create(MEETINGS, fields)

    async def update_meeting(self, meeting_id: int, fields: dict) -> dict | None:
        return await self.update(MEETINGS, meeting_id, fields)

    async def delete_meeting(self, meeting_id: int) -> bool:
        return await self.delete(MEETINGS, meeting_id)

    # Todos

    async def get_todos_by_user(self, user_id: int) -> list[dict]:
        return await self.filter(TODOS, user_id=user_id)

    async def get_todos_by_project(self, user_id: int, project_id: int) -> list[dict]:
        return await self.filter(TODOS, user_id=user_id, project_id=project_id)

    async def create_todo(self, fields: dict) -> dict:
        return await self.create(TODOS, fields)

    async def update_todo(self, todo_id: int, fields: dict) -> dict | None:
        return await self.update(TODOS, todo_id, fields)

    async def delete_todo(self, todo_id: int) -> bool:
        return await self.delete(TODOS, todo_id)

    # Projects

    async def get_projects_by_user(self, user_id: int) -> list[dict]:
        return await self.filter(PROJECTS, user_id=user_id)

    async def create_project(self, fields: dict) -> dict:
        return await self.create(PROJECTS, fields)

    async def update_project(self, project_id: int, fields: dict) -> dict | None:
        return await self.update(PROJECTS, project_id, fields)

    async def delete_project(self, project_id: int) -> bool:
        return await self.delete(PROJECTS, project_id)

    # Scheduled items

    async def get_scheduled_items_by_user_and_date(self, user_id: int, day: str) -> list[dict]:
        return await self.filter(SCHEDULED_ITEMS, user_id=user_id, date=day)

    async def create_scheduled_item(self, fields: dict) -> dict:
        return await self.create(SCHEDULED_ITEMS, fields)

    async def update_scheduled_item(self, item_id: int, fields: dict) -> dict | None:
        return await self.update(SCHEDULED_ITEMS, item_id, fields)

    async def delete_scheduled_item(self, item_id: int) -> bool:
        return await self.delete(SCHEDULED_ITEMS, item_id)

    # Passwords

    async def get_passwords_by_user(self, user_id: int) -> list[dict]:
        return await self.filter(PASSWORDS, user_id=user_id)

    async def create_password(self, fields: dict) -> dict:
        return await self.create(PASSWORDS, fields)

    async def update_password(self, password_id: int, fields: dict) -> dict | None:
        return await self.update(PASSWORDS, password_id, fields)

    async def delete_password(self, password_id: int) -> bool:
        return await self.delete(PASSWORDS, password_id)

    # Goals

    async def get_goals_by_user(self, user_id: int) -> list[dict]:
        return await self.filter(GOALS, user_id=user_id)

    async def create_goal(self, fields: dict) -> dict:
        return await self.create(GOALS, fields)

    async def update_goal(self, goal_id: int, fields: dict) -> dict | None:
        return await self.update(GOALS, goal_id, fields)

    async def delete_goal(self, goal_id: int) -> bool:
        return await self.delete(GOALS, goal_id)

    # Habit tracking

    async def get_habit_tracking_by_user_and_month(self, user_id: int, month: int, year: int) -> list[dict]:
        return [
            record
            for record in await self.filter(HABIT_TRACKING, user_id=user_id)
            if _month_and_year(record.get("date")) == (month, year)
        ]

    async def create_habit_tracking(self, fields: dict) -> dict:
        return await self.create(HABIT_TRACKING, fields)

    async def update_habit_tracking(self, tracking_id: int, fields: dict) -> dict | None:
        return await self.update(HABIT_TRACKING, tracking_id, fields)

    async def delete_habit_tracking(self, tracking_id: int) -> bool:
        return await self.delete(HABIT_TRACKING, tracking_id)

    # Habit legends

    async def get_habit_legends_by_user(self, user_id: int) -> list[dict]:
        return await self.filter(HABIT_LEGENDS, user_id=user_id)

    async def create_habit_legend(self, fields: dict) -> dict:
        return await self.create(HABIT_LEGENDS, fields)

    async def update_habit_legend(self, legend_id: int, fields: dict) -> dict | None:
        return await self.update(HABIT_LEGENDS, legend_id, fields)

    async def delete_habit_legend(self, legend_id: int) -> bool:
        return await self.delete(HABIT_LEGENDS, legend_id)

    # Accounts

    async def get_accounts_by_user(self, user_id: int) -> list[dict]:
        return await self.filter(ACCOUNTS, user_id=user_id)

    async def create_account(self, fields: dict) -> dict:
        return await self.create(ACCOUNTS, fields)

    async def update_account(self, account_id: int, fields: dict) -> dict | None:
        return await self.update(ACCOUNTS, account_id, fields)

    async def delete_account(self, account_id: int) -> bool:
        return await self.delete(ACCOUNTS, account_id)

    # Transactions

    async def get_transactions_by_user(self, user_id: int) -> list[dict]:
        return await self.filter(TRANSACTIONS, user_id=user_id)

    async def get_transactions_by_account(self, account_id: int) -> list[dict]:
        return await self.filter(TRANSACTIONS, account_id=account_id)

    async def create_transaction(self, fields: dict) -> dict:
        return await self.create(TRANSACTIONS, fields)

    async def update_transaction(self, transaction_id: int, fields: dict) -> dict | None:
        return await self.update(TRANSACTIONS, transaction_id, fields)

    async def delete_transaction(self, transaction_id: int) -> bool:
        return await self.delete(TRANSACTIONS, transaction_id)

    # Financial goals

    async def get_financial_goals_by_user(self, user_id: int) -> list[dict]:
        return await self.filter(FINANCIAL_GOALS, user_id=user_id)

    async def create_financial_goal(self, fields: dict) -> dict:
        return await self.create(FINANCIAL_GOALS, fields)

    async def update_financial_goal(self, goal_id: int, fields: dict) -> dict | None:
        return await self.update(FINANCIAL_GOALS, goal_id, fields)

    async def delete_financial_goal(self, goal_id: int) -> bool:
        return await self.delete(FINANCIAL_GOALS, goal_id)

    # Health scores

    async def get_health_scores_by_user(self, user_id: int) -> list[dict]:
        return await self.filter(HEALTH_SCORES, user_id=user_id)

    async def get_health_score_by_user_and_month(self, user_id: int, month: int, year: int) -> dict | None:
        matches = await self.filter(HEALTH_SCORES, user_id=user_id, month=month, year=year)
        return matches[0] if matches else None

    async def create_health_score(self, fields: dict) -> dict:
        return await self.create(HEALTH_SCORES, fields)

    async def update_health_score(self, score_id: int, fields: dict) -> dict | None:
        return await self.update(HEALTH_SCORES, score_id, fields)

    async def delete_health_score(self, score_id: int) -> bool:
        return await self.delete(HEALTH_SCORES, score_id)


class MemStorage(Storage):
    """Process-memory store. Everything is lost on restart."""

    def __init__(self):
        self._maps: dict[str, dict[int, dict]] = {kind: {} for kind in KINDS}
        self._current_id = 1

    async def _next_id(self) -> int:
        record_id = self._current_id
        self._current_id += 1
        return record_id

    async def _get(self, kind: str, record_id: int) -> dict | None:
        return self._maps[kind].get(record_id)

    async def _put(self, kind: str, record_id: int, record: dict) -> None:
        self._maps[kind][record_id] = dict(record)

    async def _remove(self, kind: str, record_id: int) -> bool:
        return self._maps[kind].pop(record_id, None) is not None

    async def _values(self, kind: str) -> list[dict]:
        return list(self._maps[kind].values())


RECORDS_TABLE = "entity_records"
COUNTER_TABLE = "entity_counter"
COUNTER_NAME = "global"


class SqlStorage(Storage):
    """Store backed by one SQL table of JSON payloads keyed by id."""

    def __init__(self, engine: AsyncEngine | None = None):
        self.engine = engine or get_engine()
        self._session_factory = get_sessionmaker(engine)

    async def _next_id(self) -> int:
        async with self._session_factory() as session:
            current = (await session.execute(
                sql_text(f"SELECT value FROM {COUNTER_TABLE} WHERE name = :name"),
                {"name": COUNTER_NAME},
            )).scalar_one_or_none()
            if current is None:
                current = 1
                await session.execute(
                    sql_text(f"INSERT INTO {COUNTER_TABLE} (name, value) VALUES (:name, :value)"),
                    {"name": COUNTER_NAME, "value": current + 1},
                )
            else:
                await session.execute(
                    sql_text(f"UPDATE {COUNTER_TABLE} SET value = :value WHERE name = :name"),
                    {"name": COUNTER_NAME, "value": int(current) + 1},
                )
            await session.commit()
        return int(current)

    async def _get(self, kind: str, record_id: int) -> dict | None:
        async with self._session_factory() as session:
            raw = (await session.execute(
                sql_text(f"SELECT payload_json FROM {RECORDS_TABLE} WHERE kind = :kind AND id = :id"),
                {"kind": kind, "id": record_id},
            )).scalar_one_or_none()
        return json.loads(raw) if raw else None

    async def _put(self, kind: str, record_id: int, record: dict) -> None:
        async with self._session_factory() as session:
            await session.execute(
                sql_text(
                    f"""
                    INSERT INTO {RECORDS_TABLE} (id, kind, user_id, payload_json)
                    VALUES (:id, :kind, :user_id, :payload_json)
                    ON CONFLICT(id) DO UPDATE SET
                        user_id = EXCLUDED.user_id,
                        payload_json = EXCLUDED.payload_json
                    """
                ),
                {
                    "id": record_id,
                    "kind": kind,
                    "user_id": record.get("user_id"),
                    "payload_json": json.dumps(record, ensure_ascii=False, default=str),
                },
            )
            await session.commit()

    async def _remove(self, kind: str, record_id: int) -> bool:
        async with self._session_factory() as session:
            result = await session.execute(
                sql_text(f"DELETE FROM {RECORDS_TABLE} WHERE kind = :kind AND id = :id"),
                {"kind": kind, "id": record_id},
            )
            await session.commit()
        return (result.rowcount or 0) > 0

    async def _values(self, kind: str) -> list[dict]:
        async with self._session_factory() as session:
            rows = (await session.execute(
                sql_text(f"SELECT payload_json FROM {RECORDS_TABLE} WHERE kind = :kind ORDER BY id"),
                {"kind": kind},
            )).scalars().all()
        return [json.loads(raw) for raw in rows]


_storage: Storage | None = None


def get_storage() -> Storage:
    global _storage
    if _storage is None:
        if get_settings().uses_sql:
            _storage = SqlStorage()
        else:
            _storage = MemStorage()
    return _storage
