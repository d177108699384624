from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from planner_backend.auth import current_user_id, get_store
from planner_backend.routes.common import (
    SUCCESS,
    parse_create,
    parse_patch,
    require_found,
    store_errors,
    to_wire,
    to_wire_list,
)
from planner_backend.schemas import HealthScoreCreate, HealthScorePatch
from planner_backend.storage import Storage

router = APIRouter(prefix="/api")


@router.get("/health-scores")
async def list_health_scores(user_id: int = Depends(current_user_id), store: Storage = Depends(get_store)):
    with store_errors("Failed to fetch health scores"):
        items = await store.get_health_scores_by_user(user_id)
    return to_wire_list(items)


@router.get("/health-scores/{month}/{year}")
async def get_health_score(
    month: int,
    year: int,
    user_id: int = Depends(current_user_id),
    store: Storage = Depends(get_store),
):
    with store_errors("Failed to fetch health score"):
        record = await store.get_health_score_by_user_and_month(user_id, month, year)
    return to_wire(record)


@router.post("/health-scores")
async def create_health_score(
    body: Any = Body(None),
    user_id: int = Depends(current_user_id),
    store: Storage = Depends(get_store),
):
    # A second score for the same month and year is stored alongside the first.
    fields = parse_create(HealthScoreCreate, body, "Invalid health score data")
    with store_errors("Failed to create health score"):
        record = await store.create_health_score({**fields, "user_id": user_id})
    return to_wire(record)


@router.put("/health-scores/{score_id}")
async def update_health_score(score_id: int, body: Any = Body(None), store: Storage = Depends(get_store)):
    patch = parse_patch(HealthScorePatch, body, "Invalid health score data")
    with store_errors("Failed to update health score"):
        record = await store.update_health_score(score_id, patch)
    return to_wire(require_found(record, "Health score not found"))


@router.delete("/health-scores/{score_id}")
async def delete_health_score(score_id: int, store: Storage = Depends(get_store)):
    with store_errors("Failed to delete health score"):
        deleted = await store.delete_health_score(score_id)
    require_found(deleted, "Health score not found")
    return SUCCESS
