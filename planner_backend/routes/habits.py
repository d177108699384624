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
from planner_backend.schemas import (
    GoalCreate,
    GoalPatch,
    HabitLegendCreate,
    HabitLegendPatch,
    HabitTrackingCreate,
    HabitTrackingPatch,
)
from planner_backend.storage import Storage

router = APIRouter(prefix="/api")


@router.get("/goals")
async def list_goals(user_id: int = Depends(current_user_id), store: Storage = Depends(get_store)):
    with store_errors("Failed to fetch goals"):
        items = await store.get_goals_by_user(user_id)
    return to_wire_list(items)


@router.post("/goals")
async def create_goal(
    body: Any = Body(None),
    user_id: int = Depends(current_user_id),
    store: Storage = Depends(get_store),
):
    fields = parse_create(GoalCreate, body, "Invalid goal data")
    with store_errors("Failed to create goal"):
        record = await store.create_goal({**fields, "user_id": user_id})
    return to_wire(record)


@router.put("/goals/{goal_id}")
async def update_goal(goal_id: int, body: Any = Body(None), store: Storage = Depends(get_store)):
    patch = parse_patch(GoalPatch, body, "Invalid goal data")
    with store_errors("Failed to update goal"):
        record = await store.update_goal(goal_id, patch)
    return to_wire(require_found(record, "Goal not found"))


@router.delete("/goals/{goal_id}")
async def delete_goal(goal_id: int, store: Storage = Depends(get_store)):
    with store_errors("Failed to delete goal"):
        deleted = await store.delete_goal(goal_id)
    require_found(deleted, "Goal not found")
    return SUCCESS


@router.get("/habit-tracking/{month}/{year}")
async def list_habit_tracking(
    month: int,
    year: int,
    user_id: int = Depends(current_user_id),
    store: Storage = Depends(get_store),
):
    with store_errors("Failed to fetch habit tracking"):
        items = await store.get_habit_tracking_by_user_and_month(user_id, month, year)
    return to_wire_list(items)


@router.post("/habit-tracking")
async def create_habit_tracking(
    body: Any = Body(None),
    user_id: int = Depends(current_user_id),
    store: Storage = Depends(get_store),
):
    # Always a new record, even when the (habit, date) cell already has one.
    fields = parse_create(HabitTrackingCreate, body, "Invalid habit tracking data")
    with store_errors("Failed to create habit tracking"):
        record = await store.create_habit_tracking({**fields, "user_id": user_id})
    return to_wire(record)


@router.put("/habit-tracking/{tracking_id}")
async def update_habit_tracking(tracking_id: int, body: Any = Body(None), store: Storage = Depends(get_store)):
    patch = parse_patch(HabitTrackingPatch, body, "Invalid habit tracking data")
    with store_errors("Failed to update habit tracking"):
        record = await store.update_habit_tracking(tracking_id, patch)
    return to_wire(require_found(record, "Habit tracking not found"))


@router.delete("/habit-tracking/{tracking_id}")
async def delete_habit_tracking(tracking_id: int, store: Storage = Depends(get_store)):
    with store_errors("Failed to delete habit tracking"):
        deleted = await store.delete_habit_tracking(tracking_id)
    require_found(deleted, "Habit tracking not found")
    return SUCCESS


@router.get("/habit-legends")
async def list_habit_legends(user_id: int = Depends(current_user_id), store: Storage = Depends(get_store)):
    with store_errors("Failed to fetch habit legends"):
        items = await store.get_habit_legends_by_user(user_id)
    return to_wire_list(items)


@router.post("/habit-legends")
async def create_habit_legend(
    body: Any = Body(None),
    user_id: int = Depends(current_user_id),
    store: Storage = Depends(get_store),
):
    fields = parse_create(HabitLegendCreate, body, "Invalid habit legend data")
    with store_errors("Failed to create habit legend"):
        record = await store.create_habit_legend({**fields, "user_id": user_id})
    return to_wire(record)


@router.put("/habit-legends/{legend_id}")
async def update_habit_legend(legend_id: int, body: Any = Body(None), store: Storage = Depends(get_store)):
    patch = parse_patch(HabitLegendPatch, body, "Invalid habit legend data")
    with store_errors("Failed to update habit legend"):
        record = await store.update_habit_legend(legend_id, patch)
    return to_wire(require_found(record, "Habit legend not found"))


@router.delete("/habit-legends/{legend_id}")
async def delete_habit_legend(legend_id: int, store: Storage = Depends(get_store)):
    with store_errors("Failed to delete habit legend"):
        deleted = await store.delete_habit_legend(legend_id)
    require_found(deleted, "Habit legend not found")
    return SUCCESS
