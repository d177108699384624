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
from planner_backend.schemas import MeetingCreate, MeetingPatch, ScheduledItemCreate, ScheduledItemPatch
from planner_backend.storage import Storage

router = APIRouter(prefix="/api")


@router.get("/meetings/{day}")
async def list_meetings(day: str, user_id: int = Depends(current_user_id), store: Storage = Depends(get_store)):
    with store_errors("Failed to fetch meetings"):
        items = await store.get_meetings_by_user_and_date(user_id, day)
    return to_wire_list(items)


@router.post("/meetings")
async def create_meeting(
    body: Any = Body(None),
    user_id: int = Depends(current_user_id),
    store: Storage = Depends(get_store),
):
    fields = parse_create(MeetingCreate, body, "Invalid meeting data")
    with store_errors("Failed to create meeting"):
        record = await store.create_meeting({**fields, "user_id": user_id})
    return to_wire(record)


@router.put("/meetings/{meeting_id}")
async def update_meeting(meeting_id: int, body: Any = Body(None), store: Storage = Depends(get_store)):
    patch = parse_patch(MeetingPatch, body, "Invalid meeting data")
    with store_errors("Failed to update meeting"):
        record = await store.update_meeting(meeting_id, patch)
    return to_wire(require_found(record, "Meeting not found"))


@router.delete("/meetings/{meeting_id}")
async def delete_meeting(meeting_id: int, store: Storage = Depends(get_store)):
    with store_errors("Failed to delete meeting"):
        deleted = await store.delete_meeting(meeting_id)
    require_found(deleted, "Meeting not found")
    return SUCCESS


@router.get("/scheduled-items/{day}")
async def list_scheduled_items(day: str, user_id: int = Depends(current_user_id), store: Storage = Depends(get_store)):
    with store_errors("Failed to fetch scheduled items"):
        items = await store.get_scheduled_items_by_user_and_date(user_id, day)
    return to_wire_list(items)


@router.post("/scheduled-items")
async def create_scheduled_item(
    body: Any = Body(None),
    user_id: int = Depends(current_user_id),
    store: Storage = Depends(get_store),
):
    # No check for an item already occupying the same date and start time.
    fields = parse_create(ScheduledItemCreate, body, "Invalid scheduled item data")
    with store_errors("Failed to create scheduled item"):
        record = await store.create_scheduled_item({**fields, "user_id": user_id})
    return to_wire(record)


@router.put("/scheduled-items/{item_id}")
async def update_scheduled_item(item_id: int, body: Any = Body(None), store: Storage = Depends(get_store)):
    patch = parse_patch(ScheduledItemPatch, body, "Invalid scheduled item data")
    with store_errors("Failed to update scheduled item"):
        record = await store.update_scheduled_item(item_id, patch)
    return to_wire(require_found(record, "Scheduled item not found"))


@router.delete("/scheduled-items/{item_id}")
async def delete_scheduled_item(item_id: int, store: Storage = Depends(get_store)):
    with store_errors("Failed to delete scheduled item"):
        deleted = await store.delete_scheduled_item(item_id)
    require_found(deleted, "Scheduled item not found")
    return SUCCESS
