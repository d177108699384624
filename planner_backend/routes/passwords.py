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
from planner_backend.schemas import PasswordCreate, PasswordPatch
from planner_backend.storage import Storage

router = APIRouter(prefix="/api")

# Passwords are stored and returned as plain text.


@router.get("/passwords")
async def list_passwords(user_id: int = Depends(current_user_id), store: Storage = Depends(get_store)):
    with store_errors("Failed to fetch passwords"):
        items = await store.get_passwords_by_user(user_id)
    return to_wire_list(items)


@router.post("/passwords")
async def create_password(
    body: Any = Body(None),
    user_id: int = Depends(current_user_id),
    store: Storage = Depends(get_store),
):
    fields = parse_create(PasswordCreate, body, "Invalid password data")
    with store_errors("Failed to create password"):
        record = await store.create_password({**fields, "user_id": user_id})
    return to_wire(record)


@router.put("/passwords/{password_id}")
async def update_password(password_id: int, body: Any = Body(None), store: Storage = Depends(get_store)):
    patch = parse_patch(PasswordPatch, body, "Invalid password data")
    with store_errors("Failed to update password"):
        record = await store.update_password(password_id, patch)
    return to_wire(require_found(record, "Password not found"))


@router.delete("/passwords/{password_id}")
async def delete_password(password_id: int, store: Storage = Depends(get_store)):
    with store_errors("Failed to delete password"):
        deleted = await store.delete_password(password_id)
    require_found(deleted, "Password not found")
    return SUCCESS
