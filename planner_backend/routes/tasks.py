from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

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
from planner_backend.schemas import ProjectCreate, ProjectPatch, TodoCreate, TodoPatch
from planner_backend.storage import Storage

router = APIRouter(prefix="/api")


@router.get("/todos")
async def list_todos(
    project_id: Optional[int] = Query(None, alias="projectId"),
    user_id: int = Depends(current_user_id),
    store: Storage = Depends(get_store),
):
    with store_errors("Failed to fetch todos"):
        if project_id is None:
            items = await store.get_todos_by_user(user_id)
        else:
            items = await store.get_todos_by_project(user_id, project_id)
    return to_wire_list(items)


@router.post("/todos")
async def create_todo(
    body: Any = Body(None),
    user_id: int = Depends(current_user_id),
    store: Storage = Depends(get_store),
):
    # projectId is not checked against existing projects.
    fields = parse_create(TodoCreate, body, "Invalid todo data")
    with store_errors("Failed to create todo"):
        record = await store.create_todo({**fields, "user_id": user_id})
    return to_wire(record)


@router.put("/todos/{todo_id}")
async def update_todo(todo_id: int, body: Any = Body(None), store: Storage = Depends(get_store)):
    patch = parse_patch(TodoPatch, body, "Invalid todo data")
    with store_errors("Failed to update todo"):
        record = await store.update_todo(todo_id, patch)
    return to_wire(require_found(record, "Todo not found"))


@router.delete("/todos/{todo_id}")
async def delete_todo(todo_id: int, store: Storage = Depends(get_store)):
    with store_errors("Failed to delete todo"):
        deleted = await store.delete_todo(todo_id)
    require_found(deleted, "Todo not found")
    return SUCCESS


@router.get("/projects")
async def list_projects(user_id: int = Depends(current_user_id), store: Storage = Depends(get_store)):
    with store_errors("Failed to fetch projects"):
        items = await store.get_projects_by_user(user_id)
    return to_wire_list(items)


@router.post("/projects")
async def create_project(
    body: Any = Body(None),
    user_id: int = Depends(current_user_id),
    store: Storage = Depends(get_store),
):
    fields = parse_create(ProjectCreate, body, "Invalid project data")
    with store_errors("Failed to create project"):
        record = await store.create_project({**fields, "user_id": user_id})
    return to_wire(record)


@router.put("/projects/{project_id}")
async def update_project(project_id: int, body: Any = Body(None), store: Storage = Depends(get_store)):
    patch = parse_patch(ProjectPatch, body, "Invalid project data")
    with store_errors("Failed to update project"):
        record = await store.update_project(project_id, patch)
    return to_wire(require_found(record, "Project not found"))


@router.delete("/projects/{project_id}")
async def delete_project(project_id: int, store: Storage = Depends(get_store)):
    # Todos pointing at the project keep their projectId.
    with store_errors("Failed to delete project"):
        deleted = await store.delete_project(project_id)
    require_found(deleted, "Project not found")
    return SUCCESS
