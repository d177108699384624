from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Type

from fastapi import HTTPException
from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

SUCCESS = {"success": True}


def parse_create(model: Type[BaseModel], body: Any, message: str) -> dict:
    """Validate a create body; defaults are filled in for omitted fields."""
    return _parse(model, body, message, exclude_unset=False)


def parse_patch(model: Type[BaseModel], body: Any, message: str) -> dict:
    """Validate a partial body; only the keys the caller sent are returned."""
    return _parse(model, body, message, exclude_unset=True)


def _parse(model: Type[BaseModel], body: Any, message: str, exclude_unset: bool) -> dict:
    try:
        payload = model.model_validate(body)
    except ValidationError as exc:
        logger.info("Rejected %s payload (%s errors)", model.__name__, exc.error_count())
        raise HTTPException(status_code=400, detail=message) from exc
    return payload.model_dump(mode="json", exclude_unset=exclude_unset)


def to_wire(record: dict | None) -> dict | None:
    if record is None:
        return None
    return {to_camel(key): value for key, value in record.items()}


def to_wire_list(records: list[dict]) -> list[dict]:
    return [to_wire(record) for record in records]


def require_found(record, message: str):
    if not record:
        raise HTTPException(status_code=404, detail=message)
    return record


@contextmanager
def store_errors(message: str):
    """Turn unexpected store failures into a 500 with a generic message."""
    try:
        yield
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("%s: %s", message, exc)
        raise HTTPException(status_code=500, detail=message) from exc
