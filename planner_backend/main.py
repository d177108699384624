from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from planner_backend.db_init import init_db, seed_demo_data
from planner_backend.routes import finance, habits, health, passwords, planner, tasks
from planner_backend.settings import get_settings
from planner_backend.storage import SqlStorage, Storage, get_storage


def create_app(storage: Storage | None = None) -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    app = FastAPI(title="Planner API", version="0.1.0")
    app.state.storage = storage if storage is not None else get_storage()

    app.include_router(planner.router)
    app.include_router(tasks.router)
    app.include_router(passwords.router)
    app.include_router(habits.router)
    app.include_router(finance.router)
    app.include_router(health.router)

    @app.on_event("startup")
    async def _startup():
        store = app.state.storage
        if isinstance(store, SqlStorage):
            await init_db(store.engine)
        user = await seed_demo_data(store, settings.demo_username, settings.demo_password)
        logging.getLogger("planner_backend").info("Demo user ready (id=%s)", user.get("id"))

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def _validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"message": "Invalid request"})

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logging.getLogger("planner_backend").exception("Unhandled exception: %s", exc)
        return JSONResponse(status_code=500, content={"message": "Internal error"})

    @app.get("/health")
    async def health_check():
        return {"ok": True}

    return app


app = create_app()
