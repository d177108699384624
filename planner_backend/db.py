from __future__ import annotations

import logging
from urllib.parse import urlparse, urlunparse, parse_qsl, urlencode

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncEngine

from planner_backend.settings import get_settings

logger = logging.getLogger(__name__)


def _normalize_database_url(database_url: str) -> str:
    url = str(database_url or "").strip()
    if not url:
        return url
    if url.startswith("postgres://"):
        url = "postgresql+asyncpg://" + url[len("postgres://") :]
    elif url.startswith("postgresql://"):
        url = "postgresql+asyncpg://" + url[len("postgresql://") :]
    elif url.startswith("postgresql+psycopg2://"):
        url = "postgresql+asyncpg://" + url[len("postgresql+psycopg2://") :]
    elif url.startswith("sqlite://") and not url.startswith("sqlite+"):
        url = "sqlite+aiosqlite://" + url[len("sqlite://") :]
    if not url.startswith("postgresql+asyncpg://"):
        return url
    parsed = urlparse(url)
    clean = []
    ssl_requested = False
    for key, value in parse_qsl(parsed.query, keep_blank_values=True):
        if key == "sslmode":
            ssl_requested = True
            continue
        if key in {"channel_binding", "ssl"}:
            continue
        clean.append((key, value))
    if ssl_requested:
        clean.append(("ssl", "true"))
    return urlunparse(parsed._replace(query=urlencode(clean)))


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker | None = None


def get_engine() -> AsyncEngine:
    global _engine
    if _engine is None:
        settings = get_settings()
        if not settings.database_url:
            raise RuntimeError("DATABASE_URL is required for the sql storage backend")
        db_url = _normalize_database_url(settings.database_url)
        engine_kwargs: dict = {"pool_pre_ping": True, "future": True}
        if db_url.startswith("postgresql+asyncpg://"):
            engine_kwargs.update({"pool_size": 20, "max_overflow": 10})
            host = urlparse(db_url).hostname or ""
            if host and host not in {"localhost", "127.0.0.1"}:
                engine_kwargs["connect_args"] = {"ssl": True}
        logger.info("Creating database engine for %s", urlparse(db_url).scheme)
        _engine = create_async_engine(db_url, **engine_kwargs)
    return _engine


def get_sessionmaker(engine: AsyncEngine | None = None) -> async_sessionmaker:
    global _session_factory
    if engine is not None:
        return async_sessionmaker(engine, expire_on_commit=False)
    if _session_factory is None:
        _session_factory = async_sessionmaker(get_engine(), expire_on_commit=False)
    return _session_factory
