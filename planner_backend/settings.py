from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

STORAGE_BACKENDS = {"memory", "sql"}


class Settings(BaseSettings):
    storage_backend: str = Field("memory", alias="STORAGE_BACKEND")
    database_url: str | None = Field(None, alias="DATABASE_URL")

    demo_user_id: int = Field(1, alias="DEMO_USER_ID")
    demo_username: str = Field("demo", alias="DEMO_USERNAME")
    demo_password: str = Field("demo", alias="DEMO_PASSWORD")

    log_level: str = Field("INFO", alias="BACKEND_LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    @property
    def normalized_storage_backend(self) -> str:
        value = (self.storage_backend or "").strip().lower()
        if value not in STORAGE_BACKENDS:
            raise ValueError(f"Unknown storage backend: {self.storage_backend!r}")
        return value

    @property
    def uses_sql(self) -> bool:
        return self.normalized_storage_backend == "sql"


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None

