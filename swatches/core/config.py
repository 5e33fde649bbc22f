# File: swatches/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, AnyHttpUrl, ConfigDict, field_validator


class Settings(BaseModel):
    # env values below are raw strings, run them through the validators too
    model_config = ConfigDict(validate_default=True)

    # Basic app info
    PROJECT_NAME: str = "swatches"
    VERSION: str = "0.1.0"

    api_v1_prefix: str = "/api/v1"
    environment: str = os.getenv("SWATCHES_ENV", "development")

    # Server
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "3000"))

    # CORS
    backend_cors_origins: List[AnyHttpUrl] = os.getenv("BACKEND_CORS_ORIGINS", "")

    # Database
    database_url: str = os.getenv(
        "DATABASE_URL", "postgresql+psycopg://localhost/swatches"
    )

    # Front-end served at "/"
    static_dir: str = os.getenv("STATIC_DIR", "public")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("database_url", mode="before")
    @classmethod
    def use_psycopg_driver(cls, v):
        # Heroku-style URLs come as postgres:// or postgresql:// with no driver
        if isinstance(v, str):
            for prefix in ("postgres://", "postgresql://"):
                if v.startswith(prefix):
                    return "postgresql+psycopg://" + v[len(prefix):]
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
