# swatches/main.py

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.engine import make_url

from swatches.core.config import Settings, settings
from swatches.core.logging import setup_logging
from swatches.api.error_handlers import register_error_handlers
from swatches.api.v1.api import api_router

logger = logging.getLogger(__name__)


def create_application(config: Settings = settings) -> FastAPI:
    setup_logging(config.log_level)

    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.VERSION,
    )

    # ---------- CORS ----------
    if config.backend_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(o).rstrip("/") for o in config.backend_cors_origins],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # ---------- ERRORS ----------
    register_error_handlers(app)

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=config.api_v1_prefix)

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    # ---------- STATIC FILES ----------
    # Front-end lives in /public; mounted last so it never shadows the API
    static_dir = Path(config.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning("Static directory %s not found, not serving /", static_dir)

    logger.info(
        "%s (%s) using %s database",
        config.PROJECT_NAME,
        config.environment,
        make_url(config.database_url).get_backend_name(),
    )
    return app


app = create_application()


def run() -> None:
    import uvicorn

    uvicorn.run(
        "swatches.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
