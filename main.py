"""
User Auth Service — application entry point.
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI

from api.auth import router as auth_router
from api.middleware import register_middleware
from config.settings import Settings, config
from core.credential_store import CredentialStore

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("httpcore", "httpx", "urllib3", "asyncio"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or config

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        description="User registration and login backed by an in-memory credential store.",
    )

    # One store per app instance; it lives exactly as long as the app.
    app.state.settings = settings
    app.state.credential_store = CredentialStore()

    register_middleware(app, settings)

    # Routes
    app.include_router(auth_router)

    @app.on_event("startup")
    async def on_startup():
        logger.info("Listening at http://%s:%d", settings.host, settings.port)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
