"""
Wall Backend API
Registration, sign-in and the shared post feed over a local persistent store.
Run: uvicorn --factory main:create_app
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import auth_router, health_router, posts_router
from config import Settings, get_settings
from repositories import FileStore, MemoryStore, StoreProtocol
from wall_service import WallService

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> StoreProtocol:
    if settings.WALL_STORAGE == "memory":
        logger.warning("WALL_STORAGE=memory: users, posts and sessions are lost on exit")
        return MemoryStore()
    return FileStore(settings.WALL_DATA_DIR)


def create_app(settings: Optional[Settings] = None, store: Optional[StoreProtocol] = None) -> FastAPI:
    """Build the app and its single WallService. ``store`` overrides the configured backend."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)
    service = WallService(store if store is not None else build_store(settings))

    app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION)
    app.state.settings = settings
    app.state.wall_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(posts_router)
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:create_app", factory=True, host="0.0.0.0", port=8000)
