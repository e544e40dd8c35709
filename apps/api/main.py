from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
from sqlalchemy.exc import InterfaceError, OperationalError

from apps.api.routes import (
    ai,
    health,
    lists,
    masters,
    places,
    search,
    users,
)
from apps.core.config import settings
from apps.core.db import Database

logger = logging.getLogger(__name__)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the API. A given ``database`` is used as-is and not disposed by the app."""
    app = FastAPI(
        title="Place Bookmark API",
        description="Saved places, lists and distance-aware filtered search",
        version="1.0.0",
    )
    app.state.db = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(OperationalError)
    @app.exception_handler(InterfaceError)
    async def data_store_unavailable(request: Request, exc: Exception):
        logger.exception("Data store error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=503, content={"detail": "Data store unavailable"})

    @app.on_event("startup")
    def open_database():
        if app.state.db is None:
            app.state.db = Database()
            app.state.owns_db = True
        if settings.create_tables:
            app.state.db.create_all()
        logger.info("startup complete", extra={"env": settings.environment, "port": settings.port})

    @app.on_event("shutdown")
    def close_database():
        if getattr(app.state, "owns_db", False):
            app.state.db.dispose()
            app.state.db = None
        logger.info("shutdown complete")

    app.include_router(health.router, prefix="/api")
    app.include_router(search.router, prefix="/api", tags=["search"])
    app.include_router(places.router, prefix="/api", tags=["places"])
    app.include_router(lists.router, prefix="/api")
    app.include_router(masters.router, prefix="/api")
    app.include_router(users.router, prefix="/api")
    app.include_router(ai.router, prefix="/api")

    @app.get("/")
    async def root():
        return {"message": "Place Bookmark API", "version": "1.0.0"}

    return app


app = create_app()
