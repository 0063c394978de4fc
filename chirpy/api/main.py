"""
main.py - The entry point for the Chirpy FastAPI application

This file does three things:
1. Creates the FastAPI application instance (create_app)
2. Mounts the static fileserver under /app, wrapped so every hit is counted
3. Registers the API and admin routes and the chirp error handler
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from chirpy import __version__
from chirpy.api.responses import respond_with_error
from chirpy.api.routes import admin, chirps, health
from chirpy.chirps import ChirpError
from chirpy.config import Settings
from chirpy.database.connection import DatabaseConnection
from chirpy.metrics import HitCounter, count_hits

logger = logging.getLogger(__name__)


def open_database(db_url: Optional[str]) -> Optional[DatabaseConnection]:
    """
    Build the database client, or None when DB_URL isn't set.

    A malformed URL is logged and re-raised so the server refuses to start.
    """
    if not db_url:
        logger.warning("DB_URL is not set, starting without a database client")
        return None

    try:
        return DatabaseConnection(db_url)
    except Exception as e:
        logger.error(f"Could not set up database client: {e}")
        raise


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build a Chirpy app.

    Each app gets its own HitCounter, so tests can create fresh apps without
    sharing counts.
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.db = open_database(settings.db_url)
        logger.info(f"Chirpy serving files from '{settings.filepath_root}'")
        try:
            yield
        finally:
            if app.state.db is not None:
                app.state.db.dispose()
            logger.info("Chirpy shut down")

    #create the app instance, this is what uvicorn runs
    app = FastAPI(
        title="Chirpy",
        description="Chirp validation API with an admin hit counter",
        version=__version__,
        lifespan=lifespan
    )
    app.state.hits = HitCounter()
    app.state.db = None

    @app.exception_handler(ChirpError)
    async def chirp_error_handler(request: Request, exc: ChirpError):
        return respond_with_error(exc.status_code, exc.message)

    app.include_router(health.router)
    app.include_router(admin.router)
    app.include_router(chirps.router)

    # /app/foo serves <filepath_root>/foo, html=True makes directories serve index.html
    file_server = StaticFiles(directory=settings.filepath_root, html=True)
    app.mount("/app", count_hits(file_server, app.state.hits), name="app")

    return app


app = create_app()
