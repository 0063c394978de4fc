"""
dependencies.py - shared dependencies for FastAPI routes

Both the hit counter and the database client are created once per app in
create_app() and kept on app.state, these functions hand them to routes
"""
from typing import Generator

from fastapi import HTTPException, Request
from sqlalchemy.orm import Session

from chirpy.metrics import HitCounter


def get_hit_counter(request: Request) -> HitCounter:
    """The app's fileserver hit counter."""
    return request.app.state.hits


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency that provides a database session to routes.

    Usage in a route:
        @router.get("/something")
        def my_route(db: Session = Depends(get_db)):
            db.execute(text("SELECT 1"))

    Raises a 503 when the server was started without DB_URL.
    """
    database = getattr(request.app.state, "db", None)
    if database is None:
        raise HTTPException(status_code=503, detail="Database is not configured")

    with database.get_session() as session:
        yield session
