"""
metrics.py - the fileserver hit counter and the ASGI wrapper that feeds it

The counter is shared by every request, whether it runs on the event loop
or on one of the threadpool workers FastAPI uses for sync endpoints
"""
import logging
import threading

from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)


class HitCounter:
    """
    Process-wide request counter with atomic increment, read and reset.

    Every read and write goes through the lock.
    """

    def __init__(self):
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one hit and return the new total."""
        with self._lock:
            self._value += 1
            return self._value

    def read(self) -> int:
        with self._lock:
            return self._value

    def reset(self):
        """Set the count back to zero, regardless of its current value."""
        with self._lock:
            self._value = 0
        logger.info("Hit counter reset to 0")

    def __repr__(self):
        return f"<HitCounter(hits={self.read()})>"


def count_hits(app: ASGIApp, counter: HitCounter) -> ASGIApp:
    """
    Wrap an ASGI app so every HTTP request bumps ``counter`` before it is served.

    Usage:
        app.mount("/app", count_hits(StaticFiles(directory="."), counter))

    Lifespan and websocket scopes pass straight through without counting.
    """
    async def counting_app(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            counter.increment()
        await app(scope, receive, send)

    return counting_app
