"""
Database connection management for Chirpy
This module builds the SQLAlchemy engine from DB_URL. Handlers don't query it yet,
but it is created at startup and exposed through a FastAPI dependency
"""
import os
import logging
from contextlib import contextmanager
from typing import Optional

from sqlalchemy import create_engine, event, exc, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, scoped_session

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """
    Manages database connections with pooling and per-process safety checks.

    Creating one does NOT open a connection: the engine connects lazily the
    first time a session actually needs it.
    """
    def __init__(self, database_url: Optional[str] = None):
        """
        Initialize the database connection.

        Args:
            database_url: SQLAlchemy connection string. If None, reads DB_URL from environment.

        Raises:
            ValueError: no URL was given and DB_URL is not set
            sqlalchemy.exc.ArgumentError: the URL can't be parsed
        """
        self.database_url = database_url or os.getenv("DB_URL")
        if not self.database_url:
            raise ValueError("No database URL given and DB_URL is not set")

        # Engine manages the connection pool
        self.engine = None

        # Session factory creates new database sessions
        self.Session = None

        self._init_engine()

    def _init_engine(self):
        """
        Create the engine and session factory.

        Pool tuning only applies to PostgreSQL, other backends (sqlite in tests)
        don't accept the same pool arguments
        """
        url = make_url(self.database_url)

        engine_kwargs = {"echo": False}
        if url.get_backend_name() == "postgresql":
            engine_kwargs.update(
                pool_size=5,          # Number of connections to maintain in pool
                max_overflow=10,      # Maximum overflow connections allowed
                pool_timeout=30,      # Seconds to wait before timing out
                pool_recycle=1800,    # Recycle connections after 30 minutes
                connect_args={
                    "options": "-c timezone=utc"  # Always use UTC in database
                },
            )
        elif url.get_backend_name() == "sqlite":
            # FastAPI may open a session in one threadpool worker and use it in another
            engine_kwargs["connect_args"] = {"check_same_thread": False}

        self.engine = create_engine(url, **engine_kwargs)

        @event.listens_for(self.engine, "connect")
        def receive_connect(dbapi_connection, connection_record):
            """Remember which process opened this connection"""
            connection_record.info['pid'] = os.getpid()

        @event.listens_for(self.engine, "checkout")
        def receive_checkout(dbapi_connection, connection_record, connection_proxy):
            """Drop connections inherited from another process, the pool will open a fresh one"""
            pid = os.getpid()
            if connection_record.info['pid'] != pid:
                connection_record.dbapi_connection = connection_proxy.dbapi_connection = None
                raise exc.DisconnectionError(
                    f"Connection belongs to pid {connection_record.info['pid']}, "
                    f"but we're in pid {pid}"
                )

        #scoped_session gives each request thread its own session
        self.Session = scoped_session(
            sessionmaker(
                bind=self.engine,
                autocommit=False,
                autoflush=False,
                expire_on_commit=False
            )
        )

        logger.info(f"Database client ready for backend '{url.get_backend_name()}'")

    @contextmanager
    def get_session(self):
        """
        Context manager for database sessions.

        Usage:
            with db.get_session() as session:
                session.execute(text("SELECT 1"))

        Commits on success, rolls back and re-raises on error, always closes.
        """
        session = self.Session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def ping(self) -> bool:
        """Run a trivial query, True if the database answered."""
        with self.engine.connect() as conn:
            return conn.execute(text("SELECT 1")).scalar() == 1

    def dispose(self):
        """Properly close all database connections."""
        self.Session.remove()
        self.engine.dispose()

    def __repr__(self):
        return f"<DatabaseConnection(url='{make_url(self.database_url).render_as_string(hide_password=True)}')>"
