import logging
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

# Importing through the models package registers every table on Base.metadata.
from ..models import Base

logger = logging.getLogger(__name__)


class Database:
    """
    Explicit handle around the SQLAlchemy engine.

    The application factory constructs one per app and drives its lifecycle
    with open() on startup and close() on shutdown; services only ever see
    the per-request Session produced by get_db().
    """

    def __init__(self, url: str):
        self.url = url
        self.engine: Optional[Engine] = None
        self._sessionmaker: Optional[sessionmaker] = None

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    def open(self) -> None:
        if self.engine is not None:
            return

        connect_args = {}
        if self.is_sqlite:
            # Requests are served from a thread pool, and concurrent writers
            # must wait on the file lock rather than fail immediately.
            connect_args = {"check_same_thread": False, "timeout": 15}

        self.engine = create_engine(self.url, connect_args=connect_args)

        if self.is_sqlite:
            @event.listens_for(self.engine, "connect")
            def set_sqlite_pragma(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                try:
                    cursor.execute("PRAGMA journal_mode=WAL;")
                    cursor.execute("PRAGMA foreign_keys=ON;")
                finally:
                    cursor.close()

        self._sessionmaker = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        logger.info("Database opened: %s", self.engine.url.render_as_string(hide_password=True))

    def create_tables(self) -> None:
        """
        Creates all database tables based on the current models.
        This is a non-destructive operation: it only creates tables that do not already exist.
        """
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        if self._sessionmaker is None:
            raise RuntimeError("Database is not open")
        return self._sessionmaker()

    def close(self) -> None:
        if self.engine is None:
            return
        self.engine.dispose()
        self.engine = None
        self._sessionmaker = None
        logger.info("Database connection closed.")


def get_db(request: Request) -> Iterator[Session]:
    """
    FastAPI dependency to get a database session.
    Ensures the session is always closed after the request.
    """
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
