from __future__ import annotations

import logging
import uuid
from collections.abc import Generator
from datetime import datetime, timezone

from fastapi import Request
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def new_id() -> str:
    """Opaque storage identifier assigned at insert time."""
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Database:
    """Storage handle: owns the engine and session factory.

    Constructed explicitly at process start, opened in the application
    lifespan and closed at shutdown. Request handlers receive sessions
    through :func:`get_db` rather than a module-level engine.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        self.echo = echo
        self._engine: Engine | None = None
        self._sessionmaker: sessionmaker[Session] | None = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database is not open")
        return self._engine

    def open(self) -> None:
        if self._engine is not None:
            return

        kwargs: dict = {"echo": self.echo, "pool_pre_ping": True}
        if self.url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            # An in-memory database only lives as long as its one connection
            if self.url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool

        self._engine = create_engine(self.url, **kwargs)
        self._sessionmaker = sessionmaker(
            autocommit=False, autoflush=False, bind=self._engine
        )
        logger.info("Database opened (%s)", self._engine.url.render_as_string())

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._sessionmaker = None
        logger.info("Database closed")

    def session(self) -> Session:
        if self._sessionmaker is None:
            raise RuntimeError("Database is not open")
        return self._sessionmaker()

    def create_tables(self) -> None:
        """Create any missing tables. create_all never drops or recreates."""
        # Import models so Base.metadata knows about them
        import arambo.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info(
            "Database tables ensured (%d models registered)",
            len(Base.metadata.tables),
        )


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
