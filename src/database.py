"""Database configuration and session management."""

import logging
from collections.abc import Generator
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base: Any = declarative_base()


class Database:
    """Owns the engine and session factory for one database URL."""

    def __init__(self, database_url: str):
        connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
        self.engine = create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def init(self) -> None:
        """Create all tables."""
        # Import all models here so they are registered with Base.metadata
        from src import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        url = self.engine.url.render_as_string(hide_password=True)
        logger.info(f"Database initialized at {url}")

    def session(self) -> Session:
        return self.session_factory()

    def dispose(self) -> None:
        """Close all pooled connections."""
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
