"""Database configuration and session management."""

import logging
from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from recycling_news.models import Base

# Configure logging
logger = logging.getLogger(__name__)


def _set_sqlite_pragmas(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


class Store:
    """
    Owns the SQLAlchemy engine and session factory for one database file.

    Opened once when the application starts and closed on shutdown; every
    request gets its own session through the get_db dependency.
    """

    def __init__(self, database_url: str):
        self.database_url = database_url
        logger.info(f"Database URL: {database_url}")

        self.engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False}  # Needed for SQLite
        )
        event.listen(self.engine, "connect", _set_sqlite_pragmas)

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def init_db(self):
        """Create every table that does not exist yet."""
        logger.info("Initializing database tables...")
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created successfully")

    def session(self):
        return self.SessionLocal()

    def close(self):
        """Release all pooled connections."""
        self.engine.dispose()
        logger.info("Database connections closed")


def get_db(request: Request):
    """
    Dependency function to get database session.

    Yields:
        Session: SQLAlchemy session bound to the application's store
    """
    store: Store = request.app.state.store
    db = store.session()
    try:
        yield db
    finally:
        db.close()
