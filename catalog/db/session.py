"""Database session management."""
import logging
from typing import Optional
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

class SessionManager:
    """Hands out sessions that commit on success and roll back on error.

    Each ``with`` block gets its own session; blocks must not be nested on the
    same manager.
    """

    def __init__(self, database_url: Optional[str] = None, engine: Optional[Engine] = None):
        """Initialize session manager from a database URL or an existing engine."""
        if engine is None:
            if not database_url:
                raise ValueError("database_url or engine is required")
            engine = create_engine(database_url)
        self.engine = engine
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )
        self.logger = logging.getLogger(__name__)

    def get_session(self) -> Session:
        """Get a new database session."""
        session = self.SessionLocal()
        self.logger.debug(f"Created new session: {id(session)}")
        return session

    def __enter__(self) -> Session:
        self.session = self.get_session()
        return self.session

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self.session.commit()
            else:
                self.logger.debug(f"Rolling back session {id(self.session)}: {exc_val}")
                self.session.rollback()
        finally:
            self.session.close()
