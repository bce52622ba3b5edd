"""
Database connection and session management.
"""

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import NullPool

from simulador.db.models import Base


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for the configured database."""
    # Use NullPool for serverless/Supabase compatibility
    # For SQLite, use default pool
    if database_url.startswith("postgresql"):
        return create_engine(database_url, poolclass=NullPool)
    return create_engine(
        database_url,
        connect_args={"check_same_thread": False},  # Needed for SQLite
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine):
    """Initialize database tables."""
    Base.metadata.create_all(bind=engine)


@contextmanager
def get_db_context(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """Context manager for database sessions (for use outside FastAPI)."""
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
