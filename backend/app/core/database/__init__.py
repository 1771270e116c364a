"""
Database module - engine, session factory and FastAPI dependency
"""
import os
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from app.core.config import settings

# SQLAlchemy Base for models
Base = declarative_base()

def _build_engine(url: str):
    connect_args = {}
    if url.startswith("sqlite"):
        # Ensure directory exists for file-backed SQLite
        path = url.replace("sqlite:///", "", 1)
        if path and path != ":memory:":
            os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        connect_args = {"check_same_thread": False}
    return create_engine(url, connect_args=connect_args)

engine = _build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db() -> Generator[Session, None, None]:
    """Get database session - FastAPI dependency"""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

def init_db(bind=None) -> None:
    """Create all tables (idempotent)"""
    # Import models so they register on Base.metadata
    import app.models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "get_db",
    "init_db",
]
