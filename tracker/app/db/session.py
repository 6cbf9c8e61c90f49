"""
Database session configuration.

This module handles database engine creation and session management
using SQLAlchemy. The parcel store never opens sessions itself; callers
use these helpers (or their own engine) and hand it an open session.
"""

from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from tracker.app.core.config import settings

# Create engine
engine = create_engine(
    settings.database_url,
    echo=settings.db_echo,
    future=True,
)

# Create session factory
SessionLocal = sessionmaker(
    bind=engine,
    class_=Session,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

# Create declarative base for models
Base = declarative_base()


def init_db(bind: Optional[Engine] = None) -> None:
    """Create the parcel schema on ``bind`` (defaults to the module engine)."""
    # import models so classes register to Base
    import tracker.app.models.parcel  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)


def get_db() -> Generator[Session, None, None]:
    """
    Yield a database session and ensure it's properly closed.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
