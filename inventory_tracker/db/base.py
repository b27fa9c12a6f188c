"""
SQLAlchemy declarative base and metadata.
Challenge: Single place for table definitions and migrations.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models. Enables Alembic migrations."""

    pass


def new_id() -> str:
    """Opaque primary key for users and items."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    # App-side timestamps keep microsecond ordering on every backend
    return datetime.now(timezone.utc)
