"""Module: base."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from petcare.core.timeutils import utcnow


# Shared SQLAlchemy declarative base that all ORM models inherit from.
class Base(DeclarativeBase):
    pass


# Audit columns shared by every table that is edited after creation.
class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )
