"""Module: advertisement."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petcare.core.timeutils import utcnow
from petcare.db.base import Base, TimestampMixin


# Promotional banner shown inside [start_date, end_date) while is_active is set.
class Advertisement(TimestampMixin, Base):
    __tablename__ = "advertisements"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    image: Mapped[str] = mapped_column(String, nullable=False)
    link: Mapped[str | None] = mapped_column(String, nullable=True)

    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    clicks: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or utcnow()) >= self.end_date

    def is_running(self, now: datetime | None = None) -> bool:
        now = now or utcnow()
        return self.is_active and self.start_date <= now < self.end_date
