"""Module: pet_store."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petcare.db.base import Base, TimestampMixin


class PetStore(TimestampMixin, Base):
    __tablename__ = "pet_stores"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    mobile: Mapped[str | None] = mapped_column(String, nullable=True)
    address: Mapped[str | None] = mapped_column(String, nullable=True)
    location: Mapped[str | None] = mapped_column(String, nullable=True)
    image: Mapped[str | None] = mapped_column(String, nullable=True)
