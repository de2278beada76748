"""Module: medical_case."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petcare.db.base import Base, TimestampMixin


# Health record kept by a user, optionally tied to one of their animals.
class MedicalCase(TimestampMixin, Base):
    __tablename__ = "medical_cases"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    animal_id: Mapped[int | None] = mapped_column(
        ForeignKey("animals.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    description: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[str | None] = mapped_column(String, nullable=True)

    animal: Mapped["Animal"] = relationship(back_populates="medical_cases")
