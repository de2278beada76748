"""Module: animal."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petcare.db.base import Base, TimestampMixin


# Pet profile owned by a user. Images and posts go away with the animal;
# medical cases keep their history with animal_id cleared.
class Animal(TimestampMixin, Base):
    __tablename__ = "animals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    type: Mapped[str] = mapped_column(String, nullable=False)
    gender: Mapped[str] = mapped_column(String, nullable=False)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    name: Mapped[str] = mapped_column(String, nullable=False)

    images: Mapped[list["AnimalImage"]] = relationship(
        back_populates="animal",
        cascade="all, delete-orphan",
        order_by="AnimalImage.id",
    )
    posts: Mapped[list["Post"]] = relationship(
        back_populates="animal",
        cascade="all, delete-orphan",
    )
    medical_cases: Mapped[list["MedicalCase"]] = relationship(back_populates="animal")

    @property
    def cover_image(self) -> "AnimalImage | None":
        for image in self.images:
            if image.is_cover:
                return image
        return None
