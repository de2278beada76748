"""
Public directories: veterinaries, pet stores and charities.

The three listings share one shape (name, contact, location, optional
image) and one rule set: anyone may browse, only administrators may
change entries. ``DirectoryService`` implements it once; the subclasses
name the model, the editable fields and the substring filters.
"""

import logging
from typing import ClassVar

from sqlalchemy import select

from petcare.core.errors import NotFoundError
from petcare.core.uploads import remove_upload
from petcare.db.models.charity import Charity
from petcare.db.models.pet_store import PetStore
from petcare.db.models.veterinary import Veterinary
from petcare.services.base import BaseService

logger = logging.getLogger(__name__)


class DirectoryService(BaseService):
    model: ClassVar[type]
    label: ClassVar[str]
    fields: ClassVar[tuple[str, ...]] = ("name", "mobile", "address", "location", "image")
    filters: ClassVar[tuple[str, ...]] = ("location",)

    def list_entries(self, **criteria: str | None) -> list:
        stmt = select(self.model).order_by(self.model.name, self.model.id)
        for field in self.filters:
            value = criteria.get(field)
            if value:
                stmt = stmt.where(getattr(self.model, field).contains(value))
        return list(self.db.execute(stmt).scalars().all())

    def get(self, entry_id: int):
        entry = self.db.get(self.model, entry_id)
        if entry is None:
            raise NotFoundError(f"{self.label} not found")
        return entry

    def create(self, data: dict):
        entry = self.model(**{field: data.get(field) for field in self.fields})
        with self.transaction():
            self.db.add(entry)
        self.db.refresh(entry)
        logger.info("Created %s %s", self.label.lower(), entry.id)
        return entry

    def update(self, entry_id: int, changes: dict):
        entry = self.get(entry_id)
        previous_image = entry.image
        with self.transaction():
            for field in self.fields:
                if changes.get(field) is not None:
                    setattr(entry, field, changes[field])
        self.db.refresh(entry)
        if changes.get("image") is not None and previous_image != entry.image:
            remove_upload(previous_image)
        logger.info("Updated %s %s", self.label.lower(), entry_id)
        return entry

    def delete(self, entry_id: int) -> None:
        entry = self.get(entry_id)
        image = entry.image
        with self.transaction():
            self.db.delete(entry)
        remove_upload(image)
        logger.info("Deleted %s %s", self.label.lower(), entry_id)


class VeterinaryService(DirectoryService):
    model = Veterinary
    label = "Veterinary"
    fields = ("name", "specialty", "mobile", "address", "location", "image")
    filters = ("specialty", "location")


class PetStoreService(DirectoryService):
    model = PetStore
    label = "Pet store"


class CharityService(DirectoryService):
    model = Charity
    label = "Charity"
