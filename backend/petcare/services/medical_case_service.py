"""Module: medical_case_service."""

import logging

from sqlalchemy import desc, select

from petcare.core.uploads import remove_upload
from petcare.db.models.animal import Animal
from petcare.db.models.medical_case import MedicalCase
from petcare.services.base import BaseService
from petcare.services.ownership import ensure_owned

logger = logging.getLogger(__name__)


class MedicalCaseService(BaseService):
    def _owned_animal(self, animal_id: int, user_id: int) -> Animal:
        return ensure_owned(self.db.get(Animal, animal_id), user_id, "Animal")

    def get_owned(self, case_id: int, user_id: int) -> MedicalCase:
        return ensure_owned(self.db.get(MedicalCase, case_id), user_id, "Medical case")

    def create(
        self,
        user_id: int,
        description: str,
        animal_id: int | None = None,
        image: str | None = None,
    ) -> MedicalCase:
        if animal_id is not None:
            self._owned_animal(animal_id, user_id)

        case = MedicalCase(user_id=user_id, animal_id=animal_id, description=description, image=image)
        with self.transaction():
            self.db.add(case)
        self.db.refresh(case)
        logger.info("User %s created medical case %s", user_id, case.id)
        return case

    def list_for_user(self, user_id: int) -> list[MedicalCase]:
        stmt = (
            select(MedicalCase)
            .where(MedicalCase.user_id == user_id)
            .order_by(desc(MedicalCase.created_at), desc(MedicalCase.id))
        )
        return list(self.db.execute(stmt).scalars().all())

    def list_for_animal(self, animal_id: int, user_id: int) -> list[MedicalCase]:
        self._owned_animal(animal_id, user_id)
        stmt = (
            select(MedicalCase)
            .where(MedicalCase.animal_id == animal_id)
            .order_by(desc(MedicalCase.created_at), desc(MedicalCase.id))
        )
        return list(self.db.execute(stmt).scalars().all())

    def update(self, case_id: int, user_id: int, changes: dict) -> MedicalCase:
        case = self.get_owned(case_id, user_id)
        if changes.get("animal_id") is not None and changes["animal_id"] != case.animal_id:
            self._owned_animal(changes["animal_id"], user_id)

        previous_image = case.image
        with self.transaction():
            for field in ("animal_id", "description", "image"):
                if changes.get(field) is not None:
                    setattr(case, field, changes[field])

        self.db.refresh(case)
        if changes.get("image") is not None and previous_image != case.image:
            remove_upload(previous_image)
        logger.info("User %s updated medical case %s", user_id, case_id)
        return case

    def delete(self, case_id: int, user_id: int) -> None:
        case = self.get_owned(case_id, user_id)
        image = case.image
        with self.transaction():
            self.db.delete(case)
        remove_upload(image)
        logger.info("User %s deleted medical case %s", user_id, case_id)
