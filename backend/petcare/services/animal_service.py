"""
Animal profiles and their photo sets.

Each animal's images carry an ``is_cover`` flag. The service keeps the
following true after every committed operation:

* at most one image of an animal is the cover;
* if an animal has any images, exactly one of them is the cover.

Adding a cover demotes the siblings and inserts the new image in the same
transaction; deleting the cover promotes the oldest remaining sibling
before the row is removed, also in one transaction.
"""

import logging

from sqlalchemy import select, update

from petcare.core.errors import NotFoundError, ValidationError
from petcare.core.uploads import is_upload_url, remove_upload
from petcare.db.models.animal import Animal
from petcare.db.models.animal_image import AnimalImage
from petcare.services.base import BaseService
from petcare.services.ownership import ensure_owned, is_owner

logger = logging.getLogger(__name__)

ANIMAL_FIELDS = ("type", "gender", "age", "name")


class AnimalService(BaseService):
    def get_owned(self, animal_id: int, user_id: int) -> Animal:
        return ensure_owned(self.db.get(Animal, animal_id), user_id, "Animal")

    def _check_new_images(self, images: list[str]) -> None:
        # Files are deleted along with their rows, so a row may only claim
        # an animal upload that nothing else references.
        if any(not is_upload_url(url, "animals") for url in images):
            raise ValidationError("Images must be uploaded animal photos")
        if len(set(images)) != len(images):
            raise ValidationError("Duplicate image in request")
        taken = self.db.execute(select(AnimalImage.id).where(AnimalImage.image.in_(images)).limit(1)).first()
        if taken is not None:
            raise ValidationError("Image is already in use")

    def create(self, user_id: int, data: dict, images: list[str] | None = None) -> Animal:
        if images:
            self._check_new_images(images)
        animal = Animal(user_id=user_id, **{field: data.get(field) for field in ANIMAL_FIELDS})
        with self.transaction():
            self.db.add(animal)
            for index, url in enumerate(images or []):
                animal.images.append(AnimalImage(image=url, is_cover=index == 0))

        self.db.refresh(animal)
        logger.info("User %s created animal %s with %d images", user_id, animal.id, len(images or []))
        return animal

    def list_for_user(self, user_id: int) -> list[Animal]:
        stmt = select(Animal).where(Animal.user_id == user_id).order_by(Animal.id)
        return list(self.db.execute(stmt).scalars().all())

    def update(self, animal_id: int, user_id: int, changes: dict) -> Animal:
        animal = self.get_owned(animal_id, user_id)
        with self.transaction():
            for field in ANIMAL_FIELDS:
                if field in changes:
                    setattr(animal, field, changes[field])
        self.db.refresh(animal)
        logger.info("User %s updated animal %s", user_id, animal_id)
        return animal

    def delete(self, animal_id: int, user_id: int) -> None:
        animal = self.get_owned(animal_id, user_id)
        files = [image.image for image in animal.images] + [post.image for post in animal.posts]

        with self.transaction():
            self.db.delete(animal)

        for url in files:
            remove_upload(url)
        logger.info("User %s deleted animal %s", user_id, animal_id)

    def add_image(self, animal_id: int, user_id: int, url: str, make_cover: bool = False) -> AnimalImage:
        animal = self.get_owned(animal_id, user_id)
        has_images = self.db.execute(
            select(AnimalImage.id).where(AnimalImage.animal_id == animal.id).limit(1)
        ).first() is not None
        # The first photo of an animal is always its cover.
        is_cover = make_cover or not has_images

        image = AnimalImage(animal_id=animal.id, image=url, is_cover=is_cover)
        with self.transaction():
            if is_cover:
                self.db.execute(
                    update(AnimalImage)
                    .where(AnimalImage.animal_id == animal.id, AnimalImage.is_cover.is_(True))
                    .values(is_cover=False)
                )
            self.db.add(image)

        self.db.refresh(image)
        logger.info("User %s added image %s to animal %s (cover=%s)", user_id, image.id, animal.id, is_cover)
        return image

    def delete_image(self, image_id: int, user_id: int) -> None:
        image = self.db.get(AnimalImage, image_id)
        if image is None or not is_owner(image.animal.user_id, user_id):
            raise NotFoundError("Image not found")

        animal_id = image.animal_id
        url = image.image
        with self.transaction():
            if image.is_cover:
                replacement = self.db.execute(
                    select(AnimalImage)
                    .where(AnimalImage.animal_id == animal_id, AnimalImage.id != image.id)
                    .order_by(AnimalImage.id)
                    .limit(1)
                ).scalar_one_or_none()
                if replacement is not None:
                    replacement.is_cover = True
            self.db.delete(image)

        remove_upload(url)
        logger.info("User %s deleted image %s of animal %s", user_id, image_id, animal_id)
