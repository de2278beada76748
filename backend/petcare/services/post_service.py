"""Module: post_service."""

import logging

from sqlalchemy import desc, select
from sqlalchemy.orm import selectinload

from petcare.core.uploads import remove_upload
from petcare.db.models.animal import Animal
from petcare.db.models.post import Post
from petcare.services.base import BaseService
from petcare.services.ownership import ensure_owned

logger = logging.getLogger(__name__)

POST_FIELDS = ("post_type", "location", "description", "image")


class PostService(BaseService):
    def _feed_query(self):
        return (
            select(Post)
            .options(selectinload(Post.user), selectinload(Post.animal).selectinload(Animal.images))
            .order_by(desc(Post.created_at), desc(Post.id))
        )

    def _owned_animal(self, animal_id: int, user_id: int) -> Animal:
        return ensure_owned(self.db.get(Animal, animal_id), user_id, "Animal")

    def get_owned(self, post_id: int, user_id: int) -> Post:
        return ensure_owned(self.db.get(Post, post_id), user_id, "Post")

    def create(self, user_id: int, animal_id: int, data: dict) -> Post:
        self._owned_animal(animal_id, user_id)
        post = Post(user_id=user_id, animal_id=animal_id, **{field: data.get(field) for field in POST_FIELDS})
        with self.transaction():
            self.db.add(post)
        self.db.refresh(post)
        logger.info("User %s created post %s", user_id, post.id)
        return post

    def list_posts(
        self,
        post_type: str | None = None,
        location: str | None = None,
        user_id: int | None = None,
    ) -> list[Post]:
        stmt = self._feed_query()
        if post_type:
            stmt = stmt.where(Post.post_type == post_type)
        if location:
            stmt = stmt.where(Post.location.contains(location))
        if user_id is not None:
            stmt = stmt.where(Post.user_id == user_id)
        return list(self.db.execute(stmt).scalars().all())

    def list_for_user(self, user_id: int) -> list[Post]:
        return self.list_posts(user_id=user_id)

    def update(self, post_id: int, user_id: int, changes: dict) -> Post:
        post = self.get_owned(post_id, user_id)
        if changes.get("animal_id") is not None and changes["animal_id"] != post.animal_id:
            self._owned_animal(changes["animal_id"], user_id)

        previous_image = post.image
        with self.transaction():
            if changes.get("animal_id") is not None:
                post.animal_id = changes["animal_id"]
            for field in POST_FIELDS:
                if field in changes:
                    setattr(post, field, changes[field])

        self.db.refresh(post)
        if "image" in changes and previous_image != post.image:
            remove_upload(previous_image)
        logger.info("User %s updated post %s", user_id, post_id)
        return post

    def delete(self, post_id: int, user_id: int) -> None:
        post = self.get_owned(post_id, user_id)
        image = post.image
        with self.transaction():
            self.db.delete(post)
        remove_upload(image)
        logger.info("User %s deleted post %s", user_id, post_id)
