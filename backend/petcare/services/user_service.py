"""Module: user_service."""

import logging

from petcare.core.errors import NotFoundError, ValidationError
from petcare.core.security import hash_password, verify_password
from petcare.db.models.user import User
from petcare.services.base import BaseService

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "location", "address")


class UserService(BaseService):
    def get_profile(self, user_id: int) -> User:
        user = self.db.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def update_profile(self, user_id: int, changes: dict) -> User:
        user = self.get_profile(user_id)
        with self.transaction():
            for field in PROFILE_FIELDS:
                if field in changes:
                    setattr(user, field, changes[field])
        self.db.refresh(user)
        logger.info("User %s updated profile fields %s", user_id, sorted(set(changes) & set(PROFILE_FIELDS)))
        return user

    def change_password(self, user_id: int, current_password: str, new_password: str) -> None:
        user = self.get_profile(user_id)
        if not verify_password(current_password, user.password):
            raise ValidationError("Current password is incorrect")

        with self.transaction():
            user.password = hash_password(new_password)
        logger.info("User %s changed password", user_id)
