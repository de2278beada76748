"""
Registration, login and mobile-number verification.

Verification codes are six digits. Delivering them by SMS is not part of
this service; the code is written to the log so operators can relay it.
"""

import logging
import secrets

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from petcare.core.errors import AuthenticationError, ConflictError, NotFoundError, ValidationError
from petcare.core.security import create_access_token, hash_password, verify_password
from petcare.db.models.user import ROLE_USER, User
from petcare.services.base import BaseService

logger = logging.getLogger(__name__)

INVALID_LOGIN = "Invalid mobile number or password"


def generate_verify_code() -> str:
    return str(100000 + secrets.randbelow(900000))


class AuthService(BaseService):
    def _get_by_mobile(self, mobile: str) -> User | None:
        return self.db.execute(select(User).where(User.mobile == mobile)).scalar_one_or_none()

    def register(
        self,
        name: str,
        mobile: str,
        password: str,
        location: str | None = None,
        address: str | None = None,
    ) -> User:
        mobile = mobile.strip()
        if self._get_by_mobile(mobile) is not None:
            raise ConflictError("User with this mobile number already exists")

        user = User(
            name=name.strip(),
            mobile=mobile,
            password=hash_password(password),
            location=location,
            address=address,
            verify_code=generate_verify_code(),
            is_verified=False,
            role=ROLE_USER,
        )
        try:
            with self.transaction():
                self.db.add(user)
        except IntegrityError:
            raise ConflictError("User with this mobile number already exists")

        self.db.refresh(user)
        logger.info("Registered user %s; verification code for %s: %s", user.id, user.mobile, user.verify_code)
        return user

    def login(self, mobile: str, password: str) -> tuple[User, str]:
        user = self._get_by_mobile(mobile.strip())
        if user is None or not verify_password(password, user.password):
            raise AuthenticationError(INVALID_LOGIN)

        token = create_access_token(user.id, user.mobile)
        logger.info("User %s logged in", user.id)
        return user, token

    def verify_account(self, mobile: str, verify_code: str) -> User:
        user = self._get_by_mobile(mobile.strip())
        if user is None:
            raise NotFoundError("User not found")
        if user.is_verified:
            return user
        code = verify_code.strip()
        # compare_digest only accepts ASCII text.
        if not (code.isascii() and code.isdigit()):
            raise ValidationError("Invalid verification code")
        if not user.verify_code or not secrets.compare_digest(user.verify_code, code):
            raise ValidationError("Invalid verification code")

        with self.transaction():
            user.is_verified = True
            user.verify_code = None

        self.db.refresh(user)
        logger.info("User %s verified", user.id)
        return user

    def resend_verify_code(self, mobile: str) -> None:
        user = self._get_by_mobile(mobile.strip())
        if user is None:
            raise NotFoundError("User not found")
        if user.is_verified:
            raise ValidationError("User is already verified")

        with self.transaction():
            user.verify_code = generate_verify_code()

        logger.info("New verification code for %s: %s", user.mobile, user.verify_code)
