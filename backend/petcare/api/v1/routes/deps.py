"""Module: deps."""

from typing import Generator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from petcare.core.errors import AuthenticationError, PermissionDeniedError, ValidationError
from petcare.core.security import decode_access_token
from petcare.db.models.user import User
from petcare.db.session import SessionLocal
from petcare.services.advertisement_service import AdvertisementService
from petcare.services.animal_service import AnimalService
from petcare.services.auth_service import AuthService
from petcare.services.directory_service import CharityService, PetStoreService, VeterinaryService
from petcare.services.medical_case_service import MedicalCaseService
from petcare.services.post_service import PostService
from petcare.services.user_service import UserService

bearer_scheme = HTTPBearer(auto_error=False)

# Largest value an INTEGER primary key can hold.
MAX_ID = 2**31 - 1


# Dependency provider: one DB session per request lifecycle.
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Validate and coerce numeric identifiers from path/query values.
def parse_id(value: str | int | None, field_name: str = "id") -> int:
    text = str(value).strip() if value is not None else ""
    if not (text.isascii() and text.isdigit()) or len(text) > len(str(MAX_ID)) or not 0 < int(text) <= MAX_ID:
        raise ValidationError(f"Invalid {field_name} (must be a positive integer)")
    return int(text)


def parse_optional_id(value: str | None, field_name: str = "id") -> int | None:
    if value is None or not str(value).strip():
        return None
    return parse_id(value, field_name)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise AuthenticationError("Access denied. No token provided.")

    user_id = decode_access_token(credentials.credentials)
    user = db.get(User, user_id)
    if user is None:
        raise AuthenticationError("Invalid token.")
    return user


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        raise PermissionDeniedError("Access denied. Admin only.")
    return current_user


# Service providers: each request gets services bound to its own session.
def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_animal_service(db: Session = Depends(get_db)) -> AnimalService:
    return AnimalService(db)


def get_post_service(db: Session = Depends(get_db)) -> PostService:
    return PostService(db)


def get_medical_case_service(db: Session = Depends(get_db)) -> MedicalCaseService:
    return MedicalCaseService(db)


def get_veterinary_service(db: Session = Depends(get_db)) -> VeterinaryService:
    return VeterinaryService(db)


def get_pet_store_service(db: Session = Depends(get_db)) -> PetStoreService:
    return PetStoreService(db)


def get_charity_service(db: Session = Depends(get_db)) -> CharityService:
    return CharityService(db)


def get_advertisement_service(db: Session = Depends(get_db)) -> AdvertisementService:
    return AdvertisementService(db)
