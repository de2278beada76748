"""Module: users."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from petcare.api.v1.envelope import ok
from petcare.api.v1.routes.deps import get_current_user, get_user_service
from petcare.api.v1.serializers import user_out
from petcare.db.models.user import User
from petcare.services.user_service import UserService

router = APIRouter()


class ProfileUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    location: str | None = None
    address: str | None = None


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str = Field(min_length=6)


@router.get("/profile", summary="Current user's profile")
def get_profile(
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return ok("User profile retrieved successfully", user_out(service.get_profile(current_user.id)))


@router.put("/profile", summary="Update the current user's profile")
def update_profile(
    payload: ProfileUpdateRequest,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    user = service.update_profile(current_user.id, payload.model_dump(exclude_none=True))
    return ok("User profile updated successfully", user_out(user))


@router.put("/change-password", summary="Change the current user's password")
def change_password(
    payload: ChangePasswordRequest,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    service.change_password(current_user.id, payload.current_password, payload.new_password)
    return ok("Password changed successfully")
