"""Module: auth."""

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from petcare.api.v1.envelope import ok
from petcare.api.v1.routes.deps import get_auth_service
from petcare.api.v1.serializers import user_out
from petcare.services.auth_service import AuthService

router = APIRouter()


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1)
    mobile: str = Field(min_length=4, max_length=32)
    password: str = Field(min_length=6)
    location: str | None = None
    address: str | None = None


class LoginRequest(BaseModel):
    mobile: str
    password: str


class VerifyRequest(BaseModel):
    mobile: str
    verify_code: str = Field(min_length=1)


class ResendCodeRequest(BaseModel):
    mobile: str


@router.post("/register", status_code=status.HTTP_201_CREATED, summary="Register a user")
def register(payload: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    user = service.register(
        name=payload.name,
        mobile=payload.mobile,
        password=payload.password,
        location=payload.location,
        address=payload.address,
    )
    return ok("User registered successfully", user_out(user))


@router.post("/login", summary="Exchange mobile + password for a bearer token")
def login(payload: LoginRequest, service: AuthService = Depends(get_auth_service)):
    user, token = service.login(payload.mobile, payload.password)
    return ok("User logged in successfully", {"user": user_out(user), "token": token})


@router.post("/verify", summary="Verify an account with its code")
def verify_account(payload: VerifyRequest, service: AuthService = Depends(get_auth_service)):
    user = service.verify_account(payload.mobile, payload.verify_code)
    return ok("Account verified successfully", user_out(user))


@router.post("/resend-verify-code", summary="Issue a fresh verification code")
def resend_verify_code(payload: ResendCodeRequest, service: AuthService = Depends(get_auth_service)):
    service.resend_verify_code(payload.mobile)
    return ok("Verification code resent successfully")
