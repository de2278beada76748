"""Module: api."""

# backend/petcare/api/v1/api.py
from fastapi import APIRouter

# Operational and account routes.
from petcare.api.v1.routes.health import router as health_router
from petcare.api.v1.routes.auth import router as auth_router
from petcare.api.v1.routes.users import router as users_router

# Owner-scoped records.
from petcare.api.v1.routes.animals import router as animals_router
from petcare.api.v1.routes.posts import router as posts_router
from petcare.api.v1.routes.medical_cases import router as medical_cases_router

# Public directories and promotions.
from petcare.api.v1.routes.veterinaries import router as veterinaries_router
from petcare.api.v1.routes.pet_stores import router as pet_stores_router
from petcare.api.v1.routes.charities import router as charities_router
from petcare.api.v1.routes.advertisements import router as advertisements_router


api_router = APIRouter()

api_router.include_router(health_router, prefix="/health", tags=["health"])
api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(users_router, prefix="/users", tags=["users"])

api_router.include_router(animals_router, prefix="/animals", tags=["animals"])
api_router.include_router(posts_router, prefix="/posts", tags=["posts"])
api_router.include_router(medical_cases_router, prefix="/medical-cases", tags=["medical-cases"])

api_router.include_router(veterinaries_router, prefix="/veterinaries", tags=["veterinaries"])
api_router.include_router(pet_stores_router, prefix="/pet-stores", tags=["pet-stores"])
api_router.include_router(charities_router, prefix="/charities", tags=["charities"])
api_router.include_router(advertisements_router, prefix="/advertisements", tags=["advertisements"])
