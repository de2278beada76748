"""Module: animals."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field

from petcare.api.v1.envelope import ok
from petcare.api.v1.routes.deps import get_animal_service, get_current_user, parse_id
from petcare.api.v1.serializers import animal_out, image_out
from petcare.core.errors import ValidationError
from petcare.core.uploads import discard_on_error, save_upload
from petcare.db.models.user import User
from petcare.services.animal_service import AnimalService

router = APIRouter()


class AnimalCreatePayload(BaseModel):
    type: str = Field(min_length=1)
    gender: str = Field(min_length=1)
    age: int | None = Field(default=None, ge=0)
    name: str = Field(min_length=1)
    images: list[str] = Field(default_factory=list)


class AnimalUpdatePayload(BaseModel):
    type: str | None = Field(default=None, min_length=1)
    gender: str | None = Field(default=None, min_length=1)
    age: int | None = Field(default=None, ge=0)
    name: str | None = Field(default=None, min_length=1)


# -------------------------
# Endpoints
# -------------------------

@router.post("", status_code=status.HTTP_201_CREATED, summary="Create an animal")
def create_animal(
    payload: AnimalCreatePayload,
    current_user: User = Depends(get_current_user),
    service: AnimalService = Depends(get_animal_service),
):
    animal = service.create(current_user.id, payload.model_dump(exclude={"images"}), payload.images)
    return ok("Animal created successfully", animal_out(animal))


@router.get("", summary="List the caller's animals with their cover image")
def list_animals(
    current_user: User = Depends(get_current_user),
    service: AnimalService = Depends(get_animal_service),
):
    animals = service.list_for_user(current_user.id)
    return ok("Animals retrieved successfully", [animal_out(a, cover_only=True) for a in animals])


@router.get("/{animal_id}", summary="Get one of the caller's animals")
def get_animal(
    animal_id: str,
    current_user: User = Depends(get_current_user),
    service: AnimalService = Depends(get_animal_service),
):
    animal = service.get_owned(parse_id(animal_id, "animal_id"), current_user.id)
    return ok("Animal retrieved successfully", animal_out(animal))


@router.put("/{animal_id}", summary="Update animal details")
def update_animal(
    animal_id: str,
    payload: AnimalUpdatePayload,
    current_user: User = Depends(get_current_user),
    service: AnimalService = Depends(get_animal_service),
):
    animal = service.update(
        parse_id(animal_id, "animal_id"),
        current_user.id,
        payload.model_dump(exclude_none=True),
    )
    return ok("Animal updated successfully", animal_out(animal))


@router.delete("/images/{image_id}", summary="Delete an animal image")
def delete_animal_image(
    image_id: str,
    current_user: User = Depends(get_current_user),
    service: AnimalService = Depends(get_animal_service),
):
    service.delete_image(parse_id(image_id, "image_id"), current_user.id)
    return ok("Image deleted successfully")


@router.delete("/{animal_id}", summary="Delete an animal with its images")
def delete_animal(
    animal_id: str,
    current_user: User = Depends(get_current_user),
    service: AnimalService = Depends(get_animal_service),
):
    service.delete(parse_id(animal_id, "animal_id"), current_user.id)
    return ok("Animal deleted successfully")


@router.post("/{animal_id}/images", status_code=status.HTTP_201_CREATED, summary="Upload an animal image")
async def add_animal_image(
    animal_id: str,
    image: UploadFile | None = File(default=None),
    is_cover: bool = Form(default=False),
    current_user: User = Depends(get_current_user),
    service: AnimalService = Depends(get_animal_service),
):
    aid = parse_id(animal_id, "animal_id")
    if image is None:
        raise ValidationError("No image file provided")

    stored = await save_upload(image, "animals")
    with discard_on_error(stored):
        new_image = await run_in_threadpool(
            service.add_image, aid, current_user.id, stored.url, make_cover=is_cover
        )
    return ok("Image added successfully", image_out(new_image))
