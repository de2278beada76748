"""Module: posts."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from petcare.api.v1.envelope import ok
from petcare.api.v1.routes.deps import get_current_user, get_post_service, parse_id, parse_optional_id
from petcare.api.v1.serializers import post_out
from petcare.core.errors import ValidationError
from petcare.core.uploads import discard_on_error, save_upload
from petcare.db.models.user import User
from petcare.services.post_service import PostService

router = APIRouter()


def _normalize_optional(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned if cleaned else None


# Public feed.
@router.get("", summary="List posts (public feed)")
def list_posts(
    post_type: str | None = Query(default=None),
    location: str | None = Query(default=None),
    user_id: str | None = Query(default=None),
    service: PostService = Depends(get_post_service),
):
    posts = service.list_posts(
        post_type=_normalize_optional(post_type),
        location=_normalize_optional(location),
        user_id=parse_optional_id(user_id, "user_id"),
    )
    return ok("Posts retrieved successfully", [post_out(p) for p in posts])


@router.get("/user/me", summary="List the caller's posts")
def list_my_posts(
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    posts = service.list_for_user(current_user.id)
    return ok("User posts retrieved successfully", [post_out(p) for p in posts])


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create a post")
async def create_post(
    animal_id: str = Form(...),
    post_type: str = Form(...),
    location: str | None = Form(default=None),
    description: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    aid = parse_id(animal_id, "animal_id")
    if not post_type.strip():
        raise ValidationError("Post type is required")
    stored = await save_upload(image, "posts") if image else None

    with discard_on_error(stored):
        post = await run_in_threadpool(
            service.create,
            current_user.id,
            aid,
            {
                "post_type": post_type.strip(),
                "location": _normalize_optional(location),
                "description": _normalize_optional(description),
                "image": stored.url if stored else None,
            },
        )
    return ok("Post created successfully", post_out(post))


@router.get("/{post_id}", summary="Get one of the caller's posts")
def get_post(
    post_id: str,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    post = service.get_owned(parse_id(post_id, "post_id"), current_user.id)
    return ok("Post retrieved successfully", post_out(post))


@router.put("/{post_id}", summary="Update a post")
async def update_post(
    post_id: str,
    animal_id: str | None = Form(default=None),
    post_type: str | None = Form(default=None),
    location: str | None = Form(default=None),
    description: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    pid = parse_id(post_id, "post_id")
    changes: dict = {}
    new_animal_id = parse_optional_id(animal_id, "animal_id")
    if new_animal_id is not None:
        changes["animal_id"] = new_animal_id
    if _normalize_optional(post_type) is not None:
        changes["post_type"] = post_type.strip()
    if location is not None:
        changes["location"] = _normalize_optional(location)
    if description is not None:
        changes["description"] = _normalize_optional(description)

    stored = await save_upload(image, "posts") if image else None
    if stored:
        changes["image"] = stored.url

    with discard_on_error(stored):
        post = await run_in_threadpool(service.update, pid, current_user.id, changes)
    return ok("Post updated successfully", post_out(post))


@router.delete("/{post_id}", summary="Delete a post")
def delete_post(
    post_id: str,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    service.delete(parse_id(post_id, "post_id"), current_user.id)
    return ok("Post deleted successfully")
