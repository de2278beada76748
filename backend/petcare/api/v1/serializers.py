"""Module: serializers.

Plain-dict views of ORM rows. Passwords and verification codes never leave
this module.
"""

from petcare.db.models.advertisement import Advertisement
from petcare.db.models.animal import Animal
from petcare.db.models.animal_image import AnimalImage
from petcare.db.models.medical_case import MedicalCase
from petcare.db.models.post import Post
from petcare.db.models.user import User


def user_out(user: User) -> dict:
    return {
        "id": user.id,
        "name": user.name,
        "mobile": user.mobile,
        "location": user.location,
        "address": user.address,
        "is_verified": user.is_verified,
        "role": (user.role or "USER").upper(),
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def image_out(image: AnimalImage) -> dict:
    return {
        "id": image.id,
        "animal_id": image.animal_id,
        "image": image.image,
        "is_cover": image.is_cover,
        "created_at": image.created_at,
    }


def animal_out(animal: Animal, cover_only: bool = False) -> dict:
    if cover_only:
        cover = animal.cover_image
        images = [image_out(cover)] if cover else []
    else:
        images = [image_out(image) for image in animal.images]
    return {
        "id": animal.id,
        "user_id": animal.user_id,
        "type": animal.type,
        "gender": animal.gender,
        "age": animal.age,
        "name": animal.name,
        "images": images,
        "created_at": animal.created_at,
        "updated_at": animal.updated_at,
    }


def post_out(post: Post) -> dict:
    return {
        "id": post.id,
        "user_id": post.user_id,
        "animal_id": post.animal_id,
        "post_type": post.post_type,
        "location": post.location,
        "description": post.description,
        "image": post.image,
        "user": {"id": post.user.id, "name": post.user.name} if post.user else None,
        "animal": animal_out(post.animal, cover_only=True) if post.animal else None,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def medical_case_out(case: MedicalCase) -> dict:
    animal = case.animal
    return {
        "id": case.id,
        "user_id": case.user_id,
        "animal_id": case.animal_id,
        "description": case.description,
        "image": case.image,
        "animal": animal_out(animal, cover_only=True) if animal else None,
        "created_at": case.created_at,
        "updated_at": case.updated_at,
    }


def directory_out(entry, fields: tuple[str, ...]) -> dict:
    out = {"id": entry.id}
    for field in fields:
        out[field] = getattr(entry, field)
    out["created_at"] = entry.created_at
    out["updated_at"] = entry.updated_at
    return out


def advertisement_out(ad: Advertisement) -> dict:
    return {
        "id": ad.id,
        "image": ad.image,
        "link": ad.link,
        "start_date": ad.start_date,
        "end_date": ad.end_date,
        "priority": ad.priority,
        "is_active": ad.is_active,
        "is_expired": ad.is_expired(),
        "clicks": ad.clicks,
        "views": ad.views,
        "created_at": ad.created_at,
        "updated_at": ad.updated_at,
    }
