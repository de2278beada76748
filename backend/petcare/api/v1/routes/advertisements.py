"""Module: advertisements."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from petcare.api.v1.envelope import ok
from petcare.api.v1.routes.deps import get_advertisement_service, parse_id, require_admin
from petcare.api.v1.serializers import advertisement_out
from petcare.core.errors import ValidationError
from petcare.core.uploads import discard_on_error, save_upload
from petcare.services.advertisement_service import AdvertisementService

router = APIRouter()

admin_only = [Depends(require_admin)]


# -------------------------
# Public endpoints
# -------------------------

@router.get("/active", summary="Advertisements currently on display")
def list_active_advertisements(service: AdvertisementService = Depends(get_advertisement_service)):
    ads = service.list_running()
    return ok(
        "Active advertisements retrieved successfully",
        [advertisement_out(ad) for ad in ads],
        count=len(ads),
    )


@router.post("/{ad_id}/click", summary="Record a click on a running advertisement")
def record_click(ad_id: str, service: AdvertisementService = Depends(get_advertisement_service)):
    ad = service.record_click(parse_id(ad_id, "advertisement id"))
    return ok("Click recorded successfully", {"link": ad.link, "clicks": ad.clicks})


# -------------------------
# Admin endpoints
# -------------------------

@router.get("", summary="List advertisements (admin)", dependencies=admin_only)
def list_advertisements(
    is_active: bool | None = Query(default=None),
    include_expired: bool = Query(default=False),
    service: AdvertisementService = Depends(get_advertisement_service),
):
    ads = service.list_all(is_active=is_active, include_expired=include_expired)
    return ok(
        "Advertisements retrieved successfully",
        [advertisement_out(ad) for ad in ads],
        count=len(ads),
    )


@router.post("/cleanup/expired", summary="Deactivate expired advertisements (admin)", dependencies=admin_only)
def cleanup_expired(service: AdvertisementService = Depends(get_advertisement_service)):
    deactivated = service.deactivate_expired()
    return ok("Expired advertisements cleanup completed", {"deactivated": deactivated})


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create an advertisement (admin)",
    dependencies=admin_only,
)
async def create_advertisement(
    end_date: datetime = Form(...),
    start_date: datetime | None = Form(default=None),
    link: str | None = Form(default=None),
    priority: int | None = Form(default=None),
    image: UploadFile | None = File(default=None),
    service: AdvertisementService = Depends(get_advertisement_service),
):
    if image is None:
        raise ValidationError("Image is required")

    stored = await save_upload(image, "advertisements")
    with discard_on_error(stored):
        ad = await run_in_threadpool(
            service.create,
            image=stored.url,
            end_date=end_date,
            link=link,
            start_date=start_date,
            priority=priority,
        )
    return ok("Advertisement created successfully", advertisement_out(ad))


@router.get("/{ad_id}/stats", summary="Advertisement statistics (admin)", dependencies=admin_only)
def advertisement_stats(ad_id: str, service: AdvertisementService = Depends(get_advertisement_service)):
    stats = service.stats(parse_id(ad_id, "advertisement id"))
    return ok("Advertisement statistics retrieved successfully", stats)


@router.put("/{ad_id}", summary="Update an advertisement (admin)", dependencies=admin_only)
async def update_advertisement(
    ad_id: str,
    end_date: datetime | None = Form(default=None),
    start_date: datetime | None = Form(default=None),
    link: str | None = Form(default=None),
    priority: int | None = Form(default=None),
    is_active: bool | None = Form(default=None),
    image: UploadFile | None = File(default=None),
    service: AdvertisementService = Depends(get_advertisement_service),
):
    aid = parse_id(ad_id, "advertisement id")
    stored = await save_upload(image, "advertisements") if image else None
    with discard_on_error(stored):
        ad = await run_in_threadpool(
            service.update,
            aid,
            {
                "end_date": end_date,
                "start_date": start_date,
                "link": link,
                "priority": priority,
                "is_active": is_active,
                "image": stored.url if stored else None,
            },
        )
    return ok("Advertisement updated successfully", advertisement_out(ad))


@router.delete("/{ad_id}", summary="Delete an advertisement (admin)", dependencies=admin_only)
def delete_advertisement(ad_id: str, service: AdvertisementService = Depends(get_advertisement_service)):
    service.delete(parse_id(ad_id, "advertisement id"))
    return ok("Advertisement deleted successfully")


# Public lookup; declared last so the fixed admin paths above win.
@router.get("/{ad_id}", summary="Get an advertisement")
def get_advertisement(ad_id: str, service: AdvertisementService = Depends(get_advertisement_service)):
    return ok("Advertisement retrieved successfully", advertisement_out(service.get(parse_id(ad_id, "advertisement id"))))
