"""Module: charities."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from petcare.api.v1.envelope import ok
from petcare.api.v1.routes.deps import get_charity_service, parse_id, require_admin
from petcare.api.v1.serializers import directory_out
from petcare.core.uploads import discard_on_error, save_upload
from petcare.services.directory_service import CharityService

router = APIRouter()


def _out(entry) -> dict:
    return directory_out(entry, CharityService.fields)


@router.get("", summary="List charities")
def list_charities(
    location: str | None = Query(default=None),
    service: CharityService = Depends(get_charity_service),
):
    entries = service.list_entries(location=location)
    return ok("Charities retrieved successfully", [_out(e) for e in entries])


@router.get("/{charity_id}", summary="Get a charity")
def get_charity(charity_id: str, service: CharityService = Depends(get_charity_service)):
    return ok("Charity retrieved successfully", _out(service.get(parse_id(charity_id, "charity_id"))))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create a charity (admin)", dependencies=[Depends(require_admin)])
async def create_charity(
    name: str = Form(..., min_length=1),
    mobile: str | None = Form(default=None),
    address: str | None = Form(default=None),
    location: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
    service: CharityService = Depends(get_charity_service),
):
    stored = await save_upload(image, "charities") if image else None
    with discard_on_error(stored):
        entry = await run_in_threadpool(
            service.create,
            {
                "name": name.strip(),
                "mobile": mobile,
                "address": address,
                "location": location,
                "image": stored.url if stored else None,
            }
        )
    return ok("Charity created successfully", _out(entry))


@router.put("/{charity_id}", summary="Update a charity (admin)", dependencies=[Depends(require_admin)])
async def update_charity(
    charity_id: str,
    name: str | None = Form(default=None, min_length=1),
    mobile: str | None = Form(default=None),
    address: str | None = Form(default=None),
    location: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
    service: CharityService = Depends(get_charity_service),
):
    entry_id = parse_id(charity_id, "charity_id")
    stored = await save_upload(image, "charities") if image else None
    with discard_on_error(stored):
        entry = await run_in_threadpool(
            service.update,
            entry_id,
            {
                "name": name.strip() if name else None,
                "mobile": mobile,
                "address": address,
                "location": location,
                "image": stored.url if stored else None,
            },
        )
    return ok("Charity updated successfully", _out(entry))


@router.delete("/{charity_id}", summary="Delete a charity (admin)", dependencies=[Depends(require_admin)])
def delete_charity(
    charity_id: str,
    service: CharityService = Depends(get_charity_service),
):
    service.delete(parse_id(charity_id, "charity_id"))
    return ok("Charity deleted successfully")
