"""Module: pet_stores."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from petcare.api.v1.envelope import ok
from petcare.api.v1.routes.deps import get_pet_store_service, parse_id, require_admin
from petcare.api.v1.serializers import directory_out
from petcare.core.uploads import discard_on_error, save_upload
from petcare.services.directory_service import PetStoreService

router = APIRouter()


def _out(entry) -> dict:
    return directory_out(entry, PetStoreService.fields)


@router.get("", summary="List pet stores")
def list_pet_stores(
    location: str | None = Query(default=None),
    service: PetStoreService = Depends(get_pet_store_service),
):
    entries = service.list_entries(location=location)
    return ok("Pet stores retrieved successfully", [_out(e) for e in entries])


@router.get("/{store_id}", summary="Get a pet store")
def get_pet_store(store_id: str, service: PetStoreService = Depends(get_pet_store_service)):
    return ok("Pet store retrieved successfully", _out(service.get(parse_id(store_id, "store_id"))))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create a pet store (admin)", dependencies=[Depends(require_admin)])
async def create_pet_store(
    name: str = Form(..., min_length=1),
    mobile: str | None = Form(default=None),
    address: str | None = Form(default=None),
    location: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
    service: PetStoreService = Depends(get_pet_store_service),
):
    stored = await save_upload(image, "pet-stores") if image else None
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
    return ok("Pet store created successfully", _out(entry))


@router.put("/{store_id}", summary="Update a pet store (admin)", dependencies=[Depends(require_admin)])
async def update_pet_store(
    store_id: str,
    name: str | None = Form(default=None, min_length=1),
    mobile: str | None = Form(default=None),
    address: str | None = Form(default=None),
    location: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
    service: PetStoreService = Depends(get_pet_store_service),
):
    entry_id = parse_id(store_id, "store_id")
    stored = await save_upload(image, "pet-stores") if image else None
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
    return ok("Pet store updated successfully", _out(entry))


@router.delete("/{store_id}", summary="Delete a pet store (admin)", dependencies=[Depends(require_admin)])
def delete_pet_store(
    store_id: str,
    service: PetStoreService = Depends(get_pet_store_service),
):
    service.delete(parse_id(store_id, "store_id"))
    return ok("Pet store deleted successfully")
