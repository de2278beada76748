"""Module: veterinaries."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from petcare.api.v1.envelope import ok
from petcare.api.v1.routes.deps import get_veterinary_service, parse_id, require_admin
from petcare.api.v1.serializers import directory_out
from petcare.core.uploads import discard_on_error, save_upload
from petcare.services.directory_service import VeterinaryService

router = APIRouter()


def _out(entry) -> dict:
    return directory_out(entry, VeterinaryService.fields)


@router.get("", summary="List veterinaries")
def list_veterinaries(
    specialty: str | None = Query(default=None),
    location: str | None = Query(default=None),
    service: VeterinaryService = Depends(get_veterinary_service),
):
    entries = service.list_entries(specialty=specialty, location=location)
    return ok("Veterinaries retrieved successfully", [_out(e) for e in entries])


@router.get("/{vet_id}", summary="Get a veterinary")
def get_veterinary(vet_id: str, service: VeterinaryService = Depends(get_veterinary_service)):
    return ok("Veterinary retrieved successfully", _out(service.get(parse_id(vet_id, "vet_id"))))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create a veterinary (admin)", dependencies=[Depends(require_admin)])
async def create_veterinary(
    name: str = Form(..., min_length=1),
    specialty: str | None = Form(default=None),
    mobile: str | None = Form(default=None),
    address: str | None = Form(default=None),
    location: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
    service: VeterinaryService = Depends(get_veterinary_service),
):
    stored = await save_upload(image, "veterinaries") if image else None
    with discard_on_error(stored):
        entry = await run_in_threadpool(
            service.create,
            {
                "name": name.strip(),
                "specialty": specialty,
                "mobile": mobile,
                "address": address,
                "location": location,
                "image": stored.url if stored else None,
            }
        )
    return ok("Veterinary created successfully", _out(entry))


@router.put("/{vet_id}", summary="Update a veterinary (admin)", dependencies=[Depends(require_admin)])
async def update_veterinary(
    vet_id: str,
    name: str | None = Form(default=None, min_length=1),
    specialty: str | None = Form(default=None),
    mobile: str | None = Form(default=None),
    address: str | None = Form(default=None),
    location: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
    service: VeterinaryService = Depends(get_veterinary_service),
):
    vid = parse_id(vet_id, "vet_id")
    stored = await save_upload(image, "veterinaries") if image else None
    with discard_on_error(stored):
        entry = await run_in_threadpool(
            service.update,
            vid,
            {
                "name": name.strip() if name else None,
                "specialty": specialty,
                "mobile": mobile,
                "address": address,
                "location": location,
                "image": stored.url if stored else None,
            },
        )
    return ok("Veterinary updated successfully", _out(entry))


@router.delete("/{vet_id}", summary="Delete a veterinary (admin)", dependencies=[Depends(require_admin)])
def delete_veterinary(
    vet_id: str,
    service: VeterinaryService = Depends(get_veterinary_service),
):
    service.delete(parse_id(vet_id, "vet_id"))
    return ok("Veterinary deleted successfully")
