"""Module: medical_cases."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from petcare.api.v1.envelope import ok
from petcare.api.v1.routes.deps import get_current_user, get_medical_case_service, parse_id, parse_optional_id
from petcare.api.v1.serializers import medical_case_out
from petcare.core.errors import ValidationError
from petcare.core.uploads import discard_on_error, save_upload
from petcare.db.models.user import User
from petcare.services.medical_case_service import MedicalCaseService

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create a medical case")
async def create_medical_case(
    description: str = Form(...),
    animal_id: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
    current_user: User = Depends(get_current_user),
    service: MedicalCaseService = Depends(get_medical_case_service),
):
    if not description.strip():
        raise ValidationError("Description is required")
    aid = parse_optional_id(animal_id, "animal_id")
    stored = await save_upload(image, "medical-cases") if image else None

    with discard_on_error(stored):
        case = await run_in_threadpool(
            service.create,
            current_user.id,
            description.strip(),
            animal_id=aid,
            image=stored.url if stored else None,
        )
    return ok("Medical case created successfully", medical_case_out(case))


@router.get("", summary="List the caller's medical cases")
def list_medical_cases(
    current_user: User = Depends(get_current_user),
    service: MedicalCaseService = Depends(get_medical_case_service),
):
    cases = service.list_for_user(current_user.id)
    return ok("Medical cases retrieved successfully", [medical_case_out(c) for c in cases])


# Endpoint: every case recorded for one of the caller's animals.
@router.get("/animal/{animal_id}", summary="List medical cases of an animal")
def list_animal_medical_cases(
    animal_id: str,
    current_user: User = Depends(get_current_user),
    service: MedicalCaseService = Depends(get_medical_case_service),
):
    cases = service.list_for_animal(parse_id(animal_id, "animal_id"), current_user.id)
    return ok("Animal medical cases retrieved successfully", [medical_case_out(c) for c in cases])


@router.get("/{case_id}", summary="Get a medical case")
def get_medical_case(
    case_id: str,
    current_user: User = Depends(get_current_user),
    service: MedicalCaseService = Depends(get_medical_case_service),
):
    case = service.get_owned(parse_id(case_id, "case_id"), current_user.id)
    return ok("Medical case retrieved successfully", medical_case_out(case))


@router.put("/{case_id}", summary="Update a medical case")
async def update_medical_case(
    case_id: str,
    description: str | None = Form(default=None),
    animal_id: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
    current_user: User = Depends(get_current_user),
    service: MedicalCaseService = Depends(get_medical_case_service),
):
    cid = parse_id(case_id, "case_id")
    changes: dict = {
        "description": description.strip() if description and description.strip() else None,
        "animal_id": parse_optional_id(animal_id, "animal_id"),
    }
    stored = await save_upload(image, "medical-cases") if image else None
    if stored:
        changes["image"] = stored.url

    with discard_on_error(stored):
        case = await run_in_threadpool(service.update, cid, current_user.id, changes)
    return ok("Medical case updated successfully", medical_case_out(case))


@router.delete("/{case_id}", summary="Delete a medical case")
def delete_medical_case(
    case_id: str,
    current_user: User = Depends(get_current_user),
    service: MedicalCaseService = Depends(get_medical_case_service),
):
    service.delete(parse_id(case_id, "case_id"), current_user.id)
    return ok("Medical case deleted successfully")
