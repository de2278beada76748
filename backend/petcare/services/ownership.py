"""Module: ownership."""

from typing import Protocol, TypeVar

from petcare.core.errors import NotFoundError


class Owned(Protocol):
    user_id: int


T = TypeVar("T", bound=Owned)


def is_owner(resource_owner_id: int | None, caller_id: int | None) -> bool:
    return resource_owner_id is not None and caller_id is not None and resource_owner_id == caller_id


def ensure_owned(resource: T | None, caller_id: int, label: str) -> T:
    """Return the resource, or report it as missing when the caller does not own it."""
    if resource is None or not is_owner(resource.user_id, caller_id):
        raise NotFoundError(f"{label} not found")
    return resource
