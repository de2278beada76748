"""Module: uploads.

Multipart images are written under ``settings.upload_dir/<resource>/`` with a
generated name, and referenced afterwards by their ``/uploads/...`` path.
"""

from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from fastapi import UploadFile

from petcare.core.config import settings
from petcare.core.errors import ValidationError

logger = logging.getLogger(__name__)

URL_PREFIX = "/uploads"
RESOURCE_DIRS = (
    "animals",
    "posts",
    "medical-cases",
    "veterinaries",
    "pet-stores",
    "charities",
    "advertisements",
)

# Stored extension follows the accepted type, never the client filename.
ALLOWED_IMAGE_TYPES = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


@dataclass(frozen=True)
class StoredFile:
    path: Path
    url: str

    def discard(self) -> None:
        _unlink(self.path)


def ensure_upload_dirs() -> Path:
    root = Path(settings.upload_dir)
    for name in RESOURCE_DIRS:
        (root / name).mkdir(parents=True, exist_ok=True)
    return root


def _unlink(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError:
        logger.warning("Could not remove uploaded file %s", path, exc_info=True)


async def save_upload(upload: UploadFile, resource: str) -> StoredFile:
    if resource not in RESOURCE_DIRS:
        raise ValueError(f"Unknown upload resource: {resource}")

    content_type = (upload.content_type or "").split(";")[0].strip().lower()
    ext = ALLOWED_IMAGE_TYPES.get(content_type)
    if ext is None:
        raise ValidationError("Image must be JPEG, PNG, GIF or WebP")

    data = await upload.read()
    if not data:
        raise ValidationError("Uploaded image is empty")
    if len(data) > settings.max_upload_bytes:
        raise ValidationError("Image exceeds the maximum upload size")

    filename = f"{uuid.uuid4().hex}{ext}"
    target_dir = ensure_upload_dirs() / resource
    target = target_dir / filename
    target.write_bytes(data)

    logger.info("Stored upload %s (%d bytes)", target, len(data))
    return StoredFile(path=target, url=f"{URL_PREFIX}/{resource}/{filename}")


def remove_upload(url: str | None) -> None:
    """Delete the file behind a stored ``/uploads/...`` path, if any."""
    if not url or not url.startswith(f"{URL_PREFIX}/"):
        return
    root = Path(settings.upload_dir).resolve()
    path = (root / url[len(URL_PREFIX) + 1:]).resolve()
    if root not in path.parents:
        logger.warning("Refusing to remove file outside upload dir: %s", url)
        return
    _unlink(path)


def is_upload_url(url: str | None, resource: str) -> bool:
    """True for a plain file name directly under ``/uploads/<resource>/``."""
    prefix = f"{URL_PREFIX}/{resource}/"
    if not url or not url.startswith(prefix):
        return False
    name = url[len(prefix):]
    return bool(name) and name not in (".", "..") and "/" not in name and "\\" not in name


@contextmanager
def discard_on_error(stored: StoredFile | None) -> Iterator[None]:
    """Remove a freshly stored upload if the block that persists it fails."""
    try:
        yield
    except Exception:
        if stored is not None:
            logger.info("Discarding orphaned upload %s", stored.url)
            stored.discard()
        raise
