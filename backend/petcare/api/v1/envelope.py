"""Module: envelope."""

from typing import Any


# Success shape shared by every route: {"success": true, "message": ..., "data": ...}
def ok(message: str, data: Any = None, **extra: Any) -> dict:
    body = {"success": True, "message": message}
    if data is not None:
        body["data"] = data
    body.update(extra)
    return body
