"""
Tests for shared helpers: ids, passwords, tokens, uploads and the app shell
"""
import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from petcare.api.v1.routes.deps import parse_id, parse_optional_id
from petcare.core.config import settings
from petcare.core.errors import AuthenticationError, ValidationError, register_exception_handlers
from petcare.core.security import create_access_token, decode_access_token, hash_password, verify_password
from petcare.core.uploads import StoredFile, discard_on_error, remove_upload
from petcare.services.ownership import is_owner


@pytest.mark.parametrize("value,expected", [("1", 1), (" 42 ", 42), (7, 7)])
def test_parse_id_accepts_positive_integers(value, expected):
    assert parse_id(value) == expected


@pytest.mark.parametrize(
    "value",
    ["", "0", "-1", "abc", "1e3", "١٢", None, "2147483648", "99999999999999999999999", "9" * 5000],
)
def test_parse_id_rejects_everything_else(value):
    with pytest.raises(ValidationError):
        parse_id(value, "animal_id")


def test_parse_optional_id():
    assert parse_optional_id(None) is None
    assert parse_optional_id("  ") is None
    assert parse_optional_id("5") == 5


def test_is_owner():
    assert is_owner(3, 3) is True
    assert is_owner(3, 4) is False
    assert is_owner(None, 3) is False
    assert is_owner(3, None) is False


def test_password_hashing():
    stored = hash_password("secret123")
    assert stored.startswith("pbkdf2_sha256$")
    assert verify_password("secret123", stored)
    assert not verify_password("secret124", stored)
    assert not verify_password("secret123", "secret123")


def test_token_round_trip():
    token = create_access_token(17, "0501234567")
    assert decode_access_token(token) == 17


def test_expired_or_tampered_token_is_rejected():
    with pytest.raises(AuthenticationError):
        decode_access_token(create_access_token(17, "0501234567", expires_days=-1))
    with pytest.raises(AuthenticationError):
        decode_access_token(create_access_token(17, "0501234567") + "x")


def test_discard_on_error_removes_file(tmp_path):
    path = tmp_path / "orphan.png"
    path.write_bytes(b"data")

    with pytest.raises(RuntimeError):
        with discard_on_error(StoredFile(path=path, url="/uploads/animals/orphan.png")):
            raise RuntimeError("database is down")
    assert not path.exists()


def test_remove_upload_stays_inside_upload_dir(upload_root, tmp_path):
    outside = tmp_path / "keep.txt"
    outside.write_text("keep")
    remove_upload("/uploads/../keep.txt")
    assert outside.exists()

    inside = upload_root / "posts" / "gone.png"
    inside.parent.mkdir(parents=True)
    inside.write_bytes(b"x")
    remove_upload("/uploads/posts/gone.png")
    assert not inside.exists()


def test_health(client):
    for path in ("/health", "/api/health"):
        response = client.get(path)
        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Server is running"
        assert body["status"] == "ok"


def test_unknown_route(client):
    response = client.get("/api/does-not-exist")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"success": False, "message": "Route not found"}


def _failing_app():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    def boom():
        raise RuntimeError("database is down")

    return app


def test_unhandled_error_includes_stack_outside_production():
    client = TestClient(_failing_app(), raise_server_exceptions=False)
    response = client.get("/boom")
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "database is down"
    assert "RuntimeError" in body["stack"]


def test_unhandled_error_hides_stack_in_production(monkeypatch):
    monkeypatch.setattr(settings, "environment", "production")
    client = TestClient(_failing_app(), raise_server_exceptions=False)
    response = client.get("/boom")
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"success": False, "message": "database is down"}
