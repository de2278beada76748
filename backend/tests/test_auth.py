"""
Tests for registration, login and account verification
"""
from fastapi import status
from sqlalchemy import select

from conftest import login_headers, register
from petcare.db.models.user import User


def _stored_user(session_factory, mobile):
    with session_factory() as db:
        return db.execute(select(User).where(User.mobile == mobile)).scalar_one()


def test_register_success(client, session_factory):
    response = register(client, mobile="0500000001", location="Riyadh")
    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "User registered successfully"
    data = body["data"]
    assert data["mobile"] == "0500000001"
    assert data["is_verified"] is False
    assert data["role"] == "USER"
    assert "password" not in data
    assert "verify_code" not in data

    stored = _stored_user(session_factory, "0500000001")
    assert stored.password != "secret123"
    assert stored.verify_code is not None and len(stored.verify_code) == 6


def test_register_duplicate_mobile(client):
    register(client, mobile="0500000002")
    response = register(client, mobile="0500000002", name="Someone Else")
    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json() == {"success": False, "message": "User with this mobile number already exists"}


def test_register_short_password_is_rejected(client):
    response = register(client, mobile="0500000003", password="123")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    body = response.json()
    assert body["success"] is False
    assert "password" in body["message"]


def test_login_returns_token(client):
    register(client, mobile="0500000004")
    response = client.post("/api/auth/login", json={"mobile": "0500000004", "password": "secret123"})
    assert response.status_code == status.HTTP_200_OK
    data = response.json()["data"]
    assert data["token"]
    assert data["user"]["mobile"] == "0500000004"


def test_login_wrong_password(client):
    register(client, mobile="0500000005")
    response = client.post("/api/auth/login", json={"mobile": "0500000005", "password": "wrong-pass"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["message"] == "Invalid mobile number or password"


def test_login_unknown_mobile_gives_same_message(client):
    response = client.post("/api/auth/login", json={"mobile": "0599999990", "password": "secret123"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["message"] == "Invalid mobile number or password"


def test_verify_account(client, session_factory):
    register(client, mobile="0500000006")
    code = _stored_user(session_factory, "0500000006").verify_code

    wrong = client.post("/api/auth/verify", json={"mobile": "0500000006", "verify_code": "000000" if code != "000000" else "111111"})
    assert wrong.status_code == status.HTTP_400_BAD_REQUEST

    response = client.post("/api/auth/verify", json={"mobile": "0500000006", "verify_code": code})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["data"]["is_verified"] is True
    assert _stored_user(session_factory, "0500000006").verify_code is None

    # Verifying twice is harmless.
    again = client.post("/api/auth/verify", json={"mobile": "0500000006", "verify_code": code})
    assert again.status_code == status.HTTP_200_OK


def test_verify_unknown_user(client):
    response = client.post("/api/auth/verify", json={"mobile": "0599999991", "verify_code": "123456"})
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["message"] == "User not found"


def test_resend_verify_code(client, session_factory):
    register(client, mobile="0500000007")
    response = client.post("/api/auth/resend-verify-code", json={"mobile": "0500000007"})
    assert response.status_code == status.HTTP_200_OK
    assert _stored_user(session_factory, "0500000007").verify_code is not None


def test_resend_verify_code_after_verification(client, session_factory):
    register(client, mobile="0500000008")
    code = _stored_user(session_factory, "0500000008").verify_code
    client.post("/api/auth/verify", json={"mobile": "0500000008", "verify_code": code})

    response = client.post("/api/auth/resend-verify-code", json={"mobile": "0500000008"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "User is already verified"


def test_protected_route_without_token(client):
    response = client.get("/api/users/profile")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"success": False, "message": "Access denied. No token provided."}


def test_protected_route_with_bad_token(client):
    response = client.get("/api/users/profile", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["message"] == "Invalid token."


def test_token_for_deleted_user_is_rejected(client, session_factory):
    register(client, mobile="0500000009")
    headers = login_headers(client, mobile="0500000009")
    with session_factory() as db:
        db.delete(db.execute(select(User).where(User.mobile == "0500000009")).scalar_one())
        db.commit()

    response = client.get("/api/users/profile", headers=headers)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["message"] == "Invalid token."


def test_verify_rejects_non_ascii_code(client, session_factory):
    register(client, mobile="0500000010")
    response = client.post("/api/auth/verify", json={"mobile": "0500000010", "verify_code": "١٢٣٤٥٦"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"success": False, "message": "Invalid verification code"}
    assert _stored_user(session_factory, "0500000010").is_verified is False
