"""
Tests for profile endpoints
"""
from fastapi import status

from conftest import login_headers


def test_get_profile(client, auth_headers):
    response = client.get("/api/users/profile", headers=auth_headers)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()["data"]
    assert data["mobile"] == "0501111111"
    assert "password" not in data


def test_update_profile_changes_only_given_fields(client, auth_headers):
    response = client.put(
        "/api/users/profile",
        json={"location": "Jeddah", "address": "King Road 12"},
        headers=auth_headers,
    )
    assert response.status_code == status.HTTP_200_OK
    data = response.json()["data"]
    assert data["location"] == "Jeddah"
    assert data["address"] == "King Road 12"
    assert data["name"] == "Test User"


def test_update_profile_ignores_mobile(client, auth_headers):
    response = client.put("/api/users/profile", json={"mobile": "0500000000"}, headers=auth_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["data"]["mobile"] == "0501111111"


def test_change_password(client, auth_headers):
    response = client.put(
        "/api/users/change-password",
        json={"current_password": "secret123", "new_password": "newsecret456"},
        headers=auth_headers,
    )
    assert response.status_code == status.HTTP_200_OK

    old = client.post("/api/auth/login", json={"mobile": "0501111111", "password": "secret123"})
    assert old.status_code == status.HTTP_401_UNAUTHORIZED
    assert login_headers(client, mobile="0501111111", password="newsecret456")


def test_change_password_wrong_current(client, auth_headers):
    response = client.put(
        "/api/users/change-password",
        json={"current_password": "not-it", "new_password": "newsecret456"},
        headers=auth_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Current password is incorrect"
