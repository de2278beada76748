"""
Tests for the veterinary, pet store and charity directories
"""
import pytest
from fastapi import status

from conftest import image_file

DIRECTORIES = [
    ("/api/veterinaries", "Veterinary"),
    ("/api/pet-stores", "Pet store"),
    ("/api/charities", "Charity"),
]


@pytest.mark.parametrize("path,label", DIRECTORIES)
def test_writes_require_admin(client, auth_headers, path, label):
    anonymous = client.post(path, data={"name": "Happy Paws"})
    assert anonymous.status_code == status.HTTP_401_UNAUTHORIZED

    response = client.post(path, data={"name": "Happy Paws"}, headers=auth_headers)
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json() == {"success": False, "message": "Access denied. Admin only."}


@pytest.mark.parametrize("path,label", DIRECTORIES)
def test_admin_crud(client, admin_headers, path, label):
    created = client.post(
        path,
        data={"name": "Happy Paws", "mobile": "0112223333", "location": "Riyadh"},
        files=image_file(),
        headers=admin_headers,
    )
    assert created.status_code == status.HTTP_201_CREATED
    entry = created.json()["data"]
    assert entry["image"].startswith("/uploads/")

    public = client.get(f"{path}/{entry['id']}")
    assert public.status_code == status.HTTP_200_OK
    assert public.json()["data"]["name"] == "Happy Paws"

    updated = client.put(f"{path}/{entry['id']}", data={"location": "Dammam"}, headers=admin_headers)
    assert updated.json()["data"]["location"] == "Dammam"
    assert updated.json()["data"]["name"] == "Happy Paws"

    assert client.delete(f"{path}/{entry['id']}", headers=admin_headers).status_code == status.HTTP_200_OK
    missing = client.get(f"{path}/{entry['id']}")
    assert missing.status_code == status.HTTP_404_NOT_FOUND
    assert missing.json()["message"] == f"{label} not found"


def test_directory_listing_is_public_and_filtered(client, admin_headers):
    client.post("/api/pet-stores", data={"name": "Zoo Shop", "location": "Jeddah"}, headers=admin_headers)
    client.post("/api/pet-stores", data={"name": "Animal House", "location": "East Riyadh"}, headers=admin_headers)

    everything = client.get("/api/pet-stores").json()["data"]
    # Sorted by name.
    assert [e["name"] for e in everything] == ["Animal House", "Zoo Shop"]

    riyadh = client.get("/api/pet-stores", params={"location": "Riyadh"}).json()["data"]
    assert [e["name"] for e in riyadh] == ["Animal House"]


def test_veterinary_specialty_filter(client, admin_headers):
    client.post("/api/veterinaries", data={"name": "Dr. Salem", "specialty": "Surgery"}, headers=admin_headers)
    client.post("/api/veterinaries", data={"name": "Dr. Huda", "specialty": "Dentistry"}, headers=admin_headers)

    surgeons = client.get("/api/veterinaries", params={"specialty": "Surg"}).json()["data"]
    assert [v["name"] for v in surgeons] == ["Dr. Salem"]
    assert surgeons[0]["specialty"] == "Surgery"


def test_directory_invalid_id(client):
    response = client.get("/api/charities/abc")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
