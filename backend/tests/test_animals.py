"""
Tests for animal profiles and the cover-image rule
"""
import random

import pytest
from fastapi import status

from conftest import image_file
from petcare.core.security import hash_password
from petcare.core.errors import NotFoundError
from petcare.db.models.user import User
from petcare.services.animal_service import AnimalService


def _add_image(client, headers, animal_id, is_cover=False):
    return client.post(
        f"/api/animals/{animal_id}/images",
        files=image_file(),
        data={"is_cover": "true" if is_cover else "false"},
        headers=headers,
    )


def _covers(client, headers, animal_id):
    images = client.get(f"/api/animals/{animal_id}", headers=headers).json()["data"]["images"]
    return [img["id"] for img in images if img["is_cover"]], images


def test_create_and_list_animals(client, auth_headers, animal):
    assert animal["name"] == "Mishmish"
    assert animal["images"] == []

    response = client.get("/api/animals", headers=auth_headers)
    assert response.status_code == status.HTTP_200_OK
    assert [a["id"] for a in response.json()["data"]] == [animal["id"]]


def test_create_with_images_marks_first_as_cover(client, auth_headers):
    response = client.post(
        "/api/animals",
        json={
            "type": "Dog",
            "gender": "Male",
            "name": "Rex",
            "images": ["/uploads/animals/a.png", "/uploads/animals/b.png"],
        },
        headers=auth_headers,
    )
    assert response.status_code == status.HTTP_201_CREATED
    images = response.json()["data"]["images"]
    assert [img["is_cover"] for img in images] == [True, False]


def test_create_animal_missing_fields(client, auth_headers):
    response = client.post("/api/animals", json={"type": "Cat"}, headers=auth_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["success"] is False


def test_new_cover_demotes_previous_one(client, auth_headers, animal):
    first = _add_image(client, auth_headers, animal["id"])
    assert first.status_code == status.HTTP_201_CREATED
    # First photo becomes the cover even when not requested.
    assert first.json()["data"]["is_cover"] is True

    second = _add_image(client, auth_headers, animal["id"], is_cover=True)
    third = _add_image(client, auth_headers, animal["id"])
    assert third.json()["data"]["is_cover"] is False

    covers, images = _covers(client, auth_headers, animal["id"])
    assert len(images) == 3
    assert covers == [second.json()["data"]["id"]]


def test_deleting_cover_promotes_oldest_remaining(client, auth_headers, animal):
    first = _add_image(client, auth_headers, animal["id"]).json()["data"]
    second = _add_image(client, auth_headers, animal["id"]).json()["data"]
    cover = _add_image(client, auth_headers, animal["id"], is_cover=True).json()["data"]

    response = client.delete(f"/api/animals/images/{cover['id']}", headers=auth_headers)
    assert response.status_code == status.HTTP_200_OK

    covers, images = _covers(client, auth_headers, animal["id"])
    assert covers == [first["id"]]
    assert {img["id"] for img in images} == {first["id"], second["id"]}


def test_deleting_last_image_leaves_no_cover(client, auth_headers, animal):
    only = _add_image(client, auth_headers, animal["id"]).json()["data"]
    client.delete(f"/api/animals/images/{only['id']}", headers=auth_headers)
    covers, images = _covers(client, auth_headers, animal["id"])
    assert covers == [] and images == []


def test_list_shows_cover_only(client, auth_headers, animal):
    _add_image(client, auth_headers, animal["id"])
    cover = _add_image(client, auth_headers, animal["id"], is_cover=True).json()["data"]

    listed = client.get("/api/animals", headers=auth_headers).json()["data"][0]
    assert [img["id"] for img in listed["images"]] == [cover["id"]]


def test_image_upload_writes_file(client, auth_headers, animal, upload_root):
    data = _add_image(client, auth_headers, animal["id"]).json()["data"]
    assert data["image"].startswith("/uploads/animals/")
    assert (upload_root / data["image"][len("/uploads/"):]).is_file()


def test_image_upload_requires_file(client, auth_headers, animal):
    response = client.post(f"/api/animals/{animal['id']}/images", data={"is_cover": "true"}, headers=auth_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "No image file provided"


def test_image_upload_rejects_non_images(client, auth_headers, animal):
    response = client.post(
        f"/api/animals/{animal['id']}/images",
        files=image_file(name="notes.txt", content=b"hello", content_type="text/plain"),
        headers=auth_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Image must be JPEG, PNG, GIF or WebP"


def test_stored_extension_follows_content_type(client, auth_headers, animal, upload_root):
    response = client.post(
        f"/api/animals/{animal['id']}/images",
        files=image_file(name="page.html", content_type="image/png"),
        headers=auth_headers,
    )
    assert response.status_code == status.HTTP_201_CREATED
    url = response.json()["data"]["image"]
    assert url.endswith(".png")
    assert [p.suffix for p in (upload_root / "animals").iterdir()] == [".png"]


def test_svg_uploads_are_rejected(client, auth_headers, animal):
    response = client.post(
        f"/api/animals/{animal['id']}/images",
        files=image_file(name="logo.svg", content=b"<svg/>", content_type="image/svg+xml"),
        headers=auth_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_create_cannot_claim_another_users_image(client, auth_headers, other_headers, animal, upload_root):
    victim = _add_image(client, auth_headers, animal["id"]).json()["data"]
    victim_path = upload_root / victim["image"][len("/uploads/"):]

    response = client.post(
        "/api/animals",
        json={"type": "Cat", "gender": "Male", "name": "Thief", "images": [victim["image"]]},
        headers=other_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Image is already in use"
    assert client.get("/api/animals", headers=other_headers).json()["data"] == []
    assert victim_path.is_file()


@pytest.mark.parametrize(
    "path",
    [
        "/uploads/posts/a.png",
        "/uploads/animals/../posts/a.png",
        "/uploads/animals/",
        "https://example.com/a.png",
    ],
)
def test_create_rejects_paths_outside_animal_uploads(client, auth_headers, path):
    response = client.post(
        "/api/animals",
        json={"type": "Cat", "gender": "Male", "name": "Tom", "images": [path]},
        headers=auth_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Images must be uploaded animal photos"


def test_create_rejects_repeated_image(client, auth_headers):
    response = client.post(
        "/api/animals",
        json={"type": "Cat", "gender": "Male", "name": "Tom", "images": ["/uploads/animals/a.png"] * 2},
        headers=auth_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_upload_to_foreign_animal_leaves_no_file(client, other_headers, animal, upload_root):
    response = _add_image(client, other_headers, animal["id"])
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["message"] == "Animal not found"
    assert list((upload_root / "animals").iterdir()) == []


def test_foreign_animal_is_not_found(client, other_headers, animal):
    assert client.get(f"/api/animals/{animal['id']}", headers=other_headers).status_code == 404
    assert client.put(f"/api/animals/{animal['id']}", json={"name": "Mine"}, headers=other_headers).status_code == 404
    assert client.delete(f"/api/animals/{animal['id']}", headers=other_headers).status_code == 404


def test_foreign_image_is_not_found(client, auth_headers, other_headers, animal):
    image = _add_image(client, auth_headers, animal["id"]).json()["data"]
    response = client.delete(f"/api/animals/images/{image['id']}", headers=other_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["message"] == "Image not found"


@pytest.mark.parametrize("bad_id", ["abc", "0", "-3", "1.5", "2147483648", "99999999999999999999999"])
def test_invalid_animal_id(client, auth_headers, bad_id):
    response = client.get(f"/api/animals/{bad_id}", headers=auth_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["success"] is False


def test_update_animal(client, auth_headers, animal):
    response = client.put(f"/api/animals/{animal['id']}", json={"age": 3}, headers=auth_headers)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()["data"]
    assert data["age"] == 3
    assert data["name"] == "Mishmish"


def test_delete_animal_removes_images(client, auth_headers, animal, upload_root):
    image = _add_image(client, auth_headers, animal["id"]).json()["data"]
    path = upload_root / image["image"][len("/uploads/"):]
    assert path.is_file()

    response = client.delete(f"/api/animals/{animal['id']}", headers=auth_headers)
    assert response.status_code == status.HTTP_200_OK
    assert not path.exists()
    assert client.get(f"/api/animals/{animal['id']}", headers=auth_headers).status_code == 404


def test_cover_rule_holds_under_random_operations(db_session):
    """After any sequence of adds and deletes, a non-empty set has exactly one cover."""
    owner = User(name="Owner", mobile="0503333333", password=hash_password("secret123"))
    db_session.add(owner)
    db_session.commit()

    service = AnimalService(db_session)
    animal = service.create(owner.id, {"type": "Bird", "gender": "Male", "name": "Kiwi"})
    rng = random.Random(7)
    live_ids: list[int] = []

    for step in range(60):
        if live_ids and rng.random() < 0.4:
            victim = rng.choice(live_ids)
            service.delete_image(victim, owner.id)
            live_ids.remove(victim)
        else:
            image = service.add_image(animal.id, owner.id, f"/uploads/animals/{step}.png", make_cover=rng.random() < 0.5)
            live_ids.append(image.id)

        db_session.expire_all()
        covers = [img for img in service.get_owned(animal.id, owner.id).images if img.is_cover]
        assert len(covers) == (1 if live_ids else 0)


def test_service_hides_foreign_animals(db_session):
    owner = User(name="Owner", mobile="0504444444", password=hash_password("secret123"))
    stranger = User(name="Stranger", mobile="0505555555", password=hash_password("secret123"))
    db_session.add_all([owner, stranger])
    db_session.commit()

    service = AnimalService(db_session)
    animal = service.create(owner.id, {"type": "Cat", "gender": "Female", "name": "Luna"})
    with pytest.raises(NotFoundError):
        service.get_owned(animal.id, stranger.id)
