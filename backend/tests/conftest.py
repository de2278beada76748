"""
Pytest configuration: in-memory SQLite, a temporary upload directory and
helpers to register, log in and promote users.
"""
import os
import tempfile

# Settings are read at import time, so the environment goes first.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="petcare-uploads-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from petcare.api.v1.routes.deps import get_db
from petcare.core import security
from petcare.core.config import settings
from petcare.db.base import Base
from petcare.db.models.user import ROLE_ADMIN, User
from petcare.main import app

import petcare.db.models  # noqa

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch):
    """Full-strength PBKDF2 makes every registration slow."""
    monkeypatch.setattr(security, "PASSWORD_ITERATIONS", 1000)


@pytest.fixture(autouse=True)
def upload_root(tmp_path, monkeypatch):
    """Each test writes uploads into its own directory."""
    root = tmp_path / "uploads"
    monkeypatch.setattr(settings, "upload_dir", str(root))
    return root


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Session for service-level tests."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """FastAPI test client bound to the in-memory database"""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client, mobile="0501234567", password="secret123", name="Test User", **extra):
    payload = {"name": name, "mobile": mobile, "password": password, **extra}
    return client.post("/api/auth/register", json=payload)


def login_headers(client, mobile="0501234567", password="secret123") -> dict:
    response = client.post("/api/auth/login", json={"mobile": mobile, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['data']['token']}"}


def image_file(name="photo.png", content=PNG_BYTES, content_type="image/png"):
    return {"image": (name, content, content_type)}


@pytest.fixture
def auth_headers(client):
    register(client, mobile="0501111111")
    return login_headers(client, mobile="0501111111")


@pytest.fixture
def other_headers(client):
    register(client, mobile="0502222222", name="Other User")
    return login_headers(client, mobile="0502222222")


@pytest.fixture
def admin_headers(client, session_factory):
    register(client, mobile="0509999999", name="Admin")
    with session_factory() as db:
        user = db.execute(select(User).where(User.mobile == "0509999999")).scalar_one()
        user.role = ROLE_ADMIN
        db.commit()
    return login_headers(client, mobile="0509999999")


@pytest.fixture
def animal(client, auth_headers):
    response = client.post(
        "/api/animals",
        json={"type": "Cat", "gender": "Female", "age": 2, "name": "Mishmish"},
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]
