"""
Shared pytest fixtures for the LowesPro service.

The database URL is pinned to in-memory SQLite BEFORE the app is imported,
so shared.core.database builds its engine against it.
"""
import os

import pytest

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402

from shared.core.database import Base, SessionLocal, engine  # noqa: E402
from lowespro_service.app.main import app  # noqa: E402


# ── Fresh schema per test ─────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    # unhandled errors come back as the 500 JSON body instead of raising
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


# ── Record factories ──────────────────────────────────────────────────────────

@pytest.fixture
def make_vendor(client):
    def _make(company_name="Acme Supply", **fields):
        resp = client.post("/api/vendors", json={"companyName": company_name, **fields})
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make


@pytest.fixture
def make_category(client):
    def _make(name, **fields):
        resp = client.post("/api/categories", json={"name": name, **fields})
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make
