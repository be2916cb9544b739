"""Pytest fixtures for API and page testing."""
import uuid
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.db.base import Base, get_db
from app.domain.vendor import Vendor, VendorStatus
from app.main import app
from app.routers.vendors import get_vendor_service
from app.services.vendor import VendorService
from app.web.api_client import ApiError, get_api_client


@pytest.fixture(scope="function")
def db_url(tmp_path):
    """Create a fresh SQLite file with the vendor schema for each test."""
    path = tmp_path / "vendors_test.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(bind=sync_engine)
    sync_engine.dispose()
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture(scope="function")
def client(db_url):
    """Test client with the database dependency pointed at the test file.

    NullPool keeps every connection inside the event loop of the request
    that opened it.
    """
    engine = create_async_engine(db_url, poolclass=NullPool)
    session_factory = async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_vendor(client):
    """Create a vendor through the API and return the response body."""

    def _make(**overrides):
        body = {"name": "Acme", "domain": "Cloud", "email": "a@acme.com"}
        body.update(overrides)
        response = client.post("/api/vendors", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


# ---------------------------------------------------------------------------
# Substitute store
# ---------------------------------------------------------------------------

class InMemoryVendorRepository:
    """Dict-backed stand-in for VendorRepository."""

    def __init__(self):
        self.rows: dict[str, Vendor] = {}

    async def get_by_id(self, entity_id):
        return self.rows.get(entity_id)

    async def list_newest_first(self):
        return sorted(self.rows.values(), key=lambda v: v.created_at, reverse=True)

    async def create(self, **kwargs):
        now = datetime.now(timezone.utc)
        kwargs.setdefault("status", VendorStatus.PENDING)
        vendor = Vendor(id=str(uuid.uuid4()), created_at=now, updated_at=now, **kwargs)
        self.rows[vendor.id] = vendor
        return vendor

    async def update(self, entity_id, **kwargs):
        vendor = self.rows.get(entity_id)
        if vendor is None:
            return None
        for key, value in kwargs.items():
            setattr(vendor, key, value)
        vendor.updated_at = datetime.now(timezone.utc)
        return vendor

    async def delete(self, entity_id):
        return self.rows.pop(entity_id, None) is not None


@pytest.fixture
def memory_repo():
    return InMemoryVendorRepository()


@pytest.fixture
def memory_client(memory_repo):
    """Test client whose Resource API runs on the in-memory store."""
    app.dependency_overrides[get_vendor_service] = lambda: VendorService(memory_repo)
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Recording API client for the pages
# ---------------------------------------------------------------------------

class RecordingApiClient:
    """Stands in for VendorApiClient and records every call the pages make."""

    def __init__(self, vendors=None, fail_with=None):
        self.vendors = {v["id"]: dict(v) for v in (vendors or [])}
        self.fail_with = fail_with
        self.calls = []

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    async def list_vendors(self):
        self.calls.append(("list",))
        self._check()
        return list(self.vendors.values())

    async def get_vendor(self, vendor_id):
        self.calls.append(("get", vendor_id))
        if vendor_id not in self.vendors:
            raise ApiError(f"Vendor '{vendor_id}' not found", 404)
        return dict(self.vendors[vendor_id])

    async def create_vendor(self, payload):
        self.calls.append(("create", payload))
        self._check()
        return {"id": "new-id", **payload}

    async def update_vendor(self, vendor_id, payload):
        self.calls.append(("update", vendor_id, payload))
        self._check()
        self.vendors[vendor_id] = {**self.vendors[vendor_id], **payload}
        return dict(self.vendors[vendor_id])

    async def delete_vendor(self, vendor_id):
        self.calls.append(("delete", vendor_id))
        self._check()
        self.vendors.pop(vendor_id, None)

    def calls_named(self, name):
        return [c for c in self.calls if c[0] == name]


SAMPLE_VENDOR = {
    "id": "v-1",
    "name": "Brio Technologies",
    "domain": "Cloud",
    "subDomain": "DevOps",
    "email": "contact@brio.example",
    "phone": None,
    "website": "https://brio.example",
    "city": "Pune",
    "country": "India",
    "techStack": "AWS, Kubernetes",
    "certifications": None,
    "partnerStatus": None,
    "experienceYears": 7,
    "employeeStrength": None,
    "status": "PENDING",
    "rating": 3,
    "createdAt": "2026-10-01T09:30:00",
    "updatedAt": "2026-10-01T09:30:00",
}


@pytest.fixture
def sample_vendor():
    return dict(SAMPLE_VENDOR)


@pytest.fixture
def fake_api():
    return RecordingApiClient([SAMPLE_VENDOR])


@pytest.fixture
def page_client(fake_api):
    """Test client whose pages talk to the recording fake instead of the API."""
    app.dependency_overrides[get_api_client] = lambda: fake_api
    yield TestClient(app)
    app.dependency_overrides.clear()
