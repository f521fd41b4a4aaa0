from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from invoicing.config import get_settings
from invoicing.db.engine import get_engine
from invoicing.db.schema import metadata
from invoicing.main import app


def _reset_caches() -> None:
    get_settings.cache_clear()
    get_engine.cache_clear()


@pytest.fixture
def database_url(tmp_path, monkeypatch) -> str:
    url = f"sqlite:///{tmp_path / 'invoicing.sqlite'}"
    monkeypatch.setenv("INVOICING_DATABASE_URL", url)
    _reset_caches()
    yield url
    _reset_caches()


@pytest.fixture
def engine(database_url):
    engine = create_engine(database_url, future=True)
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client(database_url) -> TestClient:
    """Client over a freshly seeded database."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def empty_client(database_url, monkeypatch) -> TestClient:
    """Client over an empty database."""
    monkeypatch.setenv("INVOICING_SEED_EXAMPLE_DATA", "false")
    get_settings.cache_clear()
    with TestClient(app) as test_client:
        yield test_client


def _invoice_payload(**overrides):
    payload = {
        "customerId": 1,
        "invoiceNumber": "INV-100",
        "date": "2024-01-01",
        "dueDate": "2024-01-31",
        "status": "pending",
        "subtotal": 200,
        "tax": 20,
        "total": 220,
        "notes": "Thanks for your business",
        "items": [
            {"description": "Design work", "quantity": 2, "unitPrice": 100, "taxRate": 10},
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def invoice_payload():
    """Builder for a valid invoice request body; keyword arguments override fields."""
    return _invoice_payload
