"""Pytest configuration and fixtures."""

import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.core.cache import Revalidation
from app.core.config import Settings
from app.core.database import Store
from app.main import create_app
from app.models import Customer, Invoice, Revenue, User
from app.services.auth_service import AuthService, hash_password
from app.services.data_service import DataService
from app.services.invoice_actions import InvoiceActions

PASSWORD = "123456"

CUSTOMERS = [
    {"id": "cust-alice", "name": "Alice Able", "email": "alice@example.com", "image_url": "/customers/alice.png"},
    {"id": "cust-bob", "name": "Bob Brown", "email": "bob@example.com", "image_url": "/customers/bob.png"},
    {"id": "cust-carol", "name": "Carol Cruz", "email": "carol@test.org", "image_url": "/customers/carol.png"},
    {"id": "cust-dave", "name": "Dave Dormant", "email": "dave@example.com", "image_url": "/customers/dave.png"},
]


def store_error() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("connection refused: secret-host:5432"))


def seed(store: Store) -> None:
    """Twelve invoices dated 2024-01-01..2024-01-12.

    Invoice i (1-based) belongs to customers[(i-1) % 3], is worth i*1000 cents
    and is paid when i is odd, pending when even. Dave has no invoices.
    """
    with store.session() as db:
        db.add(User(id="user-1", name="User", email="user@nextmail.com", password=hash_password(PASSWORD)))
        db.add_all([Customer(**customer) for customer in CUSTOMERS])
        db.add_all([
            Invoice(
                id=f"inv-{i:02d}",
                customer_id=CUSTOMERS[(i - 1) % 3]["id"],
                amount=i * 1000,
                status="paid" if i % 2 else "pending",
                date=datetime.date(2024, 1, i),
            )
            for i in range(1, 13)
        ])
        db.add_all([
            Revenue(month="Mar", revenue=2200),
            Revenue(month="Jan", revenue=2000),
            Revenue(month="Feb", revenue=1800),
        ])
        db.commit()


@pytest.fixture
def store(tmp_path):
    store = Store(f"sqlite:///{tmp_path / 'test.db'}")
    store.create_all()
    try:
        yield store
    finally:
        store.dispose()


@pytest.fixture
def seeded_store(store):
    seed(store)
    return store


@pytest.fixture
def data_service(seeded_store):
    return DataService(seeded_store)


@pytest.fixture
def revalidation():
    return Revalidation()


@pytest.fixture
def invoice_actions(seeded_store, revalidation):
    return InvoiceActions(seeded_store, revalidation)


@pytest.fixture
def auth_service(seeded_store):
    return AuthService(seeded_store)


def make_app(database_url: str):
    return create_app(Settings(DATABASE_URL=database_url, SECRET_KEY="test-secret", LOG_LEVEL="WARNING"))


def log_in(test_client: TestClient) -> TestClient:
    response = test_client.post(
        "/login",
        data={"email": "user@nextmail.com", "password": PASSWORD},
        follow_redirects=False,
    )
    assert response.status_code == 303
    return test_client


@pytest.fixture
def client(tmp_path):
    application = make_app(f"sqlite:///{tmp_path / 'web.db'}")
    with TestClient(application) as test_client:
        seed(application.state.store)
        yield test_client


@pytest.fixture
def logged_in_client(client):
    return log_in(client)


@pytest.fixture
def worker_clients(tmp_path):
    """Two independently created apps over one store, like two server workers."""
    database_url = f"sqlite:///{tmp_path / 'shared.db'}"
    first, second = make_app(database_url), make_app(database_url)
    with TestClient(first) as first_client, TestClient(second) as second_client:
        seed(first.state.store)
        yield log_in(first_client), log_in(second_client)
