"""
Pytest configuration and fixtures for testing.
Uses in-memory SQLite database for fast, isolated tests.
"""
import os
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

# Set testing environment before importing app
os.environ["TESTING"] = "True"
os.environ["DEBUG"] = "False"

from core import config as core_config
from core.db import Base, build_engine, get_db
from main import app
from models.user import User
from security import jwt as jwt_utils
from security.password import hash_password
from services import store
from sqlalchemy.orm import sessionmaker

engine = build_engine("sqlite:///:memory:")
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def override_get_db():
    """Override get_db dependency for testing."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def test_settings():
    core_config.settings.JWT_SECRET = "test-secret"
    core_config.settings.TESTING = True
    yield


@pytest.fixture(autouse=True)
def tables():
    """Fresh schema for every test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db_session = TestingSessionLocal()
    yield db_session
    db_session.close()


@pytest.fixture
def client():
    """Create a test client with overridden database dependency."""
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def delete_policy():
    """Switch the shop delete policy for one test."""
    original = core_config.settings.DELETE_POLICY

    def set_policy(policy):
        core_config.settings.DELETE_POLICY = policy

    yield set_policy
    core_config.settings.DELETE_POLICY = original


def _make_user(db, email, is_admin):
    user = User(
        email=email,
        password_hash=hash_password("testpass123"),
        display_name="Test User",
        is_admin=is_admin,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def test_user(db):
    return _make_user(db, "shopper@example.com", is_admin=False)


@pytest.fixture
def admin_user(db):
    return _make_user(db, "admin@supermall.com", is_admin=True)


@pytest.fixture
def auth_headers(test_user):
    """Authorization headers for a regular shopper."""
    return {"Authorization": f"Bearer {jwt_utils.create_access_token(str(test_user.id))}"}


@pytest.fixture
def admin_headers(admin_user):
    """Authorization headers for an admin."""
    return {"Authorization": f"Bearer {jwt_utils.create_access_token(str(admin_user.id), {'admin': True})}"}


@pytest.fixture
def category(db):
    return store.create(db, store.CATEGORIES, {"name": "Electronics", "description": "Gadgets and more"}).data


@pytest.fixture
def floor(db):
    return store.create(db, store.FLOORS, {"name": "Ground Floor", "level": 0}).data


@pytest.fixture
def shop(db, category, floor):
    return store.create(db, store.SHOPS, {
        "name": "TechTrend",
        "owner": "Sarah Johnson",
        "email": "techtrend@supermall.com",
        "phone": "+1-555-0101",
        "description": "Phones and tablets",
        "category_id": category["id"],
        "floor_id": floor["id"],
        "rating": 4.6,
    }).data


@pytest.fixture
def offer(db, shop):
    today = date.today()
    return store.create(db, store.OFFERS, {
        "title": "Smartphone Sale",
        "description": "Flagship phones at a discount",
        "shop_id": shop["id"],
        "original_price": 100,
        "discounted_price": 75,
        "start_date": today - timedelta(days=1),
        "end_date": today + timedelta(days=10),
        "features": ["Warranty"],
    }).data


@pytest.fixture
def product(db, shop, category):
    return store.create(db, store.PRODUCTS, {
        "name": "iPhone 15",
        "description": "Latest Apple smartphone",
        "price": 999,
        "shop_id": shop["id"],
        "category_id": category["id"],
    }).data
