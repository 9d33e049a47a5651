"""
Pytest fixtures for laundry console tests.

Provides the application on an in-memory SQLite database, a fresh record
store per test, seeded defaults, and authenticated request headers per role.
"""

import pytest
from laundry import create_app
from laundry.extensions import db
from laundry.services.kv_store import MemoryKeyValueStore
from laundry.services.record_store import RecordStore
from laundry.services.seed_service import initialize_data


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'STORAGE_BACKEND': 'sql',
        'SEED_ON_STARTUP': False,
    })

    with app.app_context():
        db.create_all()
        yield app
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Create fresh database for each test."""
    with app.app_context():
        # Clear all data but keep schema
        meta = db.metadata
        for table in reversed(meta.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()

        yield db.session

        # Cleanup after test
        db.session.rollback()


@pytest.fixture(scope='function')
def store(app, db_session):
    """The application's SQL-backed record store, emptied for this test."""
    return app.extensions["record_store"]


@pytest.fixture(scope='function')
def seeded_store(store):
    """Record store holding the default users, customers, outlets and products."""
    initialize_data(store)
    return store


@pytest.fixture(scope='function')
def memory_store():
    """Record store over a plain dict; needs no application context."""
    return RecordStore(MemoryKeyValueStore())


def get_auth_token(client, username: str, password: str) -> str:
    """Helper to get auth token for a user."""
    response = client.post('/api/auth/login', json={
        'username': username,
        'password': password
    })
    if response.status_code == 200:
        return response.json.get('token')
    return None


def auth_headers(token: str) -> dict:
    """Helper to create Authorization headers."""
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture(scope='function')
def admin_headers(client, seeded_store):
    return auth_headers(get_auth_token(client, "admin", "admin123"))


@pytest.fixture(scope='function')
def kasir_headers(client, seeded_store):
    return auth_headers(get_auth_token(client, "kasir", "kasir123"))


@pytest.fixture(scope='function')
def owner_headers(client, seeded_store):
    return auth_headers(get_auth_token(client, "owner", "owner123"))
