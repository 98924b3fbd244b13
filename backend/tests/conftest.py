"""
Pytest configuration and fixtures for backend tests
"""

import os

# Settings are read at import time
os.environ.setdefault("SUPABASE_URL", "https://kursusku-test.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ["ADMIN_EMAILS"] = "Admin@Example.com, second-admin@example.com"

import pytest
from unittest.mock import MagicMock
from datetime import datetime, timezone
import uuid
from starlette.testclient import TestClient
from app.main import app
from app.dependencies import get_supabase_admin, get_supabase_public


USER_TOKEN = "user-token"
ADMIN_TOKEN = "admin-token"


def make_auth_user(email, full_name=None):
    """Shape of the user object returned by supabase.auth.get_user"""
    user = MagicMock()
    user.id = str(uuid.uuid4())
    user.email = email
    user.user_metadata = {"full_name": full_name} if full_name else {}
    return user


@pytest.fixture
def mock_user():
    """Mock student returned by the identity service"""
    return make_auth_user("testuser@example.com", "Test User")


@pytest.fixture
def mock_admin():
    """Mock admin returned by the identity service"""
    return make_auth_user("admin@example.com", "Test Admin")


@pytest.fixture
def mock_supabase_public(mock_user, mock_admin):
    """Mock anon Supabase client used for token verification"""
    mock_client = MagicMock()
    users = {USER_TOKEN: mock_user, ADMIN_TOKEN: mock_admin}

    def get_user(token):
        if token not in users:
            raise Exception("invalid JWT: unable to parse or verify signature")
        response = MagicMock()
        response.user = users[token]
        return response

    mock_client.auth.get_user.side_effect = get_user
    return mock_client


@pytest.fixture
def mock_supabase_admin():
    """Mock service role Supabase client used for data access"""
    return MagicMock()


@pytest.fixture
def client(mock_supabase_public, mock_supabase_admin):
    """FastAPI test client with Supabase handles replaced by mocks"""
    app.dependency_overrides[get_supabase_public] = lambda: mock_supabase_public
    app.dependency_overrides[get_supabase_admin] = lambda: mock_supabase_admin
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Auth headers for a regular user"""
    return {"Authorization": f"Bearer {USER_TOKEN}"}


@pytest.fixture
def admin_auth_headers():
    """Auth headers for an allowlisted admin"""
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def mock_course():
    """Mock course row"""
    return {
        "id": 5,
        "title": "Bahasa Indonesia A1",
        "description": "Salam dan perkenalan",
        "level": "A1",
        "price": 150000,
        "image_url": None,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }


@pytest.fixture
def mock_courses():
    """Mock courses list, newest first"""
    return [
        {
            "id": 3,
            "title": "Bahasa Indonesia B1",
            "level": "B1",
            "price": 250000,
            "created_at": "2026-10-03T08:00:00+00:00",
        },
        {
            "id": 2,
            "title": "Bahasa Indonesia A2",
            "level": "A2",
            "price": 150000,
            "created_at": "2026-10-02T08:00:00+00:00",
        },
        {
            "id": 1,
            "title": "Bahasa Indonesia A1",
            "level": "A1",
            "price": 0,
            "created_at": "2026-10-01T08:00:00+00:00",
        },
    ]
