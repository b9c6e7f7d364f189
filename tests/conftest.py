# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - InMemoryDatabase: a dict-backed stand-in for SupabaseClient
# - Identities for an admin, a super admin, a regular user, a moderator
#   and a stranger
# =============================================================================

import os
import uuid

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-for-hs256-tokens")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest

from core.models.actor import AuthIdentity
from core.services.config_store import ConfigStore
from lib.supabase_client import SupabaseClientError


# =============================================================================
# In-memory database
# =============================================================================

class InMemoryDatabase:
    """
    Implements the SupabaseClient methods used by ConfigStore on plain dicts.

    Every call is appended to `calls` so tests can assert that nothing
    touched the database.
    """

    def __init__(self):
        self.users: dict[str, dict] = {}
        self.settings: dict[str, dict] = {}
        self.tables: dict[str, list[dict]] = {}
        self.calls: list[str] = []

    def add_user(self, token_identifier, role=None, is_super_admin=None):
        row = {
            "id": str(uuid.uuid4()),
            "token_identifier": token_identifier,
            "role": role,
            "is_super_admin": is_super_admin,
        }
        self.users[token_identifier] = row
        return row

    # Users

    def fetch_user_by_token(self, token_identifier):
        self.calls.append("fetch_user_by_token")
        row = self.users.get(token_identifier)
        return dict(row) if row else None

    # Keyed settings

    def fetch_setting(self, key):
        self.calls.append("fetch_setting")
        row = self.settings.get(key)
        return dict(row) if row else None

    def list_settings(self):
        self.calls.append("list_settings")
        return [dict(row) for row in self.settings.values()]

    def upsert_setting(self, key, value):
        self.calls.append("upsert_setting")
        row = self.settings.setdefault(key, {"id": str(uuid.uuid4()), "key": key})
        row["value"] = value
        return dict(row)

    # Singleton settings

    def fetch_singleton(self, table):
        self.calls.append("fetch_singleton")
        rows = self.tables.get(table, [])
        return dict(rows[0]) if rows else None

    def insert_row(self, table, data):
        self.calls.append("insert_row")
        rows = self.tables.setdefault(table, [])
        if rows:
            # Singleton guard
            raise SupabaseClientError("Row already exists", code="UNIQUE_VIOLATION")
        row = {"id": str(uuid.uuid4()), **data}
        rows.append(row)
        return dict(row)

    def update_row(self, table, row_id, data):
        self.calls.append("update_row")
        for row in self.tables.get(table, []):
            if row["id"] == row_id:
                row.update(data)
                return dict(row)
        return None

    def stored(self, table):
        """The raw stored row of a singleton table, or None."""
        rows = self.tables.get(table, [])
        return dict(rows[0]) if rows else None


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def db():
    """Empty database with one user of each kind."""
    database = InMemoryDatabase()
    database.add_user("admin-token", role="admin")
    database.add_user("super-token", role="user", is_super_admin=True)
    database.add_user("user-token", role="user")
    database.add_user("legacy-token")  # no role column set
    database.add_user("moderator-token", role="moderator")
    database.add_user("owner-token", role="owner", is_super_admin=True)
    database.calls.clear()
    return database


@pytest.fixture
def store(db):
    """ConfigStore bound to the in-memory database."""
    return ConfigStore(db)


@pytest.fixture
def admin():
    return AuthIdentity(token_identifier="admin-token")


@pytest.fixture
def super_admin():
    return AuthIdentity(token_identifier="super-token")


@pytest.fixture
def regular_user():
    return AuthIdentity(token_identifier="user-token")


@pytest.fixture
def moderator():
    """User whose role is neither admin nor user."""
    return AuthIdentity(token_identifier="moderator-token")


@pytest.fixture
def stranger():
    """Valid token without a user row."""
    return AuthIdentity(token_identifier="unknown-token")
