# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - An in-memory stand-in for the Supabase query builder (FakeSupabase)
# - A TestClient wired to the fakes through dependency overrides
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-key")
os.environ.setdefault("CLOUDINARY_CLOUD_NAME", "test-cloud")
os.environ.setdefault("CLOUDINARY_API_KEY", "test-api-key")
os.environ.setdefault("CLOUDINARY_API_SECRET", "test-api-secret")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import copy
from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

ADMIN_ID = "7f3a2c1e-5b4d-4e8f-9a0b-1c2d3e4f5a6b"
ADMIN_EMAIL = "admin@studio.dev"
VALID_TOKEN = "valid-token"


# =============================================================================
# Backend Errors
# =============================================================================

def no_rows_error() -> APIError:
    return APIError({
        "code": "PGRST116",
        "message": "JSON object requested, multiple (or no) rows returned",
        "details": "The result contains 0 rows",
        "hint": None,
    })


def missing_table_error(table: str) -> APIError:
    return APIError({
        "code": "42P01",
        "message": f'relation "public.{table}" does not exist',
        "details": None,
        "hint": None,
    })


def invalid_id_error(value: str) -> APIError:
    return APIError({
        "code": "22P02",
        "message": f'invalid input syntax for type uuid: "{value}"',
        "details": None,
        "hint": None,
    })


def backend_error(message: str = "connection reset by peer") -> APIError:
    return APIError({"code": "XX000", "message": message, "details": None, "hint": None})


# =============================================================================
# Fake Supabase
# =============================================================================

def _eq_matches(cell: Any, value: Any) -> bool:
    """PostgREST eq: exact and case-sensitive; booleans match "true"/"false"."""
    if cell is None:
        return False
    if isinstance(cell, bool):
        return ("true" if cell else "false") == str(value)
    return str(cell) == str(value)


class FakeResponse:
    def __init__(self, data: Any, count: int | None = None):
        self.data = data
        self.count = count


class FakeQuery:
    """Records a chained PostgREST query and runs it against in-memory rows."""

    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self.operation = "select"
        self.payload: dict[str, Any] | None = None
        self.columns = "*"
        self.count_mode = None
        self.head = False
        self.filters = []
        self.order_by = None
        self.descending = False
        self.row_limit = None
        self.single_row = False

    def select(self, *columns, count=None, head=False):
        self.columns = columns[0] if columns else "*"
        self.count_mode = count
        self.head = head
        return self

    def insert(self, payload):
        self.operation = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.operation = "update"
        self.payload = payload
        return self

    def delete(self):
        self.operation = "delete"
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: _eq_matches(row.get(column), value))
        return self

    def in_(self, column, values):
        wanted = {str(value) for value in values}
        self.filters.append(lambda row: str(row.get(column)) in wanted)
        return self

    def gte(self, column, value):
        self.filters.append(lambda row: row.get(column) is not None and row.get(column) >= value)
        return self

    def order(self, column, desc=False):
        self.order_by = column
        self.descending = desc
        return self

    def limit(self, count):
        self.row_limit = count
        return self

    def single(self):
        self.single_row = True
        return self

    def execute(self):
        self.db.calls.append((self.table, self.operation))

        if self.table in self.db.failures:
            raise self.db.failures[self.table]
        if self.table in self.db.missing_tables:
            raise missing_table_error(self.table)

        rows = self.db.tables.setdefault(self.table, [])

        if self.operation == "insert":
            record = dict(self.payload)
            record.setdefault("id", str(uuid4()))
            record.setdefault("created_at", datetime.now(timezone.utc).isoformat())
            rows.append(record)
            return FakeResponse([copy.deepcopy(record)])

        matched = [row for row in rows if all(check(row) for check in self.filters)]

        if self.operation == "update":
            for row in matched:
                row.update(self.payload)
            return FakeResponse(copy.deepcopy(matched))

        if self.operation == "delete":
            for row in matched:
                rows.remove(row)
            return FakeResponse(copy.deepcopy(matched))

        if self.order_by:
            present = [row for row in matched if row.get(self.order_by) is not None]
            absent = [row for row in matched if row.get(self.order_by) is None]
            present.sort(key=lambda row: row[self.order_by], reverse=self.descending)
            matched = present + absent

        total = len(matched)
        if self.row_limit is not None:
            matched = matched[: self.row_limit]

        if self.head:
            return FakeResponse([], count=total)

        if self.single_row:
            if len(matched) != 1:
                raise no_rows_error()
            return FakeResponse(copy.deepcopy(self._project(matched[0])))

        data = [self._project(row) for row in copy.deepcopy(matched)]
        return FakeResponse(data, count=total if self.count_mode else None)

    def _project(self, row):
        if self.columns == "*":
            return row
        wanted = [column.strip() for column in self.columns.split(",")]
        return {column: row.get(column) for column in wanted}


class FakeSupabase:
    """
    In-memory replacement for lib.supabase_client.SupabaseClient.

    - tables: table name -> list of row dicts
    - missing_tables: tables that raise "relation does not exist"
    - failures: table name -> exception raised by every query on it
    - users: bearer token -> Supabase user object
    - calls: (table, operation) for every executed query
    """

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.missing_tables: set[str] = set()
        self.failures: dict[str, Exception] = {}
        self.users = {VALID_TOKEN: SimpleNamespace(id=ADMIN_ID, email=ADMIN_EMAIL)}
        self.calls: list[tuple[str, str]] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def verify_token(self, token: str):
        return self.users.get(token)

    def writes(self) -> list[tuple[str, str]]:
        return [call for call in self.calls if call[1] != "select"]


class FakeCloudinary:
    """Stand-in for lib.cloudinary_client.CloudinaryClient."""

    def __init__(self):
        self.uploads: list[tuple[bytes, str]] = []
        self.error: Exception | None = None

    def upload_image(self, content: bytes, mimetype: str) -> dict[str, Any]:
        if self.error is not None:
            raise self.error
        self.uploads.append((content, mimetype))
        return {
            "url": "https://res.cloudinary.com/test-cloud/image/upload/v1/lumen-sphere/abc.webp",
            "public_id": "lumen-sphere/abc",
            "width": 1200,
            "height": 800,
        }


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_db():
    return FakeSupabase()


@pytest.fixture
def fake_host():
    return FakeCloudinary()


@pytest.fixture
def client(fake_db, fake_host):
    """TestClient with both backends replaced by fakes."""
    from app.dependencies import get_cloudinary_client, get_supabase_client
    from app.main import app

    app.dependency_overrides[get_supabase_client] = lambda: fake_db
    app.dependency_overrides[get_cloudinary_client] = lambda: fake_host
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {VALID_TOKEN}"}


@pytest.fixture
def sample_project_payload():
    """Project body as the admin form sends it."""
    return {
        "title": "Northwind Rebrand",
        "description": "New identity and storefront for a coffee roaster",
        "category": "E-commerce",
        "tags": "Branding, Shopify , ,Motion",
        "image": "https://res.cloudinary.com/test-cloud/image/upload/northwind.webp",
        "gallery": ["https://cdn.example.com/1.webp", " https://cdn.example.com/2.webp "],
        "metrics": {"improvement": "Conversion rate", "metric": "+42%"},
        "isFeatured": True,
        "featuredOrder": "2",
    }


@pytest.fixture
def sample_post_payload():
    return {
        "title": "Why we ship on Fridays",
        "excerpt": "A short defence of small releases",
        "category": "Process",
        "content": "Long form content...",
        "readTime": "6 min read",
        "tags": ["process", "deploys"],
        "publishedAt": "2025-03-01T09:00:00Z",
    }
