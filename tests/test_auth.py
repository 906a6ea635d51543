# =============================================================================
# tests/test_auth.py - Auth Gate Tests
# =============================================================================
# Tests for require_user: bearer parsing, Supabase verification and the
# optional ADMIN_ALLOWLIST.
#
# Run with: pytest tests/test_auth.py -v
# =============================================================================

from types import SimpleNamespace
from uuid import UUID

import pytest

from app.auth.models import AuthUser
from app.config import settings
from app.dependencies import get_supabase_client
from app.main import app
from tests.conftest import ADMIN_EMAIL, ADMIN_ID


class TestAuthUser:
    """Tests for AuthUser.from_supabase_user()"""

    def test_builds_from_supabase_user(self):
        user = AuthUser.from_supabase_user(SimpleNamespace(id=ADMIN_ID, email=ADMIN_EMAIL))

        assert user.id == UUID(ADMIN_ID)
        assert user.email == ADMIN_EMAIL

    def test_malformed_id_raises(self):
        with pytest.raises(ValueError):
            AuthUser.from_supabase_user(SimpleNamespace(id="not-a-uuid", email=None))


class TestRequireUser:
    """The gate as seen through an admin endpoint."""

    @pytest.mark.parametrize("header", [
        None,
        "",
        "Bearer ",
        "Basic dXNlcjpwYXNz",
        "valid-token",
    ])
    def test_missing_or_malformed_header_is_401(self, client, header):
        headers = {"Authorization": header} if header is not None else {}

        response = client.get("/leads", headers=headers)

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    def test_unknown_token_is_401(self, client):
        response = client.get("/leads", headers={"Authorization": "Bearer expired"})

        assert response.status_code == 401

    def test_valid_token_passes(self, client, auth_headers):
        response = client.get("/leads", headers=auth_headers)

        assert response.status_code == 200

    def test_malformed_user_id_is_401(self, client, fake_db):
        fake_db.users["odd-token"] = SimpleNamespace(id="not-a-uuid", email=ADMIN_EMAIL)

        response = client.get("/leads", headers={"Authorization": "Bearer odd-token"})

        assert response.status_code == 401

    def test_unconfigured_backend_is_500(self, client, auth_headers):
        app.dependency_overrides[get_supabase_client] = lambda: None

        response = client.get("/leads", headers=auth_headers)

        assert response.status_code == 500
        assert "Supabase is not configured" in response.json()["error"]


class TestAdminAllowlist:
    """ADMIN_ALLOWLIST narrows which verified users count as admins."""

    def test_listed_email_passes_case_insensitively(self, client, auth_headers, monkeypatch):
        monkeypatch.setattr(settings, "ADMIN_ALLOWLIST", "Admin@Studio.dev, ops@studio.dev")

        assert client.get("/leads", headers=auth_headers).status_code == 200

    def test_unlisted_email_is_401(self, client, auth_headers, fake_db, monkeypatch):
        monkeypatch.setattr(settings, "ADMIN_ALLOWLIST", "ops@studio.dev")

        response = client.post(
            "/projects",
            json={"title": "T", "description": "D", "category": "C", "image": "I"},
            headers=auth_headers,
        )

        assert response.status_code == 401
        assert fake_db.writes() == []

    def test_empty_allowlist_admits_any_verified_user(self, client, fake_db, monkeypatch):
        monkeypatch.setattr(settings, "ADMIN_ALLOWLIST", "")
        fake_db.users["other"] = SimpleNamespace(id=ADMIN_ID, email="someone@else.io")

        response = client.get("/leads", headers={"Authorization": "Bearer other"})

        assert response.status_code == 200
