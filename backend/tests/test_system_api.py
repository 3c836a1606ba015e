"""
Campus Data Backend — Identity, System and Error-Handling Endpoint Tests
=========================================================================

What we test:
    ✅ /api/currentUser creates the user on first call and reports roles
    ✅ /api/admin/users is admin-only
    ✅ /api/systemInfo is public
    ✅ /health reports database status
    ✅ Store failures return a generic 500 without internals
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from campusdata.auth.dependencies import get_current_user
from campusdata.database import get_db_session
from campusdata.main import app
from campusdata.models.user import User
from campusdata.services.current_user_service import CurrentUser
from conftest import ADMIN, ADMIN_EMAIL, OUTSIDER, USER, USER_EMAIL


def authorities(body):
    return sorted(role["authority"] for role in body["roles"])


class TestCurrentUser:
    @pytest.mark.asyncio
    async def test_anonymous_gets_401(self, test_client):
        response = await test_client.get("/api/currentUser")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_campus_user_is_member(self, test_client):
        response = await test_client.get("/api/currentUser", headers=USER)

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["email"] == USER_EMAIL
        assert body["user"]["fullName"] == "Chris Gaucho"
        assert body["user"]["hostedDomain"] == "ucsb.edu"
        assert body["user"]["admin"] is False
        assert authorities(body) == ["ROLE_MEMBER", "ROLE_USER"]

    @pytest.mark.asyncio
    async def test_outside_user_is_not_member(self, test_client):
        response = await test_client.get("/api/currentUser", headers=OUTSIDER)
        assert authorities(response.json()) == ["ROLE_USER"]

    @pytest.mark.asyncio
    async def test_configured_admin_has_admin_role(self, test_client):
        response = await test_client.get("/api/currentUser", headers=ADMIN)
        assert authorities(response.json()) == ["ROLE_ADMIN", "ROLE_MEMBER", "ROLE_USER"]

    @pytest.mark.asyncio
    async def test_repeated_logins_reuse_the_same_user(self, test_client):
        first = await test_client.get("/api/currentUser", headers=USER)
        second = await test_client.get("/api/currentUser", headers=USER)
        assert first.json()["user"]["id"] == second.json()["user"]["id"]


class TestAdminUsers:
    @pytest.mark.asyncio
    async def test_admin_lists_every_user_seen(self, test_client):
        await test_client.get("/api/currentUser", headers=USER)

        response = await test_client.get("/api/admin/users", headers=ADMIN)

        assert response.status_code == 200
        emails = sorted(user["email"] for user in response.json())
        assert emails == [ADMIN_EMAIL, USER_EMAIL]

    @pytest.mark.asyncio
    async def test_regular_user_is_forbidden(self, test_client):
        response = await test_client.get("/api/admin/users", headers=USER)
        assert response.status_code == 403


class TestSystemInfo:
    @pytest.mark.asyncio
    async def test_public_system_info(self, test_client):
        response = await test_client.get("/api/systemInfo")

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"showSwaggerUILink", "version", "sourceRepo"}
        assert body["showSwaggerUILink"] is True


class TestHealth:
    @pytest.mark.asyncio
    async def test_healthy_with_database(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_unhealthy_when_database_unreachable(self, test_client, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("down"))

        async def broken_session():
            yield mock_db_session

        app.dependency_overrides[get_db_session] = broken_session
        response = await test_client.get("/health")

        assert response.json()["status"] == "unhealthy"
        assert response.json()["database"] == "disconnected"


class TestErrorHandling:
    @pytest.mark.asyncio
    async def test_database_error_returns_generic_500(self, test_client, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))
        admin = CurrentUser(
            user=User(id=1, email=ADMIN_EMAIL, admin=True),
            roles=frozenset({"ROLE_USER", "ROLE_ADMIN"}),
        )

        async def broken_session():
            yield mock_db_session

        app.dependency_overrides[get_db_session] = broken_session
        app.dependency_overrides[get_current_user] = lambda: admin

        response = await test_client.get("/api/articles/all")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert body["type"] == "DatabaseError"
        assert "details" not in body
        assert "SELECT" not in body["message"]

    @pytest.mark.asyncio
    async def test_client_request_id_is_echoed(self, test_client):
        response = await test_client.get(
            "/api/ucsbdates", params={"id": 1}, headers={**USER, "X-Request-ID": "abc12345"}
        )

        assert response.headers["X-Request-ID"] == "abc12345"
        assert response.json()["request_id"] == "abc12345"
