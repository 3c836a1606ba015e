"""
Campus Data Backend — Current User Service Tests
=================================================

What:  Role computation and resolve-or-create of User rows.
How:   Settings instances are built per test; the DB session is mocked.
"""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from starlette.requests import Request

from campusdata.auth.identity import Principal, ProxyHeaderIdentityProvider
from campusdata.config import Settings
from campusdata.exceptions import DatabaseError
from campusdata.models.user import User
from campusdata.services.current_user_service import ANONYMOUS, CurrentUserService
from conftest import query_result


def make_request(headers: dict) -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/",
            "headers": [(k.lower().encode(), v.encode()) for k, v in headers.items()],
        }
    )


class TestComputeRoles:
    def setup_method(self):
        self.service = CurrentUserService(
            Settings(admin_emails="Boss@ucsb.edu", member_hosted_domain="ucsb.edu")
        )

    def test_outside_domain_gets_only_user(self):
        user = User(email="visitor@gmail.com", admin=False)
        assert self.service.compute_roles(user) == ["ROLE_USER"]

    def test_campus_domain_gets_member(self):
        user = User(email="cgaucho@ucsb.edu", admin=False)
        assert self.service.compute_roles(user) == ["ROLE_USER", "ROLE_MEMBER"]

    def test_admin_list_is_case_insensitive(self):
        user = User(email="boss@UCSB.edu", admin=False)
        assert "ROLE_ADMIN" in self.service.compute_roles(user)

    def test_admin_flag_on_user_grants_admin(self):
        user = User(email="promoted@gmail.com", admin=True)
        assert self.service.compute_roles(user) == ["ROLE_USER", "ROLE_ADMIN"]


class TestResolveOrCreateUser:
    def setup_method(self):
        self.service = CurrentUserService(Settings(admin_emails="admin@ucsb.edu"))

    @pytest.mark.asyncio
    async def test_no_principal_is_anonymous(self, mock_db_session):
        current = await self.service.get_current_user(mock_db_session, None)

        assert current is ANONYMOUS
        assert not current.is_logged_in
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_first_login_creates_user(self, mock_db_session):
        mock_db_session.execute.return_value = query_result(scalar_one_or_none=None)
        principal = Principal(email="cgaucho@ucsb.edu", full_name="Chris Gaucho", subject="123")

        current = await self.service.get_current_user(mock_db_session, principal)

        created = mock_db_session.add.call_args.args[0]
        assert created.email == "cgaucho@ucsb.edu"
        assert created.full_name == "Chris Gaucho"
        assert created.google_sub == "123"
        assert created.hosted_domain == "ucsb.edu"
        assert created.admin is False
        assert current.sorted_roles() == ["ROLE_MEMBER", "ROLE_USER"]

    @pytest.mark.asyncio
    async def test_known_user_is_not_recreated(self, mock_db_session):
        existing = User(
            id=3,
            email="admin@ucsb.edu",
            full_name="Admin Gaucho",
            hosted_domain="ucsb.edu",
            email_verified=False,
            admin=False,
        )
        mock_db_session.execute.return_value = query_result(scalar_one_or_none=existing)
        principal = Principal(email="admin@ucsb.edu", full_name="Admin Gaucho")

        current = await self.service.get_current_user(mock_db_session, principal)

        assert current.user is existing
        assert "ROLE_ADMIN" in current.roles
        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_changed_profile_is_refreshed(self, mock_db_session):
        existing = User(id=3, email="cgaucho@ucsb.edu", full_name="Old Name", admin=False)
        mock_db_session.execute.return_value = query_result(scalar_one_or_none=existing)
        principal = Principal(email="cgaucho@ucsb.edu", full_name="New Name")

        await self.service.resolve_or_create_user(mock_db_session, principal)

        assert existing.full_name == "New Name"
        mock_db_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_lost_first_login_race_returns_stored_user(self, mock_db_session):
        winner = User(id=7, email="cgaucho@ucsb.edu", hosted_domain="ucsb.edu", admin=False)
        mock_db_session.execute.side_effect = [
            query_result(scalar_one_or_none=None),
            query_result(scalar_one_or_none=winner),
        ]
        mock_db_session.flush.side_effect = IntegrityError(
            "INSERT INTO users", {}, Exception("UNIQUE constraint failed: users.email")
        )

        current = await self.service.get_current_user(
            mock_db_session, Principal(email="cgaucho@ucsb.edu")
        )

        assert current.user is winner
        assert "ROLE_MEMBER" in current.roles
        mock_db_session.begin_nested.assert_called_once()

    @pytest.mark.asyncio
    async def test_integrity_error_without_stored_row_is_database_error(self, mock_db_session):
        mock_db_session.execute.return_value = query_result(scalar_one_or_none=None)
        mock_db_session.flush.side_effect = IntegrityError(
            "INSERT INTO users", {}, Exception("NOT NULL constraint failed")
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.resolve_or_create_user(
                mock_db_session, Principal(email="cgaucho@ucsb.edu")
            )

        assert exc_info.value.status_code == 500
        assert exc_info.value.context["error_type"] == "IntegrityError"

    @pytest.mark.asyncio
    async def test_store_failure_is_database_error(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError(
            "SELECT", {}, Exception("database is locked")
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.get_current_user(
                mock_db_session, Principal(email="cgaucho@ucsb.edu")
            )

        assert "database is locked" not in exc_info.value.message
        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_claimed_domain_and_locale_are_stored(self, mock_db_session):
        mock_db_session.execute.return_value = query_result(scalar_one_or_none=None)
        principal = Principal(email="cgaucho@gmail.com", domain_claim="UCSB.edu", locale="en")

        current = await self.service.get_current_user(mock_db_session, principal)

        created = mock_db_session.add.call_args.args[0]
        assert created.hosted_domain == "ucsb.edu"
        assert created.locale == "en"
        assert "ROLE_MEMBER" in current.roles


class TestProxyHeaderIdentityProvider:
    def setup_method(self):
        self.provider = ProxyHeaderIdentityProvider(Settings())

    @pytest.mark.asyncio
    async def test_missing_email_header_is_anonymous(self):
        assert await self.provider.resolve(make_request({})) is None

    @pytest.mark.asyncio
    async def test_blank_email_header_is_anonymous(self):
        request = make_request({"X-Auth-Request-Email": "  "})
        assert await self.provider.resolve(request) is None

    @pytest.mark.asyncio
    async def test_claims_are_read_from_headers(self):
        request = make_request(
            {
                "X-Auth-Request-Email": "cgaucho@UCSB.edu",
                "X-Auth-Request-User": "Chris Gaucho",
                "X-Auth-Request-Subject": "10987",
            }
        )

        principal = await self.provider.resolve(request)

        assert principal.email == "cgaucho@UCSB.edu"
        assert principal.full_name == "Chris Gaucho"
        assert principal.subject == "10987"
        assert principal.hosted_domain == "ucsb.edu"
        assert principal.given_name is None
        assert principal.email_verified is True

    @pytest.mark.asyncio
    async def test_hosted_domain_and_locale_headers_are_read(self):
        request = make_request(
            {
                "X-Auth-Request-Email": "cgaucho@alumni.ucsb.edu",
                "X-Auth-Request-Hosted-Domain": "UCSB.edu",
                "X-Auth-Request-Locale": "en-US",
            }
        )

        principal = await self.provider.resolve(request)

        assert principal.hosted_domain == "ucsb.edu"
        assert principal.locale == "en-US"

    @pytest.mark.asyncio
    async def test_header_names_follow_settings(self):
        provider = ProxyHeaderIdentityProvider(
            Settings(auth_hosted_domain_header="X-Hd", auth_locale_header="X-Locale")
        )
        request = make_request(
            {"X-Auth-Request-Email": "visitor@gmail.com", "X-Hd": "example.org", "X-Locale": "fr"}
        )

        principal = await provider.resolve(request)

        assert principal.hosted_domain == "example.org"
        assert principal.locale == "fr"
