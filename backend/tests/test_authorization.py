"""
Campus Data Backend — Capability Check Tests
=============================================

What:  check_capability() decisions and the exceptions enforce() raises.
"""

import pytest

from campusdata.auth.authorization import (
    AuthorizationResult,
    check_capability,
    enforce,
    require_role,
)
from campusdata.auth.roles import Role
from campusdata.exceptions import ForbiddenError, UnauthenticatedError
from campusdata.models.user import User
from campusdata.services.current_user_service import ANONYMOUS, CurrentUser


def caller(*roles: Role) -> CurrentUser:
    user = User(id=1, email="cgaucho@ucsb.edu", admin=False)
    return CurrentUser(user=user, roles=frozenset(role.value for role in roles))


class TestCheckCapability:
    def test_anonymous_is_unauthenticated(self):
        assert check_capability(ANONYMOUS, Role.USER) is AuthorizationResult.UNAUTHENTICATED

    def test_user_role_allows_reads(self):
        assert check_capability(caller(Role.USER), Role.USER) is AuthorizationResult.ALLOWED

    def test_user_without_admin_is_forbidden(self):
        result = check_capability(caller(Role.USER, Role.MEMBER), Role.ADMIN)
        assert result is AuthorizationResult.FORBIDDEN

    def test_admin_is_allowed_admin_operations(self):
        result = check_capability(caller(Role.USER, Role.ADMIN), Role.ADMIN)
        assert result is AuthorizationResult.ALLOWED


class TestEnforce:
    def test_allowed_does_not_raise(self):
        enforce(AuthorizationResult.ALLOWED, Role.ADMIN)

    def test_unauthenticated_raises_401(self):
        with pytest.raises(UnauthenticatedError) as exc_info:
            enforce(AuthorizationResult.UNAUTHENTICATED, Role.USER)
        assert exc_info.value.status_code == 401

    def test_forbidden_raises_403_with_role(self):
        with pytest.raises(ForbiddenError) as exc_info:
            enforce(AuthorizationResult.FORBIDDEN, Role.ADMIN)
        assert exc_info.value.status_code == 403
        assert exc_info.value.required_role == "ROLE_ADMIN"

    def test_require_role_combines_check_and_enforce(self):
        require_role(caller(Role.USER), Role.USER)
        with pytest.raises(ForbiddenError):
            require_role(caller(Role.USER), Role.ADMIN)
        with pytest.raises(UnauthenticatedError):
            require_role(ANONYMOUS, Role.USER)
