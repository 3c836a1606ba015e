"""
Campus Data Backend — Capability Checks
========================================

What:  Explicit role checks that controllers call at the top of a handler.
Why:   Authorization is visible in each handler instead of hidden in
       decorators or middleware. A handler that mutates data reads:

           enforce(check_capability(current_user, Role.ADMIN), Role.ADMIN)

       before it touches any service or repository.
How:   check_capability() is a pure function returning an AuthorizationResult;
       enforce() turns a non-ALLOWED result into the matching exception.
"""

import enum
import logging

from campusdata.auth.roles import Role
from campusdata.exceptions import ForbiddenError, UnauthenticatedError
from campusdata.services.current_user_service import CurrentUser

logger = logging.getLogger(__name__)


class AuthorizationResult(enum.Enum):
    ALLOWED = "allowed"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


def check_capability(current_user: CurrentUser, required_role: Role) -> AuthorizationResult:
    """Decide whether the caller holds `required_role`. Never raises."""
    if not current_user.is_logged_in:
        return AuthorizationResult.UNAUTHENTICATED
    if required_role.value in current_user.roles:
        return AuthorizationResult.ALLOWED
    return AuthorizationResult.FORBIDDEN


def enforce(result: AuthorizationResult, required_role: Role) -> None:
    """
    Raise for anything but ALLOWED.

    Raises:
        UnauthenticatedError: No identity on the request (→ 401)
        ForbiddenError: Identity lacks the required role (→ 403)
    """
    if result is AuthorizationResult.ALLOWED:
        return
    if result is AuthorizationResult.UNAUTHENTICATED:
        raise UnauthenticatedError()
    logger.warning("Denied: caller lacks %s", required_role.value)
    raise ForbiddenError(required_role=required_role.value)


def require_role(current_user: CurrentUser, required_role: Role) -> None:
    """Shorthand for enforce(check_capability(...)) used by every handler."""
    enforce(check_capability(current_user, required_role), required_role)
