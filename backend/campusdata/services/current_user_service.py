"""
Campus Data Backend — Current User Service
===========================================

What:  Resolves the caller's stored User and granted roles.
Why:   Every controller needs to know (a) who is calling, (b) which roles they
       hold, and (c) whether they are logged in at all.
How:   Given the Principal from the identity provider:
       1. resolve_or_create_user(): find the User by email, insert it on
          first sight, refresh profile fields that changed
       2. compute_roles(): derive the granted authorities
       3. Return a CurrentUser value object consumed by capability checks

Role Rules:
    ROLE_USER    every authenticated caller
    ROLE_MEMBER  email domain equals settings.member_hosted_domain
    ROLE_ADMIN   email in settings.admin_emails OR users.admin is true
"""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from campusdata.auth.identity import Principal
from campusdata.auth.roles import Role
from campusdata.config import Settings, settings as default_settings
from campusdata.exceptions import DatabaseError
from campusdata.models.user import User
from campusdata.repositories.users import UserRepository

logger = logging.getLogger(__name__)

# Profile attributes copied from the Principal onto the User row
_PROFILE_FIELDS = {
    "google_sub": "subject",
    "picture_url": "picture_url",
    "full_name": "full_name",
    "given_name": "given_name",
    "family_name": "family_name",
    "email_verified": "email_verified",
    "locale": "locale",
    "hosted_domain": "hosted_domain",
}


@dataclass(frozen=True)
class CurrentUser:
    """The caller of the current request; `user` is None when anonymous."""

    user: Optional[User] = None
    roles: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_logged_in(self) -> bool:
        return self.user is not None

    @property
    def email(self) -> Optional[str]:
        return self.user.email if self.user else None

    def sorted_roles(self) -> List[str]:
        return sorted(self.roles)


ANONYMOUS = CurrentUser()


class CurrentUserService:
    """Stateless apart from the settings it reads the role rules from."""

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings

    async def get_current_user(
        self,
        db: AsyncSession,
        principal: Optional[Principal],
    ) -> CurrentUser:
        if principal is None:
            return ANONYMOUS
        user = await self.resolve_or_create_user(db, principal)
        return CurrentUser(user=user, roles=frozenset(self.compute_roles(user)))

    async def resolve_or_create_user(self, db: AsyncSession, principal: Principal) -> User:
        """
        Find the stored User for this principal, creating it on first login.

        Existing rows only get profile fields overwritten when the provider
        reports a non-empty, different value. `admin` is never touched here.

        Concurrent first logins race on uq_users_email: the losing INSERT is
        rolled back to its savepoint and the stored row is returned instead.

        Raises:
            DatabaseError: The users table could not be read or written (→ 500)
        """
        repo = UserRepository(db)
        try:
            user = await repo.find_by_email(principal.email)
            if user is None:
                return await self._create_user(repo, db, principal)

            if self._copy_profile(user, principal):
                await repo.save(user)
                logger.debug("Refreshed profile for user %s", user.email)
            return user
        except SQLAlchemyError as e:
            logger.error(
                "Database error resolving user %s: %s", principal.email, str(e)
            )
            raise DatabaseError(
                message="Could not load the current user. Please try again.",
                context={"entity": "User", "error_type": type(e).__name__},
            )

    async def _create_user(
        self,
        repo: UserRepository,
        db: AsyncSession,
        principal: Principal,
    ) -> User:
        user = User(email=principal.email, admin=False)
        self._copy_profile(user, principal)
        try:
            async with db.begin_nested():
                await repo.save(user)
        except IntegrityError:
            existing = await repo.find_by_email(principal.email)
            if existing is None:
                raise
            logger.info("User %s was created concurrently; using stored row", principal.email)
            return existing
        logger.info("Created user record %s for %s", user.id, user.email)
        return user

    def compute_roles(self, user: User) -> List[str]:
        roles = [Role.USER.value]
        domain = user.hosted_domain or _domain_of(user.email)
        if domain and domain == self.config.member_hosted_domain:
            roles.append(Role.MEMBER.value)
        if user.admin or user.email.lower() in self.config.admin_emails_list:
            roles.append(Role.ADMIN.value)
        return roles

    @staticmethod
    def _copy_profile(user: User, principal: Principal) -> bool:
        """Copy changed claims onto the user; returns True if anything changed."""
        changed = False
        for user_attr, principal_attr in _PROFILE_FIELDS.items():
            value = getattr(principal, principal_attr)
            if value is None or value == getattr(user, user_attr):
                continue
            setattr(user, user_attr, value)
            changed = True
        return changed


def _domain_of(email: str) -> Optional[str]:
    return email.rsplit("@", 1)[1].lower() if "@" in email else None


current_user_service = CurrentUserService()
