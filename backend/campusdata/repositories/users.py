"""
Campus Data Backend — User Repository
======================================

What:  Data access for the `users` table, including lookup by email.
Who:   CurrentUserService (resolve-or-create on login) and the admin users route.
"""

from typing import Optional

from sqlalchemy import func, select

from campusdata.models.user import User
from campusdata.repositories.base import Repository


class UserRepository(Repository[User, int]):
    model = User

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        SELECT ... WHERE lower(email) = lower(:email)

        Emails are compared case-insensitively: providers are not consistent
        about the case they report, and a second row for the same person
        would split their admin flag from their profile.
        """
        result = await self.db.execute(
            select(User).where(func.lower(User.email) == email.lower())
        )
        return result.scalar_one_or_none()
