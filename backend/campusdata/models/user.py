"""
Campus Data Backend — User SQLAlchemy Model
============================================

What:  ORM model for the `users` table: one row per person who has logged in.
Why:   Persists profile claims from the identity provider and the `admin`
       flag that can grant ROLE_ADMIN beyond the configured allow-list.
Who:   Written only by CurrentUserService.resolve_or_create_user(); read by
       UserRepository for /api/currentUser and /api/admin/users.
When:  Created the first time a principal is seen; profile fields refreshed
       whenever the provider reports different values.

Table Design Rationale:
    - email UNIQUE: the identity provider's email is the lookup key
      (UserRepository.find_by_email)
    - google_sub: the provider's stable subject claim, kept for auditing
    - admin: lets an existing admin be promoted in the database without
      redeploying with a new ADMIN_EMAILS value
"""

from typing import Optional

from sqlalchemy import Boolean, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from campusdata.database import Base, BigIntegerPK


class User(Base):
    """A person known to the system through the external identity provider."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(BigIntegerPK, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    google_sub: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    picture_url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    full_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    given_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    family_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    locale: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    hosted_domain: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', admin={self.admin})>"
