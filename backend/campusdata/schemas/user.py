"""
Campus Data Backend — User & Identity Schemas
==============================================

What:  Response shapes for /api/currentUser and /api/admin/users.

CurrentUserResponse mirrors what the frontend expects from the identity
endpoint: the stored user plus a list of granted authorities, each wrapped as
{"authority": "ROLE_..."}.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from campusdata.schemas.common import CamelModel


class UserResponse(CamelModel):
    id: int
    email: str
    google_sub: Optional[str] = None
    picture_url: Optional[str] = None
    full_name: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    email_verified: bool = False
    locale: Optional[str] = None
    hosted_domain: Optional[str] = None
    admin: bool = False


class GrantedAuthority(BaseModel):
    authority: str = Field(examples=["ROLE_USER"])


class CurrentUserResponse(BaseModel):
    user: UserResponse
    roles: List[GrantedAuthority]
