"""
Campus Data Backend — Current User Dependency
==============================================

What:  FastAPI dependency that yields the CurrentUser for a request.
How:   identity provider → Principal → CurrentUserService (resolve-or-create
       the User row, compute roles) → CurrentUser.

The caller's email is also stored on request.state so the access-log
middleware can include it without re-resolving the identity.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from campusdata.auth.identity import IdentityProvider, get_identity_provider
from campusdata.database import get_db_session
from campusdata.services.current_user_service import CurrentUser, current_user_service


async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
    provider: IdentityProvider = Depends(get_identity_provider),
) -> CurrentUser:
    principal = await provider.resolve(request)
    current_user = await current_user_service.get_current_user(db, principal)
    request.state.user_email = current_user.email
    return current_user
