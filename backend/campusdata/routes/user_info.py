"""
Campus Data Backend — Current User Route
=========================================

What:  GET /api/currentUser returns the caller's stored user record and roles.
Who:   The frontend calls it on load to decide which navigation to render.

Response:
    {"user": {"id": 1, "email": "cgaucho@ucsb.edu", ...},
     "roles": [{"authority": "ROLE_USER"}, {"authority": "ROLE_MEMBER"}]}
"""

from fastapi import APIRouter, Depends

from campusdata.auth.authorization import require_role
from campusdata.auth.dependencies import get_current_user
from campusdata.auth.roles import Role
from campusdata.schemas.common import responses_for
from campusdata.schemas.user import CurrentUserResponse, GrantedAuthority, UserResponse
from campusdata.services.current_user_service import CurrentUser

router = APIRouter(prefix="/api", tags=["Current User Information"])


@router.get(
    "/currentUser",
    response_model=CurrentUserResponse,
    responses=responses_for(401),
    summary="Get information about the current user",
)
async def current_user_info(
    current_user: CurrentUser = Depends(get_current_user),
) -> CurrentUserResponse:
    require_role(current_user, Role.USER)
    return CurrentUserResponse(
        user=UserResponse.model_validate(current_user.user),
        roles=[GrantedAuthority(authority=role) for role in current_user.sorted_roles()],
    )
