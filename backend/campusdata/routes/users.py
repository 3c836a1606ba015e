"""Administrative view of every user who has logged in: GET /api/admin/users."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from campusdata.auth.authorization import require_role
from campusdata.auth.dependencies import get_current_user
from campusdata.auth.roles import Role
from campusdata.database import get_db_session
from campusdata.repositories.users import UserRepository
from campusdata.schemas.common import responses_for
from campusdata.schemas.user import UserResponse
from campusdata.services.current_user_service import CurrentUser

router = APIRouter(prefix="/api/admin", tags=["Users"])


@router.get(
    "/users",
    response_model=List[UserResponse],
    responses=responses_for(401, 403),
    summary="List all users (admin only)",
)
async def all_users(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> List[UserResponse]:
    require_role(current_user, Role.ADMIN)
    users = await UserRepository(db).get_all()
    return [UserResponse.model_validate(user) for user in users]
