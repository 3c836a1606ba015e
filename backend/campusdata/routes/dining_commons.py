"""
Campus Data Backend — UCSBDiningCommons Route Handlers
=======================================================

What:  Resource controller for dining commons, mounted at /api/ucsbdiningcommons.
       The key is the natural `code` chosen by the client ("ortega", "dlg"),
       so a second create with the same code is rejected with 409.

Listing is public: the dining commons roster is shown on the home page before
login. Every other operation requires a logged-in caller.
"""

from typing import List

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from campusdata.auth.authorization import require_role
from campusdata.auth.dependencies import get_current_user
from campusdata.auth.roles import Role
from campusdata.database import get_db_session
from campusdata.models.dining_commons import UCSBDiningCommons
from campusdata.repositories.resources import UCSBDiningCommonsRepository
from campusdata.schemas.common import MessageResponse, responses_for
from campusdata.schemas.dining import UCSBDiningCommonsFields, UCSBDiningCommonsResponse
from campusdata.services.crud_service import CrudService
from campusdata.services.current_user_service import CurrentUser

router = APIRouter(prefix="/api/ucsbdiningcommons", tags=["UCSBDiningCommons"])

dining_commons_service: CrudService[UCSBDiningCommons, str] = CrudService(
    UCSBDiningCommonsRepository, natural_key=True
)


@router.get(
    "/all",
    response_model=List[UCSBDiningCommonsResponse],
    summary="List all dining commons",
    description="Public: no login required.",
)
async def all_commons(
    db: AsyncSession = Depends(get_db_session),
) -> List[UCSBDiningCommonsResponse]:
    commons = await dining_commons_service.list_all(db)
    return [UCSBDiningCommonsResponse.model_validate(c) for c in commons]


@router.get(
    "",
    response_model=UCSBDiningCommonsResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Get a single dining commons",
)
async def get_commons(
    code: str = Query(description="Code of the dining commons, e.g. ortega"),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBDiningCommonsResponse:
    require_role(current_user, Role.USER)
    commons = await dining_commons_service.get(db, code)
    return UCSBDiningCommonsResponse.model_validate(commons)


@router.post(
    "/post",
    response_model=UCSBDiningCommonsResponse,
    responses=responses_for(400, 401, 403, 409),
    summary="Create a new dining commons",
)
async def post_commons(
    code: str = Query(min_length=1),
    name: str = Query(min_length=1),
    has_sack_meal: bool = Query(alias="hasSackMeal"),
    has_take_out_meal: bool = Query(alias="hasTakeOutMeal"),
    has_dining_cam: bool = Query(alias="hasDiningCam"),
    latitude: float = Query(ge=-90, le=90),
    longitude: float = Query(ge=-180, le=180),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBDiningCommonsResponse:
    require_role(current_user, Role.ADMIN)
    commons = await dining_commons_service.create(
        db,
        UCSBDiningCommons(
            code=code,
            name=name,
            has_sack_meal=has_sack_meal,
            has_take_out_meal=has_take_out_meal,
            has_dining_cam=has_dining_cam,
            latitude=latitude,
            longitude=longitude,
        ),
    )
    return UCSBDiningCommonsResponse.model_validate(commons)


@router.put(
    "",
    response_model=UCSBDiningCommonsResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Replace a dining commons; the code itself cannot change",
)
async def update_commons(
    code: str = Query(),
    incoming: UCSBDiningCommonsFields = Body(),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBDiningCommonsResponse:
    require_role(current_user, Role.ADMIN)
    commons = await dining_commons_service.update(db, code, incoming)
    return UCSBDiningCommonsResponse.model_validate(commons)


@router.delete(
    "",
    response_model=MessageResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Delete a dining commons",
)
async def delete_commons(
    code: str = Query(),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    require_role(current_user, Role.ADMIN)
    message = await dining_commons_service.delete(db, code)
    return MessageResponse(message=message)
