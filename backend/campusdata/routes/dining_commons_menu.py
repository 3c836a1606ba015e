"""Menu entries per dining commons and station, mounted at /api/ucsbdiningcommonsmenu."""

from typing import List

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from campusdata.auth.authorization import require_role
from campusdata.auth.dependencies import get_current_user
from campusdata.auth.roles import Role
from campusdata.database import get_db_session
from campusdata.models.dining_commons_menu import UCSBDiningCommonsMenu
from campusdata.repositories.resources import UCSBDiningCommonsMenuRepository
from campusdata.routes.params import RecordId
from campusdata.schemas.common import MessageResponse, responses_for
from campusdata.schemas.dining import (
    UCSBDiningCommonsMenuFields,
    UCSBDiningCommonsMenuResponse,
)
from campusdata.services.crud_service import CrudService
from campusdata.services.current_user_service import CurrentUser

router = APIRouter(prefix="/api/ucsbdiningcommonsmenu", tags=["UCSBDiningCommonsMenu"])

menu_service: CrudService[UCSBDiningCommonsMenu, int] = CrudService(
    UCSBDiningCommonsMenuRepository
)


@router.get(
    "/all",
    response_model=List[UCSBDiningCommonsMenuResponse],
    responses=responses_for(401, 403),
    summary="List all menu entries",
)
async def all_menu_items(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> List[UCSBDiningCommonsMenuResponse]:
    require_role(current_user, Role.USER)
    items = await menu_service.list_all(db)
    return [UCSBDiningCommonsMenuResponse.model_validate(item) for item in items]


@router.get(
    "",
    response_model=UCSBDiningCommonsMenuResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Get a single menu entry",
)
async def get_menu_item(
    id: RecordId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBDiningCommonsMenuResponse:
    require_role(current_user, Role.USER)
    item = await menu_service.get(db, id)
    return UCSBDiningCommonsMenuResponse.model_validate(item)


@router.post(
    "/post",
    response_model=UCSBDiningCommonsMenuResponse,
    responses=responses_for(400, 401, 403),
    summary="Create a new menu entry",
)
async def post_menu_item(
    dining_commons_code: str = Query(alias="diningCommonsCode", min_length=1),
    name: str = Query(min_length=1),
    station: str = Query(min_length=1),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBDiningCommonsMenuResponse:
    require_role(current_user, Role.ADMIN)
    item = await menu_service.create(
        db,
        UCSBDiningCommonsMenu(
            dining_commons_code=dining_commons_code,
            name=name,
            station=station,
        ),
    )
    return UCSBDiningCommonsMenuResponse.model_validate(item)


@router.put(
    "",
    response_model=UCSBDiningCommonsMenuResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Replace a menu entry",
)
async def update_menu_item(
    id: RecordId,
    incoming: UCSBDiningCommonsMenuFields = Body(),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBDiningCommonsMenuResponse:
    require_role(current_user, Role.ADMIN)
    item = await menu_service.update(db, id, incoming)
    return UCSBDiningCommonsMenuResponse.model_validate(item)


@router.delete(
    "",
    response_model=MessageResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Delete a menu entry",
)
async def delete_menu_item(
    id: RecordId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    require_role(current_user, Role.ADMIN)
    message = await menu_service.delete(db, id)
    return MessageResponse(message=message)
