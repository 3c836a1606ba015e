"""
Campus Data Backend — UCSBDate Route Handlers
==============================================

What:  Resource controller for important dates, mounted at /api/ucsbdates.
How:   Each handler runs its capability check first, then delegates to the
       shared CrudService and converts entities to response schemas.

Route Inventory:
    GET    /api/ucsbdates/all                  ROLE_USER   list every date
    GET    /api/ucsbdates/quarter?quarterYYYYQ ROLE_USER   dates of one quarter
    GET    /api/ucsbdates?id=                  ROLE_USER   one date
    POST   /api/ucsbdates/post?...             ROLE_ADMIN  create
    PUT    /api/ucsbdates?id=   (JSON body)    ROLE_ADMIN  full replace
    DELETE /api/ucsbdates?id=                  ROLE_ADMIN  delete

Example:
    POST /api/ucsbdates/post?quarterYYYYQ=20221&name=Finals%20Begin&localDateTime=2022-12-01T00:00
    → {"id": 1, "quarterYYYYQ": "20221", "name": "Finals Begin",
       "localDateTime": "2022-12-01T00:00:00"}
"""

from typing import List

from fastapi import APIRouter, Body, Depends, Query
from pydantic import NaiveDatetime
from sqlalchemy.ext.asyncio import AsyncSession

from campusdata.auth.authorization import require_role
from campusdata.auth.dependencies import get_current_user
from campusdata.auth.roles import Role
from campusdata.database import get_db_session
from campusdata.models.ucsb_date import UCSBDate
from campusdata.repositories.ucsb_dates import UCSBDateRepository
from campusdata.routes.params import RecordId
from campusdata.schemas.common import MessageResponse, responses_for
from campusdata.schemas.ucsb_date import (
    QUARTER_YYYYQ_PATTERN,
    UCSBDateFields,
    UCSBDateResponse,
)
from campusdata.services.crud_service import CrudService
from campusdata.services.current_user_service import CurrentUser

router = APIRouter(prefix="/api/ucsbdates", tags=["UCSBDates"])

ucsb_date_service: CrudService[UCSBDate, int] = CrudService(UCSBDateRepository)


@router.get(
    "/all",
    response_model=List[UCSBDateResponse],
    responses=responses_for(401, 403),
    summary="List all UCSB dates",
)
async def all_ucsb_dates(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> List[UCSBDateResponse]:
    require_role(current_user, Role.USER)
    dates = await ucsb_date_service.list_all(db)
    return [UCSBDateResponse.model_validate(date) for date in dates]


@router.get(
    "/quarter",
    response_model=List[UCSBDateResponse],
    responses=responses_for(400, 401, 403),
    summary="List the dates of one quarter, in calendar order",
)
async def ucsb_dates_by_quarter(
    quarter_yyyyq: str = Query(
        alias="quarterYYYYQ",
        pattern=QUARTER_YYYYQ_PATTERN,
        description="Quarter code, e.g. 20221",
    ),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> List[UCSBDateResponse]:
    require_role(current_user, Role.USER)
    # Custom finder: not part of the generic CRUD contract
    dates = await UCSBDateRepository(db).find_all_by_quarter_yyyyq(quarter_yyyyq)
    return [UCSBDateResponse.model_validate(date) for date in dates]


@router.get(
    "",
    response_model=UCSBDateResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Get a single date",
)
async def get_ucsb_date(
    id: RecordId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBDateResponse:
    require_role(current_user, Role.USER)
    date = await ucsb_date_service.get(db, id)
    return UCSBDateResponse.model_validate(date)


@router.post(
    "/post",
    response_model=UCSBDateResponse,
    responses=responses_for(400, 401, 403),
    summary="Create a new date",
)
async def post_ucsb_date(
    quarter_yyyyq: str = Query(
        alias="quarterYYYYQ",
        pattern=QUARTER_YYYYQ_PATTERN,
        description="Quarter code, e.g. 20221",
    ),
    name: str = Query(min_length=1, description="Name of the date, e.g. 'Finals Begin'"),
    local_date_time: NaiveDatetime = Query(
        alias="localDateTime",
        description="ISO-8601 date-time, e.g. 2022-01-03T00:00:00",
    ),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBDateResponse:
    require_role(current_user, Role.ADMIN)
    date = await ucsb_date_service.create(
        db,
        UCSBDate(quarter_yyyyq=quarter_yyyyq, name=name, local_date_time=local_date_time),
    )
    return UCSBDateResponse.model_validate(date)


@router.put(
    "",
    response_model=UCSBDateResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Replace a date with the given fields",
)
async def update_ucsb_date(
    id: RecordId,
    incoming: UCSBDateFields = Body(description="Every field of the date"),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBDateResponse:
    require_role(current_user, Role.ADMIN)
    date = await ucsb_date_service.update(db, id, incoming)
    return UCSBDateResponse.model_validate(date)


@router.delete(
    "",
    response_model=MessageResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Delete a date",
)
async def delete_ucsb_date(
    id: RecordId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    require_role(current_user, Role.ADMIN)
    message = await ucsb_date_service.delete(db, id)
    return MessageResponse(message=message)
