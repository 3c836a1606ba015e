"""Office-hours help requests from project teams, mounted at /api/helprequest."""

from typing import List

from fastapi import APIRouter, Body, Depends, Query
from pydantic import NaiveDatetime
from sqlalchemy.ext.asyncio import AsyncSession

from campusdata.auth.authorization import require_role
from campusdata.auth.dependencies import get_current_user
from campusdata.auth.roles import Role
from campusdata.database import get_db_session
from campusdata.models.help_request import HelpRequest
from campusdata.repositories.resources import HelpRequestRepository
from campusdata.routes.params import RecordId
from campusdata.schemas.common import MessageResponse, responses_for
from campusdata.schemas.requests import HelpRequestFields, HelpRequestResponse
from campusdata.services.crud_service import CrudService
from campusdata.services.current_user_service import CurrentUser

router = APIRouter(prefix="/api/helprequest", tags=["HelpRequest"])

help_request_service: CrudService[HelpRequest, int] = CrudService(HelpRequestRepository)


@router.get(
    "/all",
    response_model=List[HelpRequestResponse],
    responses=responses_for(401, 403),
    summary="List all help requests",
)
async def all_help_requests(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> List[HelpRequestResponse]:
    require_role(current_user, Role.USER)
    requests = await help_request_service.list_all(db)
    return [HelpRequestResponse.model_validate(r) for r in requests]


@router.get(
    "",
    response_model=HelpRequestResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Get a single help request",
)
async def get_help_request(
    id: RecordId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> HelpRequestResponse:
    require_role(current_user, Role.USER)
    request = await help_request_service.get(db, id)
    return HelpRequestResponse.model_validate(request)


@router.post(
    "/post",
    response_model=HelpRequestResponse,
    responses=responses_for(400, 401, 403),
    summary="Create a new help request",
)
async def post_help_request(
    requester_email: str = Query(alias="requesterEmail", min_length=3),
    team_id: str = Query(alias="teamId", min_length=1),
    table_or_breakout_room: str = Query(alias="tableOrBreakoutRoom", min_length=1),
    request_time: NaiveDatetime = Query(alias="requestTime"),
    explanation: str = Query(),
    solved: bool = Query(),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> HelpRequestResponse:
    require_role(current_user, Role.ADMIN)
    request = await help_request_service.create(
        db,
        HelpRequest(
            requester_email=requester_email,
            team_id=team_id,
            table_or_breakout_room=table_or_breakout_room,
            request_time=request_time,
            explanation=explanation,
            solved=solved,
        ),
    )
    return HelpRequestResponse.model_validate(request)


@router.put(
    "",
    response_model=HelpRequestResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Replace a help request",
)
async def update_help_request(
    id: RecordId,
    incoming: HelpRequestFields = Body(),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> HelpRequestResponse:
    require_role(current_user, Role.ADMIN)
    request = await help_request_service.update(db, id, incoming)
    return HelpRequestResponse.model_validate(request)


@router.delete(
    "",
    response_model=MessageResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Delete a help request",
)
async def delete_help_request(
    id: RecordId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    require_role(current_user, Role.ADMIN)
    message = await help_request_service.delete(db, id)
    return MessageResponse(message=message)
