"""
Campus Data Backend — RecommendationRequest Route Handlers
===========================================================

What:  Letters of recommendation requested from professors, mounted at
       /api/recommendationrequest. `done` flips to true once the letter is sent.
"""

from typing import List

from fastapi import APIRouter, Body, Depends, Query
from pydantic import NaiveDatetime
from sqlalchemy.ext.asyncio import AsyncSession

from campusdata.auth.authorization import require_role
from campusdata.auth.dependencies import get_current_user
from campusdata.auth.roles import Role
from campusdata.database import get_db_session
from campusdata.models.recommendation_request import RecommendationRequest
from campusdata.repositories.resources import RecommendationRequestRepository
from campusdata.routes.params import RecordId
from campusdata.schemas.common import MessageResponse, responses_for
from campusdata.schemas.requests import (
    RecommendationRequestFields,
    RecommendationRequestResponse,
)
from campusdata.services.crud_service import CrudService
from campusdata.services.current_user_service import CurrentUser

router = APIRouter(prefix="/api/recommendationrequest", tags=["RecommendationRequest"])

recommendation_service: CrudService[RecommendationRequest, int] = CrudService(
    RecommendationRequestRepository
)


@router.get(
    "/all",
    response_model=List[RecommendationRequestResponse],
    responses=responses_for(401, 403),
    summary="List all recommendation requests",
)
async def all_recommendation_requests(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> List[RecommendationRequestResponse]:
    require_role(current_user, Role.USER)
    requests = await recommendation_service.list_all(db)
    return [RecommendationRequestResponse.model_validate(r) for r in requests]


@router.get(
    "",
    response_model=RecommendationRequestResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Get a single recommendation request",
)
async def get_recommendation_request(
    id: RecordId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> RecommendationRequestResponse:
    require_role(current_user, Role.USER)
    request = await recommendation_service.get(db, id)
    return RecommendationRequestResponse.model_validate(request)


@router.post(
    "/post",
    response_model=RecommendationRequestResponse,
    responses=responses_for(400, 401, 403),
    summary="Create a new recommendation request",
)
async def post_recommendation_request(
    requester_email: str = Query(alias="requesterEmail", min_length=3),
    professor_email: str = Query(alias="professorEmail", min_length=3),
    explanation: str = Query(min_length=1),
    date_requested: NaiveDatetime = Query(alias="dateRequested"),
    date_needed: NaiveDatetime = Query(alias="dateNeeded"),
    done: bool = Query(),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> RecommendationRequestResponse:
    require_role(current_user, Role.ADMIN)
    request = await recommendation_service.create(
        db,
        RecommendationRequest(
            requester_email=requester_email,
            professor_email=professor_email,
            explanation=explanation,
            date_requested=date_requested,
            date_needed=date_needed,
            done=done,
        ),
    )
    return RecommendationRequestResponse.model_validate(request)


@router.put(
    "",
    response_model=RecommendationRequestResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Replace a recommendation request",
)
async def update_recommendation_request(
    id: RecordId,
    incoming: RecommendationRequestFields = Body(),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> RecommendationRequestResponse:
    require_role(current_user, Role.ADMIN)
    request = await recommendation_service.update(db, id, incoming)
    return RecommendationRequestResponse.model_validate(request)


@router.delete(
    "",
    response_model=MessageResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Delete a recommendation request",
)
async def delete_recommendation_request(
    id: RecordId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    require_role(current_user, Role.ADMIN)
    message = await recommendation_service.delete(db, id)
    return MessageResponse(message=message)
