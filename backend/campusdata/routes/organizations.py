"""
Campus Data Backend — UCSBOrganization Route Handlers
======================================================

What:  Student organizations, mounted at /api/ucsborganization.
       Keyed by the client-chosen `orgCode` ("ZPR", "SKY"); duplicates → 409.
"""

from typing import List

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from campusdata.auth.authorization import require_role
from campusdata.auth.dependencies import get_current_user
from campusdata.auth.roles import Role
from campusdata.database import get_db_session
from campusdata.models.organization import UCSBOrganization
from campusdata.repositories.resources import UCSBOrganizationRepository
from campusdata.schemas.common import MessageResponse, responses_for
from campusdata.schemas.organization import UCSBOrganizationFields, UCSBOrganizationResponse
from campusdata.services.crud_service import CrudService
from campusdata.services.current_user_service import CurrentUser

router = APIRouter(prefix="/api/ucsborganization", tags=["UCSBOrganization"])

organization_service: CrudService[UCSBOrganization, str] = CrudService(
    UCSBOrganizationRepository, natural_key=True
)


@router.get(
    "/all",
    response_model=List[UCSBOrganizationResponse],
    responses=responses_for(401, 403),
    summary="List all organizations",
)
async def all_organizations(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> List[UCSBOrganizationResponse]:
    require_role(current_user, Role.USER)
    orgs = await organization_service.list_all(db)
    return [UCSBOrganizationResponse.model_validate(org) for org in orgs]


@router.get(
    "",
    response_model=UCSBOrganizationResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Get a single organization",
)
async def get_organization(
    org_code: str = Query(alias="orgCode"),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBOrganizationResponse:
    require_role(current_user, Role.USER)
    org = await organization_service.get(db, org_code)
    return UCSBOrganizationResponse.model_validate(org)


@router.post(
    "/post",
    response_model=UCSBOrganizationResponse,
    responses=responses_for(400, 401, 403, 409),
    summary="Create a new organization",
)
async def post_organization(
    org_code: str = Query(alias="orgCode", min_length=1),
    org_translation_short: str = Query(alias="orgTranslationShort", min_length=1),
    org_translation: str = Query(alias="orgTranslation", min_length=1),
    inactive: bool = Query(),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBOrganizationResponse:
    require_role(current_user, Role.ADMIN)
    org = await organization_service.create(
        db,
        UCSBOrganization(
            org_code=org_code,
            org_translation_short=org_translation_short,
            org_translation=org_translation,
            inactive=inactive,
        ),
    )
    return UCSBOrganizationResponse.model_validate(org)


@router.put(
    "",
    response_model=UCSBOrganizationResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Replace an organization; the orgCode itself cannot change",
)
async def update_organization(
    org_code: str = Query(alias="orgCode"),
    incoming: UCSBOrganizationFields = Body(),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBOrganizationResponse:
    require_role(current_user, Role.ADMIN)
    org = await organization_service.update(db, org_code, incoming)
    return UCSBOrganizationResponse.model_validate(org)


@router.delete(
    "",
    response_model=MessageResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Delete an organization",
)
async def delete_organization(
    org_code: str = Query(alias="orgCode"),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    require_role(current_user, Role.ADMIN)
    message = await organization_service.delete(db, org_code)
    return MessageResponse(message=message)
