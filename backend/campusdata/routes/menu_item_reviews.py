"""
Campus Data Backend — MenuItemReview Route Handlers
====================================================

What:  Star reviews of dining menu items, mounted at /api/menuitemreview.
       `stars` must be between 1 and 5 on both create and update.
"""

from typing import List

from fastapi import APIRouter, Body, Depends, Query
from pydantic import NaiveDatetime
from sqlalchemy.ext.asyncio import AsyncSession

from campusdata.auth.authorization import require_role
from campusdata.auth.dependencies import get_current_user
from campusdata.auth.roles import Role
from campusdata.database import get_db_session
from campusdata.models.menu_item_review import MenuItemReview
from campusdata.repositories.resources import MenuItemReviewRepository
from campusdata.routes.params import RecordId
from campusdata.schemas.common import MAX_BIGINT, MessageResponse, responses_for
from campusdata.schemas.dining import (
    MAX_STARS,
    MIN_STARS,
    MenuItemReviewFields,
    MenuItemReviewResponse,
)
from campusdata.services.crud_service import CrudService
from campusdata.services.current_user_service import CurrentUser

router = APIRouter(prefix="/api/menuitemreview", tags=["MenuItemReview"])

review_service: CrudService[MenuItemReview, int] = CrudService(MenuItemReviewRepository)


@router.get(
    "/all",
    response_model=List[MenuItemReviewResponse],
    responses=responses_for(401, 403),
    summary="List all menu item reviews",
)
async def all_reviews(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> List[MenuItemReviewResponse]:
    require_role(current_user, Role.USER)
    reviews = await review_service.list_all(db)
    return [MenuItemReviewResponse.model_validate(review) for review in reviews]


@router.get(
    "",
    response_model=MenuItemReviewResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Get a single review",
)
async def get_review(
    id: RecordId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> MenuItemReviewResponse:
    require_role(current_user, Role.USER)
    review = await review_service.get(db, id)
    return MenuItemReviewResponse.model_validate(review)


@router.post(
    "/post",
    response_model=MenuItemReviewResponse,
    responses=responses_for(400, 401, 403),
    summary="Create a new review",
)
async def post_review(
    item_id: int = Query(alias="itemId", ge=1, le=MAX_BIGINT),
    reviewer_email: str = Query(alias="reviewerEmail", min_length=3),
    stars: int = Query(ge=MIN_STARS, le=MAX_STARS),
    date_reviewed: NaiveDatetime = Query(alias="dateReviewed"),
    comments: str = Query(),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> MenuItemReviewResponse:
    require_role(current_user, Role.ADMIN)
    review = await review_service.create(
        db,
        MenuItemReview(
            item_id=item_id,
            reviewer_email=reviewer_email,
            stars=stars,
            date_reviewed=date_reviewed,
            comments=comments,
        ),
    )
    return MenuItemReviewResponse.model_validate(review)


@router.put(
    "",
    response_model=MenuItemReviewResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Replace a review",
)
async def update_review(
    id: RecordId,
    incoming: MenuItemReviewFields = Body(),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> MenuItemReviewResponse:
    require_role(current_user, Role.ADMIN)
    review = await review_service.update(db, id, incoming)
    return MenuItemReviewResponse.model_validate(review)


@router.delete(
    "",
    response_model=MessageResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Delete a review",
)
async def delete_review(
    id: RecordId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    require_role(current_user, Role.ADMIN)
    message = await review_service.delete(db, id)
    return MessageResponse(message=message)
