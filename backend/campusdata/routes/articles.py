"""Links to news articles shared by students, mounted at /api/articles."""

from typing import List

from fastapi import APIRouter, Body, Depends, Query
from pydantic import NaiveDatetime
from sqlalchemy.ext.asyncio import AsyncSession

from campusdata.auth.authorization import require_role
from campusdata.auth.dependencies import get_current_user
from campusdata.auth.roles import Role
from campusdata.database import get_db_session
from campusdata.models.article import Article
from campusdata.repositories.resources import ArticleRepository
from campusdata.routes.params import RecordId
from campusdata.schemas.article import ArticleFields, ArticleResponse
from campusdata.schemas.common import MessageResponse, responses_for
from campusdata.services.crud_service import CrudService
from campusdata.services.current_user_service import CurrentUser

router = APIRouter(prefix="/api/articles", tags=["Articles"])

article_service: CrudService[Article, int] = CrudService(ArticleRepository)


@router.get(
    "/all",
    response_model=List[ArticleResponse],
    responses=responses_for(401, 403),
    summary="List all articles",
)
async def all_articles(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> List[ArticleResponse]:
    require_role(current_user, Role.USER)
    articles = await article_service.list_all(db)
    return [ArticleResponse.model_validate(article) for article in articles]


@router.get(
    "",
    response_model=ArticleResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Get a single article",
)
async def get_article(
    id: RecordId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> ArticleResponse:
    require_role(current_user, Role.USER)
    article = await article_service.get(db, id)
    return ArticleResponse.model_validate(article)


@router.post(
    "/post",
    response_model=ArticleResponse,
    responses=responses_for(400, 401, 403),
    summary="Create a new article",
)
async def post_article(
    title: str = Query(min_length=1),
    url: str = Query(min_length=1),
    explanation: str = Query(),
    email: str = Query(min_length=3),
    date_added: NaiveDatetime = Query(alias="dateAdded"),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> ArticleResponse:
    require_role(current_user, Role.ADMIN)
    article = await article_service.create(
        db,
        Article(
            title=title,
            url=url,
            explanation=explanation,
            email=email,
            date_added=date_added,
        ),
    )
    return ArticleResponse.model_validate(article)


@router.put(
    "",
    response_model=ArticleResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Replace an article",
)
async def update_article(
    id: RecordId,
    incoming: ArticleFields = Body(),
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> ArticleResponse:
    require_role(current_user, Role.ADMIN)
    article = await article_service.update(db, id, incoming)
    return ArticleResponse.model_validate(article)


@router.delete(
    "",
    response_model=MessageResponse,
    responses=responses_for(400, 401, 403, 404),
    summary="Delete an article",
)
async def delete_article(
    id: RecordId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    require_role(current_user, Role.ADMIN)
    message = await article_service.delete(db, id)
    return MessageResponse(message=message)
