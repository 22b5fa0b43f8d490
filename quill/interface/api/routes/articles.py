"""Article routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from quill.application.usecase.article import (
    CreateArticleRequest,
    CreateArticleResponse,
    CreateArticleUseCase,
    GetArticleRequest,
    GetArticleResponse,
    GetArticleUseCase,
    ListArticlesRequest,
    ListArticlesResponse,
    ListArticlesUseCase,
    UpdateArticleRequest,
    UpdateArticleResponse,
    UpdateArticleUseCase,
)
from quill.application.usecase.comment import (
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)

router = APIRouter(prefix="/articles", tags=["articles"], route_class=DishkaRoute)


class ArticleAPIRequest(BaseModel):
    """API request body for writing or editing an article."""

    title: str = Field(min_length=1, max_length=255)
    url: str = Field(min_length=1, max_length=255)
    content: str
    visible: bool = False


@router.get("", response_model=ListArticlesResponse)
async def list_articles(
    list_articles_use_case: FromDishka[ListArticlesUseCase],
    page: int = Query(default=1, ge=1),
    session: str | None = Cookie(default=None),
) -> ListArticlesResponse:
    """List articles, newest first.

    Args:
        list_articles_use_case: List articles use case from DI
        page: 1-based page number
        session: Session cookie

    Returns:
        One page of articles viewable by the requester
    """
    return await list_articles_use_case.execute(
        ListArticlesRequest(page=page, session_id=session)
    )


@router.post(
    "", response_model=CreateArticleResponse, status_code=status.HTTP_201_CREATED
)
async def create_article(
    request: ArticleAPIRequest,
    create_article_use_case: FromDishka[CreateArticleUseCase],
    session: str | None = Cookie(default=None),
) -> CreateArticleResponse:
    """Write a new article. Requires the create_article permission."""
    return await create_article_use_case.execute(
        CreateArticleRequest(
            title=request.title,
            url=request.url,
            content=request.content,
            visible=request.visible,
            session_id=session,
        )
    )


@router.get("/{article_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    article_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    session: str | None = Cookie(default=None),
) -> GetCommentsResponse:
    """Get the comment tree of an article.

    Every node is annotated for the requester. Comments they may not see
    keep their place with their content removed.

    Args:
        article_id: Article ID
        get_comments_use_case: Get comments use case from DI
        session: Session cookie

    Returns:
        Comment forest in store order
    """
    return await get_comments_use_case.execute(
        GetCommentsRequest(article_id=article_id, session_id=session)
    )


@router.get("/{id_or_url:path}", response_model=GetArticleResponse)
async def get_article(
    id_or_url: str,
    get_article_use_case: FromDishka[GetArticleUseCase],
    session: str | None = Cookie(default=None),
) -> GetArticleResponse:
    """Get an article by numeric ID or pretty url.

    Urls may contain slashes, e.g. ``/articles/notes/2019-06-09``.
    """
    return await get_article_use_case.execute(
        GetArticleRequest(id_or_url=id_or_url, session_id=session)
    )


@router.patch("/{article_id}", response_model=UpdateArticleResponse)
async def update_article(
    article_id: int,
    request: ArticleAPIRequest,
    update_article_use_case: FromDishka[UpdateArticleUseCase],
    session: str | None = Cookie(default=None),
) -> UpdateArticleResponse:
    """Edit or publish an article. Requires the article to be editable."""
    return await update_article_use_case.execute(
        UpdateArticleRequest(
            article_id=article_id,
            title=request.title,
            url=request.url,
            content=request.content,
            visible=request.visible,
            session_id=session,
        )
    )
