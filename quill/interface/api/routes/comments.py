"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Response, status
from pydantic import BaseModel, Field

from quill.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentContextRequest,
    GetCommentContextResponse,
    GetCommentContextUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
    HideCommentUseCase,
    PurgeCommentRequest,
    PurgeCommentUseCase,
    RestoreCommentUseCase,
    SetCommentVisibilityRequest,
    SetCommentVisibilityResponse,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    article_id: int
    parent_id: int | None = None  # Parent comment ID for replies
    content: str = Field(min_length=1, max_length=10000)
    name: str | None = Field(default=None, max_length=255)  # Guests only


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1, max_length=10000)
    name: str | None = Field(default=None, max_length=255)


@router.post(
    "", response_model=CreateCommentResponse, status_code=status.HTTP_201_CREATED
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    session: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on an article or reply to another comment.

    Logged in users need the create_comment permission. Anonymous visitors
    must give a name and can only comment while guest comments are enabled.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        session: Session cookie

    Returns:
        Created comment
    """
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            article_id=request.article_id,
            parent_id=request.parent_id,
            content=request.content,
            name=request.name,
            session_id=session,
        )
    )


@router.get("/{comment_id}", response_model=GetCommentContextResponse)
async def get_comment_context(
    comment_id: int,
    get_comment_context_use_case: FromDishka[GetCommentContextUseCase],
    context: int = Query(default=0, ge=0),
    session: str | None = Cookie(default=None),
) -> GetCommentContextResponse:
    """View a comment with ``context`` levels of parent comments.

    The walk stops at the top-level comment if ``context`` reaches past it.

    Args:
        comment_id: Comment ID
        get_comment_context_use_case: Context use case from DI
        context: Number of parent levels to include
        session: Session cookie

    Returns:
        Annotated subtree rooted at the ancestor the walk ended on
    """
    return await get_comment_context_use_case.execute(
        GetCommentContextRequest(
            comment_id=comment_id, context=context, session_id=session
        )
    )


@router.get("/{comment_id}/single", response_model=GetCommentResponse)
async def get_comment(
    comment_id: int,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    session: str | None = Cookie(default=None),
) -> GetCommentResponse:
    """Get a single comment without replies."""
    return await get_comment_use_case.execute(
        GetCommentRequest(comment_id=comment_id, session_id=session)
    )


@router.patch("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: int,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    session: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    """Edit a comment. Requires the comment to be editable."""
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id,
            content=request.content,
            name=request.name,
            session_id=session,
        )
    )


@router.post("/{comment_id}/hide", response_model=SetCommentVisibilityResponse)
async def hide_comment(
    comment_id: int,
    hide_comment_use_case: FromDishka[HideCommentUseCase],
    session: str | None = Cookie(default=None),
) -> SetCommentVisibilityResponse:
    """Soft delete a comment. Its replies stay visible."""
    return await hide_comment_use_case.execute(
        SetCommentVisibilityRequest(comment_id=comment_id, session_id=session)
    )


@router.post("/{comment_id}/restore", response_model=SetCommentVisibilityResponse)
async def restore_comment(
    comment_id: int,
    restore_comment_use_case: FromDishka[RestoreCommentUseCase],
    session: str | None = Cookie(default=None),
) -> SetCommentVisibilityResponse:
    """Make a hidden comment visible again."""
    return await restore_comment_use_case.execute(
        SetCommentVisibilityRequest(comment_id=comment_id, session_id=session)
    )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def purge_comment(
    comment_id: int,
    purge_comment_use_case: FromDishka[PurgeCommentUseCase],
    session: str | None = Cookie(default=None),
) -> Response:
    """Permanently delete a comment.

    Requires the delete_foreign_comment permission. Comments with replies
    can't be purged (409); hide them instead.
    """
    await purge_comment_use_case.execute(
        PurgeCommentRequest(comment_id=comment_id, session_id=session)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
