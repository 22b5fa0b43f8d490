"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .get_comment import GetCommentRequest, GetCommentResponse, GetCommentUseCase
from .get_comment_context import (
    GetCommentContextRequest,
    GetCommentContextResponse,
    GetCommentContextUseCase,
)
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .hide_comment import (
    HideCommentUseCase,
    RestoreCommentUseCase,
    SetCommentVisibilityRequest,
    SetCommentVisibilityResponse,
)
from .purge_comment import PurgeCommentRequest, PurgeCommentUseCase
from .tree import CommentItem, CommentNodeItem
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "CommentItem",
    "CommentNodeItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "GetCommentContextRequest",
    "GetCommentContextResponse",
    "GetCommentContextUseCase",
    "GetCommentRequest",
    "GetCommentResponse",
    "GetCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "HideCommentUseCase",
    "PurgeCommentRequest",
    "PurgeCommentUseCase",
    "RestoreCommentUseCase",
    "SetCommentVisibilityRequest",
    "SetCommentVisibilityResponse",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
