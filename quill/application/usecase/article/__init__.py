"""Article use cases."""

from .common import ArticleItem
from .create_article import (
    CreateArticleRequest,
    CreateArticleResponse,
    CreateArticleUseCase,
)
from .get_article import GetArticleRequest, GetArticleResponse, GetArticleUseCase
from .list_articles import (
    ListArticlesRequest,
    ListArticlesResponse,
    ListArticlesUseCase,
)
from .update_article import (
    UpdateArticleRequest,
    UpdateArticleResponse,
    UpdateArticleUseCase,
)

__all__ = [
    "ArticleItem",
    "CreateArticleRequest",
    "CreateArticleResponse",
    "CreateArticleUseCase",
    "GetArticleRequest",
    "GetArticleResponse",
    "GetArticleUseCase",
    "ListArticlesRequest",
    "ListArticlesResponse",
    "ListArticlesUseCase",
    "UpdateArticleRequest",
    "UpdateArticleResponse",
    "UpdateArticleUseCase",
]
