"""In-memory comment repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional

from quill.domain.model.comment import (
    DELETED_NAME,
    Comment,
    CommentChanges,
    NewComment,
)
from quill.domain.repository.comment import CommentRepository
from quill.domain.value import ArticleId, CommentId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_article(self, article_id: ArticleId) -> list[Comment]:
        """Find all comments of an article ordered by ID."""
        comments = [c for c in self._comments.values() if c.article == article_id]
        comments.sort(key=lambda c: c.id)
        return comments

    async def find_by_author(self, author_id: UserId) -> list[Comment]:
        """Find comments by a specific author, newest first."""
        comments = [c for c in self._comments.values() if c.author == author_id]
        comments.sort(key=lambda c: (c.date, c.id), reverse=True)
        return comments

    async def insert(self, comment: NewComment) -> Comment:
        """Insert a comment, assigning the next serial ID."""
        stored = Comment(
            id=CommentId(next(self._ids)),
            date=datetime.now(),
            **comment.model_dump(),
        )
        self._comments[stored.id] = stored
        return stored

    async def update(
        self, comment_id: CommentId, changes: CommentChanges
    ) -> Optional[Comment]:
        """Update content and, if given, the guest name."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        update: dict = {"content": changes.content}
        if changes.name is not None:
            update["name"] = changes.name
        self._comments[comment_id] = comment.model_copy(update=update)
        return self._comments[comment_id]

    async def set_visible(
        self, comment_id: CommentId, visible: bool
    ) -> Optional[Comment]:
        """Set the soft-delete flag."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        self._comments[comment_id] = comment.model_copy(update={"visible": visible})
        return self._comments[comment_id]

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)

    async def count_children(self, parent_id: CommentId) -> int:
        """Count direct replies."""
        return sum(1 for c in self._comments.values() if c.parent == parent_id)

    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count comments of an article."""
        return sum(1 for c in self._comments.values() if c.article == article_id)

    async def anonymize_author(self, author_id: UserId, purge_content: bool) -> int:
        """Detach all comments from an author."""
        update: dict = {"author": None, "name": DELETED_NAME}
        if purge_content:
            update.update(content="", visible=False)

        targets = [c for c in self._comments.values() if c.author == author_id]
        for comment in targets:
            self._comments[comment.id] = comment.model_copy(update=update)
        return len(targets)
