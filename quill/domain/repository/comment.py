"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quill.domain.model.comment import Comment, CommentChanges, NewComment
from quill.domain.value import ArticleId, CommentId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find all comments of an article as a flat list.

        Hidden comments are included: visibility is a presentation concern.
        Comments are ordered by ascending ID so trees are built in a stable
        order.

        Args:
            article_id: The article ID

        Returns:
            Flat list of comments ordered by ID
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Comment]:
        """Find all comments submitted by a user, newest first.

        Args:
            author_id: The author's user ID

        Returns:
            List of comments by the author
        """
        pass

    @abstractmethod
    async def insert(self, comment: NewComment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment with ID and date assigned
        """
        pass

    @abstractmethod
    async def update(
        self, comment_id: CommentId, changes: CommentChanges
    ) -> Optional[Comment]:
        """Update the editable fields of a comment.

        Args:
            comment_id: The comment ID
            changes: New content and guest name

        Returns:
            The updated comment, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def set_visible(
        self, comment_id: CommentId, visible: bool
    ) -> Optional[Comment]:
        """Set the soft-delete flag of a comment.

        Args:
            comment_id: The comment ID
            visible: New visibility

        Returns:
            The updated comment, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete).

        Callers must check ``count_children`` first; the store rejects
        deleting a referenced parent via its foreign key.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def count_children(self, parent_id: CommentId) -> int:
        """Count direct replies to a comment, hidden ones included.

        Args:
            parent_id: The parent comment ID

        Returns:
            Number of direct children
        """
        pass

    @abstractmethod
    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count all comments of an article.

        Args:
            article_id: The article ID

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def anonymize_author(self, author_id: UserId, purge_content: bool) -> int:
        """Detach all comments from an author in one atomic update.

        Sets ``author`` to None and ``name`` to the deleted sentinel. With
        ``purge_content`` the content is also blanked and the comments hidden.

        Args:
            author_id: The author's user ID
            purge_content: Whether to also remove the comments' content

        Returns:
            Number of comments updated
        """
        pass
