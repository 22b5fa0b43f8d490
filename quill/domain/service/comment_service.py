"""Comment domain service."""

import logfire

from quill.domain.error import HasChildrenError, NotFoundError, ValidationError
from quill.domain.model import Comment, CommentChanges, CommentNode, NewComment
from quill.domain.repository import CommentRepository
from quill.domain.value import ArticleId, CommentId, UserId

from .base import Service
from .comment_tree import build_forest, count_nodes, view_with_context


class CommentService(Service):
    """Domain service for comment operations.

    Owns the comment lifecycle: visible -> hidden (soft delete) -> visible
    again (restore), and purge (physical removal) which is refused while a
    comment still has replies.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def get_comment(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def get_comment_tree(self, article_id: ArticleId) -> list[CommentNode]:
        """Get the comments of an article as a forest.

        Hidden comments are part of the forest; callers filter per actor.

        Args:
            article_id: Article ID

        Returns:
            Root comment nodes with replies populated recursively
        """
        with logfire.span("comment_service.get_comment_tree", article_id=article_id):
            flat = await self.comment_repository.find_by_article(article_id)
            forest = build_forest(flat)
            logfire.info(
                "Comment tree built",
                article_id=article_id,
                comments=len(flat),
                roots=len(forest),
                nodes=count_nodes(forest),
            )
            return forest

    async def get_comment_context(
        self, comment_id: CommentId, depth: int
    ) -> CommentNode | None:
        """Get a comment with ``depth`` levels of parent context.

        Args:
            comment_id: ID of the comment to view
            depth: Number of ancestors to walk up before expanding

        Returns:
            Subtree rooted at the ancestor the walk ended on, None if the
            comment doesn't exist
        """
        with logfire.span(
            "comment_service.get_comment_context", comment_id=comment_id, depth=depth
        ):
            if depth < 0:
                raise ValidationError("Context depth must not be negative")

            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found for context", comment_id=comment_id)
                return None

            flat = await self.comment_repository.find_by_article(comment.article)
            node = view_with_context(flat, comment_id, depth)
            if node is not None:
                logfire.info(
                    "Comment context built",
                    comment_id=comment_id,
                    root_id=node.comment.id,
                    nodes=count_nodes([node]),
                )
            return node

    async def comments_by_user(self, user_id: UserId) -> list[Comment]:
        """Get all comments a user has written, newest first.

        Args:
            user_id: Author user ID

        Returns:
            List of comments
        """
        with logfire.span("comment_service.comments_by_user", user_id=user_id):
            return await self.comment_repository.find_by_author(user_id)

    async def count_for_article(self, article_id: ArticleId) -> int:
        """Count the comments of an article, hidden ones included."""
        return await self.comment_repository.count_by_article(article_id)

    async def submit_comment(self, new_comment: NewComment) -> Comment:
        """Submit a comment on an article or a reply to another comment.

        Args:
            new_comment: Comment to submit

        Returns:
            Stored comment with ID and date assigned

        Raises:
            ValidationError: If the parent doesn't exist or belongs to
                another article
        """
        with logfire.span(
            "comment_service.submit_comment",
            article_id=new_comment.article,
            parent_id=new_comment.parent,
            author=new_comment.author,
        ):
            if new_comment.parent is not None:
                parent = await self.comment_repository.find_by_id(new_comment.parent)
                if parent is None:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=new_comment.parent,
                        article_id=new_comment.article,
                    )
                    raise ValidationError("Parent comment not found")
                if parent.article != new_comment.article:
                    logfire.error(
                        "Parent comment does not belong to article",
                        parent_id=parent.id,
                        parent_article_id=parent.article,
                        target_article_id=new_comment.article,
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this article"
                    )

            comment = await self.comment_repository.insert(new_comment)
            logfire.info(
                "Comment submitted",
                comment_id=comment.id,
                article_id=comment.article,
                guest=comment.is_guest,
            )
            return comment

    async def edit_comment(
        self, comment_id: CommentId, changes: CommentChanges
    ) -> Comment:
        """Edit the content of a comment.

        A new display name is only applied to guest comments.

        Args:
            comment_id: Comment ID
            changes: New content and optional guest name

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.edit_comment", comment_id=comment_id):
            existing = await self._require(comment_id)
            if existing.author is not None and changes.name is not None:
                changes = changes.model_copy(update={"name": None})

            updated = await self.comment_repository.update(comment_id, changes)
            if updated is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info(
                "Comment edited",
                comment_id=comment_id,
                content_length=len(updated.content),
            )
            return updated

    async def hide_comment(self, comment_id: CommentId) -> Comment:
        """Soft delete a comment.

        The comment keeps its content and its place in the tree.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        return await self._set_visible(comment_id, False)

    async def restore_comment(self, comment_id: CommentId) -> Comment:
        """Make a hidden comment visible again.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        return await self._set_visible(comment_id, True)

    async def purge_comment(self, comment_id: CommentId) -> None:
        """Permanently delete a comment.

        Purging is all-or-nothing: a comment with direct replies is left
        untouched.

        Args:
            comment_id: Comment ID

        Raises:
            NotFoundError: If the comment doesn't exist
            HasChildrenError: If any comment replies to this one
        """
        with logfire.span("comment_service.purge_comment", comment_id=comment_id):
            await self._require(comment_id)

            children = await self.comment_repository.count_children(comment_id)
            if children > 0:
                logfire.warn(
                    "Refusing to purge comment with replies",
                    comment_id=comment_id,
                    children=children,
                )
                raise HasChildrenError(comment_id, children)

            await self.comment_repository.delete(comment_id)
            logfire.info("Comment purged", comment_id=comment_id)

    async def anonymize_author(self, user_id: UserId, purge_content: bool) -> int:
        """Detach every comment from a deleted account.

        Args:
            user_id: The account being deleted
            purge_content: Also blank and hide the comments

        Returns:
            Number of comments anonymized
        """
        with logfire.span(
            "comment_service.anonymize_author",
            user_id=user_id,
            purge_content=purge_content,
        ):
            updated = await self.comment_repository.anonymize_author(
                user_id, purge_content
            )
            logfire.info(
                "Author comments anonymized",
                user_id=user_id,
                purge_content=purge_content,
                count=updated,
            )
            return updated

    async def _require(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=comment_id)
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def _set_visible(self, comment_id: CommentId, visible: bool) -> Comment:
        with logfire.span(
            "comment_service.set_visible", comment_id=comment_id, visible=visible
        ):
            updated = await self.comment_repository.set_visible(comment_id, visible)
            if updated is None:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))
            logfire.info(
                "Comment restored" if visible else "Comment hidden",
                comment_id=comment_id,
            )
            return updated
