"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Comment, CommentChanges, NewComment
from quill.domain.model.comment import DELETED_NAME
from quill.domain.repository import CommentRepository
from quill.domain.value import ArticleId, CommentId, UserId
from quill.persistence.mappers import row_to_comment
from quill.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find all comments of an article, hidden ones included."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.article == article_id)
            .order_by(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_author(self, author_id: UserId) -> List[Comment]:
        """Find comments by a specific author, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.author == author_id)
            .order_by(desc(comments_table.c.date), desc(comments_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def insert(self, comment: NewComment) -> Comment:
        """Insert a comment and return it with ID and date assigned."""
        stmt = (
            comments_table.insert()
            .values(**comment.model_dump())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def update(
        self, comment_id: CommentId, changes: CommentChanges
    ) -> Optional[Comment]:
        """Update content and, if given, the guest name."""
        values: dict = {"content": changes.content}
        if changes.name is not None:
            values["name"] = changes.name

        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(**values)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def set_visible(
        self, comment_id: CommentId, visible: bool
    ) -> Optional[Comment]:
        """Set the soft-delete flag."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(visible=visible)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_children(self, parent_id: CommentId) -> int:
        """Count direct replies to a comment."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.parent == parent_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count comments of an article, hidden ones included."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.article == article_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def anonymize_author(self, author_id: UserId, purge_content: bool) -> int:
        """Detach all comments from an author in a single statement."""
        values: dict = {"author": None, "name": DELETED_NAME}
        if purge_content:
            values.update(content="", visible=False)

        stmt = (
            update(comments_table)
            .where(comments_table.c.author == author_id)
            .values(**values)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
