"""Unit tests for GetCommentsUseCase and GetCommentContextUseCase."""

import pytest

from quill.application.usecase.comment import (
    GetCommentContextRequest,
    GetCommentContextUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetCommentUseCase,
)
from quill.domain.error import NotFoundError
from tests.factories import add_article, add_comment, login, seed_groups
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetComments:
    """Tests for the article comment tree."""

    @pytest.mark.asyncio
    async def test_tree_shape(self, unit_env):
        # Arrange
        article = await add_article(unit_env, author="ann")
        c1 = await add_comment(unit_env, article.id)
        c2 = await add_comment(unit_env, article.id, parent=c1.id)
        await add_comment(unit_env, article.id, parent=c2.id)
        await add_comment(unit_env, article.id)
        use_case = await unit_env.get(GetCommentsUseCase)

        # Act
        response = await use_case.execute(GetCommentsRequest(article_id=article.id))

        # Assert
        assert response.total == 4
        assert [node.id for node in response.comments] == [1, 4]
        assert response.comments[0].children[0].children[0].id == 3
        assert all(not node.editable for node in response.comments)

    @pytest.mark.asyncio
    async def test_hidden_comment_is_redacted_for_visitors(self, unit_env):
        """A hidden parent keeps its replies reachable but shows no content."""
        # Arrange
        article = await add_article(unit_env, author="ann")
        parent = await add_comment(
            unit_env, article.id, name="Mallory", content="spam", visible=False
        )
        await add_comment(unit_env, article.id, parent=parent.id, content="reply")
        use_case = await unit_env.get(GetCommentsUseCase)

        # Act
        response = await use_case.execute(GetCommentsRequest(article_id=article.id))

        # Assert
        node = response.comments[0]
        assert node.removed is True
        assert node.viewable is False
        assert node.content is None
        assert node.name is None
        assert node.children[0].content == "reply"
        assert node.children[0].removed is False

    @pytest.mark.asyncio
    async def test_moderator_sees_hidden_comment(self, unit_env):
        await seed_groups(unit_env)
        ann = await login(unit_env, "ann", "author")
        article = await add_article(unit_env, author="ann")
        await add_comment(unit_env, article.id, content="spam", visible=False)
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(
            GetCommentsRequest(article_id=article.id, session_id=ann.id)
        )

        node = response.comments[0]
        assert node.removed is False
        assert node.content == "spam"
        assert node.visible is False
        assert node.editable is True

    @pytest.mark.asyncio
    async def test_draft_article_is_not_found(self, unit_env):
        article = await add_article(unit_env, author="ann", visible=False)
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentsRequest(article_id=article.id))

    @pytest.mark.asyncio
    async def test_draft_article_comments_are_not_found(self, unit_env):
        """Single and context reads honour the article's visibility too."""
        # Arrange
        article = await add_article(unit_env, author="ann", visible=False)
        comment = await add_comment(unit_env, article.id, content="secret draft note")
        context = await unit_env.get(GetCommentContextUseCase)
        single = await unit_env.get(GetCommentUseCase)

        # Act / Assert
        with pytest.raises(NotFoundError):
            await context.execute(GetCommentContextRequest(comment_id=comment.id))
        with pytest.raises(NotFoundError):
            await single.execute(GetCommentRequest(comment_id=comment.id))

    @pytest.mark.asyncio
    async def test_article_author_reads_draft_comments(self, unit_env):
        await seed_groups(unit_env)
        ann = await login(unit_env, "ann", "author")
        article = await add_article(unit_env, author="ann", visible=False)
        comment = await add_comment(unit_env, article.id, content="early feedback")
        context = await unit_env.get(GetCommentContextUseCase)
        single = await unit_env.get(GetCommentUseCase)

        response = await context.execute(
            GetCommentContextRequest(comment_id=comment.id, session_id=ann.id)
        )
        found = await single.execute(
            GetCommentRequest(comment_id=comment.id, session_id=ann.id)
        )

        assert response.root.content == "early feedback"
        assert found.comment.content == "early feedback"

    @pytest.mark.asyncio
    async def test_unknown_article(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentsRequest(article_id=3))


class TestGetCommentContext:
    @pytest.mark.asyncio
    async def test_context(self, unit_env):
        # Arrange
        article = await add_article(unit_env, author="ann")
        c1 = await add_comment(unit_env, article.id)
        c2 = await add_comment(unit_env, article.id, parent=c1.id)
        c3 = await add_comment(unit_env, article.id, parent=c2.id)
        use_case = await unit_env.get(GetCommentContextUseCase)

        # Act
        response = await use_case.execute(
            GetCommentContextRequest(comment_id=c3.id, context=1)
        )

        # Assert
        assert response.comment_id == c3.id
        assert response.root.id == c2.id
        assert [child.id for child in response.root.children] == [c3.id]

    @pytest.mark.asyncio
    async def test_default_is_the_subtree(self, unit_env):
        article = await add_article(unit_env, author="ann")
        c1 = await add_comment(unit_env, article.id)
        await add_comment(unit_env, article.id, parent=c1.id)
        use_case = await unit_env.get(GetCommentContextUseCase)

        response = await use_case.execute(GetCommentContextRequest(comment_id=c1.id))

        assert response.root.id == c1.id
        assert len(response.root.children) == 1

    def test_negative_context_rejected(self):
        with pytest.raises(ValueError):
            GetCommentContextRequest(comment_id=1, context=-1)

    @pytest.mark.asyncio
    async def test_unknown_comment(self, unit_env):
        use_case = await unit_env.get(GetCommentContextUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentContextRequest(comment_id=8, context=2))
