"""Integration tests for the PostgreSQL repositories.

Assumes a migrated database at ``DATABASE__URL``. Run with
``pytest -m integration``.
"""

from uuid import uuid4

import pytest

from quill.domain.error import ValidationError
from quill.domain.model import (
    DELETED_NAME,
    CommentChanges,
    Group,
    NewArticle,
    NewComment,
    User,
)
from quill.domain.repository import (
    ArticleRepository,
    CommentRepository,
    GroupRepository,
    UserRepository,
)
from quill.domain.value import ArticleUrl, GroupId, Permission, UserId
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real persistence, assumes postgres running
integration_env = create_env_fixture(unmock={"persistence"})


async def create_author(env) -> UserId:
    user_repo = await env.get(UserRepository)
    user = await user_repo.insert(
        User(
            id=UserId(f"author-{uuid4().hex[:8]}"),
            name="Author",
            email="author@example.com",
            group=GroupId("author"),
        )
    )
    return user.id


async def create_article(env, author: UserId):
    article_repo = await env.get(ArticleRepository)
    return await article_repo.insert(
        NewArticle(
            title="Integration",
            author=author,
            url=ArticleUrl(f"integration-{uuid4().hex}"),
            content="...",
            visible=True,
        )
    )


class TestPostgresGroupRepository:
    @pytest.mark.asyncio
    async def test_seeded_groups(self, integration_env):
        group_repo = await integration_env.get(GroupRepository)

        admin = await group_repo.find_by_id(GroupId("admin"))

        assert admin is not None
        assert admin.has(Permission.DELETE_FOREIGN_COMMENT)

    @pytest.mark.asyncio
    async def test_save_upserts(self, integration_env):
        group_repo = await integration_env.get(GroupRepository)
        group_id = GroupId(f"group-{uuid4().hex[:8]}")

        await group_repo.save(Group(id=group_id))
        await group_repo.save(
            Group(id=group_id, permissions=frozenset({Permission.CREATE_COMMENT}))
        )

        group = await group_repo.find_by_id(group_id)
        assert group.permissions == frozenset({Permission.CREATE_COMMENT})


class TestPostgresCommentRepository:
    """Comment storage against a real database."""

    @pytest.mark.asyncio
    async def test_thread_in_id_order(self, integration_env):
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        author = await create_author(integration_env)
        article = await create_article(integration_env, author)

        # Act
        root = await comment_repo.insert(
            NewComment(article=article.id, author=author, content="root")
        )
        reply = await comment_repo.insert(
            NewComment(
                parent=root.id, article=article.id, name="Guest", content="reply"
            )
        )
        flat = await comment_repo.find_by_article(article.id)

        # Assert
        assert [c.id for c in flat] == [root.id, reply.id]
        assert await comment_repo.count_children(root.id) == 1
        assert await comment_repo.count_by_article(article.id) == 2

    @pytest.mark.asyncio
    async def test_update_and_visibility(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        author = await create_author(integration_env)
        article = await create_article(integration_env, author)
        comment = await comment_repo.insert(
            NewComment(article=article.id, name="Guest", content="before")
        )

        edited = await comment_repo.update(
            comment.id, CommentChanges(content="after", name="Renamed")
        )
        hidden = await comment_repo.set_visible(comment.id, False)

        assert edited.content == "after"
        assert edited.name == "Renamed"
        assert hidden.visible is False
        assert hidden.content == "after"

    @pytest.mark.asyncio
    async def test_anonymize_author(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        author = await create_author(integration_env)
        article = await create_article(integration_env, author)
        comment = await comment_repo.insert(
            NewComment(article=article.id, author=author, content="mine")
        )

        count = await comment_repo.anonymize_author(author, purge_content=True)

        anonymized = await comment_repo.find_by_id(comment.id)
        assert count == 1
        assert anonymized.author is None
        assert anonymized.name == DELETED_NAME
        assert anonymized.content == ""
        assert anonymized.visible is False


class TestPostgresArticleRepository:
    @pytest.mark.asyncio
    async def test_duplicate_url(self, integration_env):
        article_repo = await integration_env.get(ArticleRepository)
        author = await create_author(integration_env)
        article = await create_article(integration_env, author)

        with pytest.raises(ValidationError):
            await article_repo.insert(
                NewArticle(
                    title="Copy", author=author, url=article.url, content="..."
                )
            )

        found = await article_repo.find_by_url(article.url)
        assert found.id == article.id


class TestPostgresUserRepository:
    @pytest.mark.asyncio
    async def test_update_password_hash(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        user_id = await create_author(integration_env)

        assert await user_repo.update_password_hash(user_id, "$argon2id$new")
        assert not await user_repo.update_password_hash(
            UserId(f"ghost-{uuid4().hex[:8]}"), "$argon2id$new"
        )

        user = await user_repo.find_by_id(user_id)
        assert user.password_hash == "$argon2id$new"
