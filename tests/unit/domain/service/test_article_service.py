"""Unit tests for ArticleService."""

import pytest

from quill.domain.error import NotFoundError, ValidationError
from quill.domain.model import ArticleChanges, NewArticle
from quill.domain.service import ArticleService
from quill.domain.value import ArticleId, ArticleUrl, UserId
from tests.factories import add_article
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetArticle:
    """Articles are addressed by numeric ID or by url."""

    @pytest.mark.asyncio
    async def test_by_id(self, unit_env):
        service = await unit_env.get(ArticleService)
        article = await add_article(unit_env, author="ann")

        assert await service.get_article(str(article.id)) == article

    @pytest.mark.asyncio
    async def test_by_url(self, unit_env):
        service = await unit_env.get(ArticleService)
        article = await add_article(unit_env, author="ann", url="notes/2019-06-09")

        assert await service.get_article("notes/2019-06-09") == article

    @pytest.mark.asyncio
    async def test_unknown(self, unit_env):
        service = await unit_env.get(ArticleService)

        with pytest.raises(NotFoundError):
            await service.get_article("missing")
        with pytest.raises(NotFoundError):
            await service.get_article("42")
        with pytest.raises(NotFoundError):
            await service.get_article("what?")


class TestListPage:
    @pytest.mark.asyncio
    async def test_newest_first_and_paged(self, unit_env):
        # Arrange
        service = await unit_env.get(ArticleService)
        for n in range(5):
            await add_article(unit_env, author="ann", url=f"post-{n}")

        # Act
        first = await service.list_page(1, page_size=2)
        third = await service.list_page(3, page_size=2)

        # Assert
        assert [str(a.url) for a in first] == ["post-4", "post-3"]
        assert [str(a.url) for a in third] == ["post-0"]

    @pytest.mark.asyncio
    async def test_drafts(self, unit_env):
        service = await unit_env.get(ArticleService)
        await add_article(unit_env, author="ann", url="public")
        await add_article(unit_env, author="ann", url="draft", visible=False)

        public = await service.list_page(1, page_size=10)
        everything = await service.list_page(1, page_size=10, include_hidden=True)

        assert [str(a.url) for a in public] == ["public"]
        assert len(everything) == 2

    @pytest.mark.asyncio
    async def test_page_below_one(self, unit_env):
        service = await unit_env.get(ArticleService)
        await add_article(unit_env, author="ann")

        assert len(await service.list_page(0, page_size=10)) == 1


class TestSubmitAndEdit:
    @pytest.mark.asyncio
    async def test_duplicate_url(self, unit_env):
        service = await unit_env.get(ArticleService)
        await add_article(unit_env, author="ann", url="taken")

        with pytest.raises(ValidationError):
            await service.submit_article(
                NewArticle(
                    title="Other",
                    author=UserId("bob"),
                    url=ArticleUrl("taken"),
                    content="...",
                )
            )

    @pytest.mark.asyncio
    async def test_edit(self, unit_env):
        service = await unit_env.get(ArticleService)
        article = await add_article(unit_env, author="ann", visible=False)

        updated = await service.edit_article(
            article.id,
            ArticleChanges(
                title="New title",
                url=article.url,
                content="Rewritten",
                visible=True,
            ),
        )

        assert updated.title == "New title"
        assert updated.visible is True
        assert updated.author == article.author

    @pytest.mark.asyncio
    async def test_edit_missing(self, unit_env):
        service = await unit_env.get(ArticleService)

        with pytest.raises(NotFoundError):
            await service.edit_article(
                ArticleId(9),
                ArticleChanges(title="T", url=ArticleUrl("t"), content=""),
            )
