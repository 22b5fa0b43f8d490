"""Presentation of comments and comment trees to an actor."""

from datetime import datetime

from pydantic import BaseModel

from quill.domain.model import Comment, CommentNode, Session
from quill.domain.service import AuthorizationService


class CommentItem(BaseModel):
    """A single comment in a response."""

    id: int
    parent: int | None
    article: int
    author: str | None
    name: str | None
    content: str
    date: datetime
    visible: bool

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(
            id=comment.id,
            parent=comment.parent,
            article=comment.article,
            author=comment.author,
            name=comment.name,
            content=comment.content,
            date=comment.date,
            visible=comment.visible,
        )


class CommentNodeItem(BaseModel):
    """A comment tree node annotated for the requesting actor.

    Nodes the actor may not view stay in place so their replies remain
    reachable, but carry ``removed=True`` and no author, name or content.
    """

    id: int
    parent: int | None
    article: int
    author: str | None
    name: str | None
    content: str | None
    date: datetime
    visible: bool
    viewable: bool
    editable: bool
    removed: bool
    children: list["CommentNodeItem"] = []


async def present_node(
    node: CommentNode,
    actor: Session | None,
    authorization_service: AuthorizationService,
) -> CommentNodeItem:
    """Annotate one node and, recursively, its replies."""
    comment = node.comment
    viewable = await authorization_service.is_viewable(comment, actor)
    editable = await authorization_service.is_editable(comment, actor)
    children = [
        await present_node(child, actor, authorization_service)
        for child in node.children
    ]
    return CommentNodeItem(
        id=comment.id,
        parent=comment.parent,
        article=comment.article,
        author=comment.author if viewable else None,
        name=comment.name if viewable else None,
        content=comment.content if viewable else None,
        date=comment.date,
        visible=comment.visible,
        viewable=viewable,
        editable=editable,
        removed=not viewable,
        children=children,
    )


async def present_forest(
    forest: list[CommentNode],
    actor: Session | None,
    authorization_service: AuthorizationService,
) -> list[CommentNodeItem]:
    """Annotate every root of a forest."""
    return [await present_node(node, actor, authorization_service) for node in forest]
