"""Comment tree construction.

Rebuilds the reply hierarchy of an article from the flat comment list the
store returns. All functions are pure: they never mutate their input and
always return newly built, immutable nodes.

Visibility is deliberately not considered here. Hidden comments keep their
place in the tree so their replies stay reachable; filtering happens when a
tree is presented to a particular actor.
"""

from collections import defaultdict
from collections.abc import Iterator, Sequence

from quill.domain.model.comment import Comment, CommentNode
from quill.domain.value import CommentId


def index_children(flat: Sequence[Comment]) -> dict[CommentId, list[Comment]]:
    """Build a parent ID -> direct children map, keeping flat-list order."""
    adjacency: dict[CommentId, list[Comment]] = defaultdict(list)
    for comment in flat:
        if comment.parent is not None:
            adjacency[comment.parent].append(comment)
    return adjacency


def _expand(
    comment: Comment, adjacency: dict[CommentId, list[Comment]]
) -> CommentNode:
    children = tuple(
        _expand(child, adjacency) for child in adjacency.get(comment.id, ())
    )
    return CommentNode(comment=comment, children=children)


def build_forest(flat: Sequence[Comment]) -> list[CommentNode]:
    """Build the comment forest of one article.

    Algorithm:
    1. Index children by parent ID (one pass over ``flat``)
    2. Take comments without a parent as roots, in flat-list order
    3. Recursively attach each node's children, in flat-list order

    Comments whose parent is missing from ``flat`` are orphans. They are
    neither roots nor anyone's child, so they (and their replies) are left
    out of the forest.

    Args:
        flat: All comments of one article, in store order

    Returns:
        Root nodes with children populated recursively
    """
    adjacency = index_children(flat)
    return [_expand(comment, adjacency) for comment in flat if comment.parent is None]


def view_with_context(
    flat: Sequence[Comment], target_id: CommentId, context_depth: int
) -> CommentNode | None:
    """Build the subtree around a comment, ``context_depth`` levels up.

    Starting at the target, the walk moves to the parent comment up to
    ``context_depth`` times. It stops early, without error, once the current
    comment is a root (or its parent is missing from ``flat``). The node
    where the walk ends is expanded with all of its descendants.

    Args:
        flat: All comments of the target's article
        target_id: ID of the comment to view
        context_depth: Number of parent levels to include

    Returns:
        Node rooted at the ancestor the walk ended on, None if the target
        isn't in ``flat``
    """
    if context_depth < 0:
        raise ValueError("context_depth must not be negative")

    by_id = {comment.id: comment for comment in flat}
    current = by_id.get(target_id)
    if current is None:
        return None

    for _ in range(context_depth):
        if current.parent is None or current.parent not in by_id:
            break
        current = by_id[current.parent]

    return _expand(current, index_children(flat))


def iter_nodes(forest: Sequence[CommentNode]) -> Iterator[CommentNode]:
    """Yield every node of a forest in pre-order."""
    for node in forest:
        yield node
        yield from iter_nodes(node.children)


def count_nodes(forest: Sequence[CommentNode]) -> int:
    """Count all nodes of a forest."""
    return sum(1 for _ in iter_nodes(forest))
