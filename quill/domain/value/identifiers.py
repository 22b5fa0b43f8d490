"""Strongly typed identifiers for Quill domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType

# Serial primary keys assigned by the store
ArticleId = NewType("ArticleId", int)
CommentId = NewType("CommentId", int)

# Natural keys
UserId = NewType("UserId", str)  # The username/login
GroupId = NewType("GroupId", str)  # The group name
SessionId = NewType("SessionId", str)  # Opaque session token
