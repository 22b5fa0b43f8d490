"""Login session entity."""

from datetime import datetime

from quill.domain.model.common import DomainModel
from quill.domain.value import SessionId, UserId


class Session(DomainModel):
    """An authenticated actor.

    The core only reads ``user`` from a live session; sessions are never
    mutated, only created and deleted.
    """

    id: SessionId
    user: UserId
    expires: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """Whether the session is past its expiry time."""
        return (now or datetime.now()) >= self.expires
