"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class IntegrityError(DomainError):
    """Raised when stored data references something that doesn't exist.

    A missing group or user during a permission check is corrupted data,
    not a denial, and must surface as an internal error.
    """

    def __init__(self, message: str):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when an actor attempts an action they lack permission for."""

    def __init__(self, action: str, resource: str, resource_id: str, actor: str | None):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.actor = actor
        super().__init__(
            f"{actor or 'Anonymous user'} is not authorized to {action} "
            f"{resource} {resource_id}"
        )


class HasChildrenError(DomainError):
    """Raised when purging a comment that still has direct replies."""

    def __init__(self, comment_id: int, children: int):
        self.comment_id = comment_id
        self.children = children
        super().__init__(
            f"Can't purge comment {comment_id} with {children} direct "
            f"{'reply' if children == 1 else 'replies'}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidCredentialsError(DomainError):
    """Raised when a username and password don't match an account.

    The message doesn't say which of the two was wrong.
    """

    def __init__(self) -> None:
        super().__init__("Invalid username or password")
