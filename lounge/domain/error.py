"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed input rejected before any store access)."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class SchemaIncompatibleError(DomainError):
    """The store's current schema cannot hold the requested data.

    Raised instead of silently dropping information, e.g. a reply's parent
    link when the parent column does not exist yet. Requires operator action.
    """

    pass


class ReplyDepthExceededError(BusinessRuleViolationError):
    """Reply would nest deeper than the configured maximum depth."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Reply nesting limit reached (maximum depth {max_depth})")


class CommentIntegrityError(DomainError):
    """Base error for a parent reference that violates thread integrity."""

    pass


class ParentNotFoundError(CommentIntegrityError):
    """A comment in the parent chain does not exist."""

    def __init__(self, comment_id: str):
        self.comment_id = comment_id
        super().__init__(f"Parent comment not found: {comment_id}")


class CrossPostParentError(CommentIntegrityError):
    """A comment in the parent chain belongs to a different post."""

    def __init__(self, comment_id: str, post_id: str):
        self.comment_id = comment_id
        self.post_id = post_id
        super().__init__(
            f"Parent comment {comment_id} does not belong to post {post_id}"
        )


class InvalidCommentTreeError(CommentIntegrityError):
    """The stored parent chain is malformed (cycle or runaway traversal)."""

    pass
