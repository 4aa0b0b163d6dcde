"""Domain value objects for Lounge.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, RootModel, field_validator

from lounge.domain.value.identifiers import UserId

COMMENT_BODY_MAX_LENGTH = 10000


class NotificationType(str, Enum):
    """Kind of event a notification reports."""

    COMMENT = "comment"  # New top-level comment on the recipient's post
    REPLY = "reply"  # Reply to the recipient's comment


class CommentBody(RootModel[str]):
    """Comment text content.

    Surrounding whitespace is trimmed; the trimmed text must be 1-10000 characters.
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def validate_body(cls, v: str) -> str:
        """Trim and validate comment body length."""
        v = v.strip()
        if not v:
            raise ValueError("Comment body must not be empty")
        if len(v) > COMMENT_BODY_MAX_LENGTH:
            raise ValueError(
                f"Comment body must be at most {COMMENT_BODY_MAX_LENGTH} characters"
            )
        return v


class AuthenticatedUser(BaseModel):
    """Caller identity extracted from a verified bearer token."""

    model_config = ConfigDict(frozen=True)

    id: UserId
    email: str | None = None
    is_admin: bool = False

    def can_manage(self, owner_id: UserId) -> bool:
        """Whether this user may edit or delete content owned by owner_id."""
        return self.is_admin or self.id == owner_id
