"""Post entity.

Posts own comments. Only the fields comments depend on are modelled here:
the author (for notifications and authorization) and identity.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lounge.domain.model.common import DomainModel
from lounge.domain.value import PostId, UserId


class Post(DomainModel):
    """Post entity."""

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    body: str = ""
    lounge: str = "general"
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None
