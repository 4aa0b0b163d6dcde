"""Reply depth and parent-chain integrity checks."""

import logfire

from lounge.domain.error import (
    CrossPostParentError,
    InvalidCommentTreeError,
    ParentNotFoundError,
    ReplyDepthExceededError,
)
from lounge.domain.repository import CommentRepository
from lounge.domain.value import CommentId, PostId


# Backstop only: the depth limit and the visited set end every walk first
TRAVERSAL_SLACK = 20


class ThreadIntegrityService:
    """Decides whether a proposed parent reference is legal for a new comment.

    Depth convention: a root comment has depth 1. A reply to a node at depth
    d has depth d + 1 and is accepted only while d < max_depth, so with the
    default of 10 a depth-9 node may still gain a child and a depth-10 node
    may not.

    A stored cycle shorter than max_depth is reported as
    InvalidCommentTreeError; a longer one hits the depth limit first and is
    reported as ReplyDepthExceededError.
    """

    def __init__(self, comment_repository: CommentRepository, max_depth: int) -> None:
        """Initialize thread integrity service.

        Args:
            comment_repository: Comment repository used to read parent links
            max_depth: Maximum nesting depth (root = 1)
        """
        self.comment_repository = comment_repository
        self.max_depth = max_depth

    async def assert_reply_depth(
        self, post_id: PostId, parent_id: CommentId | None
    ) -> int:
        """Walk the ancestor chain of a prospective reply.

        One store round trip is made per ancestor. The walk is bounded by
        max_depth + 20 iterations and by a visited set, so corrupted data
        containing a cycle cannot loop forever.

        Args:
            post_id: Post the new comment will belong to
            parent_id: Proposed parent (None for a top-level comment)

        Returns:
            Depth of the new comment (1 for a top-level comment)

        Raises:
            ParentNotFoundError: If any comment in the chain is missing
            CrossPostParentError: If any comment in the chain belongs to another post
            ReplyDepthExceededError: If the reply would reach past max_depth
            InvalidCommentTreeError: If the chain revisits a comment or runs away
        """
        with logfire.span(
            "thread_integrity_service.assert_reply_depth",
            post_id=str(post_id),
            parent_id=str(parent_id) if parent_id else None,
            max_depth=self.max_depth,
        ):
            current_id = parent_id
            depth = 0
            iterations = 0
            max_iterations = self.max_depth + TRAVERSAL_SLACK
            visited: set[CommentId] = set()

            while current_id is not None:
                iterations += 1
                if iterations > max_iterations:
                    logfire.error(
                        "Comment chain traversal exceeded iteration cap",
                        post_id=str(post_id),
                        parent_id=str(parent_id),
                        iterations=iterations,
                    )
                    raise InvalidCommentTreeError(
                        f"Comment chain above {parent_id} does not terminate"
                    )

                if current_id in visited:
                    logfire.error(
                        "Cycle detected in comment chain",
                        post_id=str(post_id),
                        parent_id=str(parent_id),
                        repeated_id=str(current_id),
                    )
                    raise InvalidCommentTreeError(
                        f"Comment chain above {parent_id} contains a cycle"
                    )
                visited.add(current_id)

                link = await self.comment_repository.find_link(current_id)
                if link is None:
                    logfire.warn(
                        "Comment in parent chain not found",
                        post_id=str(post_id),
                        missing_id=str(current_id),
                    )
                    raise ParentNotFoundError(str(current_id))

                if link.post_id != post_id:
                    logfire.warn(
                        "Comment in parent chain belongs to another post",
                        comment_id=str(link.id),
                        comment_post_id=str(link.post_id),
                        target_post_id=str(post_id),
                    )
                    raise CrossPostParentError(str(link.id), str(post_id))

                depth += 1
                if depth >= self.max_depth:
                    logfire.info(
                        "Reply depth limit reached",
                        post_id=str(post_id),
                        parent_id=str(parent_id),
                        max_depth=self.max_depth,
                    )
                    raise ReplyDepthExceededError(self.max_depth)

                current_id = link.parent_id

            return depth + 1
