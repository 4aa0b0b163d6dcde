"""Thread assembly service."""

from collections import defaultdict

import logfire

from lounge.domain.model.comment import Comment
from lounge.domain.model.thread import ThreadNode
from lounge.domain.value import CommentId


class ThreadService:
    """Rebuilds reply forests from flat, chronologically ordered comment lists."""

    def __init__(self, max_depth: int) -> None:
        """Initialize thread service.

        Args:
            max_depth: Depth (root = 1) at which nodes stop offering replies
        """
        self.max_depth = max_depth

    def assemble(self, comments: list[Comment]) -> list[ThreadNode]:
        """Build the reply forest for a post.

        Input order is kept within each sibling group, so an oldest-first
        list yields oldest-first siblings. A comment whose parent is absent
        from the list (e.g. cut off by the fetch limit) is not reachable
        from any root and is left out.

        Args:
            comments: Comments of a single post, oldest first

        Returns:
            Root nodes in input order, each with its replies nested
        """
        roots: list[Comment] = []
        children: dict[CommentId, list[Comment]] = defaultdict(list)
        for comment in comments:
            if comment.parent_id is None:
                roots.append(comment)
            else:
                children[comment.parent_id].append(comment)

        forest = [self._build_node(root, 1, children) for root in roots]

        placed = sum(self._count(node) for node in forest)
        if placed < len(comments):
            logfire.warn(
                "Orphaned comments left out of thread",
                total=len(comments),
                placed=placed,
                orphaned=len(comments) - placed,
            )

        return forest

    def _build_node(
        self,
        comment: Comment,
        depth: int,
        children: dict[CommentId, list[Comment]],
    ) -> ThreadNode:
        return ThreadNode(
            comment=comment,
            depth=depth,
            can_reply=depth < self.max_depth,
            replies=[
                self._build_node(child, depth + 1, children)
                for child in children.get(comment.id, [])
            ],
        )

    def _count(self, node: ThreadNode) -> int:
        return 1 + sum(self._count(reply) for reply in node.replies)
