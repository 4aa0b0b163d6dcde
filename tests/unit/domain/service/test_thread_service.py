"""Unit tests for ThreadService."""

from uuid import uuid4

from lounge.domain.service import ThreadService
from lounge.domain.value import CommentId
from tests.conftest import make_comment


def flatten(nodes):
    """Depth-first (id, depth) pairs of a forest."""
    result = []
    for node in nodes:
        result.append((node.comment.id, node.depth))
        result.extend(flatten(node.replies))
    return result


class TestAssemble:
    """Tests for assemble method."""

    def test_empty_list_gives_empty_forest(self):
        """No comments, no roots."""
        assert ThreadService(max_depth=10).assemble([]) == []

    def test_roots_and_replies_are_nested(self, post_id):
        """Replies appear under their parent with increasing depth."""
        # Arrange
        root = make_comment(post_id, minutes=0)
        reply = make_comment(post_id, parent_id=root.id, minutes=1)
        nested = make_comment(post_id, parent_id=reply.id, minutes=2)
        other_root = make_comment(post_id, minutes=3)

        # Act
        forest = ThreadService(max_depth=10).assemble([root, reply, nested, other_root])

        # Assert
        assert [n.comment.id for n in forest] == [root.id, other_root.id]
        assert forest[0].replies[0].comment.id == reply.id
        assert forest[0].replies[0].depth == 2
        assert forest[0].replies[0].replies[0].comment.id == nested.id
        assert forest[0].replies[0].replies[0].depth == 3
        assert forest[1].replies == []

    def test_siblings_keep_input_order(self, post_id):
        """Siblings come out oldest first when the input is oldest first."""
        # Arrange
        root = make_comment(post_id, minutes=0)
        first = make_comment(post_id, parent_id=root.id, minutes=1)
        second = make_comment(post_id, parent_id=root.id, minutes=2)
        third = make_comment(post_id, parent_id=root.id, minutes=3)

        # Act
        forest = ThreadService(max_depth=10).assemble([root, first, second, third])

        # Assert
        assert [n.comment.id for n in forest[0].replies] == [
            first.id,
            second.id,
            third.id,
        ]

    def test_every_comment_appears_once(self, post_id):
        """Each comment of a well-formed list is placed exactly once."""
        # Arrange
        root_a = make_comment(post_id, minutes=0)
        root_b = make_comment(post_id, minutes=1)
        comments = [root_a, root_b]
        for i in range(2, 8):
            parent = comments[i % len(comments)]
            comments.append(make_comment(post_id, parent_id=parent.id, minutes=i))

        # Act
        placed = flatten(ThreadService(max_depth=10).assemble(comments))

        # Assert
        assert sorted(cid for cid, _ in placed) == sorted(c.id for c in comments)

    def test_can_reply_stops_at_max_depth(self, post_id):
        """Nodes below the limit may be replied to; nodes at it may not."""
        # Arrange
        comments = []
        parent_id = None
        for i in range(10):
            comment = make_comment(post_id, parent_id=parent_id, minutes=i)
            comments.append(comment)
            parent_id = comment.id

        # Act
        forest = ThreadService(max_depth=10).assemble(comments)

        # Assert
        node = forest[0]
        while node.replies:
            assert node.can_reply is True
            node = node.replies[0]
        assert node.depth == 10
        assert node.can_reply is False

    def test_orphans_are_left_out(self, post_id):
        """Comments whose parent isn't in the list are not placed."""
        # Arrange
        root = make_comment(post_id, minutes=0)
        orphan = make_comment(post_id, parent_id=CommentId(uuid4()), minutes=1)
        orphan_reply = make_comment(post_id, parent_id=orphan.id, minutes=2)

        # Act
        forest = ThreadService(max_depth=10).assemble([root, orphan, orphan_reply])

        # Assert
        assert flatten(forest) == [(root.id, 1)]

    def test_stored_cycle_is_not_reachable(self, post_id):
        """Comments in a cycle have no root and do not recurse forever."""
        # Arrange
        a_id, b_id = CommentId(uuid4()), CommentId(uuid4())
        a = make_comment(post_id, parent_id=b_id, comment_id=a_id)
        b = make_comment(post_id, parent_id=a_id, comment_id=b_id, minutes=1)
        root = make_comment(post_id, minutes=2)

        # Act
        forest = ThreadService(max_depth=10).assemble([a, b, root])

        # Assert
        assert flatten(forest) == [(root.id, 1)]
