"""add comment threading and edit timestamp

Revision ID: c5a7f3e92d18
Revises: 8d44e0b1c6a2
Create Date: 2025-07-09 09:03:51.667120

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "c5a7f3e92d18"
down_revision: Union[str, Sequence[str], None] = "8d44e0b1c6a2"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Existing comments become roots (parent_id NULL)
    with op.batch_alter_table("comments") as batch_op:
        batch_op.add_column(sa.Column("parent_id", sa.Uuid(), nullable=True))
        batch_op.add_column(
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True)
        )
        batch_op.create_foreign_key(
            "fk_comments_parent_id",
            "comments",
            ["parent_id"],
            ["id"],
            ondelete="CASCADE",
        )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_parent_id", table_name="comments")
    with op.batch_alter_table("comments") as batch_op:
        batch_op.drop_constraint("fk_comments_parent_id", type_="foreignkey")
        batch_op.drop_column("updated_at")
        batch_op.drop_column("parent_id")
