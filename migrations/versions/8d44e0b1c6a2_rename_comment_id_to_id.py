"""rename comments.comment_id to id

Revision ID: 8d44e0b1c6a2
Revises: 3f1c2a9d7b10
Create Date: 2025-05-18 16:40:09.102771

"""

from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = "8d44e0b1c6a2"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d7b10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Every other table uses "id" for its primary key
    with op.batch_alter_table("comments") as batch_op:
        batch_op.alter_column("comment_id", new_column_name="id")


def downgrade() -> None:
    """Downgrade schema."""
    with op.batch_alter_table("comments") as batch_op:
        batch_op.alter_column("id", new_column_name="comment_id")
