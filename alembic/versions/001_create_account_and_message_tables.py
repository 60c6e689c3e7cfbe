"""Create account and message tables

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `account` and `message` tables.
How:   Integer auto-increment primary keys; UNIQUE username; no foreign key
       from message.posted_by to account.account_id.

Rollback: downgrade() drops both tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create both tables and the posted_by index. See social_api/models/."""
    op.create_table(
        "account",
        sa.Column("account_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("account_id"),
        sa.UniqueConstraint("username"),
    )

    op.create_table(
        "message",
        sa.Column("message_id", sa.Integer(), autoincrement=True, nullable=False),
        # Author account_id; intentionally not a foreign key
        sa.Column("posted_by", sa.Integer(), nullable=False),
        sa.Column("message_text", sa.String(255), nullable=False),
        sa.Column("time_posted_epoch", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("message_id"),
    )

    op.create_index("idx_message_posted_by", "message", ["posted_by"])


def downgrade() -> None:
    op.drop_index("idx_message_posted_by", table_name="message")
    op.drop_table("message")
    op.drop_table("account")
