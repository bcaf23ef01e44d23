"""initial_schema

Create the guestbook schema:
- Greetings (grouped by guestbook parent key, newest-first index)
- Votes (one per identity per greeting by convention; no unique constraint)

Revision ID: 3f2c9a1d7b40
Revises:
Create Date: 2026-10-18 10:12:04.512731

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9a1d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "greetings",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False), primary_key=True),
        sa.Column("guestbook", sa.String(500), nullable=False),
        sa.Column("author", sa.String(500), nullable=False, server_default=""),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", postgresql.TIMESTAMP(timezone=True), nullable=False),
    )
    op.create_index(
        "idx_greetings_guestbook_created_at",
        "greetings",
        ["guestbook", sa.text("created_at DESC"), sa.text("id DESC")],
    )

    op.create_table(
        "votes",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False), primary_key=True),
        sa.Column("guestbook", sa.String(500), nullable=False),
        sa.Column("topic_id", sa.BigInteger(), nullable=False),
        sa.Column("author", sa.String(500), nullable=False),
    )
    op.create_index(
        "idx_votes_topic_author",
        "votes",
        ["guestbook", "topic_id", "author"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_votes_topic_author", table_name="votes")
    op.drop_table("votes")
    op.drop_index("idx_greetings_guestbook_created_at", table_name="greetings")
    op.drop_table("greetings")
