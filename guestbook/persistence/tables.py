"""SQLAlchemy table definitions for the guestbook.

They match the schema defined in Alembic migrations.
The `guestbook` column holds the parent key name and every query filters on
it, so each guestbook behaves as one consistency group.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    Identity,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# GREETINGS TABLE
# ============================================================================
greetings_table = Table(
    "greetings",
    metadata,
    Column("id", BigInteger, Identity(always=False), primary_key=True),
    Column("guestbook", String(500), nullable=False),  # Parent key name
    Column("author", String(500), nullable=False, server_default=""),  # "" = anonymous
    Column("content", Text, nullable=False),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
)

Index(
    "idx_greetings_guestbook_created_at",
    greetings_table.c.guestbook,
    greetings_table.c.created_at.desc(),
    greetings_table.c.id.desc(),
)

# ============================================================================
# VOTES TABLE
# ============================================================================
# No unique constraint on (topic_id, author): duplicates are prevented by a
# check before insert.
votes_table = Table(
    "votes",
    metadata,
    Column("id", BigInteger, Identity(always=False), primary_key=True),
    Column("guestbook", String(500), nullable=False),  # Parent key name
    Column("topic_id", BigInteger, nullable=False),  # Greeting id within guestbook
    Column("author", String(500), nullable=False),
)

Index(
    "idx_votes_topic_author",
    votes_table.c.guestbook,
    votes_table.c.topic_id,
    votes_table.c.author,
)
