"""SQLAlchemy table definitions for Threadline.

These match the schema defined in Alembic migrations.

References are stored the way the app reads them: ``users.thread_ids`` and
``threads.children`` are ordered UUID arrays.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("external_id", String(255), nullable=False, unique=True),  # Auth provider ID
    Column("username", String(255), nullable=False, unique=True),  # Always lowercase
    Column("name", String(255), nullable=False, server_default=""),
    Column("bio", Text, nullable=False, server_default=""),
    Column("image", Text, nullable=False, server_default=""),
    Column("onboarded", Boolean, nullable=False, server_default="false"),
    Column("thread_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_created_at", users_table.c.created_at)

# ============================================================================
# THREADS TABLE (top-level threads and replies)
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("text", Text, nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("threads.id", ondelete="CASCADE"), nullable=True
    ),
    Column("children", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_threads_author_id", threads_table.c.author_id)
Index("idx_threads_parent_id", threads_table.c.parent_id)
Index("idx_threads_created_at", threads_table.c.created_at.desc())
