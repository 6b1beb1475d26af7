"""initial_schema

Create the schema for Threadline:
- Users (profiles keyed on the external auth ID)
- Threads (top-level threads and replies, linked by parent_id/children)

Revision ID: 3c1f9a7d2e40
Revises:
Create Date: 2026-10-19 18:50:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7d2e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    op.create_table(
        "users",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("external_id", sa.String(length=255), nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), server_default="", nullable=False),
        sa.Column("bio", sa.Text(), server_default="", nullable=False),
        sa.Column("image", sa.Text(), server_default="", nullable=False),
        sa.Column(
            "onboarded", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.Column(
            "thread_ids",
            postgresql.ARRAY(postgresql.UUID()),
            server_default="{}",
            nullable=False,
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("external_id"),
        sa.UniqueConstraint("username"),
    )
    op.create_index("idx_users_created_at", "users", ["created_at"])

    op.create_table(
        "threads",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("author_id", postgresql.UUID(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("parent_id", postgresql.UUID(), nullable=True),
        sa.Column(
            "children",
            postgresql.ARRAY(postgresql.UUID()),
            server_default="{}",
            nullable=False,
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["threads.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_threads_author_id", "threads", ["author_id"])
    op.create_index("idx_threads_parent_id", "threads", ["parent_id"])
    op.create_index(
        "idx_threads_created_at", "threads", [sa.text("created_at DESC")]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_threads_created_at", table_name="threads")
    op.drop_index("idx_threads_parent_id", table_name="threads")
    op.drop_index("idx_threads_author_id", table_name="threads")
    op.drop_table("threads")

    op.drop_index("idx_users_created_at", table_name="users")
    op.drop_table("users")
