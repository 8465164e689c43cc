"""reader_feedback_schema

Create the beta reader feedback schema:
- Reader invitations (capability tokens, chapter scope, reader circles)
- Reader sessions (one per invitation: progress and private notes)
- Reader markers (scene annotations importable into the manuscript)
- Reader contacts (per-author acknowledgements rollup)

users and projects belong to the wider platform. They are created here only
when missing, so a standalone database can run the service.

Revision ID: 3c4f1d2a9b7e
Revises:
Create Date: 2025-10-05 14:12:09.431201

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c4f1d2a9b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # PLATFORM tables (no-op when the platform schema is present)
    # ========================================================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS users (
            user_id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            username VARCHAR(255),
            first_name VARCHAR(255),
            last_name VARCHAR(255)
        )
    """)

    op.execute("""
        CREATE TABLE IF NOT EXISTS projects (
            project_id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            user_id UUID NOT NULL REFERENCES users(user_id) ON DELETE CASCADE,
            title VARCHAR(500) NOT NULL,
            project_data JSONB NOT NULL DEFAULT '{}'::jsonb
        )
    """)

    # ========================================================================
    # READER_INVITATIONS table
    # ========================================================================
    op.create_table(
        "reader_invitations",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("project_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("access_token", sa.String(length=255), nullable=False),
        sa.Column(
            "chapters_accessible",
            postgresql.JSONB(astext_type=sa.Text()),
            nullable=False,
        ),
        sa.Column("chapter_set_key", sa.String(length=64), nullable=False),
        sa.Column("invitation_message", sa.Text(), nullable=True),
        sa.Column("reader_name", sa.String(length=255), nullable=False),
        sa.Column("reader_email", sa.String(length=255), nullable=False),
        sa.Column(
            "status",
            sa.String(length=50),
            server_default=sa.text("'pending'"),
            nullable=False,
        ),
        sa.Column("accepted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("last_activity_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("circle_name", sa.String(length=255), nullable=False),
        sa.Column(
            "archived", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.ForeignKeyConstraint(
            ["project_id"], ["projects.project_id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("access_token"),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'expired', 'revoked')",
            name="valid_status",
        ),
    )
    op.create_index(
        "idx_reader_invitations_project", "reader_invitations", ["project_id"]
    )
    op.create_index("idx_reader_invitations_user", "reader_invitations", ["user_id"])
    op.create_index("idx_reader_invitations_status", "reader_invitations", ["status"])
    op.create_index(
        "idx_reader_invitations_expires", "reader_invitations", ["expires_at"]
    )
    op.create_index(
        "idx_reader_invitations_circle",
        "reader_invitations",
        ["project_id", "user_id", "chapter_set_key"],
    )

    # ========================================================================
    # READER_SESSIONS table
    # ========================================================================
    op.create_table(
        "reader_sessions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("invitation_id", sa.UUID(), nullable=False),
        sa.Column(
            "chapters_read",
            postgresql.JSONB(astext_type=sa.Text()),
            server_default=sa.text("'[]'::jsonb"),
            nullable=False,
        ),
        sa.Column("last_chapter_id", sa.String(length=255), nullable=True),
        sa.Column(
            "completion_percentage",
            sa.Integer(),
            server_default=sa.text("0"),
            nullable=False,
        ),
        sa.Column("notes", sa.Text(), server_default=sa.text("''"), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "last_activity_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["invitation_id"], ["reader_invitations.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("invitation_id"),
        sa.CheckConstraint(
            "completion_percentage BETWEEN 0 AND 100", name="valid_completion"
        ),
    )

    # ========================================================================
    # READER_MARKERS table
    # ========================================================================
    op.create_table(
        "reader_markers",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("invitation_id", sa.UUID(), nullable=False),
        sa.Column("project_id", sa.UUID(), nullable=False),
        sa.Column("chapter_id", sa.String(length=255), nullable=False),
        sa.Column("scene_id", sa.String(length=255), nullable=False),
        sa.Column("marker_id", sa.String(length=255), nullable=False),
        sa.Column(
            "marker_type",
            sa.String(length=50),
            server_default=sa.text("'note'"),
            nullable=False,
        ),
        sa.Column("marker_text", sa.Text(), nullable=True),
        sa.Column("highlighted_text", sa.Text(), nullable=True),
        sa.Column(
            "position_data", postgresql.JSONB(astext_type=sa.Text()), nullable=True
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "imported_to_project",
            sa.Boolean(),
            server_default=sa.text("false"),
            nullable=False,
        ),
        sa.Column("imported_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["invitation_id"], ["reader_invitations.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["project_id"], ["projects.project_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "marker_type IN ('note', 'question', 'suggestion', 'highlight', 'revision')",
            name="valid_marker_type",
        ),
    )
    op.create_index(
        "idx_reader_markers_invitation", "reader_markers", ["invitation_id"]
    )
    op.create_index("idx_reader_markers_project", "reader_markers", ["project_id"])
    op.create_index("idx_reader_markers_scene", "reader_markers", ["scene_id"])

    # ========================================================================
    # READER_CONTACTS table
    # ========================================================================
    op.create_table(
        "reader_contacts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("reader_name", sa.String(length=255), nullable=False),
        sa.Column("reader_email", sa.String(length=255), nullable=False),
        sa.Column(
            "first_feedback_date",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "last_feedback_date",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "total_annotations",
            sa.Integer(),
            server_default=sa.text("0"),
            nullable=False,
        ),
        sa.Column(
            "projects_reviewed",
            postgresql.ARRAY(sa.Text()),
            server_default=sa.text("'{}'"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "reader_email", name="uq_reader_contact"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Platform tables are left in place
    op.drop_table("reader_contacts")
    op.drop_table("reader_markers")
    op.drop_table("reader_sessions")
    op.drop_table("reader_invitations")
