"""SQLAlchemy table definitions for Lyra reader feedback.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PLATFORM TABLES (owned by the account/project service, read-only here)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("user_id", UUID, primary_key=True),
    Column("username", String(255), nullable=True),
    Column("first_name", String(255), nullable=True),
    Column("last_name", String(255), nullable=True),
)

projects_table = Table(
    "projects",
    metadata,
    Column("project_id", UUID, primary_key=True),
    Column(
        "user_id", UUID, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(500), nullable=False),
    Column("project_data", JSONB, nullable=False, server_default="{}"),
)

# ============================================================================
# READER INVITATIONS TABLE
# ============================================================================
reader_invitations_table = Table(
    "reader_invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "project_id",
        UUID,
        ForeignKey("projects.project_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id", UUID, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False
    ),  # Author who sent the invitation
    Column("access_token", String(255), nullable=False, unique=True),
    Column("chapters_accessible", JSONB, nullable=False),  # Ordered chapter ids
    Column("chapter_set_key", String(64), nullable=False),  # sha256 of sorted ids
    Column("invitation_message", Text, nullable=True),
    Column("reader_name", String(255), nullable=False),
    Column("reader_email", String(255), nullable=False),
    Column("status", String(50), nullable=False, server_default="pending"),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("last_activity_at", TIMESTAMP(timezone=True), nullable=True),
    Column("circle_name", String(255), nullable=False),
    Column("archived", Boolean, nullable=False, server_default="false"),
    CheckConstraint(
        "status IN ('pending', 'accepted', 'expired', 'revoked')",
        name="valid_status",
    ),
)

Index("idx_reader_invitations_project", reader_invitations_table.c.project_id)
Index("idx_reader_invitations_user", reader_invitations_table.c.user_id)
Index("idx_reader_invitations_status", reader_invitations_table.c.status)
Index("idx_reader_invitations_expires", reader_invitations_table.c.expires_at)
Index(
    "idx_reader_invitations_circle",
    reader_invitations_table.c.project_id,
    reader_invitations_table.c.user_id,
    reader_invitations_table.c.chapter_set_key,
)

# ============================================================================
# READER SESSIONS TABLE (one per invitation)
# ============================================================================
reader_sessions_table = Table(
    "reader_sessions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "invitation_id",
        UUID,
        ForeignKey("reader_invitations.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("chapters_read", JSONB, nullable=False, server_default="[]"),
    Column("last_chapter_id", String(255), nullable=True),
    Column("completion_percentage", Integer, nullable=False, server_default="0"),
    Column("notes", Text, nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "last_activity_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    CheckConstraint(
        "completion_percentage BETWEEN 0 AND 100", name="valid_completion"
    ),
)

# ============================================================================
# READER MARKERS TABLE
# ============================================================================
reader_markers_table = Table(
    "reader_markers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "invitation_id",
        UUID,
        ForeignKey("reader_invitations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "project_id",
        UUID,
        ForeignKey("projects.project_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("chapter_id", String(255), nullable=False),
    Column("scene_id", String(255), nullable=False),
    Column("marker_id", String(255), nullable=False),  # Reader-device marker id
    Column("marker_type", String(50), nullable=False, server_default="note"),
    Column("marker_text", Text, nullable=True),
    Column("highlighted_text", Text, nullable=True),
    Column("position_data", JSONB, nullable=True),  # Editor range data
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("imported_to_project", Boolean, nullable=False, server_default="false"),
    Column("imported_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint(
        "marker_type IN ('note', 'question', 'suggestion', 'highlight', 'revision')",
        name="valid_marker_type",
    ),
)

Index("idx_reader_markers_invitation", reader_markers_table.c.invitation_id)
Index("idx_reader_markers_project", reader_markers_table.c.project_id)
Index("idx_reader_markers_scene", reader_markers_table.c.scene_id)

# ============================================================================
# READER CONTACTS TABLE (denormalized acknowledgements rollup)
# ============================================================================
reader_contacts_table = Table(
    "reader_contacts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "user_id", UUID, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False
    ),
    Column("reader_name", String(255), nullable=False),
    Column("reader_email", String(255), nullable=False),
    Column(
        "first_feedback_date",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column(
        "last_feedback_date",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column("total_annotations", Integer, nullable=False, server_default="0"),
    Column("projects_reviewed", ARRAY(Text), nullable=False, server_default="{}"),
    UniqueConstraint("user_id", "reader_email", name="uq_reader_contact"),
)
