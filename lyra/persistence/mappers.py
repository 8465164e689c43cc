"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from lyra.domain.model import (
    Author,
    Invitation,
    Manuscript,
    Marker,
    Project,
    ReaderContact,
    ReadingSession,
)
from lyra.domain.value import (
    AccessToken,
    ChapterSet,
    InvitationId,
    InvitationStatus,
    MarkerId,
    MarkerType,
    ProjectId,
    ReaderContactId,
    ReadingSessionId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model.

    Args:
        row: Database row as dict

    Returns:
        Invitation domain model
    """
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        project_id=ProjectId(_uuid(row["project_id"])),
        author_id=UserId(_uuid(row["user_id"])),
        access_token=AccessToken(row["access_token"]),
        chapters_accessible=ChapterSet(row["chapters_accessible"]),
        invitation_message=row.get("invitation_message"),
        reader_name=row["reader_name"],
        reader_email=row["reader_email"],
        status=InvitationStatus(row["status"]),
        created_at=row["created_at"],
        expires_at=row["expires_at"],
        accepted_at=row.get("accepted_at"),
        last_activity_at=row.get("last_activity_at"),
        circle_name=row["circle_name"],
        archived=row["archived"],
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict.

    Args:
        invitation: Invitation domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": invitation.id,
        "project_id": invitation.project_id,
        "user_id": invitation.author_id,
        "access_token": invitation.access_token.root,
        "chapters_accessible": invitation.chapters_accessible.as_list(),
        "chapter_set_key": invitation.chapters_accessible.key,
        "invitation_message": invitation.invitation_message,
        "reader_name": invitation.reader_name,
        "reader_email": invitation.reader_email,
        "status": invitation.status.value,
        "created_at": invitation.created_at,
        "expires_at": invitation.expires_at,
        "accepted_at": invitation.accepted_at,
        "last_activity_at": invitation.last_activity_at,
        "circle_name": invitation.circle_name,
        "archived": invitation.archived,
    }


def row_to_reading_session(row: Dict[str, Any]) -> ReadingSession:
    """Convert database row to ReadingSession domain model."""
    return ReadingSession(
        id=ReadingSessionId(_uuid(row["id"])),
        invitation_id=InvitationId(_uuid(row["invitation_id"])),
        last_chapter_id=row.get("last_chapter_id"),
        chapters_read=tuple(row.get("chapters_read") or ()),
        completion_percentage=row["completion_percentage"],
        notes=row.get("notes") or "",
        created_at=row["created_at"],
        last_activity_at=row["last_activity_at"],
    )


def reading_session_to_dict(session: ReadingSession) -> Dict[str, Any]:
    """Convert ReadingSession domain model to database dict."""
    return {
        "id": session.id,
        "invitation_id": session.invitation_id,
        "last_chapter_id": session.last_chapter_id,
        "chapters_read": list(session.chapters_read),
        "completion_percentage": session.completion_percentage,
        "notes": session.notes,
        "created_at": session.created_at,
        "last_activity_at": session.last_activity_at,
    }


def row_to_marker(row: Dict[str, Any]) -> Marker:
    """Convert database row to Marker domain model."""
    return Marker(
        id=MarkerId(_uuid(row["id"])),
        invitation_id=InvitationId(_uuid(row["invitation_id"])),
        project_id=ProjectId(_uuid(row["project_id"])),
        chapter_id=row["chapter_id"],
        scene_id=row["scene_id"],
        marker_id=row["marker_id"],
        marker_type=MarkerType(row["marker_type"]),
        marker_text=row.get("marker_text"),
        highlighted_text=row.get("highlighted_text"),
        position_data=row.get("position_data"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        imported_to_project=row["imported_to_project"],
        imported_at=row.get("imported_at"),
    )


def marker_to_dict(marker: Marker) -> Dict[str, Any]:
    """Convert Marker domain model to database dict."""
    data = marker.model_dump()
    data["marker_type"] = marker.marker_type.value
    return data


def row_to_reader_contact(row: Dict[str, Any]) -> ReaderContact:
    """Convert database row to ReaderContact domain model."""
    return ReaderContact(
        id=ReaderContactId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["user_id"])),
        reader_name=row["reader_name"],
        reader_email=row["reader_email"],
        first_feedback_at=row["first_feedback_date"],
        last_feedback_at=row["last_feedback_date"],
        total_annotations=row["total_annotations"],
        projects_reviewed=tuple(row.get("projects_reviewed") or ()),
    )


def row_to_project(row: Dict[str, Any]) -> Project:
    """Convert projects row to Project domain model."""
    return Project(
        id=ProjectId(_uuid(row["project_id"])),
        owner_id=UserId(_uuid(row["user_id"])),
        title=row["title"],
        manuscript=Manuscript.from_document(row.get("project_data")),
    )


def row_to_author(row: Dict[str, Any]) -> Author:
    """Convert users row to Author domain model."""
    return Author(
        id=UserId(_uuid(row["user_id"])),
        username=row.get("username") or "",
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
    )
