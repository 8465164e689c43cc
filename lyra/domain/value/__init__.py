"""Domain value objects for Lyra reader feedback."""

from lyra.domain.value.identifiers import (
    InvitationId,
    MarkerId,
    ProjectId,
    ReaderContactId,
    ReadingSessionId,
    UserId,
)
from lyra.domain.value.types import (
    AccessToken,
    ChapterSet,
    InvitationStatus,
    MarkerType,
    token_hint,
)

__all__ = [
    # Identifiers
    "UserId",
    "ProjectId",
    "InvitationId",
    "ReadingSessionId",
    "MarkerId",
    "ReaderContactId",
    # Types
    "AccessToken",
    "ChapterSet",
    "InvitationStatus",
    "MarkerType",
    "token_hint",
]
