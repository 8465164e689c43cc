"""Reading session entity.

Exactly one per invitation, created lazily the first time the reader shows
up. Deleting the invitation deletes the session.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lyra.domain.model.common import DomainModel
from lyra.domain.value import InvitationId, ReadingSessionId


class ReadingSession(DomainModel):
    """A reader's progress and private notes for one invitation."""

    id: ReadingSessionId
    invitation_id: InvitationId
    last_chapter_id: Optional[str] = None
    chapters_read: tuple[str, ...] = ()
    completion_percentage: int = Field(default=0, ge=0, le=100)
    notes: str = ""
    created_at: datetime
    last_activity_at: datetime
