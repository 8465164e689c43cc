"""Reader invitation entity.

An invitation is a capability: whoever holds its access token may read the
granted chapters until the invitation expires or the author revokes it.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import field_validator

from lyra.domain.model.common import DomainModel
from lyra.domain.value import (
    AccessToken,
    ChapterSet,
    InvitationId,
    InvitationStatus,
    ProjectId,
    UserId,
)
from lyra.util.clock import as_utc


def default_circle_name(created: date) -> str:
    """Circle label used when the author does not name one, e.g. "Draft Review - Oct 5, 2025"."""
    return f"Draft Review - {created:%b} {created.day}, {created.year}"


class Invitation(DomainModel):
    """Beta reader invitation.

    Business rules:
    - The access token is unique and never reused
    - chapters_accessible is a snapshot; re-invite to change scope
    - pending -> accepted happens once, on first successful access
    - expired and revoked are terminal
    - reader_name is for the author's reference only
    """

    id: InvitationId
    project_id: ProjectId
    author_id: UserId
    access_token: AccessToken
    chapters_accessible: ChapterSet
    invitation_message: Optional[str] = None
    reader_name: str
    reader_email: str
    status: InvitationStatus = InvitationStatus.PENDING
    created_at: datetime
    expires_at: datetime
    accepted_at: Optional[datetime] = None
    last_activity_at: Optional[datetime] = None
    circle_name: str
    archived: bool = False

    @field_validator("created_at", "expires_at", "accepted_at", "last_activity_at")
    @classmethod
    def normalize_timestamps(cls, v: datetime | None) -> datetime | None:
        return as_utc(v) if v is not None else None

    def is_past_expiry(self, now: datetime) -> bool:
        """Whether the author-chosen expiration time has passed."""
        return now > self.expires_at

    def is_active(self, now: datetime) -> bool:
        """Counts against the project's reader quota."""
        return (
            self.status in (InvitationStatus.PENDING, InvitationStatus.ACCEPTED)
            and not self.is_past_expiry(now)
        )

    def grants_access(self, now: datetime) -> bool:
        """Whether the token may still be used to read or annotate."""
        return not self.status.is_terminal and not self.is_past_expiry(now)
