"""Get reading session use case."""

from datetime import datetime

from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase
from lyra.domain.model.reading_session import ReadingSession
from lyra.domain.service import InvitationService, ReadingSessionService


class SessionItem(BaseModel):
    """A reader's progress and notes."""

    id: str
    invitation_id: str
    last_chapter_id: str | None
    chapters_read: list[str]
    completion_percentage: int
    notes: str
    created_at: datetime
    last_activity_at: datetime

    @classmethod
    def from_session(cls, session: ReadingSession) -> "SessionItem":
        return cls(
            id=str(session.id),
            invitation_id=str(session.invitation_id),
            last_chapter_id=session.last_chapter_id,
            chapters_read=list(session.chapters_read),
            completion_percentage=session.completion_percentage,
            notes=session.notes,
            created_at=session.created_at,
            last_activity_at=session.last_activity_at,
        )


class GetSessionRequest(BaseModel):
    """Get session request."""

    access_token: str


class GetSessionUseCase(BaseUseCase):
    """Use case for restoring a reader's place in the manuscript."""

    def __init__(
        self,
        invitation_service: InvitationService,
        session_service: ReadingSessionService,
    ) -> None:
        self.invitation_service = invitation_service
        self.session_service = session_service

    async def execute(self, request: GetSessionRequest) -> SessionItem:
        """Execute get session flow.

        Raises:
            NotFoundError: If the token is unknown or no session was started
        """
        invitation = await self.invitation_service.get_by_token(request.access_token)
        session = await self.session_service.get(invitation.id)
        return SessionItem.from_session(session)
