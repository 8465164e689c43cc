"""In-memory reading session repository for testing."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from lyra.domain.model.reading_session import ReadingSession
from lyra.domain.repository.reading_session import ReadingSessionRepository
from lyra.domain.value import InvitationId, ReadingSessionId


class InMemoryReadingSessionRepository(ReadingSessionRepository):
    """In-memory implementation of ReadingSessionRepository for testing."""

    def __init__(self) -> None:
        self._sessions: dict[InvitationId, ReadingSession] = {}

    async def find_by_invitation(
        self, invitation_id: InvitationId
    ) -> Optional[ReadingSession]:
        return self._sessions.get(invitation_id)

    async def get_or_create(
        self, invitation_id: InvitationId, now: datetime
    ) -> ReadingSession:
        if invitation_id not in self._sessions:
            self._sessions[invitation_id] = ReadingSession(
                id=ReadingSessionId(uuid4()),
                invitation_id=invitation_id,
                created_at=now,
                last_activity_at=now,
            )
        return self._sessions[invitation_id]

    async def save(self, session: ReadingSession) -> ReadingSession:
        self._sessions[session.invitation_id] = session
        return session
