"""Reading session repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from lyra.domain.model.reading_session import ReadingSession
from lyra.domain.value import InvitationId


class ReadingSessionRepository(ABC):
    """Repository for ReadingSession entity."""

    @abstractmethod
    async def find_by_invitation(
        self, invitation_id: InvitationId
    ) -> ReadingSession | None:
        """Find the session belonging to an invitation.

        Args:
            invitation_id: The invitation's ID

        Returns:
            The session if one was started, None otherwise
        """
        pass

    @abstractmethod
    async def get_or_create(
        self, invitation_id: InvitationId, now: datetime
    ) -> ReadingSession:
        """Return the invitation's session, creating it if needed.

        Must never produce a second session for the same invitation, even
        when two first visits race.

        Args:
            invitation_id: The invitation's ID
            now: Creation time if a new session is started

        Returns:
            The existing or newly created session
        """
        pass

    @abstractmethod
    async def save(self, session: ReadingSession) -> ReadingSession:
        """Update an existing session.

        Args:
            session: The session to save

        Returns:
            The saved session
        """
        pass
