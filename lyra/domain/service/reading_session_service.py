"""Reading session domain service."""

import logfire

from lyra.domain.error import NotFoundError, ValidationError
from lyra.domain.model.reading_session import ReadingSession
from lyra.domain.repository import ReadingSessionRepository
from lyra.domain.value import InvitationId
from lyra.util.clock import Clock

from .base import Service


class ReadingSessionService(Service):
    """Tracks where a reader is and what they wrote down for themselves."""

    def __init__(
        self, session_repository: ReadingSessionRepository, clock: Clock
    ) -> None:
        """Initialize reading session service.

        Args:
            session_repository: Reading session repository
            clock: Time source for activity timestamps
        """
        self.session_repository = session_repository
        self.clock = clock

    async def start(self, invitation_id: InvitationId) -> ReadingSession:
        """Return the invitation's session, creating it on first visit."""
        with logfire.span(
            "reading_session_service.start", invitation_id=str(invitation_id)
        ):
            return await self.session_repository.get_or_create(
                invitation_id, self.clock.now()
            )

    async def record_progress(
        self,
        invitation_id: InvitationId,
        chapter_id: str,
        completion_percentage: int,
    ) -> ReadingSession:
        """Record the chapter a reader is on and how far through they are.

        Args:
            invitation_id: Invitation the reader is using
            chapter_id: Chapter currently being read
            completion_percentage: Overall progress, 0 to 100

        Returns:
            The updated session

        Raises:
            ValidationError: If the percentage is outside 0-100
        """
        if not 0 <= completion_percentage <= 100:
            raise ValidationError("Completion percentage must be between 0 and 100")

        with logfire.span(
            "reading_session_service.record_progress",
            invitation_id=str(invitation_id),
            chapter_id=chapter_id,
            completion_percentage=completion_percentage,
        ):
            session = await self.start(invitation_id)

            chapters_read = session.chapters_read
            if chapter_id not in chapters_read:
                chapters_read = (*chapters_read, chapter_id)

            return await self.session_repository.save(
                session.model_copy(
                    update={
                        "last_chapter_id": chapter_id,
                        "chapters_read": chapters_read,
                        "completion_percentage": completion_percentage,
                        "last_activity_at": self.clock.now(),
                    }
                )
            )

    async def update_notes(
        self, invitation_id: InvitationId, notes: str
    ) -> ReadingSession:
        """Replace the reader's private notes."""
        with logfire.span(
            "reading_session_service.update_notes",
            invitation_id=str(invitation_id),
            length=len(notes),
        ):
            session = await self.start(invitation_id)
            return await self.session_repository.save(
                session.model_copy(
                    update={"notes": notes, "last_activity_at": self.clock.now()}
                )
            )

    async def get(self, invitation_id: InvitationId) -> ReadingSession:
        """Get the invitation's session without creating one.

        Raises:
            NotFoundError: If the reader never started a session
        """
        session = await self.session_repository.find_by_invitation(invitation_id)
        if not session:
            raise NotFoundError("Reading session", str(invitation_id))
        return session
