"""Update reading progress use case."""

from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase
from lyra.application.usecase.session.get_session import SessionItem
from lyra.domain.service import InvitationService, ReadingSessionService


class UpdateProgressRequest(BaseModel):
    """Update progress request."""

    access_token: str
    chapter_id: str
    completion_percentage: int


class UpdateProgressResponse(BaseModel):
    """Update progress response."""

    message: str
    session: SessionItem


class UpdateProgressUseCase(BaseUseCase):
    """Use case for recording how far a reader has got."""

    def __init__(
        self,
        invitation_service: InvitationService,
        session_service: ReadingSessionService,
    ) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
            session_service: Reading session domain service
        """
        self.invitation_service = invitation_service
        self.session_service = session_service

    async def execute(self, request: UpdateProgressRequest) -> UpdateProgressResponse:
        """Execute update progress flow.

        Only the token is checked, so a reader whose invitation lapsed can
        still save where they stopped. The session is created if the reader
        never opened the manuscript through the access link.

        Args:
            request: Update progress request

        Returns:
            The updated session

        Raises:
            NotFoundError: If the token is unknown
            ValidationError: If the percentage is outside 0-100
        """
        invitation = await self.invitation_service.get_by_token(request.access_token)

        session = await self.session_service.record_progress(
            invitation.id, request.chapter_id, request.completion_percentage
        )
        await self.invitation_service.touch_activity(invitation.id)

        return UpdateProgressResponse(
            message="Progress updated", session=SessionItem.from_session(session)
        )
