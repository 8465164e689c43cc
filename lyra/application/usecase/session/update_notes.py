"""Update reader notes use case."""

from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase
from lyra.domain.service import InvitationService, ReadingSessionService


class UpdateNotesRequest(BaseModel):
    """Update notes request."""

    access_token: str
    notes: str


class NotesResponse(BaseModel):
    """The reader's stored notes."""

    notes: str


class UpdateNotesUseCase(BaseUseCase):
    """Use case for saving a reader's private notes."""

    def __init__(
        self,
        invitation_service: InvitationService,
        session_service: ReadingSessionService,
    ) -> None:
        self.invitation_service = invitation_service
        self.session_service = session_service

    async def execute(self, request: UpdateNotesRequest) -> NotesResponse:
        """Execute update notes flow.

        Raises:
            NotFoundError: If the token is unknown
        """
        invitation = await self.invitation_service.get_by_token(request.access_token)

        session = await self.session_service.update_notes(invitation.id, request.notes)
        await self.invitation_service.touch_activity(invitation.id)

        return NotesResponse(notes=session.notes)
