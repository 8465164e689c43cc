"""Get reader notes use case."""

from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase
from lyra.application.usecase.session.update_notes import NotesResponse
from lyra.domain.service import InvitationService, ReadingSessionService


class GetNotesRequest(BaseModel):
    """Get notes request."""

    access_token: str


class GetNotesUseCase(BaseUseCase):
    """Use case for loading a reader's private notes."""

    def __init__(
        self,
        invitation_service: InvitationService,
        session_service: ReadingSessionService,
    ) -> None:
        self.invitation_service = invitation_service
        self.session_service = session_service

    async def execute(self, request: GetNotesRequest) -> NotesResponse:
        invitation = await self.invitation_service.get_by_token(request.access_token)
        session = await self.session_service.get(invitation.id)
        return NotesResponse(notes=session.notes)
