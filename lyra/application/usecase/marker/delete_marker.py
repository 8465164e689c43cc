"""Delete marker use case."""

from uuid import UUID

from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase
from lyra.domain.service import InvitationService, MarkerService
from lyra.domain.value import MarkerId


class DeleteMarkerRequest(BaseModel):
    """Delete marker request."""

    marker_pk: str
    access_token: str


class DeleteMarkerResponse(BaseModel):
    """Delete marker response."""

    message: str


class DeleteMarkerUseCase(BaseUseCase):
    """Use case for a reader removing one of their annotations."""

    def __init__(
        self, invitation_service: InvitationService, marker_service: MarkerService
    ) -> None:
        self.invitation_service = invitation_service
        self.marker_service = marker_service

    async def execute(self, request: DeleteMarkerRequest) -> DeleteMarkerResponse:
        invitation = await self.invitation_service.get_by_token(request.access_token)
        await self.marker_service.delete(MarkerId(UUID(request.marker_pk)), invitation.id)
        await self.invitation_service.touch_activity(invitation.id)
        return DeleteMarkerResponse(message="Marker deleted successfully")
