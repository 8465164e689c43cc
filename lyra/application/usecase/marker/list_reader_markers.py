"""List reader's own markers use case."""

from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase
from lyra.application.usecase.marker.common import MarkerItem, MarkerListResponse
from lyra.domain.service import InvitationService, MarkerService


class ListReaderMarkersRequest(BaseModel):
    """List reader markers request."""

    access_token: str


class ListReaderMarkersUseCase(BaseUseCase):
    """Use case for a reader reloading their annotations."""

    def __init__(
        self, invitation_service: InvitationService, marker_service: MarkerService
    ) -> None:
        self.invitation_service = invitation_service
        self.marker_service = marker_service

    async def execute(self, request: ListReaderMarkersRequest) -> MarkerListResponse:
        invitation = await self.invitation_service.get_by_token(request.access_token)
        markers = await self.marker_service.list_for_invitation(invitation.id)
        return MarkerListResponse(
            markers=[MarkerItem.from_marker(marker) for marker in markers]
        )
