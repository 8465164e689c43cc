"""List an invitation's markers use case (author side)."""

from uuid import UUID

from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase
from lyra.application.usecase.marker.common import MarkerItem, MarkerListResponse
from lyra.domain.service import InvitationService, MarkerService
from lyra.domain.value import InvitationId, UserId


class ListInvitationMarkersRequest(BaseModel):
    """List invitation markers request."""

    author_id: str
    invitation_id: str


class ListInvitationMarkersUseCase(BaseUseCase):
    """Use case for an author reading one reader's feedback."""

    def __init__(
        self, invitation_service: InvitationService, marker_service: MarkerService
    ) -> None:
        self.invitation_service = invitation_service
        self.marker_service = marker_service

    async def execute(
        self, request: ListInvitationMarkersRequest
    ) -> MarkerListResponse:
        """Execute list invitation markers flow.

        Raises:
            NotFoundError: If the invitation is missing or not owned
        """
        invitation = await self.invitation_service.get_owned(
            InvitationId(UUID(request.invitation_id)), UserId(UUID(request.author_id))
        )
        markers = await self.marker_service.list_for_invitation(invitation.id)
        return MarkerListResponse(
            markers=[
                MarkerItem.from_marker(marker, reader_name=invitation.reader_name)
                for marker in markers
            ]
        )
