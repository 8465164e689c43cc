"""Update marker use case."""

from uuid import UUID

from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase
from lyra.application.usecase.marker.common import MarkerItem, MarkerResponse
from lyra.domain.service import InvitationService, MarkerService
from lyra.domain.value import MarkerId


class UpdateMarkerRequest(BaseModel):
    """Update marker request."""

    marker_pk: str
    access_token: str
    marker_text: str | None = None


class UpdateMarkerUseCase(BaseUseCase):
    """Use case for a reader editing one of their annotations.

    Holding the invitation's token is the only proof of ownership.
    """

    def __init__(
        self, invitation_service: InvitationService, marker_service: MarkerService
    ) -> None:
        self.invitation_service = invitation_service
        self.marker_service = marker_service

    async def execute(self, request: UpdateMarkerRequest) -> MarkerResponse:
        """Execute update marker flow.

        Raises:
            NotFoundError: If the token is unknown or the marker is not theirs
        """
        invitation = await self.invitation_service.get_by_token(request.access_token)
        marker = await self.marker_service.update_text(
            MarkerId(UUID(request.marker_pk)), invitation.id, request.marker_text
        )
        await self.invitation_service.touch_activity(invitation.id)
        return MarkerResponse(marker=MarkerItem.from_marker(marker))
