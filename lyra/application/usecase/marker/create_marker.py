"""Create marker use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase
from lyra.application.usecase.marker.common import MarkerItem, MarkerResponse
from lyra.domain.service import (
    ContactService,
    InvitationService,
    MarkerService,
    ProjectService,
)
from lyra.domain.value import MarkerType


class CreateMarkerRequest(BaseModel):
    """Create marker request."""

    access_token: str
    chapter_id: str
    scene_id: str
    marker_id: str
    marker_type: MarkerType = MarkerType.NOTE
    marker_text: str | None = None
    highlighted_text: str | None = None
    position_data: Any = None


class CreateMarkerUseCase(BaseUseCase):
    """Use case for a reader leaving an annotation."""

    def __init__(
        self,
        invitation_service: InvitationService,
        marker_service: MarkerService,
        contact_service: ContactService,
        project_service: ProjectService,
    ) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
            marker_service: Marker domain service
            contact_service: Reader contact rollup service
            project_service: Project domain service
        """
        self.invitation_service = invitation_service
        self.marker_service = marker_service
        self.contact_service = contact_service
        self.project_service = project_service

    async def execute(self, request: CreateMarkerRequest) -> MarkerResponse:
        """Execute create marker flow.

        Args:
            request: Create marker request

        Returns:
            The stored marker

        Raises:
            NotFoundError: If the token is unknown
            ForbiddenError: If the invitation is revoked or expired
        """
        invitation = await self.invitation_service.get_usable_by_token(
            request.access_token
        )

        with logfire.span("create_marker", invitation_id=str(invitation.id)):
            marker = await self.marker_service.create(
                invitation,
                chapter_id=request.chapter_id,
                scene_id=request.scene_id,
                marker_id=request.marker_id,
                marker_type=request.marker_type,
                marker_text=request.marker_text,
                highlighted_text=request.highlighted_text,
                position_data=request.position_data,
            )
            await self.invitation_service.touch_activity(invitation.id)

            project = await self.project_service.get(invitation.project_id)
            await self.contact_service.record_feedback(invitation, project.title)

            return MarkerResponse(marker=MarkerItem.from_marker(marker))
