"""Revoke invitation use case."""

from uuid import UUID

from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase
from lyra.domain.service import InvitationService
from lyra.domain.value import InvitationId, InvitationStatus, UserId


class RevokeInvitationRequest(BaseModel):
    """Revoke invitation request."""

    author_id: str
    invitation_id: str


class RevokeInvitationResponse(BaseModel):
    """Revoke invitation response."""

    id: str
    status: InvitationStatus
    message: str


class RevokeInvitationUseCase(BaseUseCase):
    """Use case for cutting off a reader's access."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(
        self, request: RevokeInvitationRequest
    ) -> RevokeInvitationResponse:
        invitation = await self.invitation_service.revoke(
            InvitationId(UUID(request.invitation_id)),
            UserId(UUID(request.author_id)),
        )
        return RevokeInvitationResponse(
            id=str(invitation.id),
            status=invitation.status,
            message="Invitation revoked successfully",
        )
