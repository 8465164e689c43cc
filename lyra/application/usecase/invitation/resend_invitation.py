"""Resend invitation use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase
from lyra.domain.service import InvitationService, NotificationService, ProjectService
from lyra.domain.value import InvitationId, UserId


class ResendInvitationRequest(BaseModel):
    """Resend invitation request."""

    author_id: str
    invitation_id: str


class ResendInvitationResponse(BaseModel):
    """Resend invitation response."""

    message: str


class ResendInvitationUseCase(BaseUseCase):
    """Use case for emailing an invitation link again.

    The original token and expiry are kept; chapter names and the author's
    name are read fresh.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        project_service: ProjectService,
        notification_service: NotificationService,
    ) -> None:
        self.invitation_service = invitation_service
        self.project_service = project_service
        self.notification_service = notification_service

    async def execute(
        self, request: ResendInvitationRequest
    ) -> ResendInvitationResponse:
        """Execute resend invitation flow.

        Raises:
            NotFoundError: If the invitation is missing or not owned
            ExpiredError: If the invitation is past its expiry
            InvitationRevokedError: If the invitation was revoked
            DeliveryError: If the email could not be sent
        """
        author_id = UserId(UUID(request.author_id))
        invitation_id = InvitationId(UUID(request.invitation_id))

        with logfire.span("resend_invitation", invitation_id=str(invitation_id)):
            invitation = await self.invitation_service.get_owned(
                invitation_id, author_id
            )
            self.invitation_service.ensure_resendable(invitation)

            project = await self.project_service.get(invitation.project_id)
            author = await self.project_service.get_author(author_id)

            await self.notification_service.send_invitation(
                invitation, project, author
            )

            return ResendInvitationResponse(message="Invitation resent successfully")
