"""Create invitations use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from lyra.adapter.error import DeliveryError
from lyra.application.usecase.base import BaseUseCase, parse_chapters
from lyra.config import Settings
from lyra.domain.service import (
    InvitationService,
    NotificationService,
    ProjectService,
    ReaderAddress,
)
from lyra.domain.value import InvitationStatus, ProjectId, UserId


class ReaderInfo(BaseModel):
    """A reader to invite."""

    name: str
    email: str


class CreateInvitationsRequest(BaseModel):
    """Request to invite a batch of readers."""

    author_id: str
    project_id: str
    chapters: list[str]
    readers: list[ReaderInfo]
    expires_at: datetime
    invitation_message: str | None = None
    circle_name: str | None = None


class CreatedInvitationItem(BaseModel):
    """Invitation item in response."""

    id: str
    access_token: str
    reader_url: str
    reader_name: str
    reader_email: str
    status: InvitationStatus
    circle_name: str
    created_at: datetime
    expires_at: datetime


class EmailErrorItem(BaseModel):
    """A reader whose invitation was created but not emailed."""

    reader: str
    error: str


class CreateInvitationsResponse(BaseModel):
    """Response after creating invitations."""

    invitations: list[CreatedInvitationItem]
    email_errors: list[EmailErrorItem]
    message: str


class CreateInvitationsUseCase(BaseUseCase):
    """Use case for inviting beta readers to a project."""

    def __init__(
        self,
        invitation_service: InvitationService,
        project_service: ProjectService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
            project_service: Project domain service
            notification_service: Reader notification service
            settings: Application settings
        """
        self.invitation_service = invitation_service
        self.project_service = project_service
        self.notification_service = notification_service
        self.settings = settings

    async def execute(
        self, request: CreateInvitationsRequest
    ) -> CreateInvitationsResponse:
        """Create one invitation per reader, then email each of them.

        The batch is stored as a whole or not at all. Emails are sent one by
        one afterwards; a failed email is reported in ``email_errors`` and the
        invitation stays, so the author can resend it later.

        Args:
            request: Create invitations request

        Returns:
            Created invitations and any per-reader email failures

        Raises:
            NotFoundError: If the project is missing or not owned
            ValidationError: If chapters, readers or expiry are invalid
            QuotaExceededError: If the project would exceed its reader cap
        """
        author_id = UserId(UUID(request.author_id))
        project_id = ProjectId(UUID(request.project_id))

        with logfire.span(
            "create_invitations",
            author_id=str(author_id),
            project_id=str(project_id),
            reader_count=len(request.readers),
        ):
            project = await self.project_service.get_owned(project_id, author_id)
            chapters = parse_chapters(request.chapters)

            invitations = await self.invitation_service.create_invitations(
                project_id=project_id,
                author_id=author_id,
                chapters=chapters,
                readers=[
                    ReaderAddress(name=reader.name, email=reader.email)
                    for reader in request.readers
                ],
                expires_at=request.expires_at,
                message=request.invitation_message,
                circle_name=request.circle_name,
            )

            author = await self.project_service.get_author(author_id)

            email_errors: list[EmailErrorItem] = []
            for invitation in invitations:
                try:
                    await self.notification_service.send_invitation(
                        invitation, project, author
                    )
                except DeliveryError as e:
                    email_errors.append(
                        EmailErrorItem(reader=invitation.reader_email, error=e.reason)
                    )
                    logfire.warn(
                        "Invitation created without email",
                        invitation_id=str(invitation.id),
                        error=e.reason,
                    )
                except Exception as e:
                    email_errors.append(
                        EmailErrorItem(reader=invitation.reader_email, error=str(e))
                    )
                    logfire.error(
                        "Unexpected error emailing invitation",
                        invitation_id=str(invitation.id),
                        error=str(e),
                    )

            items = [
                CreatedInvitationItem(
                    id=str(invitation.id),
                    access_token=invitation.access_token.root,
                    reader_url=self.settings.reader_url(invitation.access_token.root),
                    reader_name=invitation.reader_name,
                    reader_email=invitation.reader_email,
                    status=invitation.status,
                    circle_name=invitation.circle_name,
                    created_at=invitation.created_at,
                    expires_at=invitation.expires_at,
                )
                for invitation in invitations
            ]

            if email_errors:
                message = (
                    f"{len(items)} invitation(s) created, but "
                    f"{len(email_errors)} email(s) failed to send"
                )
            else:
                message = f"{len(items)} invitation(s) created and sent successfully"

            return CreateInvitationsResponse(
                invitations=items, email_errors=email_errors, message=message
            )
