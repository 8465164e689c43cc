"""List invitations use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase
from lyra.domain.service import InvitationService, MarkerService, ProjectService
from lyra.domain.value import InvitationStatus, ProjectId, UserId


class InvitationItem(BaseModel):
    """Invitation item in response."""

    id: str
    project_id: str
    project_title: str
    reader_name: str
    reader_email: str
    status: InvitationStatus
    chapters_accessible: list[str]
    invitation_message: str | None
    circle_name: str
    archived: bool
    created_at: datetime
    expires_at: datetime
    accepted_at: datetime | None = None
    last_activity_at: datetime | None = None
    marker_count: int


class ListInvitationsRequest(BaseModel):
    """List invitations request."""

    author_id: str
    project_id: str | None = None  # None lists every project


class ListInvitationsResponse(BaseModel):
    """List invitations response."""

    invitations: list[InvitationItem]


class ListInvitationsUseCase(BaseUseCase):
    """Use case for the author's reader dashboard."""

    def __init__(
        self,
        invitation_service: InvitationService,
        project_service: ProjectService,
        marker_service: MarkerService,
    ) -> None:
        """Initialize list invitations use case.

        Args:
            invitation_service: Invitation service
            project_service: Project service
            marker_service: Marker service
        """
        self.invitation_service = invitation_service
        self.project_service = project_service
        self.marker_service = marker_service

    async def execute(self, request: ListInvitationsRequest) -> ListInvitationsResponse:
        """Execute list invitations flow.

        Args:
            request: List invitations request

        Returns:
            Invitations newest first, with project title and marker count

        Raises:
            NotFoundError: If a specific project is requested and not owned
        """
        author_id = UserId(UUID(request.author_id))
        project_id = ProjectId(UUID(request.project_id)) if request.project_id else None

        if project_id:
            await self.project_service.get_owned(project_id, author_id)

        invitations = await self.invitation_service.list_invitations(
            author_id, project_id
        )

        titles = await self.project_service.titles(
            list({invitation.project_id for invitation in invitations})
        )
        tallies = await self.marker_service.tally(
            [invitation.id for invitation in invitations]
        )

        items = []
        for invitation in invitations:
            tally = tallies.get(invitation.id)
            items.append(
                InvitationItem(
                    id=str(invitation.id),
                    project_id=str(invitation.project_id),
                    project_title=titles.get(invitation.project_id, ""),
                    reader_name=invitation.reader_name,
                    reader_email=invitation.reader_email,
                    status=invitation.status,
                    chapters_accessible=invitation.chapters_accessible.as_list(),
                    invitation_message=invitation.invitation_message,
                    circle_name=invitation.circle_name,
                    archived=invitation.archived,
                    created_at=invitation.created_at,
                    expires_at=invitation.expires_at,
                    accepted_at=invitation.accepted_at,
                    last_activity_at=invitation.last_activity_at,
                    marker_count=tally.count if tally else 0,
                )
            )

        return ListInvitationsResponse(invitations=items)
