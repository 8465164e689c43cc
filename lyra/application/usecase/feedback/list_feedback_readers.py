"""List feedback readers use case."""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase
from lyra.domain.service import InvitationService, MarkerService, ProjectService
from lyra.domain.value import InvitationStatus, ProjectId, UserId

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class FeedbackReaderItem(BaseModel):
    """A reader who left feedback on the project."""

    invitation_id: str
    reader_name: str
    status: InvitationStatus
    marker_count: int
    last_feedback_at: datetime | None


class ListFeedbackReadersRequest(BaseModel):
    """List feedback readers request."""

    author_id: str
    project_id: str


class ListFeedbackReadersResponse(BaseModel):
    """List feedback readers response."""

    readers: list[FeedbackReaderItem]


class ListFeedbackReadersUseCase(BaseUseCase):
    """Use case for the author's feedback inbox for one project."""

    def __init__(
        self,
        invitation_service: InvitationService,
        marker_service: MarkerService,
        project_service: ProjectService,
    ) -> None:
        self.invitation_service = invitation_service
        self.marker_service = marker_service
        self.project_service = project_service

    async def execute(
        self, request: ListFeedbackReadersRequest
    ) -> ListFeedbackReadersResponse:
        """Execute list feedback readers flow.

        Only readers with at least one marker are listed, most recent
        feedback first.

        Raises:
            NotFoundError: If the project is missing or not owned
        """
        author_id = UserId(UUID(request.author_id))
        project_id = ProjectId(UUID(request.project_id))

        await self.project_service.get_owned(project_id, author_id)
        invitations = await self.invitation_service.list_invitations(
            author_id, project_id
        )
        tallies = await self.marker_service.tally(
            [invitation.id for invitation in invitations]
        )

        readers = [
            FeedbackReaderItem(
                invitation_id=str(invitation.id),
                reader_name=invitation.reader_name,
                status=invitation.status,
                marker_count=tallies[invitation.id].count,
                last_feedback_at=tallies[invitation.id].last_created_at,
            )
            for invitation in invitations
            if invitation.id in tallies and tallies[invitation.id].count > 0
        ]
        readers.sort(
            key=lambda reader: reader.last_feedback_at or _EPOCH,
            reverse=True,
        )

        return ListFeedbackReadersResponse(readers=readers)
