"""Archive circle use case."""

from uuid import UUID

from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase, parse_chapters
from lyra.application.usecase.circle.rename_circle import CircleUpdateResponse
from lyra.domain.service import InvitationService
from lyra.domain.value import ProjectId, UserId


class ArchiveCircleRequest(BaseModel):
    """Archive or restore circle request."""

    author_id: str
    project_id: str
    chapters_accessible: list[str]
    archived: bool


class ArchiveCircleUseCase(BaseUseCase):
    """Use case for archiving or restoring a reader circle."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: ArchiveCircleRequest) -> CircleUpdateResponse:
        updated = await self.invitation_service.archive_circle(
            author_id=UserId(UUID(request.author_id)),
            project_id=ProjectId(UUID(request.project_id)),
            chapters=parse_chapters(request.chapters_accessible),
            archived=request.archived,
        )
        action = "archived" if request.archived else "restored"
        return CircleUpdateResponse(
            message=f"Circle {action} successfully", updated=updated
        )
