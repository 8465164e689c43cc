"""Rename circle use case."""

from uuid import UUID

from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase, parse_chapters
from lyra.domain.service import InvitationService
from lyra.domain.value import ProjectId, UserId


class RenameCircleRequest(BaseModel):
    """Rename circle request.

    The circle is identified by the chapter selection its invitations
    share; the order of ``chapters_accessible`` does not matter.
    """

    author_id: str
    project_id: str
    chapters_accessible: list[str]
    circle_name: str


class CircleUpdateResponse(BaseModel):
    """Circle update response."""

    message: str
    updated: int


class RenameCircleUseCase(BaseUseCase):
    """Use case for renaming a reader circle."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: RenameCircleRequest) -> CircleUpdateResponse:
        """Execute rename circle flow.

        Raises:
            ValidationError: If the name or chapter list is invalid
            NotFoundError: If no invitation of the author matches the circle
        """
        updated = await self.invitation_service.rename_circle(
            author_id=UserId(UUID(request.author_id)),
            project_id=ProjectId(UUID(request.project_id)),
            chapters=parse_chapters(request.chapters_accessible),
            circle_name=request.circle_name,
        )
        return CircleUpdateResponse(
            message="Circle name updated successfully", updated=updated
        )
