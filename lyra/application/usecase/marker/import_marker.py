"""Import marker use case."""

from datetime import datetime
from typing import Any
from uuid import UUID

import logfire
from pydantic import BaseModel, ConfigDict, Field

from lyra.application.usecase.base import BaseUseCase
from lyra.domain.error import NotFoundError
from lyra.domain.service import InvitationService, MarkerService, ProjectService
from lyra.domain.value import MarkerId, MarkerType, UserId


class ManuscriptAnnotation(BaseModel):
    """A reader marker in the shape the manuscript editor stores.

    Serialized with camelCase keys so the author's client can drop it
    straight into the project document.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: MarkerType
    text: str
    highlighted_text: str | None = Field(default=None, alias="highlightedText")
    position_data: Any = Field(default=None, alias="positionData")
    chapter_id: str = Field(alias="chapterId")
    scene_id: str = Field(alias="sceneId")
    is_reader_feedback: bool = Field(default=True, alias="isReaderFeedback")
    reader_name: str = Field(alias="readerName")
    created_at: datetime = Field(alias="createdAt")


class ImportMarkerRequest(BaseModel):
    """Import marker request."""

    author_id: str
    marker_pk: str


class ImportMarkerResponse(BaseModel):
    """Import marker response."""

    marker: ManuscriptAnnotation


class ImportMarkerUseCase(BaseUseCase):
    """Use case for copying reader feedback into the author's manuscript.

    The merge into the project document happens client-side; this flags
    the marker as imported and returns it in editor form. Importing twice
    is allowed and only refreshes the import time.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        marker_service: MarkerService,
        project_service: ProjectService,
    ) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
            marker_service: Marker domain service
            project_service: Project domain service
        """
        self.invitation_service = invitation_service
        self.marker_service = marker_service
        self.project_service = project_service

    async def execute(self, request: ImportMarkerRequest) -> ImportMarkerResponse:
        """Execute import marker flow.

        Args:
            request: Import marker request

        Returns:
            The marker as a manuscript annotation

        Raises:
            NotFoundError: If the marker is missing or its project not owned
        """
        marker_pk = MarkerId(UUID(request.marker_pk))
        author_id = UserId(UUID(request.author_id))

        with logfire.span("import_marker", marker_pk=str(marker_pk)):
            marker = await self.marker_service.get(marker_pk)
            try:
                await self.project_service.get_owned(marker.project_id, author_id)
            except NotFoundError:
                raise NotFoundError("Marker", str(marker_pk))

            invitation = await self.invitation_service.get(marker.invitation_id)
            marker = await self.marker_service.mark_imported(marker)

            return ImportMarkerResponse(
                marker=ManuscriptAnnotation(
                    id=marker.marker_id,
                    type=marker.marker_type,
                    text=f"[{invitation.reader_name}]\n{marker.marker_text or ''}",
                    highlighted_text=marker.highlighted_text,
                    position_data=marker.position_data,
                    chapter_id=marker.chapter_id,
                    scene_id=marker.scene_id,
                    reader_name=invitation.reader_name,
                    created_at=marker.created_at,
                )
            )
