"""Resolve reader access use case."""

from datetime import datetime
from typing import Any

import logfire
from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase
from lyra.application.usecase.session.get_session import SessionItem
from lyra.domain.service import (
    ContentFilter,
    InvitationService,
    ProjectService,
    ReadingSessionService,
)
from lyra.domain.value import InvitationStatus, token_hint


class ReaderInvitationView(BaseModel):
    """What a reader sees about their invitation."""

    id: str
    project_title: str
    reader_name: str
    message: str | None
    expires_at: datetime
    status: InvitationStatus


class ReaderContent(BaseModel):
    """The part of the manuscript shared with the reader.

    Chapters are passed through as the editor stores them, plus a
    ``chapterNumber`` giving their position in the full manuscript.
    """

    chapters: list[dict[str, Any]]


class ResolveAccessRequest(BaseModel):
    """Resolve access request."""

    access_token: str


class ResolveAccessResponse(BaseModel):
    """Resolve access response."""

    invitation: ReaderInvitationView
    content: ReaderContent
    session: SessionItem


class ResolveAccessUseCase(BaseUseCase):
    """Use case for a reader opening their invitation link.

    This is the only way manuscript text leaves the service without the
    owner's credentials.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        session_service: ReadingSessionService,
        project_service: ProjectService,
        content_filter: ContentFilter,
    ) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
            session_service: Reading session domain service
            project_service: Project domain service
            content_filter: Manuscript chapter filter
        """
        self.invitation_service = invitation_service
        self.session_service = session_service
        self.project_service = project_service
        self.content_filter = content_filter

    async def execute(self, request: ResolveAccessRequest) -> ResolveAccessResponse:
        """Execute resolve access flow.

        Args:
            request: Resolve access request

        Returns:
            Invitation details, the shared chapters and the reader's session

        Raises:
            NotFoundError: If the token is unknown
            ExpiredError: If the invitation has expired
            InvitationRevokedError: If the invitation was revoked
        """
        with logfire.span("resolve_access", token=token_hint(request.access_token)):
            invitation = await self.invitation_service.admit_reader(
                request.access_token
            )
            await self.invitation_service.touch_activity(invitation.id)
            session = await self.session_service.start(invitation.id)
            project = await self.project_service.get(invitation.project_id)

            chapters = self.content_filter.filter_chapters(
                project.manuscript, invitation.chapters_accessible
            )
            logfire.info(
                "Reader access granted",
                invitation_id=str(invitation.id),
                chapter_count=len(chapters),
            )

            return ResolveAccessResponse(
                invitation=ReaderInvitationView(
                    id=str(invitation.id),
                    project_title=project.title,
                    reader_name=invitation.reader_name,
                    message=invitation.invitation_message,
                    expires_at=invitation.expires_at,
                    status=invitation.status,
                ),
                content=ReaderContent(chapters=chapters),
                session=SessionItem.from_session(session),
            )
