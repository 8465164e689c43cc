"""Reader notification service."""

from datetime import datetime

import logfire

from lyra.domain.model.author import Author
from lyra.domain.model.invitation import Invitation
from lyra.domain.model.project import Project
from lyra.domain.value.common import ValueObject

from .base import Service


class ReaderInvitationEmail(ValueObject):
    """Everything a reader needs to open their invitation."""

    reader_email: str
    reader_name: str
    project_title: str
    author_name: str
    access_token: str
    expires_at: datetime
    message: str | None = None
    chapter_names: tuple[str, ...] = ()


class ReaderNotifier:
    """Outbound channel for reader invitations.

    One call sends one message, which either goes out or raises.
    """

    async def send_reader_invitation(self, email: ReaderInvitationEmail) -> None:
        """Deliver an invitation to a reader.

        Args:
            email: Invitation message

        Raises:
            DeliveryError: If the message could not be handed to the provider
        """
        raise NotImplementedError


class NotificationService(Service):
    """Builds reader invitation messages and hands them to the notifier."""

    def __init__(self, notifier: ReaderNotifier) -> None:
        self.notifier = notifier

    async def send_invitation(
        self, invitation: Invitation, project: Project, author: Author
    ) -> None:
        """Email a reader their invitation link.

        Chapter names come from the current manuscript, so a resend picks up
        chapters the author has renamed since.

        Args:
            invitation: Invitation to deliver
            project: Project the invitation is for
            author: Author who sent it

        Raises:
            DeliveryError: If delivery fails
        """
        with logfire.span(
            "notification_service.send_invitation",
            invitation_id=str(invitation.id),
        ):
            email = ReaderInvitationEmail(
                reader_email=invitation.reader_email,
                reader_name=invitation.reader_name,
                project_title=project.title,
                author_name=author.display_name,
                access_token=invitation.access_token.root,
                expires_at=invitation.expires_at,
                message=invitation.invitation_message,
                chapter_names=tuple(
                    project.manuscript.chapter_names(invitation.chapters_accessible)
                ),
            )
            try:
                await self.notifier.send_reader_invitation(email)
            except Exception as e:
                logfire.error(
                    "Invitation email failed",
                    invitation_id=str(invitation.id),
                    error=str(e),
                )
                raise
            logfire.info("Invitation email sent", invitation_id=str(invitation.id))
