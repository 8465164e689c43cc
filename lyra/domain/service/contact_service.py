"""Reader contact rollup service."""

import logfire

from lyra.domain.model.contact import ReaderContact
from lyra.domain.model.invitation import Invitation
from lyra.domain.repository import ReaderContactRepository
from lyra.domain.value import UserId
from lyra.util.clock import Clock

from .base import Service


class ContactService(Service):
    """Keeps the per-author list of readers who gave feedback."""

    def __init__(
        self, contact_repository: ReaderContactRepository, clock: Clock
    ) -> None:
        self.contact_repository = contact_repository
        self.clock = clock

    async def record_feedback(
        self, invitation: Invitation, project_title: str
    ) -> ReaderContact:
        """Count one new annotation towards the reader's contact entry."""
        with logfire.span(
            "contact_service.record_feedback",
            author_id=str(invitation.author_id),
            invitation_id=str(invitation.id),
        ):
            return await self.contact_repository.record_feedback(
                author_id=invitation.author_id,
                reader_name=invitation.reader_name,
                reader_email=invitation.reader_email,
                project_title=project_title,
                at=self.clock.now(),
            )

    async def list_contacts(self, author_id: UserId) -> list[ReaderContact]:
        """Contacts ordered by most recent feedback."""
        with logfire.span("contact_service.list_contacts", author_id=str(author_id)):
            return await self.contact_repository.find_by_author(author_id)
