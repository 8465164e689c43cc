"""List reader contacts use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from lyra.application.usecase.base import BaseUseCase
from lyra.domain.service import ContactService
from lyra.domain.value import UserId


class ContactItem(BaseModel):
    """Contact item in response."""

    id: str
    reader_name: str
    reader_email: str
    first_feedback_at: datetime
    last_feedback_at: datetime
    total_annotations: int
    projects_reviewed: list[str]


class ListContactsRequest(BaseModel):
    """List contacts request."""

    author_id: str


class ListContactsResponse(BaseModel):
    """List contacts response."""

    contacts: list[ContactItem]


class ListContactsUseCase(BaseUseCase):
    """Use case for the acknowledgements list of everyone who gave feedback."""

    def __init__(self, contact_service: ContactService) -> None:
        self.contact_service = contact_service

    async def execute(self, request: ListContactsRequest) -> ListContactsResponse:
        contacts = await self.contact_service.list_contacts(
            UserId(UUID(request.author_id))
        )
        return ListContactsResponse(
            contacts=[
                ContactItem(
                    id=str(contact.id),
                    reader_name=contact.reader_name,
                    reader_email=contact.reader_email,
                    first_feedback_at=contact.first_feedback_at,
                    last_feedback_at=contact.last_feedback_at,
                    total_annotations=contact.total_annotations,
                    projects_reviewed=list(contact.projects_reviewed),
                )
                for contact in contacts
            ]
        )
