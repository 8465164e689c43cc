"""In-memory reader contact repository for testing."""

from datetime import datetime
from uuid import uuid4

from lyra.domain.model.contact import ReaderContact
from lyra.domain.repository.contact import ReaderContactRepository
from lyra.domain.value import ReaderContactId, UserId


class InMemoryReaderContactRepository(ReaderContactRepository):
    """In-memory implementation of ReaderContactRepository for testing."""

    def __init__(self) -> None:
        self._contacts: dict[tuple[UserId, str], ReaderContact] = {}

    async def find_by_author(self, author_id: UserId) -> list[ReaderContact]:
        found = [c for c in self._contacts.values() if c.author_id == author_id]
        return sorted(found, key=lambda c: c.last_feedback_at, reverse=True)

    async def record_feedback(
        self,
        author_id: UserId,
        reader_name: str,
        reader_email: str,
        project_title: str,
        at: datetime,
    ) -> ReaderContact:
        key = (author_id, reader_email)
        existing = self._contacts.get(key)

        if existing is None:
            contact = ReaderContact(
                id=ReaderContactId(uuid4()),
                author_id=author_id,
                reader_name=reader_name,
                reader_email=reader_email,
                first_feedback_at=at,
                last_feedback_at=at,
                total_annotations=1,
                projects_reviewed=(project_title,),
            )
        else:
            projects = existing.projects_reviewed
            if project_title not in projects:
                projects = projects + (project_title,)
            contact = existing.model_copy(
                update={
                    "reader_name": reader_name,
                    "last_feedback_at": at,
                    "total_annotations": existing.total_annotations + 1,
                    "projects_reviewed": projects,
                }
            )

        self._contacts[key] = contact
        return contact
