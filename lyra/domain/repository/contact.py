"""Reader contact repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from lyra.domain.model.contact import ReaderContact
from lyra.domain.value import UserId


class ReaderContactRepository(ABC):
    """Repository for the ReaderContact rollup."""

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> list[ReaderContact]:
        """List an author's reader contacts, most recent feedback first.

        Args:
            author_id: The author's ID

        Returns:
            List of contacts
        """
        pass

    @abstractmethod
    async def record_feedback(
        self,
        author_id: UserId,
        reader_name: str,
        reader_email: str,
        project_title: str,
        at: datetime,
    ) -> ReaderContact:
        """Fold one new annotation into the (author, reader email) rollup.

        Creates the contact on first feedback, otherwise bumps the
        annotation count, the last feedback time and the reviewed projects.

        Args:
            author_id: The author who received the feedback
            reader_name: Reader's display name
            reader_email: Reader's email, the rollup key
            project_title: Title of the project annotated
            at: Feedback time

        Returns:
            The updated contact
        """
        pass
