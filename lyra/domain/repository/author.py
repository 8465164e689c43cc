"""Author repository interface."""

from abc import ABC, abstractmethod

from lyra.domain.model.author import Author
from lyra.domain.value import UserId


class AuthorRepository(ABC):
    """Read-only access to platform users acting as authors."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Author | None:
        """Find an author by user ID.

        Args:
            user_id: The user's ID

        Returns:
            The author if found, None otherwise
        """
        pass
