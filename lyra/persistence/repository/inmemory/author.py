"""In-memory author repository for testing."""

from typing import Optional

from lyra.domain.model.author import Author
from lyra.domain.repository.author import AuthorRepository
from lyra.domain.value import UserId


class InMemoryAuthorRepository(AuthorRepository):
    """In-memory implementation of AuthorRepository for testing."""

    def __init__(self) -> None:
        self._authors: dict[UserId, Author] = {}

    def add(self, author: Author) -> Author:
        """Seed an author."""
        self._authors[author.id] = author
        return author

    async def find_by_id(self, user_id: UserId) -> Optional[Author]:
        return self._authors.get(user_id)
