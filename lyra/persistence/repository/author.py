"""PostgreSQL implementation of Author repository (read-only)."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lyra.domain.model import Author
from lyra.domain.repository import AuthorRepository
from lyra.domain.value import UserId
from lyra.persistence.mappers import row_to_author
from lyra.persistence.tables import users_table


class PostgresAuthorRepository(AuthorRepository):
    """PostgreSQL implementation of AuthorRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[Author]:
        stmt = select(users_table).where(users_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_author(dict(row)) if row else None
