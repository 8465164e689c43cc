"""PostgreSQL implementation of ReadingSession repository."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from lyra.domain.model import ReadingSession
from lyra.domain.repository import ReadingSessionRepository
from lyra.domain.value import InvitationId
from lyra.persistence.mappers import reading_session_to_dict, row_to_reading_session
from lyra.persistence.tables import reader_sessions_table


class PostgresReadingSessionRepository(ReadingSessionRepository):
    """PostgreSQL implementation of ReadingSessionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_invitation(
        self, invitation_id: InvitationId
    ) -> Optional[ReadingSession]:
        stmt = select(reader_sessions_table).where(
            reader_sessions_table.c.invitation_id == invitation_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_reading_session(dict(row)) if row else None

    async def get_or_create(
        self, invitation_id: InvitationId, now: datetime
    ) -> ReadingSession:
        """Return the invitation's session, inserting one if absent.

        The unique constraint on invitation_id makes concurrent first visits
        collapse onto a single row.
        """
        stmt = (
            insert(reader_sessions_table)
            .values(
                id=uuid4(),
                invitation_id=invitation_id,
                chapters_read=[],
                completion_percentage=0,
                notes="",
                created_at=now,
                last_activity_at=now,
            )
            .on_conflict_do_nothing(index_elements=["invitation_id"])
        )
        await self.session.execute(stmt)
        await self.session.flush()

        session = await self.find_by_invitation(invitation_id)
        assert session is not None
        return session

    async def save(self, session: ReadingSession) -> ReadingSession:
        stmt = (
            update(reader_sessions_table)
            .where(reader_sessions_table.c.id == session.id)
            .values(**reading_session_to_dict(session))
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return session
