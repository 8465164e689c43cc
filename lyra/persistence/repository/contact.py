"""PostgreSQL implementation of ReaderContact repository."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import any_, case, func, literal, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from lyra.domain.model import ReaderContact
from lyra.domain.repository import ReaderContactRepository
from lyra.domain.value import UserId
from lyra.persistence.mappers import row_to_reader_contact
from lyra.persistence.tables import reader_contacts_table


class PostgresReaderContactRepository(ReaderContactRepository):
    """PostgreSQL implementation of ReaderContactRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_author(self, author_id: UserId) -> list[ReaderContact]:
        stmt = (
            select(reader_contacts_table)
            .where(reader_contacts_table.c.user_id == author_id)
            .order_by(reader_contacts_table.c.last_feedback_date.desc())
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_reader_contact(dict(row)) for row in rows]

    async def record_feedback(
        self,
        author_id: UserId,
        reader_name: str,
        reader_email: str,
        project_title: str,
        at: datetime,
    ) -> ReaderContact:
        """Upsert the contact row keyed on (user_id, reader_email).

        The latest reader name wins; project titles are appended once each.
        """
        table = reader_contacts_table
        stmt = insert(table).values(
            id=uuid4(),
            user_id=author_id,
            reader_name=reader_name,
            reader_email=reader_email,
            first_feedback_date=at,
            last_feedback_date=at,
            total_annotations=1,
            projects_reviewed=[project_title],
        )
        stmt = stmt.on_conflict_do_update(
            constraint="uq_reader_contact",
            set_={
                "reader_name": stmt.excluded.reader_name,
                "last_feedback_date": stmt.excluded.last_feedback_date,
                "total_annotations": table.c.total_annotations + 1,
                "projects_reviewed": case(
                    (
                        literal(project_title) == any_(table.c.projects_reviewed),
                        table.c.projects_reviewed,
                    ),
                    else_=func.array_append(table.c.projects_reviewed, project_title),
                ),
            },
        ).returning(*table.c)

        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_reader_contact(dict(row))
