"""PostgreSQL implementation of Marker repository."""

from typing import Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lyra.domain.model import Marker
from lyra.domain.repository import MarkerRepository, MarkerTally
from lyra.domain.value import InvitationId, MarkerId
from lyra.persistence.mappers import marker_to_dict, row_to_marker
from lyra.persistence.tables import reader_markers_table


class PostgresMarkerRepository(MarkerRepository):
    """PostgreSQL implementation of MarkerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, marker_id: MarkerId) -> Optional[Marker]:
        stmt = select(reader_markers_table).where(reader_markers_table.c.id == marker_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_marker(dict(row)) if row else None

    async def find_by_invitation(self, invitation_id: InvitationId) -> list[Marker]:
        stmt = (
            select(reader_markers_table)
            .where(reader_markers_table.c.invitation_id == invitation_id)
            .order_by(reader_markers_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_marker(dict(row)) for row in rows]

    async def add(self, marker: Marker) -> Marker:
        stmt = insert(reader_markers_table).values(**marker_to_dict(marker))
        await self.session.execute(stmt)
        await self.session.flush()
        return marker

    async def save(self, marker: Marker) -> Marker:
        stmt = (
            update(reader_markers_table)
            .where(reader_markers_table.c.id == marker.id)
            .values(**marker_to_dict(marker))
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return marker

    async def delete(self, marker_id: MarkerId) -> bool:
        stmt = delete(reader_markers_table).where(reader_markers_table.c.id == marker_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return (result.rowcount or 0) > 0

    async def tally_by_invitations(
        self, invitation_ids: list[InvitationId]
    ) -> dict[InvitationId, MarkerTally]:
        """Count markers per invitation in a single grouped query.

        Args:
            invitation_ids: Invitations to tally

        Returns:
            Mapping of invitation ID to its tally
        """
        if not invitation_ids:
            return {}

        stmt = (
            select(
                reader_markers_table.c.invitation_id,
                func.count().label("count"),
                func.max(reader_markers_table.c.created_at).label("last_created_at"),
            )
            .where(reader_markers_table.c.invitation_id.in_(invitation_ids))
            .group_by(reader_markers_table.c.invitation_id)
        )
        result = await self.session.execute(stmt)

        return {
            InvitationId(row.invitation_id): MarkerTally(
                count=row.count, last_created_at=row.last_created_at
            )
            for row in result.all()
        }
