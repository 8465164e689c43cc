"""PostgreSQL implementation of Invitation repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lyra.domain.error import QuotaExceededError
from lyra.domain.model import Invitation
from lyra.domain.repository import InvitationRepository
from lyra.domain.value import (
    AccessToken,
    InvitationId,
    InvitationStatus,
    ProjectId,
    UserId,
)
from lyra.persistence.mappers import invitation_to_dict, row_to_invitation
from lyra.persistence.tables import reader_invitations_table

_ACTIVE_STATUSES = (InvitationStatus.PENDING.value, InvitationStatus.ACCEPTED.value)


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID.

        Args:
            invitation_id: Invitation ID to look up

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(reader_invitations_table).where(
            reader_invitations_table.c.id == invitation_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_token(self, token: AccessToken) -> Optional[Invitation]:
        """Find an invitation by its access token.

        Critical path for every reader request - unique index on access_token.
        """
        stmt = select(reader_invitations_table).where(
            reader_invitations_table.c.access_token == token.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_owned(
        self, invitation_id: InvitationId, author_id: UserId
    ) -> Optional[Invitation]:
        stmt = select(reader_invitations_table).where(
            and_(
                reader_invitations_table.c.id == invitation_id,
                reader_invitations_table.c.user_id == author_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_author(
        self, author_id: UserId, project_id: Optional[ProjectId] = None
    ) -> list[Invitation]:
        """Find an author's invitations, newest first.

        Args:
            author_id: Author user ID
            project_id: Optional filter by project

        Returns:
            List of matching invitations
        """
        stmt = (
            select(reader_invitations_table)
            .where(reader_invitations_table.c.user_id == author_id)
            .order_by(reader_invitations_table.c.created_at.desc())
        )

        if project_id:
            stmt = stmt.where(reader_invitations_table.c.project_id == project_id)

        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_invitation(dict(row)) for row in rows]

    async def count_active(self, project_id: ProjectId, now: datetime) -> int:
        stmt = (
            select(func.count())
            .select_from(reader_invitations_table)
            .where(
                and_(
                    reader_invitations_table.c.project_id == project_id,
                    reader_invitations_table.c.status.in_(_ACTIVE_STATUSES),
                    reader_invitations_table.c.expires_at >= now,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def add_within_quota(
        self,
        project_id: ProjectId,
        invitations: list[Invitation],
        limit: int,
        now: datetime,
    ) -> list[Invitation]:
        """Insert a batch of invitations under a per-project advisory lock.

        The transaction-scoped lock serializes concurrent batches for the same
        project, so the count and the inserts cannot interleave. It is released
        when the request transaction commits or rolls back.

        Raises:
            QuotaExceededError: If the batch would exceed the limit
        """
        await self.session.execute(
            select(func.pg_advisory_xact_lock(func.hashtext(str(project_id))))
        )

        active = await self.count_active(project_id, now)
        if active + len(invitations) > limit:
            raise QuotaExceededError(limit, active, len(invitations))

        if invitations:
            await self.session.execute(
                insert(reader_invitations_table),
                [invitation_to_dict(invitation) for invitation in invitations],
            )
            await self.session.flush()
        return invitations

    async def accept(
        self, invitation_id: InvitationId, at: datetime
    ) -> Optional[Invitation]:
        """Accept a pending invitation.

        The status guard is re-evaluated against the latest committed row,
        so a concurrent revoke wins and the update matches nothing.
        """
        stmt = (
            update(reader_invitations_table)
            .where(
                and_(
                    reader_invitations_table.c.id == invitation_id,
                    reader_invitations_table.c.status
                    == InvitationStatus.PENDING.value,
                )
            )
            .values(status=InvitationStatus.ACCEPTED.value, accepted_at=at)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(invitation_id)

    async def mark_expired(self, invitation_id: InvitationId) -> Optional[Invitation]:
        stmt = (
            update(reader_invitations_table)
            .where(
                and_(
                    reader_invitations_table.c.id == invitation_id,
                    reader_invitations_table.c.status.in_(_ACTIVE_STATUSES),
                )
            )
            .values(status=InvitationStatus.EXPIRED.value)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(invitation_id)

    async def revoke(
        self, invitation_id: InvitationId, author_id: UserId
    ) -> Optional[Invitation]:
        stmt = (
            update(reader_invitations_table)
            .where(
                and_(
                    reader_invitations_table.c.id == invitation_id,
                    reader_invitations_table.c.user_id == author_id,
                )
            )
            .values(status=InvitationStatus.REVOKED.value)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_owned(invitation_id, author_id)

    async def touch_activity(self, invitation_id: InvitationId, at: datetime) -> None:
        stmt = (
            update(reader_invitations_table)
            .where(reader_invitations_table.c.id == invitation_id)
            .values(last_activity_at=at)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def update_circle(
        self,
        project_id: ProjectId,
        author_id: UserId,
        chapter_set_key: str,
        circle_name: Optional[str] = None,
        archived: Optional[bool] = None,
    ) -> int:
        """Batch-update a reader circle.

        Returns:
            Number of invitations updated
        """
        values: dict = {}
        if circle_name is not None:
            values["circle_name"] = circle_name
        if archived is not None:
            values["archived"] = archived
        if not values:
            return 0

        stmt = (
            update(reader_invitations_table)
            .where(
                and_(
                    reader_invitations_table.c.project_id == project_id,
                    reader_invitations_table.c.user_id == author_id,
                    reader_invitations_table.c.chapter_set_key == chapter_set_key,
                )
            )
            .values(**values)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
