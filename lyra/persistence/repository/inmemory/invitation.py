"""In-memory invitation repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from lyra.domain.error import QuotaExceededError
from lyra.domain.model.invitation import Invitation
from lyra.domain.repository.invitation import InvitationRepository
from lyra.domain.value import (
    AccessToken,
    InvitationId,
    InvitationStatus,
    ProjectId,
    UserId,
)


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self) -> None:
        self._invitations: list[Invitation] = []

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        for invitation in self._invitations:
            if invitation.id == invitation_id:
                return invitation
        return None

    async def find_by_token(self, token: AccessToken) -> Optional[Invitation]:
        """Find an invitation by its access token."""
        for invitation in self._invitations:
            if invitation.access_token == token:
                return invitation
        return None

    async def find_owned(
        self, invitation_id: InvitationId, author_id: UserId
    ) -> Optional[Invitation]:
        invitation = await self.find_by_id(invitation_id)
        if invitation and invitation.author_id == author_id:
            return invitation
        return None

    async def find_by_author(
        self, author_id: UserId, project_id: Optional[ProjectId] = None
    ) -> list[Invitation]:
        """Find an author's invitations, newest first."""
        found = [
            invitation
            for invitation in self._invitations
            if invitation.author_id == author_id
            and (project_id is None or invitation.project_id == project_id)
        ]
        return sorted(found, key=lambda i: i.created_at, reverse=True)

    async def count_active(self, project_id: ProjectId, now: datetime) -> int:
        return sum(
            1
            for invitation in self._invitations
            if invitation.project_id == project_id and invitation.is_active(now)
        )

    async def add_within_quota(
        self,
        project_id: ProjectId,
        invitations: list[Invitation],
        limit: int,
        now: datetime,
    ) -> list[Invitation]:
        """Insert a batch of invitations if the project stays within its cap.

        Raises:
            QuotaExceededError: If the batch would exceed the limit
            IntegrityError: If an access token is already in use
        """
        active = await self.count_active(project_id, now)
        if active + len(invitations) > limit:
            raise QuotaExceededError(limit, active, len(invitations))

        tokens = {invitation.access_token for invitation in self._invitations}
        for invitation in invitations:
            if invitation.access_token in tokens:
                raise IntegrityError("Duplicate access token", None, Exception())
            tokens.add(invitation.access_token)

        self._invitations.extend(invitations)
        return invitations

    def _update_where(self, invitation_id: InvitationId, allowed, changes: dict) -> None:
        for i, existing in enumerate(self._invitations):
            if existing.id == invitation_id and existing.status in allowed:
                self._invitations[i] = existing.model_copy(update=changes)
                return

    async def accept(
        self, invitation_id: InvitationId, at: datetime
    ) -> Optional[Invitation]:
        self._update_where(
            invitation_id,
            (InvitationStatus.PENDING,),
            {"status": InvitationStatus.ACCEPTED, "accepted_at": at},
        )
        return await self.find_by_id(invitation_id)

    async def mark_expired(self, invitation_id: InvitationId) -> Optional[Invitation]:
        self._update_where(
            invitation_id,
            (InvitationStatus.PENDING, InvitationStatus.ACCEPTED),
            {"status": InvitationStatus.EXPIRED},
        )
        return await self.find_by_id(invitation_id)

    async def revoke(
        self, invitation_id: InvitationId, author_id: UserId
    ) -> Optional[Invitation]:
        invitation = await self.find_owned(invitation_id, author_id)
        if invitation is None:
            return None
        self._update_where(
            invitation_id, tuple(InvitationStatus), {"status": InvitationStatus.REVOKED}
        )
        return await self.find_by_id(invitation_id)

    async def touch_activity(self, invitation_id: InvitationId, at: datetime) -> None:
        for i, existing in enumerate(self._invitations):
            if existing.id == invitation_id:
                self._invitations[i] = existing.model_copy(
                    update={"last_activity_at": at}
                )
                return

    async def update_circle(
        self,
        project_id: ProjectId,
        author_id: UserId,
        chapter_set_key: str,
        circle_name: Optional[str] = None,
        archived: Optional[bool] = None,
    ) -> int:
        changes: dict = {}
        if circle_name is not None:
            changes["circle_name"] = circle_name
        if archived is not None:
            changes["archived"] = archived
        if not changes:
            return 0

        updated = 0
        for i, existing in enumerate(self._invitations):
            if (
                existing.project_id == project_id
                and existing.author_id == author_id
                and existing.chapters_accessible.key == chapter_set_key
            ):
                self._invitations[i] = existing.model_copy(update=changes)
                updated += 1
        return updated
