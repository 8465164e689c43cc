"""Invitation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from lyra.domain.model.invitation import Invitation
from lyra.domain.value import AccessToken, InvitationId, ProjectId, UserId


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Defines the contract for invitation persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: AccessToken) -> Invitation | None:
        """Find an invitation by access token.

        Used on every reader request.

        Args:
            token: The reader's access token

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_owned(
        self, invitation_id: InvitationId, author_id: UserId
    ) -> Invitation | None:
        """Find an invitation created by the given author.

        Args:
            invitation_id: The invitation's unique identifier
            author_id: The author who must own it

        Returns:
            The invitation if it exists and belongs to the author, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, project_id: ProjectId | None = None
    ) -> list[Invitation]:
        """List an author's invitations, newest first.

        Args:
            author_id: The author's ID
            project_id: Restrict to one project, or None for all projects

        Returns:
            List of invitations
        """
        pass

    @abstractmethod
    async def count_active(self, project_id: ProjectId, now: datetime) -> int:
        """Count pending or accepted invitations that have not yet expired.

        Args:
            project_id: The project's ID
            now: Current time

        Returns:
            Number of active invitations
        """
        pass

    @abstractmethod
    async def add_within_quota(
        self,
        project_id: ProjectId,
        invitations: list[Invitation],
        limit: int,
        now: datetime,
    ) -> list[Invitation]:
        """Insert a batch of invitations if the project stays within its cap.

        The active count and the inserts happen atomically, so two concurrent
        batches cannot both squeeze under the limit.

        Args:
            project_id: The project all invitations belong to
            invitations: New invitations to insert
            limit: Maximum active invitations allowed for the project
            now: Current time, used to decide which invitations are active

        Returns:
            The inserted invitations

        Raises:
            QuotaExceededError: If the batch would exceed the limit; nothing is inserted
        """
        pass

    @abstractmethod
    async def accept(
        self, invitation_id: InvitationId, at: datetime
    ) -> Invitation | None:
        """Move a pending invitation to accepted.

        Only a row still pending is changed, so a revoke or expiry that lands
        first is never overwritten.

        Args:
            invitation_id: The invitation's ID
            at: Acceptance time

        Returns:
            The invitation as stored after the update, None if it is gone
        """
        pass

    @abstractmethod
    async def mark_expired(self, invitation_id: InvitationId) -> Invitation | None:
        """Move a pending or accepted invitation to expired.

        Revoked invitations keep their status.

        Returns:
            The invitation as stored after the update, None if it is gone
        """
        pass

    @abstractmethod
    async def revoke(
        self, invitation_id: InvitationId, author_id: UserId
    ) -> Invitation | None:
        """Set an author's invitation to revoked, touching only its status.

        Returns:
            The revoked invitation, None if missing or not owned
        """
        pass

    @abstractmethod
    async def touch_activity(self, invitation_id: InvitationId, at: datetime) -> None:
        """Record reader activity on an invitation.

        Args:
            invitation_id: The invitation's ID
            at: Activity time
        """
        pass

    @abstractmethod
    async def update_circle(
        self,
        project_id: ProjectId,
        author_id: UserId,
        chapter_set_key: str,
        circle_name: str | None = None,
        archived: bool | None = None,
    ) -> int:
        """Batch-update every invitation in a reader circle.

        A circle is the set of an author's invitations on one project that
        share the same chapter selection (compared by ChapterSet.key).

        Args:
            project_id: The project's ID
            author_id: The owning author
            chapter_set_key: Order-independent key of the chapter selection
            circle_name: New name, if renaming
            archived: New archived flag, if archiving or restoring

        Returns:
            Number of invitations updated
        """
        pass
