"""Invitation domain service."""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire

from lyra.config import InvitationSettings
from lyra.domain.error import (
    ExpiredError,
    ForbiddenError,
    InvitationRevokedError,
    NotFoundError,
    ValidationError,
)
from lyra.domain.model.invitation import Invitation, default_circle_name
from lyra.domain.repository import InvitationRepository
from lyra.domain.value import (
    AccessToken,
    ChapterSet,
    InvitationId,
    InvitationStatus,
    ProjectId,
    UserId,
    token_hint,
)
from lyra.util.clock import Clock, as_utc

from .base import Service
from .token_service import AccessTokenIssuer


@dataclass(frozen=True)
class ReaderAddress:
    """Who an invitation is for."""

    name: str
    email: str


class InvitationService(Service):
    """Domain service for the reader invitation lifecycle."""

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        token_issuer: AccessTokenIssuer,
        clock: Clock,
        settings: InvitationSettings,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            token_issuer: Access token issuer
            clock: Time source for expiry decisions
            settings: Invitation settings (reader quota)
        """
        self.invitation_repository = invitation_repository
        self.token_issuer = token_issuer
        self.clock = clock
        self.settings = settings

    async def create_invitations(
        self,
        project_id: ProjectId,
        author_id: UserId,
        chapters: ChapterSet,
        readers: list[ReaderAddress],
        expires_at: datetime,
        message: str | None = None,
        circle_name: str | None = None,
    ) -> list[Invitation]:
        """Create one invitation per reader, all or nothing.

        Args:
            project_id: Project being shared (ownership checked by the caller)
            author_id: Author sending the invitations
            chapters: Chapters every reader in the batch may read
            readers: Readers to invite
            expires_at: When the invitations stop working
            message: Personal message from the author
            circle_name: Circle label, defaults to "Draft Review - <date>"

        Returns:
            Created invitations, in the order of ``readers``

        Raises:
            ValidationError: If no readers are given or expiry is not in the future
            QuotaExceededError: If the project would exceed its active reader cap
        """
        now = self.clock.now()
        expires_at = as_utc(expires_at)

        with logfire.span(
            "invitation_service.create_invitations",
            project_id=str(project_id),
            author_id=str(author_id),
            reader_count=len(readers),
            chapter_count=len(chapters),
        ):
            if not readers:
                raise ValidationError("At least one reader is required")
            if expires_at <= now:
                raise ValidationError("Expiration must be in the future")

            circle = (circle_name or "").strip() or default_circle_name(now.date())

            invitations = [
                Invitation(
                    id=InvitationId(uuid4()),
                    project_id=project_id,
                    author_id=author_id,
                    access_token=self.token_issuer.issue(),
                    chapters_accessible=chapters,
                    invitation_message=message,
                    reader_name=reader.name,
                    reader_email=reader.email,
                    status=InvitationStatus.PENDING,
                    created_at=now,
                    expires_at=expires_at,
                    circle_name=circle,
                )
                for reader in readers
            ]

            try:
                saved = await self.invitation_repository.add_within_quota(
                    project_id,
                    invitations,
                    limit=self.settings.max_active_readers,
                    now=now,
                )
            except Exception as e:
                logfire.warn(
                    "Invitations not created",
                    project_id=str(project_id),
                    error=str(e),
                )
                raise

            logfire.info(
                "Invitations created",
                project_id=str(project_id),
                count=len(saved),
                circle_name=circle,
            )
            return saved

    async def list_invitations(
        self, author_id: UserId, project_id: ProjectId | None = None
    ) -> list[Invitation]:
        """List an author's invitations, newest first.

        Args:
            author_id: Author ID
            project_id: One project, or None for all of the author's projects

        Returns:
            List of invitations
        """
        with logfire.span(
            "invitation_service.list_invitations",
            author_id=str(author_id),
            project_id=str(project_id) if project_id else "all",
        ):
            invitations = await self.invitation_repository.find_by_author(
                author_id, project_id
            )
            logfire.info(
                "Invitations listed", author_id=str(author_id), count=len(invitations)
            )
            return invitations

    async def get_owned(
        self, invitation_id: InvitationId, author_id: UserId
    ) -> Invitation:
        """Get an invitation the author created.

        Raises:
            NotFoundError: If missing or created by someone else
        """
        invitation = await self.invitation_repository.find_owned(
            invitation_id, author_id
        )
        if not invitation:
            logfire.warn(
                "Invitation not found or not owned",
                invitation_id=str(invitation_id),
                author_id=str(author_id),
            )
            raise NotFoundError("Invitation", str(invitation_id))
        return invitation

    async def get(self, invitation_id: InvitationId) -> Invitation:
        """Get an invitation by ID.

        Raises:
            NotFoundError: If the invitation does not exist
        """
        invitation = await self.invitation_repository.find_by_id(invitation_id)
        if not invitation:
            raise NotFoundError("Invitation", str(invitation_id))
        return invitation

    async def get_by_token(self, raw_token: str) -> Invitation:
        """Look up the invitation behind a reader token.

        Args:
            raw_token: Token exactly as the reader presented it

        Raises:
            NotFoundError: If no invitation uses this token
        """
        hint = token_hint(raw_token)
        with logfire.span("invitation_service.get_by_token", token=hint):
            token = AccessToken.from_raw(raw_token)
            invitation = None
            if token is not None:
                invitation = await self.invitation_repository.find_by_token(token)
            if not invitation:
                logfire.warn("Invalid access token", token=hint)
                raise NotFoundError("Invitation", hint)
            return invitation

    async def admit_reader(self, raw_token: str) -> Invitation:
        """Run the access state machine for a reader visit.

        Past expiry the invitation becomes expired (unless revoked, which is
        already terminal) and the visit is refused. A revoked invitation is
        refused. A pending invitation becomes accepted on its first visit.

        Args:
            raw_token: Reader access token

        Returns:
            The invitation after any transition

        Raises:
            NotFoundError: If the token is unknown
            ExpiredError: If the invitation is past its expiration time
            InvitationRevokedError: If the author revoked the invitation
        """
        invitation = await self.get_by_token(raw_token)
        now = self.clock.now()

        with logfire.span(
            "invitation_service.admit_reader",
            invitation_id=str(invitation.id),
            status=invitation.status.value,
        ):
            if invitation.is_past_expiry(now) or (
                invitation.status == InvitationStatus.EXPIRED
            ):
                if not invitation.status.is_terminal:
                    await self.invitation_repository.mark_expired(invitation.id)
                    logfire.info("Invitation expired", invitation_id=str(invitation.id))
                raise ExpiredError(str(invitation.id))

            if invitation.status == InvitationStatus.REVOKED:
                logfire.warn(
                    "Revoked invitation accessed", invitation_id=str(invitation.id)
                )
                raise InvitationRevokedError(str(invitation.id))

            if invitation.status == InvitationStatus.PENDING:
                stored = await self.invitation_repository.accept(invitation.id, now)
                if stored is None:
                    raise NotFoundError("Invitation", str(invitation.id))
                if stored.status == InvitationStatus.REVOKED:
                    # Revoked between the lookup and the accept
                    logfire.warn(
                        "Revoked invitation accessed", invitation_id=str(invitation.id)
                    )
                    raise InvitationRevokedError(str(invitation.id))
                if stored.status == InvitationStatus.EXPIRED:
                    raise ExpiredError(str(invitation.id))
                invitation = stored
                logfire.info("Invitation accepted", invitation_id=str(invitation.id))

            return invitation

    async def get_usable_by_token(self, raw_token: str) -> Invitation:
        """Look up an invitation that may still be used to annotate.

        Unlike ``admit_reader`` this never changes the invitation's status.

        Raises:
            NotFoundError: If the token is unknown
            ForbiddenError: If the invitation is revoked or expired
        """
        invitation = await self.get_by_token(raw_token)
        if not invitation.grants_access(self.clock.now()):
            logfire.warn(
                "Access expired or revoked",
                invitation_id=str(invitation.id),
                status=invitation.status.value,
            )
            raise ForbiddenError("Access expired or revoked")
        return invitation

    async def touch_activity(self, invitation_id: InvitationId) -> None:
        """Mark the invitation as recently used by its reader."""
        await self.invitation_repository.touch_activity(
            invitation_id, self.clock.now()
        )

    async def revoke(self, invitation_id: InvitationId, author_id: UserId) -> Invitation:
        """Revoke an invitation, whatever its current status.

        Args:
            invitation_id: Invitation to revoke
            author_id: Author who must own it

        Returns:
            The revoked invitation

        Raises:
            NotFoundError: If missing or not owned
        """
        with logfire.span(
            "invitation_service.revoke",
            invitation_id=str(invitation_id),
            author_id=str(author_id),
        ):
            invitation = await self.get_owned(invitation_id, author_id)
            revoked = await self.invitation_repository.revoke(invitation_id, author_id)
            if revoked is None:
                raise NotFoundError("Invitation", str(invitation_id))
            logfire.info(
                "Invitation revoked",
                invitation_id=str(invitation_id),
                previous_status=invitation.status.value,
            )
            return revoked

    def ensure_resendable(self, invitation: Invitation) -> None:
        """Check an invitation can be emailed again.

        Raises:
            ExpiredError: If past its expiration time
            InvitationRevokedError: If revoked
        """
        if invitation.is_past_expiry(self.clock.now()):
            raise ExpiredError(str(invitation.id))
        if invitation.status == InvitationStatus.REVOKED:
            raise InvitationRevokedError(str(invitation.id))

    async def rename_circle(
        self,
        author_id: UserId,
        project_id: ProjectId,
        chapters: ChapterSet,
        circle_name: str,
    ) -> int:
        """Rename every invitation in a reader circle.

        Returns:
            Number of invitations renamed

        Raises:
            ValidationError: If the new name is blank
            NotFoundError: If no invitation matches the circle
        """
        name = circle_name.strip()
        if not name:
            raise ValidationError("Circle name cannot be empty")

        with logfire.span(
            "invitation_service.rename_circle",
            project_id=str(project_id),
            circle_name=name,
        ):
            updated = await self.invitation_repository.update_circle(
                project_id, author_id, chapters.key, circle_name=name
            )
            return self._require_circle_hit(updated, project_id)

    async def archive_circle(
        self,
        author_id: UserId,
        project_id: ProjectId,
        chapters: ChapterSet,
        archived: bool,
    ) -> int:
        """Archive or restore every invitation in a reader circle.

        Returns:
            Number of invitations updated

        Raises:
            NotFoundError: If no invitation matches the circle
        """
        with logfire.span(
            "invitation_service.archive_circle",
            project_id=str(project_id),
            archived=archived,
        ):
            updated = await self.invitation_repository.update_circle(
                project_id, author_id, chapters.key, archived=archived
            )
            return self._require_circle_hit(updated, project_id)

    def _require_circle_hit(self, updated: int, project_id: ProjectId) -> int:
        if updated == 0:
            logfire.warn("Circle not found", project_id=str(project_id))
            raise NotFoundError("Circle", str(project_id))
        logfire.info("Circle updated", project_id=str(project_id), updated=updated)
        return updated
