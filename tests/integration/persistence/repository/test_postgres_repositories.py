"""Integration tests for the PostgreSQL repositories.

Assume PostgreSQL is running and migrated. Run with ``pytest -m integration``.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession

from lyra.domain.error import QuotaExceededError
from lyra.domain.model import Invitation
from lyra.domain.repository import (
    InvitationRepository,
    ReaderContactRepository,
    ReadingSessionRepository,
)
from lyra.domain.service import AccessTokenIssuer
from lyra.domain.value import (
    AccessToken,
    ChapterSet,
    InvitationId,
    InvitationStatus,
    ProjectId,
    UserId,
)
from lyra.persistence.tables import projects_table, users_table
from tests.conftest import CHAPTERS
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})

NOW = datetime.now(timezone.utc).replace(microsecond=0)


async def _seed_project(session: AsyncSession) -> tuple[UserId, ProjectId]:
    user_id = UserId(uuid4())
    project_id = ProjectId(uuid4())
    await session.execute(
        insert(users_table).values(
            user_id=user_id, username=f"author-{user_id.hex[:8]}", first_name="Mara"
        )
    )
    await session.execute(
        insert(projects_table).values(
            project_id=project_id,
            user_id=user_id,
            title="The Lighthouse Keeper",
            project_data={"chapters": CHAPTERS},
        )
    )
    return user_id, project_id


def _invitation(user_id, project_id, email="ada@example.com", **overrides):
    fields = dict(
        id=InvitationId(uuid4()),
        project_id=project_id,
        author_id=user_id,
        access_token=AccessTokenIssuer().issue(),
        chapters_accessible=ChapterSet(["ch-2", "ch-1"]),
        reader_name="Ada",
        reader_email=email,
        created_at=NOW,
        expires_at=NOW + timedelta(days=7),
        circle_name="Draft Review",
    )
    fields.update(overrides)
    return Invitation(**fields)


class TestPostgresInvitationRepository:
    """Integration tests for PostgresInvitationRepository."""

    @pytest.mark.asyncio
    async def test_round_trip_and_find_by_token(self, integration_env):
        # Arrange
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(InvitationRepository)
        user_id, project_id = await _seed_project(session)
        invitation = _invitation(user_id, project_id)

        # Act
        await repo.add_within_quota(project_id, [invitation], limit=15, now=NOW)
        found = await repo.find_by_token(AccessToken(invitation.access_token.root))

        # Assert
        assert found is not None
        assert found.id == invitation.id
        assert found.chapters_accessible.as_list() == ["ch-2", "ch-1"]
        assert found.status == InvitationStatus.PENDING
        assert found.expires_at == invitation.expires_at

    @pytest.mark.asyncio
    async def test_unknown_token(self, integration_env):
        repo = await integration_env.get(InvitationRepository)

        assert await repo.find_by_token(AccessTokenIssuer().issue()) is None

    @pytest.mark.asyncio
    async def test_quota_counts_only_active(self, integration_env):
        # Arrange
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(InvitationRepository)
        user_id, project_id = await _seed_project(session)
        batch = [_invitation(user_id, project_id, f"r{i}@example.com") for i in range(2)]
        batch.append(
            _invitation(
                user_id, project_id, "gone@example.com", status=InvitationStatus.REVOKED
            )
        )
        await repo.add_within_quota(project_id, batch, limit=3, now=NOW)

        # Act & Assert
        assert await repo.count_active(project_id, NOW) == 2
        with pytest.raises(QuotaExceededError):
            await repo.add_within_quota(
                project_id,
                [_invitation(user_id, project_id, f"x{i}@example.com") for i in range(2)],
                limit=3,
                now=NOW,
            )

    @pytest.mark.asyncio
    async def test_update_circle_ignores_chapter_order(self, integration_env):
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(InvitationRepository)
        user_id, project_id = await _seed_project(session)
        await repo.add_within_quota(
            project_id, [_invitation(user_id, project_id)], limit=15, now=NOW
        )

        updated = await repo.update_circle(
            project_id,
            user_id,
            ChapterSet(["ch-1", "ch-2"]).key,
            circle_name="Night owls",
        )

        assert updated == 1
        [found] = await repo.find_by_author(user_id, project_id)
        assert found.circle_name == "Night owls"

    @pytest.mark.asyncio
    async def test_accept_only_moves_pending(self, integration_env):
        """Should leave a revoked invitation revoked and its circle intact."""
        # Arrange
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(InvitationRepository)
        user_id, project_id = await _seed_project(session)
        invitation = _invitation(user_id, project_id)
        await repo.add_within_quota(project_id, [invitation], limit=15, now=NOW)
        await repo.update_circle(
            project_id, user_id, invitation.chapters_accessible.key, archived=True
        )
        await repo.revoke(invitation.id, user_id)

        # Act
        accepted = await repo.accept(invitation.id, NOW)
        expired = await repo.mark_expired(invitation.id)

        # Assert
        assert accepted.status == InvitationStatus.REVOKED
        assert accepted.accepted_at is None
        assert expired.status == InvitationStatus.REVOKED
        assert expired.archived is True

    @pytest.mark.asyncio
    async def test_revoke_requires_owner(self, integration_env):
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(InvitationRepository)
        user_id, project_id = await _seed_project(session)
        invitation = _invitation(user_id, project_id)
        await repo.add_within_quota(project_id, [invitation], limit=15, now=NOW)

        assert await repo.revoke(invitation.id, UserId(uuid4())) is None
        found = await repo.find_by_id(invitation.id)
        assert found.status == InvitationStatus.PENDING


class TestPostgresSessionAndContactRepositories:
    """Integration tests for reading sessions and the contact rollup."""

    @pytest.mark.asyncio
    async def test_get_or_create_session_once(self, integration_env):
        session = await integration_env.get(AsyncSession)
        invitations = await integration_env.get(InvitationRepository)
        sessions = await integration_env.get(ReadingSessionRepository)
        user_id, project_id = await _seed_project(session)
        invitation = _invitation(user_id, project_id)
        await invitations.add_within_quota(project_id, [invitation], limit=15, now=NOW)

        first = await sessions.get_or_create(invitation.id, NOW)
        second = await sessions.get_or_create(invitation.id, NOW + timedelta(hours=1))

        assert first.id == second.id

    @pytest.mark.asyncio
    async def test_record_feedback_upserts(self, integration_env):
        session = await integration_env.get(AsyncSession)
        contacts = await integration_env.get(ReaderContactRepository)
        user_id, _ = await _seed_project(session)

        await contacts.record_feedback(user_id, "Ada", "ada@example.com", "Book One", NOW)
        await contacts.record_feedback(
            user_id, "Ada L.", "ada@example.com", "Book One", NOW + timedelta(hours=1)
        )
        contact = await contacts.record_feedback(
            user_id, "Ada L.", "ada@example.com", "Book Two", NOW + timedelta(hours=2)
        )

        assert contact.total_annotations == 3
        assert contact.projects_reviewed == ("Book One", "Book Two")
        assert contact.first_feedback_at == NOW
        assert contact.last_feedback_at == NOW + timedelta(hours=2)
        assert contact.reader_name == "Ada L."
