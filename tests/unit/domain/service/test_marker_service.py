"""Unit tests for MarkerService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from lyra.domain.error import NotFoundError
from lyra.domain.repository import AuthorRepository, ProjectRepository
from lyra.domain.service import InvitationService, MarkerService, ReaderAddress
from lyra.domain.value import ChapterSet, MarkerId, MarkerType
from lyra.util.clock import FrozenClock
from tests.conftest import T0, in_days, seed_author_and_project
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _two_invitations(unit_env):
    author, project = await seed_author_and_project(
        await unit_env.get(AuthorRepository), await unit_env.get(ProjectRepository)
    )
    invitation_service = await unit_env.get(InvitationService)
    return await invitation_service.create_invitations(
        project_id=project.id,
        author_id=author.id,
        chapters=ChapterSet(["ch-1"]),
        readers=[
            ReaderAddress(name="Ada", email="ada@example.com"),
            ReaderAddress(name="Ben", email="ben@example.com"),
        ],
        expires_at=in_days(7),
    )


class TestMarkerService:
    """Tests for MarkerService."""

    @pytest.mark.asyncio
    async def test_create_copies_project_from_invitation(self, unit_env):
        # Arrange
        ada, _ = await _two_invitations(unit_env)
        service = await unit_env.get(MarkerService)

        # Act
        marker = await service.create(
            ada,
            chapter_id="ch-1",
            scene_id="s-1",
            marker_id="m-1",
            marker_type=MarkerType.QUESTION,
            marker_text="Who is speaking here?",
            position_data={"from": 3, "to": 9},
        )

        # Assert
        assert marker.project_id == ada.project_id
        assert marker.invitation_id == ada.id
        assert marker.created_at == marker.updated_at == T0
        assert marker.position_data == {"from": 3, "to": 9}
        assert not marker.imported_to_project

    @pytest.mark.asyncio
    async def test_chapter_is_not_checked_against_invitation(self, unit_env):
        ada, _ = await _two_invitations(unit_env)
        service = await unit_env.get(MarkerService)

        marker = await service.create(ada, "ch-4", "s-4", "m-1")

        assert marker.chapter_id == "ch-4"

    @pytest.mark.asyncio
    async def test_readers_only_touch_their_own_markers(self, unit_env):
        # Arrange
        ada, ben = await _two_invitations(unit_env)
        service = await unit_env.get(MarkerService)
        marker = await service.create(ada, "ch-1", "s-1", "m-1", marker_text="hm")

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.update_text(marker.id, ben.id, "mine now")
        with pytest.raises(NotFoundError):
            await service.delete(marker.id, ben.id)

        assert (await service.get(marker.id)).marker_text == "hm"

    @pytest.mark.asyncio
    async def test_update_text_bumps_updated_at(self, unit_env):
        ada, _ = await _two_invitations(unit_env)
        service = await unit_env.get(MarkerService)
        clock = await unit_env.get(FrozenClock)
        marker = await service.create(ada, "ch-1", "s-1", "m-1", marker_text="hm")
        clock.advance(timedelta(minutes=5))

        updated = await service.update_text(marker.id, ada.id, "Lovely image")

        assert updated.marker_text == "Lovely image"
        assert updated.created_at == T0
        assert updated.updated_at == T0 + timedelta(minutes=5)

    @pytest.mark.asyncio
    async def test_delete(self, unit_env):
        ada, _ = await _two_invitations(unit_env)
        service = await unit_env.get(MarkerService)
        marker = await service.create(ada, "ch-1", "s-1", "m-1")

        await service.delete(marker.id, ada.id)

        assert await service.list_for_invitation(ada.id) == []
        with pytest.raises(NotFoundError):
            await service.get(marker.id)

    @pytest.mark.asyncio
    async def test_mark_imported_twice_refreshes_time(self, unit_env):
        ada, _ = await _two_invitations(unit_env)
        service = await unit_env.get(MarkerService)
        clock = await unit_env.get(FrozenClock)
        marker = await service.create(ada, "ch-1", "s-1", "m-1")

        first = await service.mark_imported(marker)
        clock.advance(timedelta(hours=1))
        second = await service.mark_imported(first)

        assert first.imported_at == T0
        assert second.imported_to_project
        assert second.imported_at == T0 + timedelta(hours=1)

    @pytest.mark.asyncio
    async def test_tally(self, unit_env):
        # Arrange
        ada, ben = await _two_invitations(unit_env)
        service = await unit_env.get(MarkerService)
        clock = await unit_env.get(FrozenClock)
        await service.create(ada, "ch-1", "s-1", "m-1")
        clock.advance(timedelta(hours=3))
        await service.create(ada, "ch-1", "s-1", "m-2")

        # Act
        tallies = await service.tally([ada.id, ben.id])

        # Assert
        assert tallies[ada.id].count == 2
        assert tallies[ada.id].last_created_at == T0 + timedelta(hours=3)
        assert ben.id not in tallies
        assert await service.tally([]) == {}

    @pytest.mark.asyncio
    async def test_get_unknown_marker(self, unit_env):
        service = await unit_env.get(MarkerService)

        with pytest.raises(NotFoundError):
            await service.get(MarkerId(uuid4()))
