"""Unit tests for ReadingSessionService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from lyra.domain.error import NotFoundError, ValidationError
from lyra.domain.service import ReadingSessionService
from lyra.domain.value import InvitationId
from lyra.util.clock import FrozenClock
from tests.conftest import T0
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestReadingSessionService:
    """Tests for reader progress and notes."""

    @pytest.mark.asyncio
    async def test_start_is_idempotent(self, unit_env):
        service = await unit_env.get(ReadingSessionService)
        invitation_id = InvitationId(uuid4())

        first = await service.start(invitation_id)
        second = await service.start(invitation_id)

        assert first.id == second.id
        assert first.completion_percentage == 0
        assert first.created_at == T0

    @pytest.mark.asyncio
    async def test_record_progress_tracks_chapters_once(self, unit_env):
        # Arrange
        service = await unit_env.get(ReadingSessionService)
        clock = await unit_env.get(FrozenClock)
        invitation_id = InvitationId(uuid4())

        # Act
        await service.record_progress(invitation_id, "ch-1", 20)
        await service.record_progress(invitation_id, "ch-2", 45)
        clock.advance(timedelta(minutes=30))
        session = await service.record_progress(invitation_id, "ch-1", 50)

        # Assert
        assert session.chapters_read == ("ch-1", "ch-2")
        assert session.last_chapter_id == "ch-1"
        assert session.completion_percentage == 50
        assert session.last_activity_at == T0 + timedelta(minutes=30)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("percentage", [-1, 101])
    async def test_record_progress_rejects_out_of_range(self, unit_env, percentage):
        service = await unit_env.get(ReadingSessionService)

        with pytest.raises(ValidationError):
            await service.record_progress(InvitationId(uuid4()), "ch-1", percentage)

    @pytest.mark.asyncio
    async def test_progress_bounds_are_inclusive(self, unit_env):
        service = await unit_env.get(ReadingSessionService)
        invitation_id = InvitationId(uuid4())

        assert (await service.record_progress(invitation_id, "ch-1", 0)).completion_percentage == 0
        assert (await service.record_progress(invitation_id, "ch-4", 100)).completion_percentage == 100

    @pytest.mark.asyncio
    async def test_update_notes_replaces_notes(self, unit_env):
        service = await unit_env.get(ReadingSessionService)
        invitation_id = InvitationId(uuid4())

        await service.update_notes(invitation_id, "check the timeline")
        session = await service.update_notes(invitation_id, "")

        assert session.notes == ""
        assert (await service.get(invitation_id)).notes == ""

    @pytest.mark.asyncio
    async def test_get_does_not_create(self, unit_env):
        service = await unit_env.get(ReadingSessionService)

        with pytest.raises(NotFoundError):
            await service.get(InvitationId(uuid4()))
