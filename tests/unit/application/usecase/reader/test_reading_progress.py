"""Unit tests for reading progress and notes use cases."""

from datetime import timedelta

import pytest

from lyra.application.usecase.session import (
    GetNotesRequest,
    GetNotesUseCase,
    GetSessionRequest,
    GetSessionUseCase,
    UpdateNotesRequest,
    UpdateNotesUseCase,
    UpdateProgressRequest,
    UpdateProgressUseCase,
)
from lyra.domain.error import NotFoundError, ValidationError
from lyra.domain.repository import AuthorRepository, ProjectRepository
from lyra.domain.service import InvitationService, ReaderAddress
from lyra.domain.value import ChapterSet
from lyra.util.clock import FrozenClock
from tests.conftest import T0, in_days, seed_author_and_project
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _token(unit_env) -> str:
    author, project = await seed_author_and_project(
        await unit_env.get(AuthorRepository), await unit_env.get(ProjectRepository)
    )
    service = await unit_env.get(InvitationService)
    [invitation] = await service.create_invitations(
        project_id=project.id,
        author_id=author.id,
        chapters=ChapterSet(["ch-1", "ch-2", "ch-3"]),
        readers=[ReaderAddress(name="Ada", email="ada@example.com")],
        expires_at=in_days(7),
    )
    return invitation.access_token.root


class TestUpdateProgressUseCase:
    """Tests for UpdateProgressUseCase."""

    @pytest.mark.asyncio
    async def test_progress_creates_session_lazily(self, unit_env):
        # Arrange
        token = await _token(unit_env)
        use_case = await unit_env.get(UpdateProgressUseCase)

        # Act
        response = await use_case.execute(
            UpdateProgressRequest(
                access_token=token, chapter_id="ch-2", completion_percentage=40
            )
        )

        # Assert
        assert response.message == "Progress updated"
        assert response.session.chapters_read == ["ch-2"]
        assert response.session.last_chapter_id == "ch-2"
        assert response.session.completion_percentage == 40

    @pytest.mark.asyncio
    async def test_progress_touches_invitation_activity(self, unit_env):
        token = await _token(unit_env)
        clock = await unit_env.get(FrozenClock)
        clock.advance(timedelta(hours=6))
        use_case = await unit_env.get(UpdateProgressUseCase)
        invitation_service = await unit_env.get(InvitationService)

        await use_case.execute(
            UpdateProgressRequest(
                access_token=token, chapter_id="ch-1", completion_percentage=10
            )
        )

        invitation = await invitation_service.get_by_token(token)
        assert invitation.last_activity_at == T0 + timedelta(hours=6)

    @pytest.mark.asyncio
    async def test_progress_out_of_range(self, unit_env):
        token = await _token(unit_env)
        use_case = await unit_env.get(UpdateProgressUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdateProgressRequest(
                    access_token=token, chapter_id="ch-1", completion_percentage=120
                )
            )

    @pytest.mark.asyncio
    async def test_progress_unknown_token(self, unit_env):
        use_case = await unit_env.get(UpdateProgressUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateProgressRequest(
                    access_token="a" * 64, chapter_id="ch-1", completion_percentage=1
                )
            )


class TestSessionAndNotes:
    """Tests for GetSession, UpdateNotes and GetNotes."""

    @pytest.mark.asyncio
    async def test_session_missing_until_reader_starts(self, unit_env):
        token = await _token(unit_env)
        use_case = await unit_env.get(GetSessionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetSessionRequest(access_token=token))

    @pytest.mark.asyncio
    async def test_notes_round_trip(self, unit_env):
        # Arrange
        token = await _token(unit_env)
        update = await unit_env.get(UpdateNotesUseCase)
        get_notes = await unit_env.get(GetNotesUseCase)
        get_session = await unit_env.get(GetSessionUseCase)

        # Act
        saved = await update.execute(
            UpdateNotesRequest(access_token=token, notes="Ch 2 drags a bit")
        )
        fetched = await get_notes.execute(GetNotesRequest(access_token=token))
        session = await get_session.execute(GetSessionRequest(access_token=token))

        # Assert
        assert saved.notes == "Ch 2 drags a bit"
        assert fetched.notes == "Ch 2 drags a bit"
        assert session.notes == "Ch 2 drags a bit"

    @pytest.mark.asyncio
    async def test_notes_need_a_session(self, unit_env):
        token = await _token(unit_env)
        get_notes = await unit_env.get(GetNotesUseCase)

        with pytest.raises(NotFoundError):
            await get_notes.execute(GetNotesRequest(access_token=token))
