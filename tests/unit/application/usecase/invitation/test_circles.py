"""Unit tests for reader circle use cases."""

from uuid import uuid4

import pytest

from lyra.application.usecase.circle import (
    ArchiveCircleRequest,
    ArchiveCircleUseCase,
    RenameCircleRequest,
    RenameCircleUseCase,
)
from lyra.application.usecase.invitation import (
    ListInvitationsRequest,
    ListInvitationsUseCase,
)
from lyra.domain.error import NotFoundError, ValidationError
from lyra.domain.repository import AuthorRepository, ProjectRepository
from lyra.domain.service import InvitationService, ReaderAddress
from lyra.domain.value import ChapterSet
from tests.conftest import in_days, seed_author_and_project
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _circle(unit_env):
    author, project = await seed_author_and_project(
        await unit_env.get(AuthorRepository), await unit_env.get(ProjectRepository)
    )
    service = await unit_env.get(InvitationService)
    await service.create_invitations(
        project_id=project.id,
        author_id=author.id,
        chapters=ChapterSet(["ch-1", "ch-3"]),
        readers=[
            ReaderAddress(name="Ada", email="ada@example.com"),
            ReaderAddress(name="Ben", email="ben@example.com"),
        ],
        expires_at=in_days(7),
    )
    return author, project


class TestCircleUseCases:
    """Tests for RenameCircleUseCase and ArchiveCircleUseCase."""

    @pytest.mark.asyncio
    async def test_rename(self, unit_env):
        # Arrange
        author, project = await _circle(unit_env)
        use_case = await unit_env.get(RenameCircleUseCase)
        listing = await unit_env.get(ListInvitationsUseCase)

        # Act
        response = await use_case.execute(
            RenameCircleRequest(
                author_id=str(author.id),
                project_id=str(project.id),
                chapters_accessible=["ch-3", "ch-1"],
                circle_name="Writing group",
            )
        )

        # Assert
        assert response.updated == 2
        assert response.message == "Circle name updated successfully"
        listed = await listing.execute(ListInvitationsRequest(author_id=str(author.id)))
        assert {i.circle_name for i in listed.invitations} == {"Writing group"}

    @pytest.mark.asyncio
    async def test_archive(self, unit_env):
        author, project = await _circle(unit_env)
        use_case = await unit_env.get(ArchiveCircleUseCase)

        response = await use_case.execute(
            ArchiveCircleRequest(
                author_id=str(author.id),
                project_id=str(project.id),
                chapters_accessible=["ch-1", "ch-3"],
                archived=True,
            )
        )

        assert response.updated == 2

    @pytest.mark.asyncio
    async def test_empty_chapter_list(self, unit_env):
        author, project = await _circle(unit_env)
        use_case = await unit_env.get(RenameCircleUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                RenameCircleRequest(
                    author_id=str(author.id),
                    project_id=str(project.id),
                    chapters_accessible=[],
                    circle_name="Nobody",
                )
            )

    @pytest.mark.asyncio
    async def test_other_author(self, unit_env):
        _, project = await _circle(unit_env)
        use_case = await unit_env.get(ArchiveCircleUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ArchiveCircleRequest(
                    author_id=str(uuid4()),
                    project_id=str(project.id),
                    chapters_accessible=["ch-1", "ch-3"],
                    archived=True,
                )
            )
