"""Unit tests for the author's feedback use cases."""

from datetime import timedelta
from uuid import uuid4

import pytest

from lyra.application.usecase.feedback import (
    ListContactsRequest,
    ListContactsUseCase,
    ListFeedbackReadersRequest,
    ListFeedbackReadersUseCase,
)
from lyra.application.usecase.marker import (
    CreateMarkerRequest,
    CreateMarkerUseCase,
    ImportMarkerRequest,
    ImportMarkerUseCase,
    ListInvitationMarkersRequest,
    ListInvitationMarkersUseCase,
)
from lyra.domain.error import NotFoundError
from lyra.domain.repository import AuthorRepository, ProjectRepository
from lyra.domain.service import InvitationService, ReaderAddress
from lyra.domain.value import ChapterSet, MarkerType
from lyra.util.clock import FrozenClock
from tests.conftest import T0, in_days, seed_author_and_project
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _project_with_readers(unit_env, title="The Lighthouse Keeper", author=None):
    author, project = await seed_author_and_project(
        await unit_env.get(AuthorRepository),
        await unit_env.get(ProjectRepository),
        title=title,
        author=author,
    )
    service = await unit_env.get(InvitationService)
    invitations = await service.create_invitations(
        project_id=project.id,
        author_id=author.id,
        chapters=ChapterSet(["ch-1", "ch-2"]),
        readers=[
            ReaderAddress(name="Ada", email="ada@example.com"),
            ReaderAddress(name="Ben", email="ben@example.com"),
            ReaderAddress(name="Cy", email="cy@example.com"),
        ],
        expires_at=in_days(7),
    )
    return author, project, invitations


async def _annotate(unit_env, invitation, marker_id="m-1", text="Love this line"):
    use_case = await unit_env.get(CreateMarkerUseCase)
    response = await use_case.execute(
        CreateMarkerRequest(
            access_token=invitation.access_token.root,
            chapter_id="ch-2",
            scene_id="s-2",
            marker_id=marker_id,
            marker_type=MarkerType.HIGHLIGHT,
            marker_text=text,
            highlighted_text="salt in the hinges",
            position_data={"from": 4, "to": 22},
        )
    )
    return response.marker


class TestListInvitationMarkersUseCase:
    """Tests for ListInvitationMarkersUseCase."""

    @pytest.mark.asyncio
    async def test_lists_markers_with_reader_name(self, unit_env):
        author, _, (ada, _, _) = await _project_with_readers(unit_env)
        await _annotate(unit_env, ada, "m-1")
        await _annotate(unit_env, ada, "m-2")
        use_case = await unit_env.get(ListInvitationMarkersUseCase)

        response = await use_case.execute(
            ListInvitationMarkersRequest(
                author_id=str(author.id), invitation_id=str(ada.id)
            )
        )

        assert [m.marker_id for m in response.markers] == ["m-1", "m-2"]
        assert all(m.reader_name == "Ada" for m in response.markers)

    @pytest.mark.asyncio
    async def test_other_author_cannot_read_feedback(self, unit_env):
        _, _, (ada, _, _) = await _project_with_readers(unit_env)
        use_case = await unit_env.get(ListInvitationMarkersUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ListInvitationMarkersRequest(
                    author_id=str(uuid4()), invitation_id=str(ada.id)
                )
            )


class TestImportMarkerUseCase:
    """Tests for ImportMarkerUseCase."""

    @pytest.mark.asyncio
    async def test_import_returns_editor_annotation(self, unit_env):
        """Should prefix the text with the reader's name and flag the marker."""
        # Arrange
        author, _, (ada, _, _) = await _project_with_readers(unit_env)
        marker = await _annotate(unit_env, ada, text="Love this line")
        use_case = await unit_env.get(ImportMarkerUseCase)
        listing = await unit_env.get(ListInvitationMarkersUseCase)

        # Act
        response = await use_case.execute(
            ImportMarkerRequest(author_id=str(author.id), marker_pk=marker.id)
        )

        # Assert
        annotation = response.marker
        assert annotation.id == "m-1"
        assert annotation.type == MarkerType.HIGHLIGHT
        assert annotation.text == "[Ada]\nLove this line"
        assert annotation.chapter_id == "ch-2"
        assert annotation.is_reader_feedback

        dumped = annotation.model_dump(by_alias=True)
        assert dumped["readerName"] == "Ada"
        assert dumped["positionData"] == {"from": 4, "to": 22}
        assert dumped["isReaderFeedback"] is True

        stored = await listing.execute(
            ListInvitationMarkersRequest(
                author_id=str(author.id), invitation_id=str(ada.id)
            )
        )
        assert stored.markers[0].imported_to_project
        assert stored.markers[0].imported_at == T0

    @pytest.mark.asyncio
    async def test_import_twice(self, unit_env):
        author, _, (ada, _, _) = await _project_with_readers(unit_env)
        marker = await _annotate(unit_env, ada)
        use_case = await unit_env.get(ImportMarkerUseCase)
        clock = await unit_env.get(FrozenClock)
        request = ImportMarkerRequest(author_id=str(author.id), marker_pk=marker.id)

        first = await use_case.execute(request)
        clock.advance(timedelta(days=1))
        second = await use_case.execute(request)

        assert first.marker == second.marker

    @pytest.mark.asyncio
    async def test_import_without_text(self, unit_env):
        author, _, (ada, _, _) = await _project_with_readers(unit_env)
        marker = await _annotate(unit_env, ada, text=None)
        use_case = await unit_env.get(ImportMarkerUseCase)

        response = await use_case.execute(
            ImportMarkerRequest(author_id=str(author.id), marker_pk=marker.id)
        )

        assert response.marker.text == "[Ada]\n"

    @pytest.mark.asyncio
    async def test_import_someone_elses_marker(self, unit_env):
        _, _, (ada, _, _) = await _project_with_readers(unit_env)
        marker = await _annotate(unit_env, ada)
        use_case = await unit_env.get(ImportMarkerUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ImportMarkerRequest(author_id=str(uuid4()), marker_pk=marker.id)
            )


class TestListFeedbackReadersUseCase:
    """Tests for ListFeedbackReadersUseCase."""

    @pytest.mark.asyncio
    async def test_only_readers_with_markers_most_recent_first(self, unit_env):
        # Arrange
        author, project, (ada, ben, _) = await _project_with_readers(unit_env)
        clock = await unit_env.get(FrozenClock)
        await _annotate(unit_env, ada, "m-1")
        clock.advance(timedelta(hours=1))
        await _annotate(unit_env, ben, "m-2")
        clock.advance(timedelta(hours=1))
        await _annotate(unit_env, ada, "m-3")
        clock.advance(timedelta(hours=1))
        await _annotate(unit_env, ben, "m-4")
        await _annotate(unit_env, ben, "m-5")
        use_case = await unit_env.get(ListFeedbackReadersUseCase)

        # Act
        response = await use_case.execute(
            ListFeedbackReadersRequest(
                author_id=str(author.id), project_id=str(project.id)
            )
        )

        # Assert
        assert [(r.reader_name, r.marker_count) for r in response.readers] == [
            ("Ben", 3),
            ("Ada", 2),
        ]
        assert response.readers[0].last_feedback_at == T0 + timedelta(hours=3)

    @pytest.mark.asyncio
    async def test_project_must_be_owned(self, unit_env):
        _, project, _ = await _project_with_readers(unit_env)
        use_case = await unit_env.get(ListFeedbackReadersUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ListFeedbackReadersRequest(
                    author_id=str(uuid4()), project_id=str(project.id)
                )
            )


class TestListContactsUseCase:
    """Tests for the reader contact rollup."""

    @pytest.mark.asyncio
    async def test_contacts_roll_up_across_projects(self, unit_env):
        # Arrange
        author, _, (ada, ben, _) = await _project_with_readers(unit_env)
        _, _, (ada_again, _, _) = await _project_with_readers(
            unit_env, title="Second Book", author=author
        )
        clock = await unit_env.get(FrozenClock)

        await _annotate(unit_env, ada, "m-1")
        clock.advance(timedelta(hours=1))
        await _annotate(unit_env, ben, "m-2")
        clock.advance(timedelta(hours=1))
        await _annotate(unit_env, ada_again, "m-3")
        await _annotate(unit_env, ada_again, "m-4")
        use_case = await unit_env.get(ListContactsUseCase)

        # Act
        response = await use_case.execute(ListContactsRequest(author_id=str(author.id)))

        # Assert
        assert [c.reader_email for c in response.contacts] == [
            "ada@example.com",
            "ben@example.com",
        ]
        ada_contact = response.contacts[0]
        assert ada_contact.total_annotations == 3
        assert ada_contact.projects_reviewed == ["The Lighthouse Keeper", "Second Book"]
        assert ada_contact.first_feedback_at == T0
        assert ada_contact.last_feedback_at == T0 + timedelta(hours=2)

    @pytest.mark.asyncio
    async def test_contacts_are_per_author(self, unit_env):
        await _project_with_readers(unit_env)
        use_case = await unit_env.get(ListContactsUseCase)

        response = await use_case.execute(ListContactsRequest(author_id=str(uuid4())))

        assert response.contacts == []
