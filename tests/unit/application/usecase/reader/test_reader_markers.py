"""Unit tests for the reader's marker use cases."""

from datetime import timedelta
from uuid import uuid4

import pytest

from lyra.application.usecase.marker import (
    CreateMarkerRequest,
    CreateMarkerUseCase,
    DeleteMarkerRequest,
    DeleteMarkerUseCase,
    ListReaderMarkersRequest,
    ListReaderMarkersUseCase,
    UpdateMarkerRequest,
    UpdateMarkerUseCase,
)
from lyra.domain.error import ForbiddenError, NotFoundError
from lyra.domain.repository import (
    AuthorRepository,
    InvitationRepository,
    ProjectRepository,
)
from lyra.domain.service import InvitationService, ReaderAddress
from lyra.domain.value import ChapterSet, MarkerType
from lyra.util.clock import FrozenClock
from tests.conftest import T0, in_days, seed_author_and_project
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _invitations(unit_env):
    author, project = await seed_author_and_project(
        await unit_env.get(AuthorRepository), await unit_env.get(ProjectRepository)
    )
    service = await unit_env.get(InvitationService)
    ada, ben = await service.create_invitations(
        project_id=project.id,
        author_id=author.id,
        chapters=ChapterSet(["ch-1", "ch-2"]),
        readers=[
            ReaderAddress(name="Ada", email="ada@example.com"),
            ReaderAddress(name="Ben", email="ben@example.com"),
        ],
        expires_at=in_days(7),
    )
    return author, ada, ben


def _marker_request(invitation, marker_id="m-1", **overrides) -> CreateMarkerRequest:
    fields = dict(
        access_token=invitation.access_token.root,
        chapter_id="ch-1",
        scene_id="s-1",
        marker_id=marker_id,
        marker_type=MarkerType.SUGGESTION,
        marker_text="Cut this paragraph?",
        highlighted_text="The sea was grey.",
        position_data={"from": 10, "to": 27},
    )
    fields.update(overrides)
    return CreateMarkerRequest(**fields)


class TestCreateMarkerUseCase:
    """Tests for CreateMarkerUseCase."""

    @pytest.mark.asyncio
    async def test_create_marker(self, unit_env):
        # Arrange
        _, ada, _ = await _invitations(unit_env)
        use_case = await unit_env.get(CreateMarkerUseCase)
        invitation_repo = await unit_env.get(InvitationRepository)

        # Act
        response = await use_case.execute(_marker_request(ada))

        # Assert
        marker = response.marker
        assert marker.invitation_id == str(ada.id)
        assert marker.project_id == str(ada.project_id)
        assert marker.marker_type == MarkerType.SUGGESTION
        assert marker.position_data == {"from": 10, "to": 27}
        assert not marker.imported_to_project

        stored = await invitation_repo.find_by_id(ada.id)
        assert stored.last_activity_at == T0

    @pytest.mark.asyncio
    async def test_pending_invitation_can_annotate(self, unit_env):
        """Creating a marker does not require the reader to open the link first."""
        _, ada, _ = await _invitations(unit_env)
        use_case = await unit_env.get(CreateMarkerUseCase)

        response = await use_case.execute(_marker_request(ada))

        assert response.marker.marker_id == "m-1"

    @pytest.mark.asyncio
    async def test_revoked_invitation_cannot_annotate(self, unit_env):
        author, ada, _ = await _invitations(unit_env)
        service = await unit_env.get(InvitationService)
        await service.revoke(ada.id, author.id)
        use_case = await unit_env.get(CreateMarkerUseCase)

        with pytest.raises(ForbiddenError):
            await use_case.execute(_marker_request(ada))

    @pytest.mark.asyncio
    async def test_expired_invitation_cannot_annotate(self, unit_env):
        _, ada, _ = await _invitations(unit_env)
        clock = await unit_env.get(FrozenClock)
        clock.set(in_days(8))
        use_case = await unit_env.get(CreateMarkerUseCase)

        with pytest.raises(ForbiddenError):
            await use_case.execute(_marker_request(ada))

    @pytest.mark.asyncio
    async def test_unknown_token(self, unit_env):
        use_case = await unit_env.get(CreateMarkerUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateMarkerRequest(
                    access_token="nope", chapter_id="c", scene_id="s", marker_id="m"
                )
            )


class TestReaderMarkerEditing:
    """Tests for listing, editing and deleting a reader's own markers."""

    @pytest.mark.asyncio
    async def test_list_only_own_markers(self, unit_env):
        # Arrange
        _, ada, ben = await _invitations(unit_env)
        create = await unit_env.get(CreateMarkerUseCase)
        await create.execute(_marker_request(ada, "m-1"))
        await create.execute(_marker_request(ada, "m-2"))
        await create.execute(_marker_request(ben, "m-3"))
        use_case = await unit_env.get(ListReaderMarkersUseCase)

        # Act
        response = await use_case.execute(
            ListReaderMarkersRequest(access_token=ada.access_token.root)
        )

        # Assert
        assert [m.marker_id for m in response.markers] == ["m-1", "m-2"]

    @pytest.mark.asyncio
    async def test_update_own_marker(self, unit_env):
        _, ada, _ = await _invitations(unit_env)
        create = await unit_env.get(CreateMarkerUseCase)
        created = await create.execute(_marker_request(ada))
        use_case = await unit_env.get(UpdateMarkerUseCase)

        response = await use_case.execute(
            UpdateMarkerRequest(
                marker_pk=created.marker.id,
                access_token=ada.access_token.root,
                marker_text="Keep it after all",
            )
        )

        assert response.marker.marker_text == "Keep it after all"

    @pytest.mark.asyncio
    async def test_cannot_touch_another_readers_marker(self, unit_env):
        # Arrange
        _, ada, ben = await _invitations(unit_env)
        create = await unit_env.get(CreateMarkerUseCase)
        created = await create.execute(_marker_request(ada))
        update = await unit_env.get(UpdateMarkerUseCase)
        delete = await unit_env.get(DeleteMarkerUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await update.execute(
                UpdateMarkerRequest(
                    marker_pk=created.marker.id,
                    access_token=ben.access_token.root,
                    marker_text="Hijacked",
                )
            )
        with pytest.raises(NotFoundError):
            await delete.execute(
                DeleteMarkerRequest(
                    marker_pk=created.marker.id, access_token=ben.access_token.root
                )
            )

    @pytest.mark.asyncio
    async def test_delete_own_marker(self, unit_env):
        _, ada, _ = await _invitations(unit_env)
        create = await unit_env.get(CreateMarkerUseCase)
        created = await create.execute(_marker_request(ada))
        delete = await unit_env.get(DeleteMarkerUseCase)
        listing = await unit_env.get(ListReaderMarkersUseCase)

        response = await delete.execute(
            DeleteMarkerRequest(
                marker_pk=created.marker.id, access_token=ada.access_token.root
            )
        )

        assert response.message == "Marker deleted successfully"
        remaining = await listing.execute(
            ListReaderMarkersRequest(access_token=ada.access_token.root)
        )
        assert remaining.markers == []

    @pytest.mark.asyncio
    async def test_delete_unknown_marker(self, unit_env):
        _, ada, _ = await _invitations(unit_env)
        delete = await unit_env.get(DeleteMarkerUseCase)

        with pytest.raises(NotFoundError):
            await delete.execute(
                DeleteMarkerRequest(
                    marker_pk=str(uuid4()), access_token=ada.access_token.root
                )
            )

    @pytest.mark.asyncio
    async def test_edit_and_delete_record_activity(self, unit_env):
        """Should move the invitation's last activity forward on every change."""
        # Arrange
        _, ada, _ = await _invitations(unit_env)
        create = await unit_env.get(CreateMarkerUseCase)
        created = await create.execute(_marker_request(ada))
        service = await unit_env.get(InvitationService)
        clock = await unit_env.get(FrozenClock)
        update = await unit_env.get(UpdateMarkerUseCase)
        delete = await unit_env.get(DeleteMarkerUseCase)

        # Act & Assert
        clock.advance(timedelta(hours=1))
        await update.execute(
            UpdateMarkerRequest(
                marker_pk=created.marker.id,
                access_token=ada.access_token.root,
                marker_text="Softer wording",
            )
        )
        assert (await service.get(ada.id)).last_activity_at == T0 + timedelta(hours=1)

        clock.advance(timedelta(hours=1))
        await delete.execute(
            DeleteMarkerRequest(
                marker_pk=created.marker.id, access_token=ada.access_token.root
            )
        )
        assert (await service.get(ada.id)).last_activity_at == T0 + timedelta(hours=2)
