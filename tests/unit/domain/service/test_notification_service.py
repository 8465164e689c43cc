"""Unit tests for NotificationService."""

import pytest

from lyra.adapter.email import MockEmailNotifier
from lyra.adapter.error import DeliveryError
from lyra.domain.repository import AuthorRepository, ProjectRepository
from lyra.domain.service import InvitationService, NotificationService, ReaderAddress
from lyra.domain.value import ChapterSet
from tests.conftest import in_days, seed_author_and_project
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _setup(unit_env):
    author, project = await seed_author_and_project(
        await unit_env.get(AuthorRepository), await unit_env.get(ProjectRepository)
    )
    invitation_service = await unit_env.get(InvitationService)
    [invitation] = await invitation_service.create_invitations(
        project_id=project.id,
        author_id=author.id,
        chapters=ChapterSet(["ch-3", "ch-1"]),
        readers=[ReaderAddress(name="Ada", email="ada@example.com")],
        expires_at=in_days(14),
        message="Be honest!",
    )
    return author, project, invitation


class TestNotificationService:
    """Tests for NotificationService.send_invitation."""

    @pytest.mark.asyncio
    async def test_builds_message_from_invitation_and_project(self, unit_env):
        # Arrange
        author, project, invitation = await _setup(unit_env)
        service = await unit_env.get(NotificationService)
        notifier = await unit_env.get(MockEmailNotifier)

        # Act
        await service.send_invitation(invitation, project, author)

        # Assert
        [email] = notifier.sent_to("ada@example.com")
        assert email.project_title == "The Lighthouse Keeper"
        assert email.author_name == "Mara Quill"
        assert email.access_token == invitation.access_token.root
        assert email.message == "Be honest!"
        assert email.chapter_names == ("The Quiet Harbour", "Undertow")

    @pytest.mark.asyncio
    async def test_delivery_failure_propagates(self, unit_env):
        author, project, invitation = await _setup(unit_env)
        service = await unit_env.get(NotificationService)
        notifier = await unit_env.get(MockEmailNotifier)
        notifier.failing.add("ada@example.com")

        with pytest.raises(DeliveryError):
            await service.send_invitation(invitation, project, author)

        assert notifier.sent == []
