"""Marker domain service."""

from typing import Any
from uuid import uuid4

import logfire

from lyra.domain.error import NotFoundError
from lyra.domain.model.invitation import Invitation
from lyra.domain.model.marker import Marker
from lyra.domain.repository import MarkerRepository, MarkerTally
from lyra.domain.value import InvitationId, MarkerId, MarkerType
from lyra.util.clock import Clock

from .base import Service


class MarkerService(Service):
    """Reader annotations and their import into the author's manuscript."""

    def __init__(self, marker_repository: MarkerRepository, clock: Clock) -> None:
        """Initialize marker service.

        Args:
            marker_repository: Marker repository
            clock: Time source for marker timestamps
        """
        self.marker_repository = marker_repository
        self.clock = clock

    async def create(
        self,
        invitation: Invitation,
        chapter_id: str,
        scene_id: str,
        marker_id: str,
        marker_type: MarkerType = MarkerType.NOTE,
        marker_text: str | None = None,
        highlighted_text: str | None = None,
        position_data: Any = None,
    ) -> Marker:
        """Store a new annotation left through an invitation.

        The caller is responsible for checking the invitation still grants
        access. The chapter is stored as given and not checked against the
        invitation's chapters.

        Args:
            invitation: Usable invitation the reader holds
            chapter_id: Chapter annotated
            scene_id: Scene annotated
            marker_id: Reader-device marker identifier
            marker_type: Kind of annotation
            marker_text: Reader's comment
            highlighted_text: Text the reader selected
            position_data: Editor range data, stored verbatim

        Returns:
            The stored marker
        """
        with logfire.span(
            "marker_service.create",
            invitation_id=str(invitation.id),
            chapter_id=chapter_id,
            marker_type=marker_type.value,
        ):
            now = self.clock.now()
            marker = await self.marker_repository.add(
                Marker(
                    id=MarkerId(uuid4()),
                    invitation_id=invitation.id,
                    project_id=invitation.project_id,
                    chapter_id=chapter_id,
                    scene_id=scene_id,
                    marker_id=marker_id,
                    marker_type=marker_type,
                    marker_text=marker_text,
                    highlighted_text=highlighted_text,
                    position_data=position_data,
                    created_at=now,
                    updated_at=now,
                )
            )
            logfire.info(
                "Marker created",
                marker_pk=str(marker.id),
                invitation_id=str(invitation.id),
            )
            return marker

    async def list_for_invitation(self, invitation_id: InvitationId) -> list[Marker]:
        """Markers left through an invitation, oldest first."""
        return await self.marker_repository.find_by_invitation(invitation_id)

    async def get_for_invitation(
        self, marker_pk: MarkerId, invitation_id: InvitationId
    ) -> Marker:
        """Get a marker, proving it was left through the given invitation.

        Raises:
            NotFoundError: If missing or left through another invitation
        """
        marker = await self.marker_repository.find_by_id(marker_pk)
        if not marker or marker.invitation_id != invitation_id:
            logfire.warn(
                "Marker not found for invitation",
                marker_pk=str(marker_pk),
                invitation_id=str(invitation_id),
            )
            raise NotFoundError("Marker", str(marker_pk))
        return marker

    async def get(self, marker_pk: MarkerId) -> Marker:
        """Get a marker by primary key.

        Raises:
            NotFoundError: If the marker does not exist
        """
        marker = await self.marker_repository.find_by_id(marker_pk)
        if not marker:
            raise NotFoundError("Marker", str(marker_pk))
        return marker

    async def update_text(
        self, marker_pk: MarkerId, invitation_id: InvitationId, marker_text: str
    ) -> Marker:
        """Edit the reader's comment on their own marker.

        Raises:
            NotFoundError: If the marker was not left through this invitation
        """
        with logfire.span("marker_service.update_text", marker_pk=str(marker_pk)):
            marker = await self.get_for_invitation(marker_pk, invitation_id)
            return await self.marker_repository.save(
                marker.model_copy(
                    update={"marker_text": marker_text, "updated_at": self.clock.now()}
                )
            )

    async def delete(self, marker_pk: MarkerId, invitation_id: InvitationId) -> None:
        """Delete the reader's own marker.

        Raises:
            NotFoundError: If the marker was not left through this invitation
        """
        with logfire.span("marker_service.delete", marker_pk=str(marker_pk)):
            await self.get_for_invitation(marker_pk, invitation_id)
            await self.marker_repository.delete(marker_pk)
            logfire.info("Marker deleted", marker_pk=str(marker_pk))

    async def mark_imported(self, marker: Marker) -> Marker:
        """Flag a marker as copied into the manuscript.

        Importing again just refreshes ``imported_at``.
        """
        with logfire.span(
            "marker_service.mark_imported",
            marker_pk=str(marker.id),
            reimport=marker.imported_to_project,
        ):
            return await self.marker_repository.save(
                marker.model_copy(
                    update={
                        "imported_to_project": True,
                        "imported_at": self.clock.now(),
                    }
                )
            )

    async def tally(
        self, invitation_ids: list[InvitationId]
    ) -> dict[InvitationId, MarkerTally]:
        """Marker count and latest marker time per invitation."""
        if not invitation_ids:
            return {}
        return await self.marker_repository.tally_by_invitations(invitation_ids)
