"""Marker repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from lyra.domain.model.marker import Marker
from lyra.domain.value import InvitationId, MarkerId


@dataclass(frozen=True)
class MarkerTally:
    """Marker count and most recent marker time for one invitation."""

    count: int
    last_created_at: datetime | None


class MarkerRepository(ABC):
    """Repository for Marker entity."""

    @abstractmethod
    async def find_by_id(self, marker_id: MarkerId) -> Marker | None:
        """Find a marker by ID.

        Args:
            marker_id: The marker's unique identifier

        Returns:
            The marker if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_invitation(self, invitation_id: InvitationId) -> list[Marker]:
        """List markers left through an invitation, oldest first.

        Args:
            invitation_id: The invitation's ID

        Returns:
            List of markers
        """
        pass

    @abstractmethod
    async def add(self, marker: Marker) -> Marker:
        """Insert a new marker.

        Args:
            marker: The marker to insert

        Returns:
            The inserted marker
        """
        pass

    @abstractmethod
    async def save(self, marker: Marker) -> Marker:
        """Update an existing marker.

        Args:
            marker: The marker to save

        Returns:
            The saved marker
        """
        pass

    @abstractmethod
    async def delete(self, marker_id: MarkerId) -> bool:
        """Delete a marker.

        Args:
            marker_id: The marker's unique identifier

        Returns:
            True if a marker was deleted
        """
        pass

    @abstractmethod
    async def tally_by_invitations(
        self, invitation_ids: list[InvitationId]
    ) -> dict[InvitationId, MarkerTally]:
        """Count markers per invitation.

        Invitations without markers are absent from the result.

        Args:
            invitation_ids: Invitations to tally

        Returns:
            Mapping of invitation ID to its tally
        """
        pass
