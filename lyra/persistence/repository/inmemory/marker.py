"""In-memory marker repository for testing."""

from typing import Optional

from lyra.domain.model.marker import Marker
from lyra.domain.repository.marker import MarkerRepository, MarkerTally
from lyra.domain.value import InvitationId, MarkerId


class InMemoryMarkerRepository(MarkerRepository):
    """In-memory implementation of MarkerRepository for testing."""

    def __init__(self) -> None:
        self._markers: dict[MarkerId, Marker] = {}

    async def find_by_id(self, marker_id: MarkerId) -> Optional[Marker]:
        return self._markers.get(marker_id)

    async def find_by_invitation(self, invitation_id: InvitationId) -> list[Marker]:
        found = [m for m in self._markers.values() if m.invitation_id == invitation_id]
        return sorted(found, key=lambda m: m.created_at)

    async def add(self, marker: Marker) -> Marker:
        self._markers[marker.id] = marker
        return marker

    async def save(self, marker: Marker) -> Marker:
        self._markers[marker.id] = marker
        return marker

    async def delete(self, marker_id: MarkerId) -> bool:
        return self._markers.pop(marker_id, None) is not None

    async def tally_by_invitations(
        self, invitation_ids: list[InvitationId]
    ) -> dict[InvitationId, MarkerTally]:
        wanted = set(invitation_ids)
        tallies: dict[InvitationId, MarkerTally] = {}
        for marker in self._markers.values():
            if marker.invitation_id not in wanted:
                continue
            current = tallies.get(marker.invitation_id)
            if current is None:
                tallies[marker.invitation_id] = MarkerTally(1, marker.created_at)
            else:
                latest = max(current.last_created_at, marker.created_at)
                tallies[marker.invitation_id] = MarkerTally(current.count + 1, latest)
        return tallies
