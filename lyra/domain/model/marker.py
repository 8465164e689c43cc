"""Reader marker entity.

Markers are annotations a beta reader leaves on a scene. They use the same
shape as the manuscript editor's own markers so an author can import them.
"""

from datetime import datetime
from typing import Any, Optional

from lyra.domain.model.common import DomainModel
from lyra.domain.value import InvitationId, MarkerId, MarkerType, ProjectId


class Marker(DomainModel):
    """Annotation left by a beta reader.

    chapter_id and scene_id are opaque references into the manuscript
    document; marker_id is generated by the reader's device and is not
    validated for uniqueness.
    """

    id: MarkerId
    invitation_id: InvitationId
    project_id: ProjectId  # Denormalized from the invitation
    chapter_id: str
    scene_id: str
    marker_id: str
    marker_type: MarkerType = MarkerType.NOTE
    marker_text: Optional[str] = None
    highlighted_text: Optional[str] = None
    position_data: Optional[Any] = None  # Editor range data, stored verbatim
    created_at: datetime
    updated_at: datetime
    imported_to_project: bool = False
    imported_at: Optional[datetime] = None
