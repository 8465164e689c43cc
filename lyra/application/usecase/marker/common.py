"""Marker response items shared by the marker use cases."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from lyra.domain.model.marker import Marker
from lyra.domain.value import MarkerType


class MarkerItem(BaseModel):
    """Marker item in response."""

    id: str
    invitation_id: str
    project_id: str
    chapter_id: str
    scene_id: str
    marker_id: str
    marker_type: MarkerType
    marker_text: str | None
    highlighted_text: str | None
    position_data: Any = None
    created_at: datetime
    updated_at: datetime
    imported_to_project: bool
    imported_at: datetime | None = None
    reader_name: str | None = None

    @classmethod
    def from_marker(cls, marker: Marker, reader_name: str | None = None) -> "MarkerItem":
        return cls(
            id=str(marker.id),
            invitation_id=str(marker.invitation_id),
            project_id=str(marker.project_id),
            chapter_id=marker.chapter_id,
            scene_id=marker.scene_id,
            marker_id=marker.marker_id,
            marker_type=marker.marker_type,
            marker_text=marker.marker_text,
            highlighted_text=marker.highlighted_text,
            position_data=marker.position_data,
            created_at=marker.created_at,
            updated_at=marker.updated_at,
            imported_to_project=marker.imported_to_project,
            imported_at=marker.imported_at,
            reader_name=reader_name,
        )


class MarkerResponse(BaseModel):
    """A single marker."""

    marker: MarkerItem


class MarkerListResponse(BaseModel):
    """A list of markers, oldest first."""

    markers: list[MarkerItem]
