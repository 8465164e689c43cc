"""Marker use cases."""

from lyra.application.usecase.marker.common import (
    MarkerItem,
    MarkerListResponse,
    MarkerResponse,
)
from lyra.application.usecase.marker.create_marker import (
    CreateMarkerRequest,
    CreateMarkerUseCase,
)
from lyra.application.usecase.marker.delete_marker import (
    DeleteMarkerRequest,
    DeleteMarkerResponse,
    DeleteMarkerUseCase,
)
from lyra.application.usecase.marker.import_marker import (
    ImportMarkerRequest,
    ImportMarkerResponse,
    ImportMarkerUseCase,
    ManuscriptAnnotation,
)
from lyra.application.usecase.marker.list_invitation_markers import (
    ListInvitationMarkersRequest,
    ListInvitationMarkersUseCase,
)
from lyra.application.usecase.marker.list_reader_markers import (
    ListReaderMarkersRequest,
    ListReaderMarkersUseCase,
)
from lyra.application.usecase.marker.update_marker import (
    UpdateMarkerRequest,
    UpdateMarkerUseCase,
)

__all__ = [
    "CreateMarkerRequest",
    "CreateMarkerUseCase",
    "DeleteMarkerRequest",
    "DeleteMarkerResponse",
    "DeleteMarkerUseCase",
    "ImportMarkerRequest",
    "ImportMarkerResponse",
    "ImportMarkerUseCase",
    "ListInvitationMarkersRequest",
    "ListInvitationMarkersUseCase",
    "ListReaderMarkersRequest",
    "ListReaderMarkersUseCase",
    "ManuscriptAnnotation",
    "MarkerItem",
    "MarkerListResponse",
    "MarkerResponse",
    "UpdateMarkerRequest",
    "UpdateMarkerUseCase",
]
