"""Reading session use cases."""

from lyra.application.usecase.session.get_notes import (
    GetNotesRequest,
    GetNotesUseCase,
)
from lyra.application.usecase.session.get_session import (
    GetSessionRequest,
    GetSessionUseCase,
    SessionItem,
)
from lyra.application.usecase.session.update_notes import (
    NotesResponse,
    UpdateNotesRequest,
    UpdateNotesUseCase,
)
from lyra.application.usecase.session.update_progress import (
    UpdateProgressRequest,
    UpdateProgressResponse,
    UpdateProgressUseCase,
)

__all__ = [
    "GetNotesRequest",
    "GetNotesUseCase",
    "GetSessionRequest",
    "GetSessionUseCase",
    "NotesResponse",
    "SessionItem",
    "UpdateNotesRequest",
    "UpdateNotesUseCase",
    "UpdateProgressRequest",
    "UpdateProgressResponse",
    "UpdateProgressUseCase",
]
