"""Reader circle use cases."""

from lyra.application.usecase.circle.archive_circle import (
    ArchiveCircleRequest,
    ArchiveCircleUseCase,
)
from lyra.application.usecase.circle.rename_circle import (
    CircleUpdateResponse,
    RenameCircleRequest,
    RenameCircleUseCase,
)

__all__ = [
    "ArchiveCircleRequest",
    "ArchiveCircleUseCase",
    "CircleUpdateResponse",
    "RenameCircleRequest",
    "RenameCircleUseCase",
]
