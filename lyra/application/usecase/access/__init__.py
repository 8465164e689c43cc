"""Reader access use cases."""

from lyra.application.usecase.access.resolve_access import (
    ResolveAccessRequest,
    ResolveAccessResponse,
    ResolveAccessUseCase,
)

__all__ = [
    "ResolveAccessRequest",
    "ResolveAccessResponse",
    "ResolveAccessUseCase",
]
