"""Invitation use cases."""

from lyra.application.usecase.invitation.create_invitations import (
    CreateInvitationsRequest,
    CreateInvitationsResponse,
    CreateInvitationsUseCase,
)
from lyra.application.usecase.invitation.list_invitations import (
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)
from lyra.application.usecase.invitation.resend_invitation import (
    ResendInvitationRequest,
    ResendInvitationResponse,
    ResendInvitationUseCase,
)
from lyra.application.usecase.invitation.revoke_invitation import (
    RevokeInvitationRequest,
    RevokeInvitationResponse,
    RevokeInvitationUseCase,
)

__all__ = [
    "CreateInvitationsRequest",
    "CreateInvitationsResponse",
    "CreateInvitationsUseCase",
    "ListInvitationsRequest",
    "ListInvitationsResponse",
    "ListInvitationsUseCase",
    "ResendInvitationRequest",
    "ResendInvitationResponse",
    "ResendInvitationUseCase",
    "RevokeInvitationRequest",
    "RevokeInvitationResponse",
    "RevokeInvitationUseCase",
]
