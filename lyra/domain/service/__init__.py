"""Domain services."""

from .base import Service
from .contact_service import ContactService
from .content_filter import ContentFilter
from .invitation_service import InvitationService, ReaderAddress
from .jwt_service import JWTService
from .marker_service import MarkerService
from .notification_service import (
    NotificationService,
    ReaderInvitationEmail,
    ReaderNotifier,
)
from .project_service import ProjectService
from .reading_session_service import ReadingSessionService
from .token_service import AccessTokenIssuer

__all__ = [
    "AccessTokenIssuer",
    "ContactService",
    "ContentFilter",
    "InvitationService",
    "JWTService",
    "MarkerService",
    "NotificationService",
    "ProjectService",
    "ReaderAddress",
    "ReaderInvitationEmail",
    "ReaderNotifier",
    "ReadingSessionService",
    "Service",
]
