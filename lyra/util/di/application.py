"""Application layer DI providers."""

from dishka import Scope, provide

from lyra.application.usecase.access import ResolveAccessUseCase
from lyra.application.usecase.circle import ArchiveCircleUseCase, RenameCircleUseCase
from lyra.application.usecase.feedback import (
    ListContactsUseCase,
    ListFeedbackReadersUseCase,
)
from lyra.application.usecase.invitation import (
    CreateInvitationsUseCase,
    ListInvitationsUseCase,
    ResendInvitationUseCase,
    RevokeInvitationUseCase,
)
from lyra.application.usecase.marker import (
    CreateMarkerUseCase,
    DeleteMarkerUseCase,
    ImportMarkerUseCase,
    ListInvitationMarkersUseCase,
    ListReaderMarkersUseCase,
    UpdateMarkerUseCase,
)
from lyra.application.usecase.session import (
    GetNotesUseCase,
    GetSessionUseCase,
    UpdateNotesUseCase,
    UpdateProgressUseCase,
)
from lyra.config import Settings
from lyra.domain.service import (
    ContactService,
    ContentFilter,
    InvitationService,
    MarkerService,
    NotificationService,
    ProjectService,
    ReadingSessionService,
)
from lyra.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invitation use cases (author)
    @provide(scope=Scope.REQUEST)
    def get_create_invitations_use_case(
        self,
        invitation_service: InvitationService,
        project_service: ProjectService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> CreateInvitationsUseCase:
        """Provide create invitations use case."""
        return CreateInvitationsUseCase(
            invitation_service=invitation_service,
            project_service=project_service,
            notification_service=notification_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_invitations_use_case(
        self,
        invitation_service: InvitationService,
        project_service: ProjectService,
        marker_service: MarkerService,
    ) -> ListInvitationsUseCase:
        """Provide list invitations use case."""
        return ListInvitationsUseCase(
            invitation_service=invitation_service,
            project_service=project_service,
            marker_service=marker_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_resend_invitation_use_case(
        self,
        invitation_service: InvitationService,
        project_service: ProjectService,
        notification_service: NotificationService,
    ) -> ResendInvitationUseCase:
        """Provide resend invitation use case."""
        return ResendInvitationUseCase(
            invitation_service=invitation_service,
            project_service=project_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_revoke_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> RevokeInvitationUseCase:
        """Provide revoke invitation use case."""
        return RevokeInvitationUseCase(invitation_service=invitation_service)

    # Circle use cases
    @provide(scope=Scope.REQUEST)
    def get_rename_circle_use_case(
        self, invitation_service: InvitationService
    ) -> RenameCircleUseCase:
        """Provide rename circle use case."""
        return RenameCircleUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_archive_circle_use_case(
        self, invitation_service: InvitationService
    ) -> ArchiveCircleUseCase:
        """Provide archive circle use case."""
        return ArchiveCircleUseCase(invitation_service=invitation_service)

    # Reader access and session use cases
    @provide(scope=Scope.REQUEST)
    def get_resolve_access_use_case(
        self,
        invitation_service: InvitationService,
        session_service: ReadingSessionService,
        project_service: ProjectService,
        content_filter: ContentFilter,
    ) -> ResolveAccessUseCase:
        """Provide resolve access use case."""
        return ResolveAccessUseCase(
            invitation_service=invitation_service,
            session_service=session_service,
            project_service=project_service,
            content_filter=content_filter,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_session_use_case(
        self,
        invitation_service: InvitationService,
        session_service: ReadingSessionService,
    ) -> GetSessionUseCase:
        """Provide get session use case."""
        return GetSessionUseCase(
            invitation_service=invitation_service, session_service=session_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_progress_use_case(
        self,
        invitation_service: InvitationService,
        session_service: ReadingSessionService,
    ) -> UpdateProgressUseCase:
        """Provide update progress use case."""
        return UpdateProgressUseCase(
            invitation_service=invitation_service, session_service=session_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_notes_use_case(
        self,
        invitation_service: InvitationService,
        session_service: ReadingSessionService,
    ) -> UpdateNotesUseCase:
        """Provide update notes use case."""
        return UpdateNotesUseCase(
            invitation_service=invitation_service, session_service=session_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_notes_use_case(
        self,
        invitation_service: InvitationService,
        session_service: ReadingSessionService,
    ) -> GetNotesUseCase:
        """Provide get notes use case."""
        return GetNotesUseCase(
            invitation_service=invitation_service, session_service=session_service
        )

    # Marker use cases
    @provide(scope=Scope.REQUEST)
    def get_create_marker_use_case(
        self,
        invitation_service: InvitationService,
        marker_service: MarkerService,
        contact_service: ContactService,
        project_service: ProjectService,
    ) -> CreateMarkerUseCase:
        """Provide create marker use case."""
        return CreateMarkerUseCase(
            invitation_service=invitation_service,
            marker_service=marker_service,
            contact_service=contact_service,
            project_service=project_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_reader_markers_use_case(
        self, invitation_service: InvitationService, marker_service: MarkerService
    ) -> ListReaderMarkersUseCase:
        """Provide list reader markers use case."""
        return ListReaderMarkersUseCase(
            invitation_service=invitation_service, marker_service=marker_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_marker_use_case(
        self, invitation_service: InvitationService, marker_service: MarkerService
    ) -> UpdateMarkerUseCase:
        """Provide update marker use case."""
        return UpdateMarkerUseCase(
            invitation_service=invitation_service, marker_service=marker_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_marker_use_case(
        self, invitation_service: InvitationService, marker_service: MarkerService
    ) -> DeleteMarkerUseCase:
        """Provide delete marker use case."""
        return DeleteMarkerUseCase(
            invitation_service=invitation_service, marker_service=marker_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_invitation_markers_use_case(
        self, invitation_service: InvitationService, marker_service: MarkerService
    ) -> ListInvitationMarkersUseCase:
        """Provide list invitation markers use case."""
        return ListInvitationMarkersUseCase(
            invitation_service=invitation_service, marker_service=marker_service
        )

    @provide(scope=Scope.REQUEST)
    def get_import_marker_use_case(
        self,
        invitation_service: InvitationService,
        marker_service: MarkerService,
        project_service: ProjectService,
    ) -> ImportMarkerUseCase:
        """Provide import marker use case."""
        return ImportMarkerUseCase(
            invitation_service=invitation_service,
            marker_service=marker_service,
            project_service=project_service,
        )

    # Feedback use cases
    @provide(scope=Scope.REQUEST)
    def get_list_feedback_readers_use_case(
        self,
        invitation_service: InvitationService,
        marker_service: MarkerService,
        project_service: ProjectService,
    ) -> ListFeedbackReadersUseCase:
        """Provide list feedback readers use case."""
        return ListFeedbackReadersUseCase(
            invitation_service=invitation_service,
            marker_service=marker_service,
            project_service=project_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_contacts_use_case(
        self, contact_service: ContactService
    ) -> ListContactsUseCase:
        """Provide list contacts use case."""
        return ListContactsUseCase(contact_service=contact_service)
