"""Author-side feedback routes: reader markers, feedback summary, contacts."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from lyra.application.usecase.feedback import (
    ListContactsUseCase,
    ListFeedbackReadersUseCase,
)
from lyra.application.usecase.feedback.list_contacts import (
    ListContactsRequest,
    ListContactsResponse,
)
from lyra.application.usecase.feedback.list_feedback_readers import (
    ListFeedbackReadersRequest,
    ListFeedbackReadersResponse,
)
from lyra.application.usecase.marker import (
    ImportMarkerUseCase,
    ListInvitationMarkersUseCase,
)
from lyra.application.usecase.marker.common import MarkerListResponse
from lyra.application.usecase.marker.import_marker import (
    ImportMarkerRequest,
    ImportMarkerResponse,
)
from lyra.application.usecase.marker.list_invitation_markers import (
    ListInvitationMarkersRequest,
)
from lyra.domain.error import DomainError
from lyra.domain.service import JWTService
from lyra.interface.api.auth import authenticate_author
from lyra.interface.error import to_http_exception

router = APIRouter(prefix="/readers", tags=["feedback"], route_class=DishkaRoute)


@router.get("/markers/{invitation_id}", response_model=MarkerListResponse)
async def list_invitation_markers(
    invitation_id: UUID,
    list_invitation_markers_use_case: FromDishka[ListInvitationMarkersUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkerListResponse:
    """List markers one reader left, oldest first.

    Raises:
        HTTPException: If not authenticated or the invitation is not the author's
    """
    author_id = authenticate_author(auth_token, jwt_service)

    try:
        return await list_invitation_markers_use_case.execute(
            ListInvitationMarkersRequest(
                author_id=author_id, invitation_id=str(invitation_id)
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/markers/{marker_pk}/import",
    response_model=ImportMarkerResponse,
)
async def import_marker(
    marker_pk: UUID,
    import_marker_use_case: FromDishka[ImportMarkerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ImportMarkerResponse:
    """Import a reader marker into the author's manuscript.

    Returns the annotation in the editor's own shape; the editor stores it.
    Importing again is allowed.
    """
    author_id = authenticate_author(auth_token, jwt_service)

    try:
        return await import_marker_use_case.execute(
            ImportMarkerRequest(author_id=author_id, marker_pk=str(marker_pk))
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/feedback/{project_id}", response_model=ListFeedbackReadersResponse)
async def list_feedback_readers(
    project_id: UUID,
    list_feedback_readers_use_case: FromDishka[ListFeedbackReadersUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListFeedbackReadersResponse:
    """Readers who left feedback on a project, most recent first."""
    author_id = authenticate_author(auth_token, jwt_service)

    try:
        return await list_feedback_readers_use_case.execute(
            ListFeedbackReadersRequest(author_id=author_id, project_id=str(project_id))
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/contacts", response_model=ListContactsResponse)
async def list_contacts(
    list_contacts_use_case: FromDishka[ListContactsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListContactsResponse:
    """Everyone who has given the author feedback, for acknowledgements."""
    author_id = authenticate_author(auth_token, jwt_service)
    return await list_contacts_use_case.execute(
        ListContactsRequest(author_id=author_id)
    )
