"""Author-side invitation and reader circle routes."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import EmailStr, Field

from lyra.adapter.error import DeliveryError
from lyra.application.usecase.circle import ArchiveCircleUseCase, RenameCircleUseCase
from lyra.application.usecase.circle.archive_circle import ArchiveCircleRequest
from lyra.application.usecase.circle.rename_circle import (
    CircleUpdateResponse,
    RenameCircleRequest,
)
from lyra.application.usecase.invitation import (
    CreateInvitationsUseCase,
    ListInvitationsUseCase,
    ResendInvitationUseCase,
    RevokeInvitationUseCase,
)
from lyra.application.usecase.invitation.create_invitations import (
    CreateInvitationsRequest,
    CreateInvitationsResponse,
    ReaderInfo,
)
from lyra.application.usecase.invitation.list_invitations import (
    ListInvitationsRequest,
    ListInvitationsResponse,
)
from lyra.application.usecase.invitation.resend_invitation import (
    ResendInvitationRequest,
    ResendInvitationResponse,
)
from lyra.application.usecase.invitation.revoke_invitation import (
    RevokeInvitationRequest,
    RevokeInvitationResponse,
)
from lyra.domain.error import DomainError
from lyra.domain.service import JWTService
from lyra.interface.api.auth import authenticate_author
from lyra.interface.api.schema import CamelModel
from lyra.interface.error import to_http_exception

router = APIRouter(prefix="/readers", tags=["invitations"], route_class=DishkaRoute)

ALL_PROJECTS = "all"


class ReaderAPIInfo(CamelModel):
    """API info for a single invited reader."""

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr


class CreateInvitationsAPIRequest(CamelModel):
    """API request for inviting beta readers."""

    project_id: UUID
    chapters: list[str] = Field(min_length=1)
    readers: list[ReaderAPIInfo] = Field(min_length=1)
    expires_at: datetime
    invitation_message: str | None = None
    circle_name: str | None = Field(default=None, max_length=255)


class CircleAPIRequest(CamelModel):
    """Identifies a reader circle by its chapter selection."""

    chapters_accessible: list[str] = Field(min_length=1)


class RenameCircleAPIRequest(CircleAPIRequest):
    circle_name: str = Field(min_length=1, max_length=255)


class ArchiveCircleAPIRequest(CircleAPIRequest):
    archived: bool


@router.post(
    "/invitations",
    response_model=CreateInvitationsResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_invitations(
    request: CreateInvitationsAPIRequest,
    create_invitations_use_case: FromDishka[CreateInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateInvitationsResponse:
    """Invite one or more beta readers to selected chapters.

    Invitations are created even when some emails fail; failures are
    listed in ``email_errors``.

    Args:
        request: Project, chapters, readers and expiry
        create_invitations_use_case: Create invitations use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie

    Returns:
        Created invitations with reader links, plus per-reader email failures

    Raises:
        HTTPException: If not authenticated, project not found, or quota exceeded
    """
    author_id = authenticate_author(auth_token, jwt_service)

    try:
        use_case_request = CreateInvitationsRequest(
            author_id=author_id,
            project_id=str(request.project_id),
            chapters=request.chapters,
            readers=[
                ReaderInfo(name=reader.name, email=str(reader.email))
                for reader in request.readers
            ],
            expires_at=request.expires_at,
            invitation_message=request.invitation_message,
            circle_name=request.circle_name,
        )
        return await create_invitations_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/invitations/{project_id}", response_model=ListInvitationsResponse)
async def list_invitations(
    project_id: str,
    list_invitations_use_case: FromDishka[ListInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListInvitationsResponse:
    """List the author's invitations for one project, or ``all`` projects.

    Raises:
        HTTPException: If not authenticated or the project is not the author's
    """
    author_id = authenticate_author(auth_token, jwt_service)

    if project_id == ALL_PROJECTS:
        scope = None
    else:
        try:
            scope = str(UUID(project_id))
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"project_id must be a UUID or '{ALL_PROJECTS}'",
            )

    try:
        return await list_invitations_use_case.execute(
            ListInvitationsRequest(author_id=author_id, project_id=scope)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/invitations/{invitation_id}/resend", response_model=ResendInvitationResponse
)
async def resend_invitation(
    invitation_id: UUID,
    resend_invitation_use_case: FromDishka[ResendInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ResendInvitationResponse:
    """Email the reader link again, keeping the original token and expiry.

    Raises:
        HTTPException: 404 if not found, 410 if expired, 403 if revoked,
            502 if the email could not be delivered
    """
    author_id = authenticate_author(auth_token, jwt_service)

    try:
        return await resend_invitation_use_case.execute(
            ResendInvitationRequest(
                author_id=author_id, invitation_id=str(invitation_id)
            )
        )
    except (DomainError, DeliveryError) as e:
        raise to_http_exception(e)


@router.delete("/invitations/{invitation_id}", response_model=RevokeInvitationResponse)
async def revoke_invitation(
    invitation_id: UUID,
    revoke_invitation_use_case: FromDishka[RevokeInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RevokeInvitationResponse:
    """Revoke a reader's access. The invitation row is kept."""
    author_id = authenticate_author(auth_token, jwt_service)

    try:
        return await revoke_invitation_use_case.execute(
            RevokeInvitationRequest(
                author_id=author_id, invitation_id=str(invitation_id)
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/circles/{project_id}/name", response_model=CircleUpdateResponse)
async def rename_circle(
    project_id: UUID,
    request: RenameCircleAPIRequest,
    rename_circle_use_case: FromDishka[RenameCircleUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CircleUpdateResponse:
    """Rename every invitation sharing a chapter selection."""
    author_id = authenticate_author(auth_token, jwt_service)

    try:
        return await rename_circle_use_case.execute(
            RenameCircleRequest(
                author_id=author_id,
                project_id=str(project_id),
                chapters_accessible=request.chapters_accessible,
                circle_name=request.circle_name,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/circles/{project_id}/archive", response_model=CircleUpdateResponse)
async def archive_circle(
    project_id: UUID,
    request: ArchiveCircleAPIRequest,
    archive_circle_use_case: FromDishka[ArchiveCircleUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CircleUpdateResponse:
    """Archive or restore a reader circle."""
    author_id = authenticate_author(auth_token, jwt_service)

    try:
        return await archive_circle_use_case.execute(
            ArchiveCircleRequest(
                author_id=author_id,
                project_id=str(project_id),
                chapters_accessible=request.chapters_accessible,
                archived=request.archived,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
