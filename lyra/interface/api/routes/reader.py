"""Reader-side routes.

Readers have no account. Every route is authorized by the invitation's
access token, passed in the path for reads and in the body for writes.
"""

from typing import Any
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import Field

from lyra.application.usecase.access import ResolveAccessUseCase
from lyra.application.usecase.access.resolve_access import (
    ResolveAccessRequest,
    ResolveAccessResponse,
)
from lyra.application.usecase.marker import (
    CreateMarkerUseCase,
    DeleteMarkerUseCase,
    ListReaderMarkersUseCase,
    UpdateMarkerUseCase,
)
from lyra.application.usecase.marker.common import MarkerListResponse, MarkerResponse
from lyra.application.usecase.marker.create_marker import CreateMarkerRequest
from lyra.application.usecase.marker.delete_marker import (
    DeleteMarkerRequest,
    DeleteMarkerResponse,
)
from lyra.application.usecase.marker.list_reader_markers import (
    ListReaderMarkersRequest,
)
from lyra.application.usecase.marker.update_marker import UpdateMarkerRequest
from lyra.application.usecase.session import (
    GetNotesUseCase,
    GetSessionUseCase,
    UpdateNotesUseCase,
    UpdateProgressUseCase,
)
from lyra.application.usecase.session.get_notes import GetNotesRequest
from lyra.application.usecase.session.get_session import GetSessionRequest, SessionItem
from lyra.application.usecase.session.update_notes import (
    NotesResponse,
    UpdateNotesRequest,
)
from lyra.application.usecase.session.update_progress import (
    UpdateProgressRequest,
    UpdateProgressResponse,
)
from lyra.domain.error import DomainError
from lyra.domain.value import MarkerType
from lyra.interface.api.schema import CamelModel
from lyra.interface.error import to_http_exception

router = APIRouter(prefix="/readers", tags=["reader"], route_class=DishkaRoute)


class TokenAPIRequest(CamelModel):
    access_token: str = Field(min_length=1)


class CreateMarkerAPIRequest(TokenAPIRequest):
    """API request for leaving a marker on a scene."""

    chapter_id: str = Field(min_length=1)
    scene_id: str = Field(min_length=1)
    marker_id: str = Field(min_length=1)
    marker_type: MarkerType = MarkerType.NOTE
    marker_text: str | None = None
    highlighted_text: str | None = None
    position_data: Any = None


class UpdateMarkerAPIRequest(TokenAPIRequest):
    marker_text: str | None = None


class UpdateProgressAPIRequest(TokenAPIRequest):
    chapter_id: str = Field(min_length=1)
    completion_percentage: int


class UpdateNotesAPIRequest(TokenAPIRequest):
    notes: str


@router.get("/access/{token}", response_model=ResolveAccessResponse)
async def resolve_access(
    token: str,
    resolve_access_use_case: FromDishka[ResolveAccessUseCase],
) -> ResolveAccessResponse:
    """Open the reader's view of the granted chapters.

    The first successful access accepts the invitation. An invitation found
    past its expiry is marked expired before the 410 is returned; the write
    is kept because the request session commits once the HTTPException has
    been turned into a response.

    Raises:
        HTTPException: 404 unknown token, 403 revoked, 410 expired
    """
    try:
        return await resolve_access_use_case.execute(
            ResolveAccessRequest(access_token=token)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/markers", response_model=MarkerResponse, status_code=status.HTTP_201_CREATED
)
async def create_marker(
    request: CreateMarkerAPIRequest,
    create_marker_use_case: FromDishka[CreateMarkerUseCase],
) -> MarkerResponse:
    """Leave a marker on a scene.

    Raises:
        HTTPException: 404 unknown token, 403 expired or revoked invitation
    """
    try:
        return await create_marker_use_case.execute(
            CreateMarkerRequest(
                access_token=request.access_token,
                chapter_id=request.chapter_id,
                scene_id=request.scene_id,
                marker_id=request.marker_id,
                marker_type=request.marker_type,
                marker_text=request.marker_text,
                highlighted_text=request.highlighted_text,
                position_data=request.position_data,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/my-markers/{token}", response_model=MarkerListResponse)
async def list_my_markers(
    token: str,
    list_reader_markers_use_case: FromDishka[ListReaderMarkersUseCase],
) -> MarkerListResponse:
    """The reader's own markers, oldest first."""
    try:
        return await list_reader_markers_use_case.execute(
            ListReaderMarkersRequest(access_token=token)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/markers/{marker_pk}", response_model=MarkerResponse)
async def update_marker(
    marker_pk: UUID,
    request: UpdateMarkerAPIRequest,
    update_marker_use_case: FromDishka[UpdateMarkerUseCase],
) -> MarkerResponse:
    """Edit the text of one of the reader's markers."""
    try:
        return await update_marker_use_case.execute(
            UpdateMarkerRequest(
                marker_pk=str(marker_pk),
                access_token=request.access_token,
                marker_text=request.marker_text,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/markers/{marker_pk}", response_model=DeleteMarkerResponse)
async def delete_marker(
    marker_pk: UUID,
    request: TokenAPIRequest,
    delete_marker_use_case: FromDishka[DeleteMarkerUseCase],
) -> DeleteMarkerResponse:
    """Delete one of the reader's markers. The token travels in the body."""
    try:
        return await delete_marker_use_case.execute(
            DeleteMarkerRequest(
                marker_pk=str(marker_pk), access_token=request.access_token
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/progress", response_model=UpdateProgressResponse)
async def update_progress(
    request: UpdateProgressAPIRequest,
    update_progress_use_case: FromDishka[UpdateProgressUseCase],
) -> UpdateProgressResponse:
    """Record how far the reader has got.

    Raises:
        HTTPException: 404 unknown token, 422 percentage outside 0-100
    """
    try:
        return await update_progress_use_case.execute(
            UpdateProgressRequest(
                access_token=request.access_token,
                chapter_id=request.chapter_id,
                completion_percentage=request.completion_percentage,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/session/{token}", response_model=SessionItem)
async def get_session(
    token: str,
    get_session_use_case: FromDishka[GetSessionUseCase],
) -> SessionItem:
    """The reader's progress; 404 until the invitation has been opened."""
    try:
        return await get_session_use_case.execute(GetSessionRequest(access_token=token))
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/notes", response_model=NotesResponse)
async def update_notes(
    request: UpdateNotesAPIRequest,
    update_notes_use_case: FromDishka[UpdateNotesUseCase],
) -> NotesResponse:
    """Replace the reader's private notes."""
    try:
        return await update_notes_use_case.execute(
            UpdateNotesRequest(access_token=request.access_token, notes=request.notes)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/notes/{token}", response_model=NotesResponse)
async def get_notes(
    token: str,
    get_notes_use_case: FromDishka[GetNotesUseCase],
) -> NotesResponse:
    """The reader's private notes."""
    try:
        return await get_notes_use_case.execute(GetNotesRequest(access_token=token))
    except DomainError as e:
        raise to_http_exception(e)
