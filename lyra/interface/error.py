"""Translation of domain and adapter errors into HTTP responses."""

from fastapi import HTTPException, status

from lyra.adapter.error import DeliveryError
from lyra.domain.error import (
    DomainError,
    ExpiredError,
    ForbiddenError,
    NotFoundError,
    QuotaExceededError,
    ValidationError,
)

# Checked in order; subclasses must come before their bases
_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),  # Includes InvitationRevokedError
    (ExpiredError, status.HTTP_410_GONE),
    (QuotaExceededError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (DeliveryError, status.HTTP_502_BAD_GATEWAY),
]


def to_http_exception(error: DomainError | DeliveryError) -> HTTPException:
    """Map a domain or delivery error onto an HTTPException.

    Args:
        error: Error raised by a use case

    Returns:
        HTTPException carrying the error message as detail
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=str(error),
    )
