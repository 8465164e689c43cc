"""Author authentication for API routes.

Authors are signed in by the account service, which sets a JWT in the
``auth_token`` cookie. Readers never authenticate; their access token is
the capability.
"""

from uuid import UUID

from fastapi import HTTPException, status

from lyra.domain.service import JWTService
from lyra.util.jwt import JWTError


def authenticate_author(auth_token: str | None, jwt_service: JWTService) -> str:
    """Verify the author cookie and return the author's user ID.

    Args:
        auth_token: JWT token from cookie
        jwt_service: JWT service for token verification

    Returns:
        The author's user ID as a string

    Raises:
        HTTPException: 401 if the cookie is missing or invalid
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        payload = jwt_service.verify_token(auth_token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )

    try:
        UUID(payload.user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token subject",
        )

    return payload.user_id
