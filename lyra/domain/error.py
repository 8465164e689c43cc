"""Domain layer errors.

``NotFoundError`` deliberately covers both "does not exist" and "exists but
belongs to someone else" so responses never reveal foreign records.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found or not owned."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when an invitation no longer grants the requested access."""

    pass


class InvitationRevokedError(ForbiddenError):
    """Raised when acting on an invitation the author revoked."""

    def __init__(self, invitation_id: str):
        self.invitation_id = invitation_id
        super().__init__(f"Invitation {invitation_id} has been revoked")


class ExpiredError(DomainError):
    """Raised when an invitation is past its expiration time."""

    def __init__(self, invitation_id: str):
        self.invitation_id = invitation_id
        super().__init__(f"Invitation {invitation_id} has expired")


class QuotaExceededError(DomainError):
    """Raised when a project would exceed its active reader cap."""

    def __init__(self, limit: int, active: int, requested: int):
        self.limit = limit
        self.active = active
        self.requested = requested
        super().__init__(
            f"Maximum {limit} active readers per project. "
            f"Currently: {active}, requested: {requested}"
        )
