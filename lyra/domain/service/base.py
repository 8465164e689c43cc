"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the reader-feedback rules that span entities:
    invitation lifecycle, content filtering, sessions and markers.
    """

    pass
