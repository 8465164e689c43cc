"""Infrastructure providers."""

# Import bases
from .clock import ClockProvider
from .email import EmailProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .clock import ProdClockProvider  # noqa: F401
from .email import ProdEmailProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "ClockProvider",
    "EmailProvider",
    "PersistenceProvider",
    "ProdClockProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
]
